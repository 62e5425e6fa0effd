"""Product repository - listings, detail pages and images."""

import math
from datetime import datetime

from loguru import logger

from app.caching import cache_key, memoized, namespace_prefix
from app.helpers import new_id, slugify
from app.models.catalog import ProductImageData
from app.repositories.base import BaseRepository
from app.repositories.errors import IntegrityError
from settings import (
    FEATURED_PRODUCTS_TTL,
    PRODUCT_TTL,
    PRODUCTS_PAGE_SIZE,
    PRODUCTS_TTL,
    RELATED_PRODUCTS_TTL,
)

_PRODUCT_SELECT = """
    SELECT p.id, p.name, p.slug, p.description, p.price, p.discounted_price,
           p.category_id, p.featured, p.stock, p.created_at,
           c.name AS category_name, c.slug AS category_slug
    FROM product p
    LEFT JOIN category c ON c.id = p.category_id
"""

_EFFECTIVE_PRICE = "COALESCE(p.discounted_price, p.price)"

SORT_ORDERS = {
    "price-asc": f"{_EFFECTIVE_PRICE} ASC, p.name ASC",
    "price-desc": f"{_EFFECTIVE_PRICE} DESC, p.name ASC",
    "name-asc": "p.name ASC",
    "name-desc": "p.name DESC",
    "newest": "p.created_at DESC, p.name ASC",
}
DEFAULT_SORT = "newest"

_UPDATABLE = ("name", "description", "price", "discounted_price", "category_id", "featured", "stock")


class ProductRepository(BaseRepository):
    """Repository for product data access."""

    def _attach_images(self, products: list[dict]) -> list[dict]:
        """Add image metadata (no bytes) to each product, ordered by sort_order."""
        if not products:
            return products
        ids = [p["id"] for p in products]
        placeholders = ", ".join("?" for _ in ids)
        images = self.fetch_dicts(
            f"""
            SELECT id, product_id, color, sort_order FROM product_image
            WHERE product_id IN ({placeholders})
            ORDER BY sort_order, id
            """,
            ids,
        )
        by_product: dict[str, list[dict]] = {pid: [] for pid in ids}
        for img in images:
            by_product[img.pop("product_id")].append(img)
        for p in products:
            p["images"] = by_product[p["id"]]
        return products

    @memoized
    def get_products(
        self,
        category_id: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        sort: str | None = None,
        page: int = 1,
        limit: int = PRODUCTS_PAGE_SIZE,
    ) -> dict:
        """Filtered, sorted, paginated product listing.

        Price filters apply to the effective price (discounted when set).
        Returns ``{"products": [...], "pagination": {total, pages, page, limit}}``.
        """
        sort = sort if sort in SORT_ORDERS else DEFAULT_SORT
        page = max(page, 1)
        limit = max(limit, 1)

        def fetch():
            where, params = [], []
            if category_id:
                where.append("p.category_id = ?")
                params.append(category_id)
            if min_price is not None:
                where.append(f"{_EFFECTIVE_PRICE} >= ?")
                params.append(min_price)
            if max_price is not None:
                where.append(f"{_EFFECTIVE_PRICE} <= ?")
                params.append(max_price)
            clause = f" WHERE {' AND '.join(where)}" if where else ""

            total = self.fetchone(f"SELECT COUNT(*) FROM product p{clause}", params)[0]
            rows = self.fetch_dicts(
                f"{_PRODUCT_SELECT}{clause} ORDER BY {SORT_ORDERS[sort]} LIMIT ? OFFSET ?",
                [*params, limit, (page - 1) * limit],
            )
            logger.debug("get_products: {} of {} (page {})", len(rows), total, page)
            return {
                "products": self._attach_images(rows),
                "pagination": {
                    "total": total,
                    "pages": math.ceil(total / limit),
                    "page": page,
                    "limit": limit,
                },
            }

        key = cache_key("products", category_id, min_price, max_price, sort, page, limit)
        return self._cached(key, PRODUCTS_TTL, fetch)

    @memoized
    def get_product_by_slug(self, slug: str) -> dict | None:
        """Product with images by slug. Only found products are cached."""

        def fetch():
            product = self.fetch_dict(f"{_PRODUCT_SELECT} WHERE p.slug = ?", [slug])
            if product is None:
                return None
            return self._attach_images([product])[0]

        return self._cached(cache_key("product", slug), PRODUCT_TTL, fetch)

    @memoized
    def get_related_products(self, product_id: str, category_id: str, limit: int = 4) -> list[dict]:
        """Newest products from the same category, excluding the product itself."""

        def fetch():
            rows = self.fetch_dicts(
                f"""{_PRODUCT_SELECT}
                WHERE p.category_id = ? AND p.id <> ?
                ORDER BY p.created_at DESC, p.name ASC
                LIMIT ?""",
                [category_id, product_id, limit],
            )
            return self._attach_images(rows)

        return self._cached(cache_key("products", "related", product_id, limit), RELATED_PRODUCTS_TTL, fetch)

    @memoized
    def get_featured_products(self, limit: int = 8) -> list[dict]:
        """Featured products first, then newest."""

        def fetch():
            rows = self.fetch_dicts(
                f"{_PRODUCT_SELECT} ORDER BY p.featured DESC, p.created_at DESC, p.name ASC LIMIT ?",
                [limit],
            )
            logger.debug("get_featured_products: {} products", len(rows))
            return self._attach_images(rows)

        return self._cached(cache_key("products", "featured", limit), FEATURED_PRODUCTS_TTL, fetch)

    def search_products(self, query: str, limit: int = 5) -> list[dict]:
        """Case-insensitive name/description search (uncached)."""
        if not query.strip():
            return []
        pattern = f"%{query.strip()}%"
        rows = self.fetch_dicts(
            f"""{_PRODUCT_SELECT}
            WHERE p.name ILIKE ? OR p.description ILIKE ?
            ORDER BY p.name
            LIMIT ?""",
            [pattern, pattern, limit],
        )
        return self._attach_images(rows)

    def get_product(self, product_id: str) -> dict | None:
        """Product by id (uncached, used by admin forms)."""
        product = self.fetch_dict(f"{_PRODUCT_SELECT} WHERE p.id = ?", [product_id])
        if product is None:
            return None
        return self._attach_images([product])[0]

    def get_product_image(self, slug: str) -> ProductImageData | None:
        """First image of a product by sort order. Bytes are never cached."""
        row = self.fetchone(
            """
            SELECT i.image, i.content_type FROM product_image i
            JOIN product p ON p.id = i.product_id
            WHERE p.slug = ?
            ORDER BY i.sort_order, i.id
            LIMIT 1
            """,
            [slug],
        )
        if row is None:
            return None
        return ProductImageData(data=bytes(row[0]), content_type=row[1] or "image/jpeg")

    def get_image(self, image_id: str) -> ProductImageData | None:
        """Image bytes by image id."""
        row = self.fetchone("SELECT image, content_type FROM product_image WHERE id = ?", [image_id])
        if row is None:
            return None
        return ProductImageData(data=bytes(row[0]), content_type=row[1] or "image/jpeg")

    def _invalidate_product(self, *slugs: str) -> None:
        self._invalidate(
            *(cache_key("product", s) for s in slugs),
            prefixes=(namespace_prefix("products"),),
        )

    def create_product(
        self,
        name: str,
        price: float,
        category_id: str,
        description: str | None = None,
        discounted_price: float | None = None,
        featured: bool = False,
        stock: int = 0,
    ) -> dict:
        """Create a product in an existing category."""
        slug = slugify(name)
        if not slug:
            raise IntegrityError(f"Cannot derive a slug from name {name!r}")
        if not self.fetchone("SELECT 1 FROM category WHERE id = ?", [category_id]):
            raise IntegrityError(f"Category '{category_id}' does not exist")
        if self.fetchone("SELECT 1 FROM product WHERE slug = ?", [slug]):
            raise IntegrityError(f"Product with slug '{slug}' already exists")

        product_id = new_id()
        self.execute(
            """
            INSERT INTO product (id, name, slug, description, price, discounted_price,
                                 category_id, featured, stock, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [product_id, name, slug, description, price, discounted_price,
             category_id, featured, stock, datetime.now()],
        )
        logger.info("Product created: {}", slug)
        self._invalidate_product(slug)
        return self.get_product(product_id)

    def update_product(self, product_id: str, **changes) -> dict | None:
        """Update product fields. Renaming changes the slug."""
        existing = self.get_product(product_id)
        if existing is None:
            return None

        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Unknown product fields: {sorted(unknown)}")

        values = {f: changes.get(f, existing[f]) for f in _UPDATABLE}
        slug = existing["slug"]
        if "name" in changes:
            slug = slugify(values["name"])
            if not slug:
                raise IntegrityError(f"Cannot derive a slug from name {values['name']!r}")
            if self.fetchone("SELECT 1 FROM product WHERE slug = ? AND id <> ?", [slug, product_id]):
                raise IntegrityError(f"Product with slug '{slug}' already exists")
        if "category_id" in changes and not self.fetchone(
            "SELECT 1 FROM category WHERE id = ?", [values["category_id"]]
        ):
            raise IntegrityError(f"Category '{values['category_id']}' does not exist")

        self.execute(
            """
            UPDATE product SET name = ?, slug = ?, description = ?, price = ?, discounted_price = ?,
                               category_id = ?, featured = ?, stock = ?
            WHERE id = ?
            """,
            [values["name"], slug, values["description"], values["price"], values["discounted_price"],
             values["category_id"], values["featured"], values["stock"], product_id],
        )
        logger.info("Product updated: {}", slug)
        self._invalidate_product(existing["slug"], slug)
        return self.get_product(product_id)

    def delete_product(self, product_id: str) -> bool:
        """Delete a product and its images."""
        existing = self.get_product(product_id)
        if existing is None:
            return False

        with self.transaction():
            self.execute("DELETE FROM product_image WHERE product_id = ?", [product_id])
            self.execute("DELETE FROM product WHERE id = ?", [product_id])
        logger.info("Product deleted: {}", existing["slug"])
        self._invalidate_product(existing["slug"])
        return True

    def add_product_image(
        self,
        product_id: str,
        data: bytes,
        content_type: str = "image/jpeg",
        color: str | None = None,
    ) -> str:
        """Append an image after the product's existing ones."""
        existing = self.get_product(product_id)
        if existing is None:
            raise IntegrityError(f"Product '{product_id}' does not exist")

        next_order = self.fetchone(
            "SELECT COALESCE(MAX(sort_order) + 1, 0) FROM product_image WHERE product_id = ?",
            [product_id],
        )[0]
        image_id = new_id()
        self.execute(
            """
            INSERT INTO product_image (id, product_id, image, content_type, color, sort_order)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            [image_id, product_id, data, content_type, color, next_order],
        )
        self._invalidate_product(existing["slug"])
        return image_id
