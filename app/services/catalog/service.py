"""Catalog service - storefront pages."""

from loguru import logger

from app.models.catalog import Category, Product, ProductImageData
from app.repositories.catalog import CategoryRepository, ProductRepository
from settings import FEATURED_LIMIT, PRODUCTS_PAGE_SIZE, RELATED_LIMIT


class CatalogService:
    """Storefront business logic."""

    def __init__(self, category_repo: CategoryRepository, product_repo: ProductRepository):
        self._categories = category_repo
        self._products = product_repo
        logger.debug("CatalogService initialized")

    def get_categories(self) -> list[Category]:
        return [Category.from_dict(c) for c in self._categories.get_categories()]

    def get_home(self, featured_limit: int = FEATURED_LIMIT) -> dict:
        """Home page: category strip and featured products."""
        return {
            "categories": self.get_categories(),
            "featured": [Product.from_dict(p) for p in self._products.get_featured_products(featured_limit)],
        }

    def get_category_page(
        self,
        slug: str,
        sort: str | None = None,
        page: int = 1,
        limit: int = PRODUCTS_PAGE_SIZE,
    ) -> dict | None:
        """Category with one page of its products, or None for an unknown slug."""
        category = self._categories.get_category_by_slug(slug)
        if category is None:
            return None

        listing = self._products.get_products(category_id=category["id"], sort=sort, page=page, limit=limit)
        return {
            "category": Category.from_dict(category),
            "products": [Product.from_dict(p) for p in listing["products"]],
            "pagination": listing["pagination"],
        }

    def list_products(
        self,
        category_slug: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        sort: str | None = None,
        page: int = 1,
        limit: int = PRODUCTS_PAGE_SIZE,
    ) -> dict:
        """Product listing. An unknown category slug yields an empty page."""
        category_id = None
        if category_slug:
            category = self._categories.get_category_by_slug(category_slug)
            if category is None:
                return {"products": [], "pagination": {"total": 0, "pages": 0, "page": page, "limit": limit}}
            category_id = category["id"]

        listing = self._products.get_products(category_id, min_price, max_price, sort, page, limit)
        return {
            "products": [Product.from_dict(p) for p in listing["products"]],
            "pagination": listing["pagination"],
        }

    def get_product_page(self, slug: str, related_limit: int = RELATED_LIMIT) -> dict | None:
        """Product detail with related products, or None for an unknown slug."""
        product = self._products.get_product_by_slug(slug)
        if product is None:
            return None

        related = self._products.get_related_products(product["id"], product["category_id"], related_limit)
        return {
            "product": Product.from_dict(product),
            "related": [Product.from_dict(p) for p in related],
        }

    def search(self, query: str, limit: int = 5) -> list[Product]:
        return [Product.from_dict(p) for p in self._products.search_products(query, limit)]

    def get_product_image(self, slug: str) -> ProductImageData | None:
        return self._products.get_product_image(slug)

    def get_image(self, image_id: str) -> ProductImageData | None:
        return self._products.get_image(image_id)
