"""Category repository - categories with product counts."""

from datetime import datetime

from loguru import logger

from app.caching import cache_key, memoized, namespace_prefix
from app.helpers import new_id, slugify
from app.repositories.base import BaseRepository
from app.repositories.errors import IntegrityError
from settings import CATEGORIES_TTL, CATEGORY_TTL

_CATEGORY_SELECT = """
    SELECT c.id, c.name, c.slug, c.description,
           COUNT(p.id)::INTEGER AS product_count
    FROM category c
    LEFT JOIN product p ON p.category_id = c.id
"""


class CategoryRepository(BaseRepository):
    """Repository for category data access.

    Lookups are cached for 30 minutes; ``product_count`` is a snapshot taken
    when the entry was written.
    """

    @memoized
    def get_categories(self) -> list[dict]:
        """All categories ordered by name. An empty list is cached too."""

        def fetch():
            rows = self.fetch_dicts(
                _CATEGORY_SELECT + " GROUP BY c.id, c.name, c.slug, c.description ORDER BY c.name"
            )
            logger.debug("get_categories: {} categories", len(rows))
            return rows

        return self._cached(cache_key("categories"), CATEGORIES_TTL, fetch)

    @memoized
    def get_category_by_slug(self, slug: str) -> dict | None:
        """Category by slug. Only found categories are cached."""

        def fetch():
            return self.fetch_dict(
                _CATEGORY_SELECT + " WHERE c.slug = ? GROUP BY c.id, c.name, c.slug, c.description",
                [slug],
            )

        return self._cached(cache_key("category", slug), CATEGORY_TTL, fetch)

    def get_category(self, category_id: str) -> dict | None:
        """Category by id (uncached, used by admin forms)."""
        return self.fetch_dict(
            _CATEGORY_SELECT + " WHERE c.id = ? GROUP BY c.id, c.name, c.slug, c.description",
            [category_id],
        )

    def create_category(self, name: str, description: str | None = None) -> dict:
        """Create a category with a slug derived from its name."""
        slug = slugify(name)
        if not slug:
            raise IntegrityError(f"Cannot derive a slug from name {name!r}")
        if self.fetchone("SELECT 1 FROM category WHERE slug = ?", [slug]):
            raise IntegrityError(f"Category with slug '{slug}' already exists")

        category_id = new_id()
        self.execute(
            "INSERT INTO category (id, name, slug, description, created_at) VALUES (?, ?, ?, ?, ?)",
            [category_id, name, slug, description, datetime.now()],
        )
        logger.info("Category created: {}", slug)
        self._invalidate(prefixes=(namespace_prefix("categories"),))
        return self.get_category(category_id)

    def update_category(
        self,
        category_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> dict | None:
        """Update name and/or description. Renaming changes the slug."""
        existing = self.get_category(category_id)
        if existing is None:
            return None

        slug = existing["slug"]
        if name is not None:
            slug = slugify(name)
            if not slug:
                raise IntegrityError(f"Cannot derive a slug from name {name!r}")
            clash = self.fetchone("SELECT 1 FROM category WHERE slug = ? AND id <> ?", [slug, category_id])
            if clash:
                raise IntegrityError(f"Category with slug '{slug}' already exists")

        self.execute(
            "UPDATE category SET name = ?, slug = ?, description = ? WHERE id = ?",
            [
                name if name is not None else existing["name"],
                slug,
                description if description is not None else existing["description"],
                category_id,
            ],
        )
        logger.info("Category updated: {}", slug)
        self._invalidate(
            cache_key("category", existing["slug"]),
            cache_key("category", slug),
            prefixes=(namespace_prefix("categories"),),
        )
        return self.get_category(category_id)

    def delete_category(self, category_id: str) -> bool:
        """Delete a category that no product references."""
        existing = self.get_category(category_id)
        if existing is None:
            return False
        if existing["product_count"]:
            raise IntegrityError(
                f"Category '{existing['slug']}' still has {existing['product_count']} products"
            )

        self.execute("DELETE FROM category WHERE id = ?", [category_id])
        logger.info("Category deleted: {}", existing["slug"])
        self._invalidate(
            cache_key("category", existing["slug"]),
            prefixes=(namespace_prefix("categories"),),
        )
        return True
