"""Catalog repositories."""

from app.repositories.catalog.category import CategoryRepository
from app.repositories.catalog.product import ProductRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
]
