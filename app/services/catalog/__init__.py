"""Catalog services."""

from app.services.catalog.service import CatalogService

__all__ = [
    "CatalogService",
]
