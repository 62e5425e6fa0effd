"""Catalog API."""

from web.api.catalog.views import (
    get_categories,
    get_category,
    get_home,
    get_image,
    get_product,
    get_product_image,
    get_products,
    search_products,
)

__all__ = [
    "get_home",
    "get_categories",
    "get_category",
    "get_products",
    "get_product",
    "search_products",
    "get_product_image",
    "get_image",
]
