"""Catalog domain models - categories, products, images."""

from app.models.catalog.category import CATEGORY_DDL
from app.models.catalog.entities import Category, Product, ProductImage, ProductImageData
from app.models.catalog.product import PRODUCT_DDL, PRODUCT_IMAGE_DDL

__all__ = [
    "CATEGORY_DDL",
    "PRODUCT_DDL",
    "PRODUCT_IMAGE_DDL",
    "Category",
    "Product",
    "ProductImage",
    "ProductImageData",
]
