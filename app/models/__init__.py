"""Models package - DDL and entities for all domains."""

from app.models.accounts import ADDRESS_DDL, USERS_DDL, Address, User, UserRole
from app.models.catalog import (
    CATEGORY_DDL,
    PRODUCT_DDL,
    PRODUCT_IMAGE_DDL,
    Category,
    Product,
    ProductImage,
    ProductImageData,
)
from app.models.common import CACHE_DDL, BaseEntity
from app.models.sales import (
    COUPON_DDL,
    ORDER_ITEM_DDL,
    ORDERS_DDL,
    Coupon,
    CouponDiscount,
    DashboardStats,
    DiscountType,
    SalesPoint,
    TopProduct,
)

ALL_DDL = [
    # Catalog
    CATEGORY_DDL,
    PRODUCT_DDL,
    PRODUCT_IMAGE_DDL,
    # Accounts
    USERS_DDL,
    ADDRESS_DDL,
    # Sales
    ORDERS_DDL,
    ORDER_ITEM_DDL,
    COUPON_DDL,
    # Common
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # Catalog
    "CATEGORY_DDL",
    "PRODUCT_DDL",
    "PRODUCT_IMAGE_DDL",
    "Category",
    "Product",
    "ProductImage",
    "ProductImageData",
    # Accounts
    "USERS_DDL",
    "ADDRESS_DDL",
    "UserRole",
    "User",
    "Address",
    # Sales
    "COUPON_DDL",
    "ORDERS_DDL",
    "ORDER_ITEM_DDL",
    "DiscountType",
    "Coupon",
    "CouponDiscount",
    "DashboardStats",
    "TopProduct",
    "SalesPoint",
    # All DDL
    "ALL_DDL",
]
