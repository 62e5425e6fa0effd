"""Sales domain models - coupons, orders and dashboard entities."""

from app.models.sales.coupon import COUPON_DDL, DiscountType
from app.models.sales.entities import (
    Coupon,
    CouponDiscount,
    DashboardStats,
    SalesPoint,
    TopProduct,
)
from app.models.sales.order import ORDER_ITEM_DDL, ORDERS_DDL

__all__ = [
    "COUPON_DDL",
    "ORDERS_DDL",
    "ORDER_ITEM_DDL",
    "DiscountType",
    "Coupon",
    "CouponDiscount",
    "DashboardStats",
    "TopProduct",
    "SalesPoint",
]
