"""Coupon API."""

from web.api.coupons.views import (
    create_coupon,
    delete_coupon,
    get_coupon,
    list_coupons,
    update_coupon,
    validate_coupon,
)

__all__ = [
    "list_coupons",
    "get_coupon",
    "create_coupon",
    "update_coupon",
    "delete_coupon",
    "validate_coupon",
]
