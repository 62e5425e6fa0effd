"""Coupon services."""

from app.services.coupons.service import CouponRejected, CouponService

__all__ = [
    "CouponService",
    "CouponRejected",
]
