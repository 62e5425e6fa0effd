"""Sales repositories."""

from app.repositories.sales.admin import AdminRepository
from app.repositories.sales.coupon import CouponRepository

__all__ = [
    "AdminRepository",
    "CouponRepository",
]
