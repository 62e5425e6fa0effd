"""Services package - service class exports."""

from app.services.catalog import CatalogService
from app.services.coupons import CouponRejected, CouponService
from app.services.dashboard import DashboardService

__all__ = [
    "CatalogService",
    "CouponService",
    "CouponRejected",
    "DashboardService",
]
