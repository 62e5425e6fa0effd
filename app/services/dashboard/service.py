"""Dashboard service."""

from datetime import datetime

from app.models.sales import DashboardStats, SalesPoint, TopProduct
from app.repositories.sales import AdminRepository
from settings import TOP_PRODUCTS_LIMIT


class DashboardService:
    """Admin dashboard business logic."""

    def __init__(self, admin_repo: AdminRepository):
        self._admin = admin_repo

    def get_stats(self, now: datetime | None = None) -> DashboardStats:
        return DashboardStats.from_dict(self._admin.get_dashboard_stats(now))

    def get_top_products(self, limit: int = TOP_PRODUCTS_LIMIT) -> list[TopProduct]:
        return [TopProduct.from_dict(p) for p in self._admin.get_top_products(limit)]

    def get_sales_chart(self, now: datetime | None = None) -> list[SalesPoint]:
        """Monthly revenue series for the dashboard chart, oldest month first."""
        return [SalesPoint.from_dict(p) for p in self._admin.get_monthly_sales(now)]

    def get_overview(self, now: datetime | None = None) -> dict:
        """Everything the dashboard page shows."""
        return {
            "stats": self.get_stats(now),
            "top_products": self.get_top_products(),
            "sales": self.get_sales_chart(now),
        }
