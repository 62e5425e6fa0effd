"""Dashboard API."""

from web.api.dashboard.views import get_overview, get_sales_chart

__all__ = [
    "get_overview",
    "get_sales_chart",
]
