"""Dashboard API views - thin layer over services."""

from app.container import container
from web.api.errors import request_view

from .schemas import OverviewResponse, SalesPointItem, StatsResponse, TopProductItem


@request_view
def get_overview() -> OverviewResponse:
    """Get admin dashboard overview."""
    data = container.dashboard.get_overview()

    return OverviewResponse(
        stats=StatsResponse(**data["stats"].to_dict()),
        top_products=[TopProductItem(**p.to_dict()) for p in data["top_products"]],
        sales=[SalesPointItem(month=s.month, total=s.total) for s in data["sales"]],
    )


@request_view
def get_sales_chart() -> list[SalesPointItem]:
    """Monthly sales series for the dashboard chart."""
    return [SalesPointItem(month=s.month, total=s.total) for s in container.dashboard.get_sales_chart()]
