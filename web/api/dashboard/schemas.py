"""Dashboard API response schemas."""

from pydantic import BaseModel


class StatsResponse(BaseModel):
    """Headline figures with month-over-month change (%)."""

    total_revenue: float
    total_orders: int
    total_users: int
    total_products: int
    revenue_change: float
    orders_change: float
    users_change: float
    products_change: float


class TopProductItem(BaseModel):
    id: str
    name: str
    slug: str
    price: float
    discounted_price: float | None
    total_sold: int


class SalesPointItem(BaseModel):
    """One bar of the monthly sales chart."""

    month: str
    total: float


class OverviewResponse(BaseModel):
    """Dashboard overview response."""

    stats: StatsResponse
    top_products: list[TopProductItem]
    sales: list[SalesPointItem]
