"""Sales domain entities - coupons and dashboard figures."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class Coupon(BaseEntity):
    id: str
    code: str
    discount_type: str
    discount_value: float
    start_date: str
    end_date: str
    description: str | None = None
    min_order_value: float | None = None
    max_discount: float | None = None
    usage_limit: int | None = None
    used_count: int = 0
    is_active: bool = True


@dataclass
class CouponDiscount(BaseEntity):
    """Result of a successful coupon validation."""

    coupon_id: str
    code: str
    discount_type: str
    discount_value: float
    discount: float


@dataclass
class DashboardStats(BaseEntity):
    """Admin dashboard headline figures with month-over-month change (%)."""

    total_revenue: float
    total_orders: int
    total_users: int
    total_products: int
    revenue_change: float
    orders_change: float
    users_change: float
    products_change: float


@dataclass
class TopProduct(BaseEntity):
    id: str
    name: str
    slug: str
    price: float
    total_sold: int
    discounted_price: float | None = None


@dataclass
class SalesPoint(BaseEntity):
    """One bar of the monthly sales chart."""

    month: str
    total: float
