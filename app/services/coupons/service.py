"""Coupon service - checkout coupon validation."""

from datetime import datetime

from loguru import logger

from app.models.sales import Coupon, CouponDiscount, DiscountType
from app.repositories.sales import CouponRepository


class CouponRejected(Exception):
    """Coupon cannot be applied; message is shown to the customer."""

    def __init__(self, message: str = "Invalid coupon code"):
        self.message = message
        super().__init__(self.message)


def compute_discount(coupon: Coupon, subtotal: float) -> float:
    """Percentage discounts are capped by max_discount, fixed ones by the subtotal."""
    if coupon.discount_type == DiscountType.PERCENTAGE:
        discount = subtotal * coupon.discount_value / 100
        if coupon.max_discount and discount > coupon.max_discount:
            discount = coupon.max_discount
    else:
        discount = min(coupon.discount_value, subtotal)
    return round(discount, 2)


class CouponService:
    """Coupon business logic."""

    def __init__(self, coupon_repo: CouponRepository):
        self._coupons = coupon_repo

    def validate(self, code: str, subtotal: float, now: datetime | None = None) -> CouponDiscount:
        """Check a coupon against an order subtotal and compute the discount."""
        if not code or not code.strip():
            raise CouponRejected("Coupon code is required")
        if subtotal <= 0:
            raise CouponRejected("Subtotal must be positive")

        row = self._coupons.get_coupon_by_code(code)
        if row is None:
            raise CouponRejected("Invalid coupon code")
        coupon = Coupon.from_dict(row)

        if not coupon.is_active:
            raise CouponRejected("Coupon is not active")

        now = now or datetime.now()
        if datetime.fromisoformat(coupon.start_date) > now or datetime.fromisoformat(coupon.end_date) < now:
            raise CouponRejected("Coupon is expired or not yet valid")

        if coupon.usage_limit and coupon.used_count >= coupon.usage_limit:
            raise CouponRejected("Coupon usage limit reached")

        if coupon.min_order_value and subtotal < coupon.min_order_value:
            raise CouponRejected(f"Minimum order value for this coupon is {coupon.min_order_value}")

        discount = compute_discount(coupon, subtotal)
        logger.debug("Coupon {} accepted: discount {}", coupon.code, discount)
        return CouponDiscount(
            coupon_id=coupon.id,
            code=coupon.code,
            discount_type=coupon.discount_type,
            discount_value=coupon.discount_value,
            discount=discount,
        )
