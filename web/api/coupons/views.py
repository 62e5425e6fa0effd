"""Coupon API views - thin layer over services."""

from app.container import container
from app.repositories.errors import IntegrityError
from app.services.coupons import CouponRejected
from web.api.errors import NotFoundError, ValidationError

from .schemas import CouponCreate, CouponItem, CouponsResponse, CouponValidation


def list_coupons() -> CouponsResponse:
    """All coupons (admin)."""
    return CouponsResponse(items=[CouponItem(**c) for c in container.coupons.list_coupons()])


def get_coupon(coupon_id: str) -> CouponItem:
    coupon = container.coupons.get_coupon(coupon_id)
    if coupon is None:
        raise NotFoundError(f"Coupon not found: {coupon_id}")
    return CouponItem(**coupon)


def create_coupon(form: CouponCreate) -> CouponItem:
    """Create a coupon (admin)."""
    try:
        coupon = container.coupons.create_coupon(**form.model_dump())
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    return CouponItem(**coupon)


def update_coupon(coupon_id: str, **changes) -> CouponItem:
    """Update coupon fields (admin)."""
    try:
        coupon = container.coupons.update_coupon(coupon_id, **changes)
    except (IntegrityError, ValueError) as e:
        raise ValidationError(str(e)) from e
    if coupon is None:
        raise NotFoundError(f"Coupon not found: {coupon_id}")
    return CouponItem(**coupon)


def delete_coupon(coupon_id: str) -> None:
    if not container.coupons.delete_coupon(coupon_id):
        raise NotFoundError(f"Coupon not found: {coupon_id}")


def validate_coupon(code: str, subtotal: float) -> CouponValidation:
    """Apply a coupon to a cart subtotal."""
    try:
        result = container.coupon_service.validate(code, subtotal)
    except CouponRejected as e:
        raise ValidationError(e.message) from e
    return CouponValidation(**result.to_dict())
