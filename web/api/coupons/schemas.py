"""Coupon API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class CouponItem(BaseModel):
    id: str
    code: str
    description: str | None
    discount_type: str
    discount_value: float
    min_order_value: float | None
    max_discount: float | None
    usage_limit: int | None
    used_count: int
    start_date: datetime
    end_date: datetime
    is_active: bool


class CouponsResponse(BaseModel):
    items: list[CouponItem]


class CouponCreate(BaseModel):
    """Admin coupon form."""

    code: str = Field(min_length=1)
    discount_type: str = "PERCENTAGE"
    discount_value: float = Field(gt=0)
    start_date: datetime
    end_date: datetime
    description: str | None = None
    min_order_value: float | None = Field(default=None, ge=0)
    max_discount: float | None = Field(default=None, gt=0)
    usage_limit: int | None = Field(default=None, gt=0)
    is_active: bool = True


class CouponValidation(BaseModel):
    """Result of applying a coupon to a subtotal."""

    coupon_id: str
    code: str
    discount_type: str
    discount_value: float
    discount: float
