"""Coupon model."""

from enum import StrEnum

COUPON_DDL = """
CREATE TABLE IF NOT EXISTS coupon (
    id VARCHAR PRIMARY KEY,
    code VARCHAR NOT NULL UNIQUE,
    description VARCHAR,
    discount_type VARCHAR NOT NULL,
    discount_value DOUBLE NOT NULL,
    min_order_value DOUBLE,
    max_discount DOUBLE,
    usage_limit INTEGER,
    used_count INTEGER DEFAULT 0,
    start_date TIMESTAMP NOT NULL,
    end_date TIMESTAMP NOT NULL,
    is_active BOOLEAN DEFAULT TRUE,
    created_at TIMESTAMP NOT NULL
)
"""


class DiscountType(StrEnum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"
