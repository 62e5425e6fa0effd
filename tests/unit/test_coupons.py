"""Tests for coupon storage and checkout validation."""

from datetime import datetime

import pytest

from app.models.sales import Coupon
from app.repositories import IntegrityError
from app.services.coupons import CouponRejected, CouponService
from app.services.coupons.service import compute_discount

NOW = datetime(2026, 3, 10, 12, 0)


def make_coupon(**overrides) -> Coupon:
    values = {
        "id": "c1",
        "code": "SAVE10",
        "discount_type": "PERCENTAGE",
        "discount_value": 10.0,
        "start_date": "2026-01-01T00:00:00",
        "end_date": "2026-12-31T00:00:00",
    }
    values.update(overrides)
    return Coupon(**values)


@pytest.fixture
def service(coupons):
    return CouponService(coupons)


@pytest.fixture
def save10(coupons):
    return coupons.create_coupon(
        "save10",
        "PERCENTAGE",
        10.0,
        start_date=datetime(2026, 1, 1),
        end_date=datetime(2026, 12, 31),
        max_discount=25.0,
    )


class TestComputeDiscount:
    def test_percentage(self):
        assert compute_discount(make_coupon(), 80.0) == 8.0

    def test_percentage_capped(self):
        assert compute_discount(make_coupon(max_discount=15.0), 500.0) == 15.0

    def test_fixed_capped_by_subtotal(self):
        coupon = make_coupon(discount_type="FIXED", discount_value=30.0)
        assert compute_discount(coupon, 100.0) == 30.0
        assert compute_discount(coupon, 20.0) == 20.0

    def test_rounded_to_cents(self):
        assert compute_discount(make_coupon(), 19.99) == 2.0


class TestCouponRepository:
    def test_code_stored_upper_case(self, coupons, save10):
        assert save10["code"] == "SAVE10"
        assert coupons.get_coupon_by_code(" save10 ")["id"] == save10["id"]

    def test_duplicate_code_rejected(self, coupons, save10):
        with pytest.raises(IntegrityError):
            coupons.create_coupon("SAVE10", "FIXED", 5.0, datetime(2026, 1, 1), datetime(2026, 2, 1))

    def test_unknown_discount_type(self, coupons):
        with pytest.raises(IntegrityError):
            coupons.create_coupon("BOGUS", "BOGO", 5.0, datetime(2026, 1, 1), datetime(2026, 2, 1))

    def test_end_before_start(self, coupons):
        with pytest.raises(IntegrityError):
            coupons.create_coupon("LATE", "FIXED", 5.0, datetime(2026, 2, 1), datetime(2026, 1, 1))

    def test_update(self, coupons, save10):
        updated = coupons.update_coupon(save10["id"], is_active=False, code="spring")
        assert updated["code"] == "SPRING"
        assert updated["is_active"] is False
        assert coupons.update_coupon("missing", is_active=False) is None

    def test_update_rejects_unknown_fields(self, coupons, save10):
        with pytest.raises(ValueError):
            coupons.update_coupon(save10["id"], used_count=0)

    def test_delete(self, coupons, save10):
        assert coupons.delete_coupon(save10["id"]) is True
        assert coupons.list_coupons() == []
        assert coupons.delete_coupon(save10["id"]) is False

    def test_record_use(self, coupons, save10):
        coupons.record_use(save10["id"])
        assert coupons.get_coupon(save10["id"])["used_count"] == 1


class TestValidate:
    def test_accepts_valid_coupon(self, service, save10):
        result = service.validate("save10", 120.0, now=NOW)
        assert result.code == "SAVE10"
        assert result.discount == 12.0

    def test_cap_applies(self, service, save10):
        assert service.validate("SAVE10", 1000.0, now=NOW).discount == 25.0

    @pytest.mark.parametrize("code", ["", "   "])
    def test_code_required(self, service, code):
        with pytest.raises(CouponRejected, match="required"):
            service.validate(code, 50.0, now=NOW)

    def test_subtotal_must_be_positive(self, service, save10):
        with pytest.raises(CouponRejected, match="positive"):
            service.validate("SAVE10", 0, now=NOW)

    def test_unknown_code(self, service):
        with pytest.raises(CouponRejected, match="Invalid coupon code"):
            service.validate("NOPE", 50.0, now=NOW)

    def test_inactive(self, service, coupons, save10):
        coupons.update_coupon(save10["id"], is_active=False)
        with pytest.raises(CouponRejected, match="not active"):
            service.validate("SAVE10", 50.0, now=NOW)

    @pytest.mark.parametrize("moment", [datetime(2025, 12, 31), datetime(2027, 1, 1)])
    def test_outside_date_window(self, service, save10, moment):
        with pytest.raises(CouponRejected, match="expired"):
            service.validate("SAVE10", 50.0, now=moment)

    def test_usage_limit(self, service, coupons, save10):
        coupons.update_coupon(save10["id"], usage_limit=1)
        service.validate("SAVE10", 50.0, now=NOW)
        coupons.record_use(save10["id"])
        with pytest.raises(CouponRejected, match="usage limit"):
            service.validate("SAVE10", 50.0, now=NOW)

    def test_minimum_order_value(self, service, coupons, save10):
        coupons.update_coupon(save10["id"], min_order_value=100.0)
        with pytest.raises(CouponRejected, match="Minimum order value"):
            service.validate("SAVE10", 99.0, now=NOW)
        assert service.validate("SAVE10", 100.0, now=NOW).discount == 10.0
