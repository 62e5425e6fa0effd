"""Coupon repository - coupon CRUD (uncached)."""

from datetime import datetime

from loguru import logger

from app.helpers import new_id
from app.models.sales import DiscountType
from app.repositories.base import BaseRepository
from app.repositories.errors import IntegrityError

_COUPON_COLUMNS = """
    id, code, description, discount_type, discount_value, min_order_value,
    max_discount, usage_limit, used_count, start_date, end_date, is_active
"""

_UPDATABLE = (
    "code",
    "description",
    "discount_type",
    "discount_value",
    "min_order_value",
    "max_discount",
    "usage_limit",
    "start_date",
    "end_date",
    "is_active",
)


def _normalize(values: dict) -> dict:
    """Upper-case code, validate discount type."""
    if "code" in values:
        code = (values["code"] or "").strip().upper()
        if not code:
            raise IntegrityError("Coupon code is required")
        values["code"] = code
    if "discount_type" in values:
        try:
            values["discount_type"] = DiscountType(values["discount_type"]).value
        except ValueError as e:
            raise IntegrityError(f"Unknown discount type: {values['discount_type']!r}") from e
    return values


class CouponRepository(BaseRepository):
    """Repository for coupon data access."""

    def list_coupons(self) -> list[dict]:
        """All coupons, newest first."""
        return self.fetch_dicts(f"SELECT {_COUPON_COLUMNS} FROM coupon ORDER BY created_at DESC, code")

    def get_coupon(self, coupon_id: str) -> dict | None:
        return self.fetch_dict(f"SELECT {_COUPON_COLUMNS} FROM coupon WHERE id = ?", [coupon_id])

    def get_coupon_by_code(self, code: str) -> dict | None:
        """Lookup is case-insensitive: codes are stored upper-case."""
        return self.fetch_dict(
            f"SELECT {_COUPON_COLUMNS} FROM coupon WHERE code = ?",
            [code.strip().upper()],
        )

    def create_coupon(
        self,
        code: str,
        discount_type: str,
        discount_value: float,
        start_date: datetime,
        end_date: datetime,
        description: str | None = None,
        min_order_value: float | None = None,
        max_discount: float | None = None,
        usage_limit: int | None = None,
        is_active: bool = True,
    ) -> dict:
        values = _normalize({"code": code, "discount_type": discount_type})
        if end_date < start_date:
            raise IntegrityError("Coupon end date is before its start date")
        if self.get_coupon_by_code(values["code"]):
            raise IntegrityError(f"Coupon code '{values['code']}' already exists")

        coupon_id = new_id()
        self.execute(
            """
            INSERT INTO coupon (id, code, description, discount_type, discount_value,
                                min_order_value, max_discount, usage_limit, used_count,
                                start_date, end_date, is_active, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, 0, ?, ?, ?, ?)
            """,
            [coupon_id, values["code"], description, values["discount_type"], discount_value,
             min_order_value, max_discount, usage_limit, start_date, end_date, is_active, datetime.now()],
        )
        logger.info("Coupon created: {}", values["code"])
        return self.get_coupon(coupon_id)

    def update_coupon(self, coupon_id: str, **changes) -> dict | None:
        existing = self.get_coupon(coupon_id)
        if existing is None:
            return None

        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Unknown coupon fields: {sorted(unknown)}")

        changes = _normalize(dict(changes))
        if "code" in changes:
            clash = self.fetchone("SELECT 1 FROM coupon WHERE code = ? AND id <> ?", [changes["code"], coupon_id])
            if clash:
                raise IntegrityError(f"Coupon code '{changes['code']}' already exists")
        if not changes:
            return existing

        assignments = ", ".join(f"{field} = ?" for field in changes)
        self.execute(f"UPDATE coupon SET {assignments} WHERE id = ?", [*changes.values(), coupon_id])
        logger.info("Coupon updated: {}", changes.get("code", existing["code"]))
        return self.get_coupon(coupon_id)

    def delete_coupon(self, coupon_id: str) -> bool:
        existing = self.get_coupon(coupon_id)
        if existing is None:
            return False
        self.execute("DELETE FROM coupon WHERE id = ?", [coupon_id])
        logger.info("Coupon deleted: {}", existing["code"])
        return True

    def record_use(self, coupon_id: str) -> None:
        """Count one redemption."""
        self.execute("UPDATE coupon SET used_count = used_count + 1 WHERE id = ?", [coupon_id])
