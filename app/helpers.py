"""Small shared helpers."""

import re
import unicodedata
import uuid
from datetime import date, datetime

_NON_WORD = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """URL slug: lower-case ASCII words joined by dashes."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode()
    return _NON_WORD.sub("-", ascii_text.lower()).strip("-")


def new_id() -> str:
    """Random primary key."""
    return uuid.uuid4().hex


def to_json_value(value):
    """Make a DB value JSON-friendly (timestamps as ISO strings)."""
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


def month_start(moment: datetime, months_back: int = 0) -> datetime:
    """First instant of the month ``months_back`` months before ``moment``'s month."""
    index = moment.year * 12 + (moment.month - 1) - months_back
    return datetime(index // 12, index % 12 + 1, 1)


def percentage_change(previous: float, current: float) -> float:
    """Month-over-month change in percent, rounded to one decimal.

    0 when both are zero, 100 when only the previous value is zero.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 1)
