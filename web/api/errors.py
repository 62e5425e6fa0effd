"""API errors and validation helpers."""

import re
from collections.abc import Callable
from functools import wraps

from app.caching import request_scope


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

MAX_PAGE_SIZE = 100


def validate_slug(slug: str) -> None:
    """Validate slug format (lower-case words joined by dashes)."""
    if not slug or not _SLUG.match(slug):
        raise ValidationError(f"Invalid slug: {slug!r}")


def validate_page(page: int, limit: int) -> None:
    """Validate pagination parameters."""
    if page < 1:
        raise ValidationError(f"Invalid page: {page}. Must be at least 1")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(f"Invalid limit: {limit}. Must be between 1 and {MAX_PAGE_SIZE}")


def validate_price_range(min_price: float | None, max_price: float | None) -> None:
    """Validate optional price bounds."""
    for name, value in (("min_price", min_price), ("max_price", max_price)):
        if value is not None and value < 0:
            raise ValidationError(f"Invalid {name}: {value}. Must not be negative")
    if min_price is not None and max_price is not None and min_price > max_price:
        raise ValidationError("min_price must not exceed max_price")


def request_view(fn: Callable) -> Callable:
    """Run a view inside its own request memo scope."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        with request_scope():
            return fn(*args, **kwargs)

    return wrapper
