"""Account domain entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class User(BaseEntity):
    """User as listed in the admin area."""

    id: str
    email: str
    name: str | None = None
    role: str = "USER"
    created_at: str | None = None
    order_count: int = 0


@dataclass
class Address(BaseEntity):
    id: str
    user_id: str
    full_name: str
    street_address: str
    city: str
    state: str
    postal_code: str
    country: str
    is_default: bool = False
