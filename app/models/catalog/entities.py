"""Catalog domain entities."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class Category(BaseEntity):
    """Category with a snapshot of its product count."""

    id: str
    name: str
    slug: str
    description: str | None = None
    product_count: int = 0


@dataclass
class ProductImage(BaseEntity):
    """Image metadata (bytes are served separately)."""

    id: str
    color: str | None = None
    sort_order: int = 0


@dataclass
class Product(BaseEntity):
    """Product as shown on listing and detail pages."""

    id: str
    name: str
    slug: str
    price: float
    category_id: str
    description: str | None = None
    discounted_price: float | None = None
    featured: bool = False
    stock: int = 0
    category_name: str | None = None
    category_slug: str | None = None
    created_at: str | None = None
    images: list[dict] = field(default_factory=list)

    @property
    def effective_price(self) -> float:
        """Price the customer pays."""
        return self.discounted_price if self.discounted_price is not None else self.price


@dataclass
class ProductImageData:
    """Raw image bytes for the image endpoint."""

    data: bytes
    content_type: str
