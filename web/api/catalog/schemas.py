"""Catalog API response schemas."""

from pydantic import BaseModel


class CategoryItem(BaseModel):
    """Category with product count."""

    id: str
    name: str
    slug: str
    description: str | None
    product_count: int


class CategoriesResponse(BaseModel):
    items: list[CategoryItem]


class ImageItem(BaseModel):
    id: str
    color: str | None
    url: str


class ProductItem(BaseModel):
    """Product card / detail."""

    id: str
    name: str
    slug: str
    description: str | None
    price: float
    discounted_price: float | None
    effective_price: float
    category_id: str
    category_name: str | None
    category_slug: str | None
    stock: int
    images: list[ImageItem]


class Pagination(BaseModel):
    total: int
    pages: int
    page: int
    limit: int


class ProductsResponse(BaseModel):
    items: list[ProductItem]
    pagination: Pagination


class CategoryPageResponse(BaseModel):
    category: CategoryItem
    items: list[ProductItem]
    pagination: Pagination


class ProductPageResponse(BaseModel):
    product: ProductItem
    related: list[ProductItem]


class HomeResponse(BaseModel):
    categories: list[CategoryItem]
    featured: list[ProductItem]


class ImageResponse(BaseModel):
    """Raw image bytes with HTTP caching headers."""

    content: bytes
    content_type: str
    cache_control: str = "public, max-age=31536000, immutable"
