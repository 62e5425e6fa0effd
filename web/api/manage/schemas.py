"""Catalog and user management (admin) schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from web.api.catalog.schemas import Pagination


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    category_id: str
    description: str | None = None
    discounted_price: float | None = Field(default=None, gt=0)
    featured: bool = False
    stock: int = Field(default=0, ge=0)


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, gt=0)
    category_id: str | None = None
    description: str | None = None
    discounted_price: float | None = Field(default=None, gt=0)
    featured: bool | None = None
    stock: int | None = Field(default=None, ge=0)


class UserItem(BaseModel):
    """User row in the admin user list."""

    id: str
    name: str | None
    email: str
    role: str
    created_at: datetime
    order_count: int


class UsersResponse(BaseModel):
    items: list[UserItem]
    pagination: Pagination


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: str | None = Field(default=None, pattern=r"^(USER|ADMIN)$")
