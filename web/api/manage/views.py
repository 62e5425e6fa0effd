"""Catalog and user management API views - admin writes.

Writes drop the affected cache entries, so storefront reads see them on the
next request.
"""

from app.container import container
from app.models.catalog import Category, Product
from app.repositories.errors import IntegrityError
from web.api.catalog.schemas import CategoryItem, Pagination, ProductItem
from web.api.catalog.views import category_item, product_item
from web.api.errors import NotFoundError, ValidationError, validate_page

from .schemas import (
    CategoryCreate,
    CategoryUpdate,
    ProductCreate,
    ProductUpdate,
    UserItem,
    UsersResponse,
    UserUpdate,
)


def create_category(form: CategoryCreate) -> CategoryItem:
    try:
        category = container.categories.create_category(form.name, form.description)
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    return category_item(Category.from_dict(category))


def update_category(category_id: str, form: CategoryUpdate) -> CategoryItem:
    try:
        category = container.categories.update_category(category_id, form.name, form.description)
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    if category is None:
        raise NotFoundError(f"Category not found: {category_id}")
    return category_item(Category.from_dict(category))


def delete_category(category_id: str) -> None:
    try:
        deleted = container.categories.delete_category(category_id)
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    if not deleted:
        raise NotFoundError(f"Category not found: {category_id}")


def create_product(form: ProductCreate) -> ProductItem:
    try:
        product = container.products.create_product(**form.model_dump())
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    return product_item(Product.from_dict(product))


def update_product(product_id: str, form: ProductUpdate) -> ProductItem:
    try:
        product = container.products.update_product(product_id, **form.model_dump(exclude_unset=True))
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    if product is None:
        raise NotFoundError(f"Product not found: {product_id}")
    return product_item(Product.from_dict(product))


def delete_product(product_id: str) -> None:
    if not container.products.delete_product(product_id):
        raise NotFoundError(f"Product not found: {product_id}")


def upload_product_image(product_id: str, data: bytes, content_type: str = "image/jpeg", color: str | None = None) -> str:
    """Store an image for a product; returns the image id."""
    if not data:
        raise ValidationError("Image is empty")
    try:
        return container.products.add_product_image(product_id, data, content_type, color)
    except IntegrityError as e:
        raise NotFoundError(e.message) from e


def list_users(q: str | None = None, page: int = 1, limit: int = 10) -> UsersResponse:
    """Users newest first, searchable by name or email."""
    validate_page(page, limit)
    data = container.users.list_users(q, page, limit)
    return UsersResponse(
        items=[UserItem(**u) for u in data["users"]],
        pagination=Pagination(**data["pagination"]),
    )


def get_user(user_id: str) -> UserItem:
    user = container.users.get_user(user_id)
    if user is None:
        raise NotFoundError(f"User not found: {user_id}")
    return UserItem(**user)


def update_user(user_id: str, form: UserUpdate) -> UserItem:
    try:
        user = container.users.update_user(user_id, form.name, form.email, form.role)
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    if user is None:
        raise NotFoundError(f"User not found: {user_id}")
    return UserItem(**user)


def delete_user(user_id: str, acting_user_id: str | None = None) -> None:
    try:
        deleted = container.users.delete_user(user_id, acting_user_id)
    except IntegrityError as e:
        raise ValidationError(e.message) from e
    if not deleted:
        raise NotFoundError(f"User not found: {user_id}")
