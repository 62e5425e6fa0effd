"""Catalog and user management API."""

from web.api.manage.views import (
    create_category,
    create_product,
    delete_category,
    delete_product,
    delete_user,
    get_user,
    list_users,
    update_category,
    update_product,
    update_user,
    upload_product_image,
)

__all__ = [
    "create_category",
    "update_category",
    "delete_category",
    "create_product",
    "update_product",
    "delete_product",
    "upload_product_image",
    "list_users",
    "get_user",
    "update_user",
    "delete_user",
]
