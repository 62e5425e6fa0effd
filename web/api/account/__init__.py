"""Account API."""

from web.api.account.views import (
    create_address,
    delete_address,
    get_address,
    list_addresses,
    set_default_address,
    update_address,
)

__all__ = [
    "list_addresses",
    "get_address",
    "create_address",
    "update_address",
    "delete_address",
    "set_default_address",
]
