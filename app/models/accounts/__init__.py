"""Account domain models - users and their addresses."""

from app.models.accounts.address import ADDRESS_DDL
from app.models.accounts.entities import Address, User
from app.models.accounts.user import USERS_DDL, UserRole

__all__ = [
    "USERS_DDL",
    "ADDRESS_DDL",
    "UserRole",
    "User",
    "Address",
]
