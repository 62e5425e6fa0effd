"""Account repositories."""

from app.repositories.accounts.address import AddressRepository
from app.repositories.accounts.user import UserRepository

__all__ = [
    "UserRepository",
    "AddressRepository",
]
