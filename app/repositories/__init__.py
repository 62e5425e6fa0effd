"""Repositories package - data access layer for our database."""

from app.repositories.accounts import AddressRepository, UserRepository
from app.repositories.base import BaseRepository
from app.repositories.catalog import CategoryRepository, ProductRepository
from app.repositories.db import Database, db_exists, init_tables
from app.repositories.errors import IntegrityError, RepositoryError, SourceFetchFailed
from app.repositories.sales import AdminRepository, CouponRepository

__all__ = [
    # DB
    "Database",
    "db_exists",
    "init_tables",
    # Errors
    "RepositoryError",
    "SourceFetchFailed",
    "IntegrityError",
    # Base
    "BaseRepository",
    # Catalog
    "CategoryRepository",
    "ProductRepository",
    # Accounts
    "UserRepository",
    "AddressRepository",
    # Sales
    "CouponRepository",
    "AdminRepository",
]
