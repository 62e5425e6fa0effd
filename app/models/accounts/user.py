"""User model."""

from enum import StrEnum

USERS_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id VARCHAR PRIMARY KEY,
    name VARCHAR,
    email VARCHAR NOT NULL UNIQUE,
    role VARCHAR DEFAULT 'USER',
    created_at TIMESTAMP NOT NULL
)
"""


class UserRole(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"
