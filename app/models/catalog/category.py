"""Category model."""

CATEGORY_DDL = """
CREATE TABLE IF NOT EXISTS category (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    slug VARCHAR NOT NULL UNIQUE,
    description VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""
