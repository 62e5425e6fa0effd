"""Shipping address model."""

# At most one row per user_id has is_default = TRUE
ADDRESS_DDL = """
CREATE TABLE IF NOT EXISTS address (
    id VARCHAR PRIMARY KEY,
    user_id VARCHAR NOT NULL,
    full_name VARCHAR NOT NULL,
    street_address VARCHAR NOT NULL,
    city VARCHAR NOT NULL,
    state VARCHAR NOT NULL,
    postal_code VARCHAR NOT NULL,
    country VARCHAR NOT NULL,
    is_default BOOLEAN DEFAULT FALSE,
    created_at TIMESTAMP NOT NULL
)
"""
