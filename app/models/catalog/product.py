"""Product and product image models."""

PRODUCT_DDL = """
CREATE TABLE IF NOT EXISTS product (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    slug VARCHAR NOT NULL UNIQUE,
    description VARCHAR,
    price DOUBLE NOT NULL,
    discounted_price DOUBLE,
    category_id VARCHAR NOT NULL,
    featured BOOLEAN DEFAULT FALSE,
    stock INTEGER DEFAULT 0,
    created_at TIMESTAMP NOT NULL
)
"""

# Image bytes live here and are served uncached
PRODUCT_IMAGE_DDL = """
CREATE TABLE IF NOT EXISTS product_image (
    id VARCHAR PRIMARY KEY,
    product_id VARCHAR NOT NULL,
    image BLOB NOT NULL,
    content_type VARCHAR DEFAULT 'image/jpeg',
    color VARCHAR,
    sort_order INTEGER DEFAULT 0
)
"""
