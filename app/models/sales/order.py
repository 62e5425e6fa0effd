"""Order and order item models (read by the admin dashboard)."""

ORDERS_DDL = """
CREATE TABLE IF NOT EXISTS orders (
    id VARCHAR PRIMARY KEY,
    user_id VARCHAR NOT NULL,
    total DOUBLE NOT NULL,
    status VARCHAR DEFAULT 'PENDING',
    created_at TIMESTAMP NOT NULL
)
"""

ORDER_ITEM_DDL = """
CREATE TABLE IF NOT EXISTS order_item (
    id VARCHAR PRIMARY KEY,
    order_id VARCHAR NOT NULL,
    product_id VARCHAR NOT NULL,
    quantity INTEGER NOT NULL,
    price DOUBLE NOT NULL
)
"""
