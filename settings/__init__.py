"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("SHOP_DB_PATH", "shop.duckdb")

# Logging
LOG_DIR = Path("logs")

# Cache backend: "memory" (per process) or "duckdb" (shared cache_entry table)
CACHE_BACKEND = os.getenv("SHOP_CACHE_BACKEND", "memory")

# Cache TTLs (seconds)
CATEGORIES_TTL = 60 * 30
CATEGORY_TTL = 60 * 30
PRODUCTS_TTL = 60 * 5
PRODUCT_TTL = 60 * 10
RELATED_PRODUCTS_TTL = 60 * 10
FEATURED_PRODUCTS_TTL = 60 * 10
DASHBOARD_STATS_TTL = 60 * 15
TOP_PRODUCTS_TTL = 60 * 30
MONTHLY_SALES_TTL = 60 * 60

# Catalog
PRODUCTS_PAGE_SIZE = 12
FEATURED_LIMIT = 8
RELATED_LIMIT = 4
TOP_PRODUCTS_LIMIT = 5
SALES_MONTHS = 6
