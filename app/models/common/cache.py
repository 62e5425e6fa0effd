"""Cache entry table - backing storage for the DuckDB cache store."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS cache_entry (
    key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    expires_at TIMESTAMP NOT NULL,
    computed_at TIMESTAMP NOT NULL
)
"""
