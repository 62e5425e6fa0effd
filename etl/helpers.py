"""ETL helper functions."""

import duckdb
import polars as pl


def get_existing_slugs(conn: duckdb.DuckDBPyConnection, table: str) -> set[str]:
    """Slugs already present in a catalog table."""
    rows = conn.execute(f"SELECT slug FROM {table}").fetchall()
    return {r[0] for r in rows}


def get_existing_codes(conn: duckdb.DuckDBPyConnection) -> set[str]:
    """Coupon codes already present."""
    rows = conn.execute("SELECT code FROM coupon").fetchall()
    return {r[0] for r in rows}


def insert_frame(conn: duckdb.DuckDBPyConnection, table: str, df: pl.DataFrame) -> int:
    """Insert a DataFrame into table by column name. Returns row count."""
    if df.is_empty():
        return 0
    view = f"{table}_df"
    columns = ", ".join(df.columns)
    conn.register(view, df)
    try:
        conn.execute(f"INSERT INTO {table} ({columns}) SELECT {columns} FROM {view}")
    finally:
        conn.unregister(view)
    return df.height
