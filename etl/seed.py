"""Catalog seed - load categories, products and coupons from a JSON document."""

from datetime import datetime

import duckdb
import polars as pl
from loguru import logger

from app.helpers import new_id, slugify
from etl.helpers import get_existing_codes, get_existing_slugs, insert_frame

CATEGORY_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "slug": pl.Utf8,
    "description": pl.Utf8,
    "created_at": pl.Datetime,
}

PRODUCT_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "slug": pl.Utf8,
    "description": pl.Utf8,
    "price": pl.Float64,
    "discounted_price": pl.Float64,
    "category_id": pl.Utf8,
    "featured": pl.Boolean,
    "stock": pl.Int32,
    "created_at": pl.Datetime,
}

COUPON_SCHEMA = {
    "id": pl.Utf8,
    "code": pl.Utf8,
    "description": pl.Utf8,
    "discount_type": pl.Utf8,
    "discount_value": pl.Float64,
    "min_order_value": pl.Float64,
    "max_discount": pl.Float64,
    "usage_limit": pl.Int32,
    "used_count": pl.Int32,
    "start_date": pl.Datetime,
    "end_date": pl.Datetime,
    "is_active": pl.Boolean,
    "created_at": pl.Datetime,
}


def _parse_date(value) -> datetime:
    return value if isinstance(value, datetime) else datetime.fromisoformat(value)


def _optional_float(value) -> float | None:
    return None if value is None else float(value)


def _frames(data: dict, category_ids: dict[str, str], now: datetime) -> tuple[list, list]:
    categories, products = [], []
    product_slugs = set()
    for c in data.get("categories", []):
        slug = c.get("slug") or slugify(c["name"])
        if slug not in category_ids:
            category_ids[slug] = new_id()
            categories.append(
                {
                    "id": category_ids[slug],
                    "name": c["name"],
                    "slug": slug,
                    "description": c.get("description"),
                    "created_at": now,
                }
            )
        for p in c.get("products", []):
            product_slug = p.get("slug") or slugify(p["name"])
            if product_slug in product_slugs:
                logger.warning("Duplicate product slug in document, keeping first: {}", product_slug)
                continue
            product_slugs.add(product_slug)
            products.append(
                {
                    "id": new_id(),
                    "name": p["name"],
                    "slug": product_slug,
                    "description": p.get("description"),
                    "price": float(p["price"]),
                    "discounted_price": _optional_float(p.get("discounted_price")),
                    "category_id": category_ids[slug],
                    "featured": bool(p.get("featured", False)),
                    "stock": int(p.get("stock", 0)),
                    "created_at": now,
                }
            )
    return categories, products


def clear_catalog(conn: duckdb.DuckDBPyConnection) -> None:
    """Empty the catalog tables. Runs inside the caller's transaction."""
    for table in ("product_image", "product", "category", "coupon"):
        conn.execute(f"DELETE FROM {table}")
    logger.info("Catalog tables emptied")


def seed_catalog(conn: duckdb.DuckDBPyConnection, data: dict, replace: bool = False) -> dict:
    """Load a catalog document.

    Incremental by default: categories, products and coupons whose slug/code
    already exists are skipped. With ``replace`` the catalog tables are emptied
    first, in the same transaction, so a bad document leaves the old catalog
    in place. Returns inserted row counts per table.
    """
    now = datetime.now()

    conn.execute("BEGIN TRANSACTION")
    try:
        if replace:
            clear_catalog(conn)

        category_ids = {r[1]: r[0] for r in conn.execute("SELECT id, slug FROM category").fetchall()}
        categories, products = _frames(data, category_ids, now)

        existing_products = get_existing_slugs(conn, "product")
        products = [p for p in products if p["slug"] not in existing_products]

        seen_codes = get_existing_codes(conn)
        coupons = []
        for c in data.get("coupons", []):
            code = c["code"].strip().upper()
            if code in seen_codes:
                continue
            seen_codes.add(code)
            coupons.append(
                {
                    "id": new_id(),
                    "code": code,
                    "description": c.get("description"),
                    "discount_type": c.get("discount_type", "PERCENTAGE"),
                    "discount_value": float(c["discount_value"]),
                    "min_order_value": _optional_float(c.get("min_order_value")),
                    "max_discount": _optional_float(c.get("max_discount")),
                    "usage_limit": c.get("usage_limit"),
                    "used_count": 0,
                    "start_date": _parse_date(c["start_date"]),
                    "end_date": _parse_date(c["end_date"]),
                    "is_active": bool(c.get("is_active", True)),
                    "created_at": now,
                }
            )

        counts = {
            "category": insert_frame(conn, "category", pl.DataFrame(categories, schema=CATEGORY_SCHEMA)),
            "product": insert_frame(conn, "product", pl.DataFrame(products, schema=PRODUCT_SCHEMA)),
            "coupon": insert_frame(conn, "coupon", pl.DataFrame(coupons, schema=COUPON_SCHEMA)),
        }
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    logger.info("Seeded: {}", counts)
    return counts
