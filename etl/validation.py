"""Catalog validation functions."""

import duckdb


def validate_catalog(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate catalog integrity."""
    issues = []
    stats = {}

    stats["categories"] = conn.execute("SELECT COUNT(*) FROM category").fetchone()[0]
    stats["products"] = conn.execute("SELECT COUNT(*) FROM product").fetchone()[0]
    stats["coupons"] = conn.execute("SELECT COUNT(*) FROM coupon").fetchone()[0]

    if stats["categories"] == 0:
        issues.append("No categories found")

    orphans = conn.execute(
        """
        SELECT COUNT(*) FROM product p
        LEFT JOIN category c ON c.id = p.category_id
        WHERE c.id IS NULL
        """
    ).fetchone()[0]
    if orphans > 0:
        issues.append(f"{orphans} products reference a missing category")

    bad_discounts = conn.execute(
        "SELECT COUNT(*) FROM product WHERE discounted_price IS NOT NULL AND discounted_price >= price"
    ).fetchone()[0]
    if bad_discounts > 0:
        issues.append(f"{bad_discounts} products have a discounted price not below the price")

    bad_coupons = conn.execute("SELECT COUNT(*) FROM coupon WHERE end_date < start_date").fetchone()[0]
    if bad_coupons > 0:
        issues.append(f"{bad_coupons} coupons end before they start")

    stats["products_without_images"] = conn.execute(
        """
        SELECT COUNT(*) FROM product p
        WHERE NOT EXISTS (SELECT 1 FROM product_image i WHERE i.product_id = p.id)
        """
    ).fetchone()[0]

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
