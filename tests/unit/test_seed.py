"""Tests for catalog seeding and validation."""

import pytest

from etl import seed_catalog, validate_catalog

CATALOG = {
    "categories": [
        {
            "name": "Shoes",
            "description": "Things for feet",
            "products": [
                {"name": "Trail Runner", "price": 120, "discounted_price": 90, "featured": True, "stock": 5},
                {"name": "Court Classic", "price": 80.0},
            ],
        },
        {"name": "Hats", "products": [{"name": "Wool Beanie", "price": 25.0}]},
    ],
    "coupons": [
        {
            "code": "welcome",
            "discount_type": "FIXED",
            "discount_value": 15,
            "min_order_value": 50,
            "start_date": "2026-01-01T00:00:00",
            "end_date": "2026-12-31T00:00:00",
        }
    ],
}


@pytest.fixture
def conn(db):
    return db.connection()


class TestSeedCatalog:
    def test_counts(self, conn):
        counts = seed_catalog(conn, CATALOG)
        assert counts == {"category": 2, "product": 3, "coupon": 1}

    def test_rows_readable_through_repositories(self, conn, categories, products, coupons):
        seed_catalog(conn, CATALOG)
        assert [c["slug"] for c in categories.get_categories()] == ["hats", "shoes"]
        runner = products.get_product_by_slug("trail-runner")
        assert runner["discounted_price"] == 90.0
        assert runner["featured"] is True
        assert runner["category_slug"] == "shoes"
        assert coupons.get_coupon_by_code("WELCOME")["min_order_value"] == 50.0

    def test_incremental_skips_existing(self, conn):
        seed_catalog(conn, CATALOG)
        more = {
            "categories": [
                {"name": "Shoes", "products": [{"name": "Trail Runner", "price": 1.0}, {"name": "Sandal", "price": 30.0}]}
            ],
            "coupons": [{**CATALOG["coupons"][0], "code": "WELCOME"}],
        }
        assert seed_catalog(conn, more) == {"category": 0, "product": 1, "coupon": 0}
        assert conn.execute("SELECT COUNT(*) FROM product").fetchone()[0] == 4
        assert conn.execute("SELECT price FROM product WHERE slug = 'trail-runner'").fetchone()[0] == 120.0

    def test_replace(self, conn):
        seed_catalog(conn, CATALOG)
        counts = seed_catalog(conn, {"categories": [{"name": "Bags"}]}, replace=True)
        assert counts == {"category": 1, "product": 0, "coupon": 0}
        assert conn.execute("SELECT slug FROM category").fetchall() == [("bags",)]

    def test_failed_replace_keeps_old_catalog(self, conn):
        seed_catalog(conn, CATALOG)
        broken = {"categories": [{"name": "Bags", "products": [{"name": "Tote"}]}]}
        with pytest.raises(KeyError):
            seed_catalog(conn, broken, replace=True)
        assert conn.execute("SELECT COUNT(*) FROM category").fetchone()[0] == 2
        assert conn.execute("SELECT COUNT(*) FROM product").fetchone()[0] == 3
        assert conn.execute("SELECT COUNT(*) FROM coupon").fetchone()[0] == 1

    def test_duplicate_slugs_in_document_keep_first(self, conn):
        doc = {
            "categories": [
                {"name": "Shoes", "products": [{"name": "Trail Runner", "price": 120.0}]},
                {"name": "Sale", "products": [{"name": "Trail Runner", "price": 60.0}]},
            ],
            "coupons": [
                {**CATALOG["coupons"][0], "code": "welcome"},
                {**CATALOG["coupons"][0], "code": "WELCOME"},
            ],
        }
        assert seed_catalog(conn, doc) == {"category": 2, "product": 1, "coupon": 1}
        assert conn.execute("SELECT price FROM product WHERE slug = 'trail-runner'").fetchone()[0] == 120.0

    def test_empty_document(self, conn):
        assert seed_catalog(conn, {}) == {"category": 0, "product": 0, "coupon": 0}


class TestValidateCatalog:
    def test_empty_catalog(self, conn):
        result = validate_catalog(conn)
        assert result["valid"] is False
        assert "No categories found" in result["issues"]

    def test_seeded_catalog_is_valid(self, conn):
        seed_catalog(conn, CATALOG)
        result = validate_catalog(conn)
        assert result["valid"] is True
        assert result["stats"]["products"] == 3
        assert result["stats"]["products_without_images"] == 3

    def test_reports_bad_rows(self, conn):
        seed_catalog(conn, CATALOG)
        conn.execute("UPDATE product SET discounted_price = price + 1 WHERE slug = 'court-classic'")
        conn.execute("UPDATE product SET category_id = 'gone' WHERE slug = 'wool-beanie'")
        result = validate_catalog(conn)
        assert result["valid"] is False
        assert len(result["issues"]) == 2
