"""Tests for dashboard aggregates."""

from datetime import datetime

import pytest

from app.caching import MISSING
from app.helpers import month_start, percentage_change
from app.services.dashboard import DashboardService
from settings import DASHBOARD_STATS_TTL

NOW = datetime(2026, 3, 10, 12, 0)


def add_user(db, user_id: str, created_at: datetime) -> None:
    db.connection().execute(
        "INSERT INTO users (id, name, email, created_at) VALUES (?, ?, ?, ?)",
        [user_id, user_id.title(), f"{user_id}@example.com", created_at],
    )


def add_order(db, order_id: str, total: float, created_at: datetime, items: tuple = ()) -> None:
    conn = db.connection()
    conn.execute(
        "INSERT INTO orders (id, user_id, total, created_at) VALUES (?, 'u1', ?, ?)",
        [order_id, total, created_at],
    )
    for n, (product_id, quantity) in enumerate(items):
        conn.execute(
            "INSERT INTO order_item (id, order_id, product_id, quantity, price) VALUES (?, ?, ?, ?, 10.0)",
            [f"{order_id}-{n}", order_id, product_id, quantity],
        )


@pytest.fixture
def shop(db, categories, products):
    shoes = categories.create_category("Shoes")
    runner = products.create_product("Trail Runner", 120.0, shoes["id"])
    beanie = products.create_product("Wool Beanie", 25.0, shoes["id"])

    add_user(db, "u1", datetime(2026, 2, 3))
    add_user(db, "u2", datetime(2026, 3, 2))
    add_user(db, "u3", datetime(2026, 3, 5))
    add_order(db, "o1", 100.0, datetime(2025, 12, 20), [(runner["id"], 1)])
    add_order(db, "o2", 200.0, datetime(2026, 2, 14), [(beanie["id"], 3)])
    add_order(db, "o3", 300.0, datetime(2026, 3, 1), [(runner["id"], 1), (beanie["id"], 1)])
    return {"runner": runner, "beanie": beanie}


class TestHelpers:
    @pytest.mark.parametrize(
        "months_back, expected",
        [(0, datetime(2026, 3, 1)), (1, datetime(2026, 2, 1)), (3, datetime(2025, 12, 1))],
    )
    def test_month_start(self, months_back, expected):
        assert month_start(NOW, months_back) == expected

    @pytest.mark.parametrize(
        "previous, current, expected",
        [(0, 0, 0.0), (0, 5, 100.0), (200, 300, 50.0), (3, 1, -66.7)],
    )
    def test_percentage_change(self, previous, current, expected):
        assert percentage_change(previous, current) == expected


class TestDashboardStats:
    def test_totals_and_changes(self, admin, shop):
        stats = admin.get_dashboard_stats(NOW)
        assert stats["total_revenue"] == 600.0
        assert stats["total_orders"] == 3
        assert stats["total_users"] == 3
        assert stats["total_products"] == 2
        assert stats["revenue_change"] == 50.0
        assert stats["orders_change"] == 0.0
        assert stats["users_change"] == 100.0
        assert stats["products_change"] == 100.0

    def test_stats_cached_until_ttl(self, db, admin, shop, clock):
        assert admin.get_dashboard_stats(NOW)["total_orders"] == 3
        add_order(db, "o4", 50.0, datetime(2026, 3, 9))
        assert admin.get_dashboard_stats(NOW)["total_orders"] == 3
        clock.advance(DASHBOARD_STATS_TTL)
        assert admin.get_dashboard_stats(NOW)["total_orders"] == 4

    def test_each_month_has_its_own_entry(self, db, admin, store):
        add_user(db, "u1", datetime(2026, 3, 2))
        assert admin.get_dashboard_stats(datetime(2026, 3, 15))["users_change"] == 100.0
        assert admin.get_dashboard_stats(datetime(2026, 4, 15))["users_change"] == -100.0
        assert store.get("admin:dashboard:stats:2026-03-01") is not MISSING
        assert store.get("admin:dashboard:stats:2026-04-01") is not MISSING

    def test_same_month_shares_an_entry(self, db, admin):
        add_user(db, "u1", datetime(2026, 3, 2))
        admin.get_dashboard_stats(datetime(2026, 3, 1))
        add_user(db, "u2", datetime(2026, 3, 3))
        assert admin.get_dashboard_stats(datetime(2026, 3, 31))["total_users"] == 1

    def test_empty_shop(self, admin):
        stats = admin.get_dashboard_stats(NOW)
        assert stats["total_revenue"] == 0.0
        assert stats["revenue_change"] == 0.0


class TestTopProducts:
    def test_ordered_by_quantity(self, admin, shop):
        top = admin.get_top_products(5)
        assert [(p["slug"], p["total_sold"]) for p in top] == [("wool-beanie", 4), ("trail-runner", 2)]

    def test_limit(self, admin, shop):
        assert len(admin.get_top_products(1)) == 1


class TestMonthlySales:
    def test_zero_filled_oldest_first(self, admin, shop):
        series = admin.get_monthly_sales(NOW, months=6)
        assert [p["month"] for p in series] == [
            "Oct 2025",
            "Nov 2025",
            "Dec 2025",
            "Jan 2026",
            "Feb 2026",
            "Mar 2026",
        ]
        assert [p["total"] for p in series] == [0.0, 0.0, 100.0, 0.0, 200.0, 300.0]

    def test_window_length_is_part_of_the_key(self, admin, shop):
        assert len(admin.get_monthly_sales(NOW, months=3)) == 3
        assert len(admin.get_monthly_sales(NOW, months=6)) == 6

    def test_window_end_is_part_of_the_key(self, admin, shop):
        assert admin.get_monthly_sales(NOW, months=2)[-1]["month"] == "Mar 2026"
        series = admin.get_monthly_sales(datetime(2026, 2, 20), months=2)
        assert [p["month"] for p in series] == ["Jan 2026", "Feb 2026"]
        assert [p["total"] for p in series] == [0.0, 200.0]


class TestDashboardService:
    def test_overview(self, admin, shop):
        overview = DashboardService(admin).get_overview(NOW)
        assert overview["stats"].total_orders == 3
        assert overview["top_products"][0].slug == "wool-beanie"
        assert len(overview["sales"]) == 6
