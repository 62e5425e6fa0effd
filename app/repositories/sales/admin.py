"""Admin repository - dashboard aggregates over orders, users and products."""

from datetime import datetime

from loguru import logger

from app.caching import cache_key, memoized
from app.helpers import month_start, percentage_change
from app.repositories.base import BaseRepository
from settings import DASHBOARD_STATS_TTL, MONTHLY_SALES_TTL, SALES_MONTHS, TOP_PRODUCTS_TTL


class AdminRepository(BaseRepository):
    """Repository for admin dashboard figures."""

    def _count_between(self, table: str, start: datetime | None, end: datetime | None) -> int:
        where, params = self._range(start, end)
        return self.fetchone(f"SELECT COUNT(*) FROM {table}{where}", params)[0]

    def _revenue_between(self, start: datetime | None, end: datetime | None) -> float:
        where, params = self._range(start, end)
        return float(self.fetchone(f"SELECT COALESCE(SUM(total), 0) FROM orders{where}", params)[0])

    @staticmethod
    def _range(start: datetime | None, end: datetime | None) -> tuple[str, list]:
        clauses, params = [], []
        if start is not None:
            clauses.append("created_at >= ?")
            params.append(start)
        if end is not None:
            clauses.append("created_at < ?")
            params.append(end)
        return (f" WHERE {' AND '.join(clauses)}" if clauses else ""), params

    @memoized
    def get_dashboard_stats(self, now: datetime | None = None) -> dict:
        """Totals plus this-month vs last-month change for revenue, orders, users, products."""
        now = now or datetime.now()
        this_month = month_start(now)
        last_month = month_start(now, 1)

        def fetch():
            changes = {}
            for name, table in (("orders", "orders"), ("users", "users"), ("products", "product")):
                previous = self._count_between(table, last_month, this_month)
                current = self._count_between(table, this_month, None)
                changes[f"{name}_change"] = percentage_change(previous, current)

            stats = {
                "total_revenue": self._revenue_between(None, None),
                "total_orders": self._count_between("orders", None, None),
                "total_users": self._count_between("users", None, None),
                "total_products": self._count_between("product", None, None),
                "revenue_change": percentage_change(
                    self._revenue_between(last_month, this_month),
                    self._revenue_between(this_month, None),
                ),
                **changes,
            }
            logger.debug("get_dashboard_stats: {}", stats)
            return stats

        key = cache_key("admin", "dashboard", "stats", this_month.date())
        return self._cached(key, DASHBOARD_STATS_TTL, fetch)

    @memoized
    def get_top_products(self, limit: int = 5) -> list[dict]:
        """Best sellers by quantity ordered."""

        def fetch():
            return self.fetch_dicts(
                """
                SELECT p.id, p.name, p.slug, p.price, p.discounted_price,
                       SUM(oi.quantity)::BIGINT AS total_sold
                FROM order_item oi
                JOIN product p ON p.id = oi.product_id
                GROUP BY p.id, p.name, p.slug, p.price, p.discounted_price
                ORDER BY total_sold DESC, p.name
                LIMIT ?
                """,
                [limit],
            )

        return self._cached(cache_key("admin", "top-products", limit), TOP_PRODUCTS_TTL, fetch)

    @memoized
    def get_monthly_sales(self, now: datetime | None = None, months: int = SALES_MONTHS) -> list[dict]:
        """Revenue per calendar month for the last ``months`` months, oldest first.

        Months without orders are present with a zero total.
        """
        now = now or datetime.now()

        def fetch():
            first = month_start(now, months - 1)
            rows = self.fetchall(
                """
                SELECT date_trunc('month', created_at) AS month, SUM(total)
                FROM orders
                WHERE created_at >= ?
                GROUP BY month
                """,
                [first],
            )
            totals = {(m.year, m.month): float(t) for m, t in rows}
            series = []
            for back in range(months - 1, -1, -1):
                start = month_start(now, back)
                series.append(
                    {
                        "month": start.strftime("%b %Y"),
                        "total": totals.get((start.year, start.month), 0.0),
                    }
                )
            return series

        key = cache_key("admin", "monthly-sales", month_start(now).date(), months)
        return self._cached(key, MONTHLY_SALES_TTL, fetch)
