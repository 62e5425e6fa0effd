"""DuckDB cache store - cache entries persisted in the cache_entry table."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import duckdb
from loguru import logger

from app.caching.errors import CacheUnavailable, validate_key, validate_ttl
from app.caching.store import MISSING, CacheStore, dumps, loads
from app.repositories.db import Database


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in TIMESTAMP columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class DuckDBCacheStore(CacheStore):
    """Cache store shared by every process using the same database file.

    Expired rows are filtered out on read and removed by ``purge_expired``.
    """

    def __init__(self, db: Database, clock: Callable[[], datetime] = utcnow):
        self._db = db
        self._clock = clock
        logger.debug("DuckDBCacheStore initialized: {}", db.path)

    def _execute(self, query: str, params: list | None = None) -> duckdb.DuckDBPyConnection:
        try:
            return self._db.connection().execute(query, params or [])
        except duckdb.Error as e:
            raise CacheUnavailable(f"Cache query failed: {e}") from e

    def get(self, key: str) -> Any:
        row = self._execute(
            "SELECT data FROM cache_entry WHERE key = ? AND expires_at > ?",
            [key, self._clock()],
        ).fetchone()
        if row is None:
            return MISSING
        return loads(row[0])

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        validate_key(key)
        validate_ttl(ttl_seconds)
        data = dumps(value)
        now = self._clock()
        self._execute(
            """
            INSERT OR REPLACE INTO cache_entry (key, data, expires_at, computed_at)
            VALUES (?, ?, ?, ?)
            """,
            [key, data, now + timedelta(seconds=ttl_seconds), now],
        )

    def delete(self, key: str) -> bool:
        row = self._execute("DELETE FROM cache_entry WHERE key = ?", [key]).fetchone()
        return bool(row and row[0])

    def delete_prefix(self, prefix: str) -> int:
        row = self._execute("DELETE FROM cache_entry WHERE starts_with(key, ?)", [prefix]).fetchone()
        return row[0] if row else 0

    def clear(self) -> None:
        self._execute("DELETE FROM cache_entry")
        logger.info("All cache cleared")

    def purge_expired(self) -> int:
        """Delete expired rows. Returns how many were removed."""
        row = self._execute("DELETE FROM cache_entry WHERE expires_at <= ?", [self._clock()]).fetchone()
        removed = row[0] if row else 0
        if removed:
            logger.info("Purged {} expired cache entries", removed)
        return removed

    def count(self) -> int:
        """Number of live (unexpired) entries."""
        row = self._execute("SELECT COUNT(*) FROM cache_entry WHERE expires_at > ?", [self._clock()]).fetchone()
        return row[0]
