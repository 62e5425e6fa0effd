"""Base repository class."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.caching.memo import current_memo
from app.caching.reader import CacheAsideReader, not_none
from app.helpers import to_json_value
from app.repositories.db import Database
from app.repositories.errors import IntegrityError, SourceFetchFailed


class BaseRepository:
    """Base repository with query helpers and read-through caching."""

    def __init__(self, db: Database, reader: CacheAsideReader):
        self._db = db
        self._reader = reader
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def conn(self) -> duckdb.DuckDBPyConnection:
        return self._db.connection()

    def _cached(
        self,
        key: str,
        ttl_seconds: int,
        fn: Callable[[], Any],
        cache_if: Callable[[Any], bool] = not_none,
    ) -> Any:
        """Get from cache or fetch and store."""
        return self._reader.get_or_populate(key, ttl_seconds, fn, cache_if)

    def _invalidate(self, *keys: str, prefixes: tuple[str, ...] = ()) -> None:
        """Drop cached keys and key prefixes after a write."""
        memo = current_memo()
        if memo is not None:
            memo.clear()
        for key in keys:
            self._reader.invalidate(key)
        for prefix in prefixes:
            self._reader.invalidate_prefix(prefix)

    def execute(self, query: str, params: list | None = None) -> duckdb.DuckDBPyConnection:
        """Execute SQL query."""
        try:
            if params:
                return self.conn.execute(query, params)
            return self.conn.execute(query)
        except duckdb.ConstraintException as e:
            raise IntegrityError(str(e)) from e
        except duckdb.Error as e:
            logger.error("Query failed: {}", e)
            raise SourceFetchFailed(str(e)) from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def fetch_dicts(self, query: str, params: list | None = None) -> list[dict]:
        """Execute and fetch rows as JSON-friendly dicts keyed by column name."""
        cursor = self.execute(query, params)
        columns = [d[0] for d in cursor.description]
        return [{c: to_json_value(v) for c, v in zip(columns, row)} for row in cursor.fetchall()]

    def fetch_dict(self, query: str, params: list | None = None) -> dict | None:
        """Execute and fetch the first row as a dict, or None."""
        rows = self.fetch_dicts(query, params)
        return rows[0] if rows else None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run statements in one transaction, rolling back on error."""
        self.execute("BEGIN TRANSACTION")
        try:
            yield
            self.execute("COMMIT")
        except Exception:
            self.execute("ROLLBACK")
            raise
