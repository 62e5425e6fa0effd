"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL


def db_exists(path: str) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'cache_entry'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


class Database:
    """Owns the DuckDB database and one cursor per thread.

    Constructed once by the container and closed at shutdown. Thread cursors
    share the root connection's database, so ``:memory:`` works across threads.
    """

    def __init__(self, path: str):
        self.path = path
        self._local = threading.local()
        self._lock = threading.Lock()
        self._root: duckdb.DuckDBPyConnection | None = None
        self._cursors: list[duckdb.DuckDBPyConnection] = []

    def _open_root(self) -> duckdb.DuckDBPyConnection:
        if self._root is None:
            if not db_exists(self.path):
                logger.warning("DB not found: {}. Creating empty DB.", self.path)
            self._root = duckdb.connect(self.path)
            init_tables(self._root)
            logger.debug("DB connected: {}", self.path)
        return self._root

    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get thread-local connection."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            with self._lock:
                conn = self._open_root().cursor()
                self._cursors.append(conn)
            self._local.conn = conn
        return conn

    def close(self) -> None:
        """Close every cursor and the root connection."""
        with self._lock:
            for cursor in self._cursors:
                cursor.close()
            self._cursors.clear()
            if self._root is not None:
                self._root.close()
                self._root = None
                logger.debug("DB connection closed: {}", self.path)
            self._local = threading.local()

    def reconnect(self) -> duckdb.DuckDBPyConnection:
        """Force reconnect."""
        self.close()
        return self.connection()
