"""Caching package - cache stores, the cache-aside reader and request memo.

The DuckDB-backed store lives in ``app.caching.duckdb_store``.
"""

from app.caching.errors import CacheError, CacheUnavailable, InvalidKeyOrTTL
from app.caching.keys import cache_key, namespace_prefix
from app.caching.memo import RequestMemo, current_memo, memoized, request_scope
from app.caching.reader import CacheAsideReader, not_none
from app.caching.store import MISSING, CacheStore, MemoryCacheStore

__all__ = [
    # Errors
    "CacheError",
    "CacheUnavailable",
    "InvalidKeyOrTTL",
    # Stores
    "MISSING",
    "CacheStore",
    "MemoryCacheStore",
    # Reader
    "CacheAsideReader",
    "not_none",
    # Keys
    "cache_key",
    "namespace_prefix",
    # Request memo
    "RequestMemo",
    "request_scope",
    "current_memo",
    "memoized",
]
