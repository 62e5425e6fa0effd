"""Cache-aside reader - read-through caching for expensive lookups."""

import threading
from collections.abc import Callable
from concurrent.futures import CancelledError, Future
from typing import Any, TypeVar

from loguru import logger

from app.caching.errors import validate_key, validate_ttl
from app.caching.store import MISSING, CacheStore

T = TypeVar("T")


def not_none(value: Any) -> bool:
    """Default cache predicate: cache anything except None."""
    return value is not None


class CacheAsideReader:
    """Serve lookups from a cache store, falling back to the source on a miss.

    On a miss the result of ``fetch`` is written with the given TTL. Store
    failures degrade to a miss (on read) or are logged (on write); fetch
    failures propagate and are never cached.

    Concurrent misses on the same key are collapsed: the first caller runs
    ``fetch`` and the others wait for its result.
    """

    def __init__(self, store: CacheStore):
        self._store = store
        self._inflight: dict[str, Future] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def store(self) -> CacheStore:
        return self._store

    def get_or_populate(
        self,
        key: str,
        ttl_seconds: int,
        fetch: Callable[[], T],
        cache_if: Callable[[T], bool] = not_none,
    ) -> T:
        """Return the cached value for key, or fetch, store and return it."""
        validate_key(key)
        validate_ttl(ttl_seconds)

        cached = self._read(key)
        if cached is not MISSING:
            with self._lock:
                self.hits += 1
            logger.debug("Cache hit: {}", key)
            return cached

        with self._lock:
            self.misses += 1
        logger.debug("Cache miss: {}", key)
        return self._populate(key, ttl_seconds, fetch, cache_if)

    def _populate(self, key: str, ttl_seconds: int, fetch: Callable[[], T], cache_if: Callable[[T], bool]) -> T:
        with self._lock:
            call = self._inflight.get(key)
            leader = call is None
            if leader:
                call = Future()
                self._inflight[key] = call

        if not leader:
            logger.debug("Waiting for in-flight fetch: {}", key)
            try:
                return call.result()
            except CancelledError:
                logger.debug("In-flight fetch abandoned, fetching: {}", key)
                return self._populate(key, ttl_seconds, fetch, cache_if)

        try:
            value = fetch()
            if cache_if(value):
                self._write(key, value, ttl_seconds)
            else:
                logger.debug("Not caching {}: rejected by predicate", key)
        except Exception as e:
            self._release(key)
            call.set_exception(e)
            raise
        except BaseException:
            # Interrupted: nothing written, waiters fetch for themselves
            self._release(key)
            call.cancel()
            raise

        self._release(key)
        call.set_result(value)
        return value

    def _release(self, key: str) -> None:
        with self._lock:
            self._inflight.pop(key, None)

    def _read(self, key: str) -> Any:
        try:
            return self._store.get(key)
        except Exception as e:
            logger.warning("Cache read failed for {}, treating as miss: {}", key, e)
            return MISSING

    def _write(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            self._store.set(key, value, ttl_seconds)
        except Exception as e:
            logger.warning("Cache write failed for {}: {}", key, e)

    def invalidate(self, key: str) -> None:
        """Drop one key. Store failures are logged, not raised."""
        try:
            self._store.delete(key)
            logger.info("Cache invalidated: {}", key)
        except Exception as e:
            logger.warning("Cache invalidation failed for {}: {}", key, e)

    def invalidate_prefix(self, prefix: str) -> None:
        """Drop every key starting with prefix."""
        try:
            removed = self._store.delete_prefix(prefix)
            logger.info("Cache invalidated: {}* ({} entries)", prefix, removed)
        except Exception as e:
            logger.warning("Cache invalidation failed for {}*: {}", prefix, e)
