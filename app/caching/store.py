"""Cache stores - key/value storage with TTL expiry."""

import json
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger

from app.caching.errors import CacheUnavailable, validate_key, validate_ttl


class _Missing:
    """Sentinel type for a cache miss."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def dumps(value: Any) -> str:
    """Serialize a payload for storage."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        raise CacheUnavailable(f"Value is not JSON serializable: {e}") from e


def loads(data: str) -> Any:
    """Deserialize a stored payload."""
    return json.loads(data)


class CacheStore(ABC):
    """Key/value store that enforces expiry on read."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the stored value, or MISSING when absent or expired."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store value, replacing any existing entry, for ttl_seconds."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove one entry. Returns True if it existed."""

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Remove every entry whose key starts with prefix."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    def close(self) -> None:
        """Release backend resources."""

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()


@dataclass
class _Entry:
    data: str
    expires_at: float


class MemoryCacheStore(CacheStore):
    """In-process cache backed by a dict.

    Values are stored JSON-encoded, so every hit returns a fresh copy.
    Expired entries are dropped lazily on read and by ``purge_expired``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._clock = clock
        logger.debug("MemoryCacheStore initialized")

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return MISSING
            if entry.expires_at <= self._clock():
                del self._entries[key]
                logger.debug("Cache expired: {}", key)
                return MISSING
            data = entry.data
        return loads(data)

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        validate_key(key)
        validate_ttl(ttl_seconds)
        data = dumps(value)
        with self._lock:
            self._entries[key] = _Entry(data, self._clock() + ttl_seconds)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def delete_prefix(self, prefix: str) -> int:
        with self._lock:
            doomed = [k for k in self._entries if k.startswith(prefix)]
            for k in doomed:
                del self._entries[k]
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            doomed = [k for k, e in self._entries.items() if e.expires_at <= now]
            for k in doomed:
                del self._entries[k]
        return len(doomed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
