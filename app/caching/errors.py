"""Cache layer errors."""


class CacheError(Exception):
    """Base class for cache layer errors."""

    def __init__(self, message: str = "Cache error"):
        self.message = message
        super().__init__(self.message)


class CacheUnavailable(CacheError):
    """Cache store cannot be read or written."""

    def __init__(self, message: str = "Cache store unavailable"):
        super().__init__(message)


class InvalidKeyOrTTL(CacheError, ValueError):
    """Empty cache key or non-positive TTL."""

    def __init__(self, message: str = "Invalid cache key or TTL"):
        super().__init__(message)


def validate_key(key: str) -> None:
    """Reject empty or blank cache keys."""
    if not isinstance(key, str) or not key.strip():
        raise InvalidKeyOrTTL(f"Cache key must be a non-empty string, got {key!r}")


def validate_ttl(ttl_seconds: int) -> None:
    """Reject TTLs that are not positive integers."""
    if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds <= 0:
        raise InvalidKeyOrTTL(f"TTL must be a positive integer of seconds, got {ttl_seconds!r}")
