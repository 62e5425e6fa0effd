"""Cache key construction."""

from app.caching.errors import InvalidKeyOrTTL

SEPARATOR = ":"
ALL = "all"


def cache_key(namespace: str, *parts) -> str:
    """Build a namespaced key: ``namespace:part:part``.

    ``None`` parts render as ``all``; with no parts the key is ``namespace:all``.
    """
    if not namespace or SEPARATOR in namespace:
        raise InvalidKeyOrTTL(f"Invalid cache namespace: {namespace!r}")

    if not parts:
        return f"{namespace}{SEPARATOR}{ALL}"

    rendered = [ALL if p is None else str(p) for p in parts]
    return SEPARATOR.join([namespace, *rendered])


def namespace_prefix(namespace: str) -> str:
    """Prefix matching every key in a namespace."""
    return f"{namespace}{SEPARATOR}"
