"""Request-scoped memoization.

Inside ``with request_scope():`` repeated calls to a ``@memoized`` function
with the same arguments return the first result. Outside a scope the function
runs every time. Each scope gets its own map, dropped when the scope exits.
"""

import functools
from collections.abc import Callable, Hashable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from loguru import logger

_current: ContextVar["RequestMemo | None"] = ContextVar("request_memo", default=None)


class RequestMemo:
    """Memo map for one request or operation."""

    def __init__(self):
        self._results: dict[Hashable, Any] = {}
        self.hits = 0

    def get_or_call(self, key: Hashable, fn: Callable[[], Any]) -> Any:
        """Return the memoized result for key, or call fn and remember it."""
        if key in self._results:
            self.hits += 1
            return self._results[key]
        result = fn()
        self._results[key] = result
        return result

    def clear(self) -> None:
        """Forget every result (after a write in the same request)."""
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)


def current_memo() -> RequestMemo | None:
    """Memo of the enclosing request scope, if any."""
    return _current.get()


@contextmanager
def request_scope() -> Iterator[RequestMemo]:
    """Open a memoization scope for the current context."""
    memo = RequestMemo()
    token = _current.set(memo)
    try:
        yield memo
    finally:
        _current.reset(token)
        if memo.hits:
            logger.debug("Request memo: {} entries, {} reused", len(memo), memo.hits)


def memoized(fn: Callable) -> Callable:
    """Reuse results within the enclosing request scope."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        memo = _current.get()
        if memo is None:
            return fn(*args, **kwargs)

        key = (fn.__module__, fn.__qualname__, args, tuple(sorted(kwargs.items())))
        try:
            hash(key)
        except TypeError:
            return fn(*args, **kwargs)
        return memo.get_or_call(key, lambda: fn(*args, **kwargs))

    return wrapper
