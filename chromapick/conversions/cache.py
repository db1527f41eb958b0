"""
Memoization for parsers and converters.

A ``ConversionCache`` maps a composite key (function name plus the repr of
its arguments) to the stored result. Results are returned verbatim for as
long as the cache generation stays the same; assigning a different
generation token empties the cache.
"""
from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_key(name: str, args: Tuple[Any, ...]) -> str:
    return f"{name}({', '.join(repr(a) for a in args)})"


class ConversionCache:
    """
    Keyed store of conversion results with a generation token.

    Args:
        maxsize: evict the oldest entry once this many are stored.
            ``None`` keeps every entry.
        key: initial generation token.
    """

    def __init__(self, maxsize: Optional[int] = None, key: Hashable = "") -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be positive or None, got {maxsize!r}")
        self.maxsize = maxsize
        self._key = key
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def key(self) -> Hashable:
        return self._key

    @key.setter
    def key(self, value: Hashable) -> None:
        with self._lock:
            if value != self._key:
                logger.debug(
                    "cache generation %r -> %r, dropping %d entries",
                    self._key, value, len(self._store),
                )
                self._store = {}
            self._key = value

    def clear(self) -> None:
        with self._lock:
            self._store = {}

    def get_or_compute(self, name: str, args: Tuple[Any, ...], compute: Callable[[], T]) -> T:
        key = make_key(name, args)
        store = self._store
        try:
            value = store[key]
        except KeyError:
            pass
        else:
            self.hits += 1
            return value

        self.misses += 1
        value = compute()
        # Racing callers may both compute; the first stored value wins. A
        # generation change during compute leaves the result in the old store.
        with self._lock:
            value = store.setdefault(key, value)
            while self.maxsize is not None and len(store) > self.maxsize:
                del store[next(iter(store))]
        return value

    def __contains__(self, key: str) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"ConversionCache(key={self._key!r}, size={len(self._store)}, maxsize={self.maxsize!r})"


def memoized(name: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Cache a method of an object exposing a ``cache`` attribute under ``name``.

    Positional arguments only; they form the cache key.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(self, *args):
            return self.cache.get_or_compute(name, args, lambda: func(self, *args))
        wrapper.cache_name = name  # type: ignore[attr-defined]
        return wrapper
    return decorator
