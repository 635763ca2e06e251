"""In-memory key-value store implementation."""

import time
from collections.abc import Callable, Iterable, Mapping
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Entry(NamedTuple):
    value: str
    ttl: int


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class InMemoryKeyValueStore:
    """In-memory key-value store with per-key TTL and LRU eviction.

    Suitable for single-process deployments and tests. Uses cachetools'
    TLRUCache, so every key expires on its own schedule, like the script
    cache the chunked layout was designed for.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory store.

        Args:
            maxsize: Maximum number of keys held; least recently used
                keys are evicted first.
            timer: Clock used for expiry, injectable for tests.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    def put(self, key: str, value: str, ttl: int) -> None:
        """Store a single value for ``ttl`` seconds."""
        self._cache[key] = _Entry(value, ttl)

    def put_all(self, values: Mapping[str, str], ttl: int) -> None:
        """Store several values with the same TTL."""
        for key, value in values.items():
            self._cache[key] = _Entry(value, ttl)

    def get(self, key: str) -> str | None:
        """Retrieve a value, or None if absent or expired."""
        entry = self._cache.get(key)
        return entry.value if entry is not None else None

    def get_all(self, keys: Iterable[str]) -> dict[str, str]:
        """Retrieve the values of the keys that are present."""
        found: dict[str, str] = {}
        for key in keys:
            entry = self._cache.get(key)
            if entry is not None:
                found[key] = entry.value
        return found

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        self._cache.pop(key, None)

    def remove_all(self, keys: Iterable[str]) -> None:
        """Delete every present key in ``keys``."""
        for key in keys:
            self._cache.pop(key, None)

    def ttl_of(self, key: str) -> int | None:
        """Return the TTL a live key was written with, or None."""
        entry = self._cache.get(key)
        return entry.ttl if entry is not None else None

    def keys(self) -> list[str]:
        """Return the live keys."""
        self._cache.expire()
        return list(self._cache.keys())

    def clear(self) -> None:
        """Remove every key."""
        self._cache.clear()

    def __contains__(self, key: object) -> bool:
        """Check whether a live key exists."""
        return key in self._cache

    def __len__(self) -> int:
        """Return the number of live keys."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
