"""Key-value store interface."""

from collections.abc import Iterable, Mapping
from typing import Protocol


class IKeyValueStore(Protocol):
    """Contract for the underlying key-value cache service.

    The store holds string values under string keys, tracks expiration
    per key, and may evict any key at any time. No atomicity across
    keys is assumed, not even within a single ``put_all`` or ``get_all``.
    Implementations may raise on transport failures; ``CacheService``
    catches those.
    """

    def put(self, key: str, value: str, ttl: int) -> None:
        """Store a single value.

        Args:
            key: The physical key.
            value: The string to store.
            ttl: Time-to-live in seconds.
        """
        ...

    def put_all(self, values: Mapping[str, str], ttl: int) -> None:
        """Store several values with the same TTL in one call.

        Args:
            values: Mapping of physical key to string.
            ttl: Time-to-live in seconds.
        """
        ...

    def get(self, key: str) -> str | None:
        """Retrieve a value.

        Returns:
            The stored string, or None if absent or expired.
        """
        ...

    def get_all(self, keys: Iterable[str]) -> dict[str, str]:
        """Retrieve several values.

        Returns:
            Mapping containing only the keys that are present.
        """
        ...

    def remove(self, key: str) -> None:
        """Delete a key. Deleting an absent key is a no-op."""
        ...

    def remove_all(self, keys: Iterable[str]) -> None:
        """Delete several keys. Absent keys are ignored."""
        ...
