"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving valid cache keys from arbitrary identifiers."""

    def build(self, prefix: str, identifier: Any) -> str:
        """Build a cache key scoped under ``prefix``.

        Args:
            prefix: A valid cache key used as namespace.
            identifier: Any value identifying the cached item
                (e.g. a user's e-mail address).

        Returns:
            A key that passes key validation.
        """
        ...
