"""Key-value store implementations."""

from chunkcache.infrastructure.backends.memory import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
