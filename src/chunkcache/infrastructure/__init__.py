"""Infrastructure layer implementations for chunkcache."""

from chunkcache.infrastructure.backends import InMemoryKeyValueStore
from chunkcache.infrastructure.key_builders import DefaultKeyBuilder
from chunkcache.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryKeyValueStore",
    "DefaultKeyBuilder",
    "JsonSerializer",
]
