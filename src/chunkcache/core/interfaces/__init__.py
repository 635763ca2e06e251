"""Core interfaces (Protocol classes) for chunkcache."""

from chunkcache.core.interfaces.key_builder import IKeyBuilder
from chunkcache.core.interfaces.kv_store import IKeyValueStore
from chunkcache.core.interfaces.serializer import ISerializer

__all__ = [
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
]
