"""Core domain layer for chunkcache."""

from chunkcache.core.entities import CacheConfig, CacheKey, WellKnownKey
from chunkcache.core.interfaces import (
    IKeyBuilder,
    IKeyValueStore,
    ISerializer,
)
from chunkcache.core.services import CacheService

__all__ = [
    # Entities
    "CacheConfig",
    "CacheKey",
    "WellKnownKey",
    # Interfaces
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
    # Services
    "CacheService",
]
