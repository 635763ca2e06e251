"""Domain entities for chunkcache."""

from chunkcache.core.entities.cache_config import CacheConfig
from chunkcache.core.entities.cache_key import CacheKey, WellKnownKey
from chunkcache.core.entities.results import (
    ReadResult,
    ReadStatus,
    WriteResult,
    WriteStatus,
)

__all__ = [
    "CacheConfig",
    "CacheKey",
    "WellKnownKey",
    "ReadResult",
    "ReadStatus",
    "WriteResult",
    "WriteStatus",
]
