"""chunkcache - Chunked, best-effort cache over size-limited key-value stores.

Stores values of up to a megabyte in a cache service whose entries are
capped far below that, by splitting serialized values into chunks and
putting them back together on read. Torn, evicted or corrupt chunk sets
are purged and reported as a plain cache miss; no public method raises.

Example:
    from chunkcache import (
        CacheConfig,
        CacheService,
        InMemoryKeyValueStore,
        JsonSerializer,
        WellKnownKey,
    )

    cache = CacheService(
        store=InMemoryKeyValueStore(),
        serializer=JsonSerializer(),
        config=CacheConfig(default_ttl=21600),
    )

    exam_data = cache.get_or_set(
        WellKnownKey.EXAM_DATA.value,
        load_exam_data_from_sheet,
    )

Using Redis as the store:
    from chunkcache_redis import RedisKeyValueStore

    cache = CacheService(
        store=RedisKeyValueStore("redis://localhost:6379"),
        serializer=JsonSerializer(),
    )
"""

from chunkcache.core.entities import (
    CacheConfig,
    CacheKey,
    ReadResult,
    ReadStatus,
    WellKnownKey,
    WriteResult,
    WriteStatus,
)
from chunkcache.core.exceptions import (
    ChunkCacheError,
    OversizedValueError,
    SerializationError,
)
from chunkcache.core.interfaces import (
    IKeyBuilder,
    IKeyValueStore,
    ISerializer,
)
from chunkcache.core.services import (
    Assembler,
    CacheService,
    Chunker,
    Cleaner,
    KeyValidator,
    SizeGuard,
    split_into_chunks,
)
from chunkcache.decorators import cached, invalidates
from chunkcache.infrastructure import (
    DefaultKeyBuilder,
    InMemoryKeyValueStore,
    JsonSerializer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheKey",
    "WellKnownKey",
    "ReadResult",
    "ReadStatus",
    "WriteResult",
    "WriteStatus",
    # Exceptions
    "ChunkCacheError",
    "OversizedValueError",
    "SerializationError",
    # Core interfaces
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
    # Core services
    "CacheService",
    "KeyValidator",
    "SizeGuard",
    "Chunker",
    "Assembler",
    "Cleaner",
    "split_into_chunks",
    # Infrastructure implementations
    "InMemoryKeyValueStore",
    "DefaultKeyBuilder",
    "JsonSerializer",
    # Decorators
    "cached",
    "invalidates",
]
