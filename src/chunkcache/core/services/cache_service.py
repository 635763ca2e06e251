"""Cache service - public facade of the chunked cache layer."""

import logging
from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import Any, TypeVar

from chunkcache.core.entities.cache_config import CacheConfig
from chunkcache.core.entities.cache_key import WellKnownKey
from chunkcache.core.entities.results import (
    ReadResult,
    ReadStatus,
    WriteResult,
    WriteStatus,
)
from chunkcache.core.exceptions import OversizedValueError, SerializationError
from chunkcache.core.interfaces.kv_store import IKeyValueStore
from chunkcache.core.interfaces.serializer import ISerializer
from chunkcache.core.services.assembler import Assembler
from chunkcache.core.services.chunker import Chunker
from chunkcache.core.services.cleaner import Cleaner
from chunkcache.core.services.key_validator import KeyValidator
from chunkcache.core.services.size_guard import SizeGuard

logger = logging.getLogger(__name__)

T = TypeVar("T")

TTL = int | float | timedelta | None


class CacheService:
    """Soft, best-effort cache over a size-limited key-value store.

    Values whose serialized form fits in one chunk are stored inline;
    larger ones are split by the Chunker and put back together by the
    Assembler. No public method raises: invalid input, oversized values,
    torn chunk sets and store failures all end up as a no-op (writes) or
    a miss (reads). Callers recompute from their source of truth on a
    miss.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            store: The underlying key-value store.
            serializer: The serializer for encoding/decoding values.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._store = store
        self._config = config or CacheConfig()

        self._validator = KeyValidator(self._config.max_key_length)
        self._size_guard = SizeGuard(serializer, self._config.max_size)
        self._serializer = serializer
        self._cleaner = Cleaner(store, self._config.max_chunks)
        self._chunker = Chunker(
            store,
            self._cleaner,
            chunk_size=self._config.chunk_size,
            max_chunks=self._config.max_chunks,
        )
        self._assembler = Assembler(
            store,
            serializer,
            self._cleaner,
            max_chunks=self._config.max_chunks,
        )

        # Statistics
        self._hits = 0
        self._misses = 0
        self._last_write: WriteResult | None = None

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total requests.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    @property
    def last_write_status(self) -> WriteStatus | None:
        """Outcome of the most recent ``set``, for diagnostics only."""
        return self._last_write.status if self._last_write else None

    def set(self, key: str, value: Any, ttl: TTL = None) -> None:
        """Cache ``value`` under ``key``.

        Args:
            key: Cache key; invalid keys are ignored.
            value: Any JSON-serializable value. ``None`` is not cached.
            ttl: Seconds or timedelta, clamped to the configured bounds.
                Defaults to the configured default TTL.
        """
        try:
            result = self._write(key, value, ttl)
        except Exception:
            logger.exception("Unexpected error caching %r", key)
            result = WriteResult(WriteStatus.STORE_FAILURE)
        self._last_write = result

    def get(self, key: str) -> Any | None:
        """Return the cached value for ``key``, or None on a miss."""
        try:
            result = self._read(key)
        except Exception:
            logger.exception("Unexpected error reading %r", key)
            result = ReadResult.miss(ReadStatus.STORE_FAILURE)

        if result.found:
            self._hits += 1
            return result.value

        self._misses += 1
        return None

    def remove(self, key: str) -> None:
        """Remove every entry stored for ``key``. Invalid keys are ignored."""
        if not self._validator.is_valid_key(key):
            logger.debug("Ignoring remove of invalid key %r", key)
            return
        self._cleaner.purge(key)

    def clear_all(
        self,
        keys: str | WellKnownKey | Iterable[str | WellKnownKey] | None = None,
    ) -> None:
        """Purge a set of logical keys.

        Args:
            keys: Keys to purge. A single key is accepted as is.
                Defaults to every ``WellKnownKey``.
        """
        if keys is None:
            keys = list(WellKnownKey)
        elif isinstance(keys, (str, WellKnownKey)):
            keys = [keys]
        for key in keys:
            self.remove(key.value if isinstance(key, WellKnownKey) else key)

    def get_or_set(self, key: str, loader: Callable[[], T], ttl: TTL = None) -> T:
        """Return the cached value, or load, cache and return it.

        Exceptions raised by ``loader`` propagate; ``None`` results are
        returned without being cached.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = loader()
        if value is not None:
            self.set(key, value, ttl)
        return value

    def _write(self, key: str, value: Any, ttl: TTL) -> WriteResult:
        if not self._config.enabled:
            return WriteResult(WriteStatus.DISABLED)

        if not self._validator.is_valid_key(key):
            logger.warning("Not caching value under invalid key %r", key)
            return WriteResult(WriteStatus.INVALID_KEY)

        if value is None:
            logger.debug("Not caching empty value for %r", key)
            return WriteResult(WriteStatus.EMPTY_VALUE)

        try:
            serialized = self._size_guard.serialize(value)
        except SerializationError as e:
            logger.warning("Not caching %r: %s", key, e)
            return WriteResult(WriteStatus.UNSERIALIZABLE_VALUE)
        except OversizedValueError as e:
            logger.warning("Not caching %r: %s", key, e)
            return WriteResult(WriteStatus.OVERSIZED_VALUE)

        effective_ttl = self._config.clamp_ttl(ttl)

        if len(serialized) > self._config.chunk_size:
            return self._chunker.write(key, serialized, effective_ttl)

        # Drop any chunked entry first; its marker would shadow the inline value
        self._cleaner.purge(key)
        try:
            self._store.put(key, serialized, effective_ttl)
        except Exception:
            logger.warning("Inline write failed for %r", key, exc_info=True)
            self._cleaner.purge(key)
            return WriteResult(WriteStatus.STORE_FAILURE)

        logger.debug("Cached %r inline (ttl=%ds)", key, effective_ttl)
        return WriteResult(WriteStatus.STORED_INLINE, chunk_count=0)

    def _read(self, key: str) -> ReadResult:
        if not self._config.enabled:
            return ReadResult.miss(ReadStatus.MISS)

        if not self._validator.is_valid_key(key):
            logger.debug("Cache miss for invalid key %r", key)
            return ReadResult.miss(ReadStatus.MISS)

        result = self._assembler.read(key)
        if result.status is not ReadStatus.NO_CHUNKED_ENTRY:
            return result

        try:
            data = self._store.get(key)
        except Exception:
            logger.warning("Failed to read %r", key, exc_info=True)
            return ReadResult.miss(ReadStatus.STORE_FAILURE)

        if data is None:
            logger.debug("Cache miss for %r", key)
            return ReadResult.miss(ReadStatus.MISS)

        try:
            return ReadResult.hit(self._serializer.deserialize(data))
        except SerializationError as e:
            logger.warning("Discarding unparsable entry %r: %s", key, e)
            self._cleaner.purge(key)
            return ReadResult.miss(ReadStatus.PARSE_FAILURE)
