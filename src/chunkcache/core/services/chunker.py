"""Chunked writes of oversized serialized values."""

import logging

from chunkcache.core.entities.cache_key import CacheKey
from chunkcache.core.entities.results import WriteResult, WriteStatus
from chunkcache.core.interfaces.kv_store import IKeyValueStore
from chunkcache.core.services.cleaner import Cleaner

logger = logging.getLogger(__name__)


def split_into_chunks(serialized: str, chunk_size: int) -> list[str]:
    """Split text into consecutive pieces of at most ``chunk_size`` characters.

    Concatenating the result in order reproduces ``serialized``.
    """
    return [
        serialized[i : i + chunk_size]
        for i in range(0, len(serialized), chunk_size)
    ]


class Chunker:
    """Writes a serialized value as a count marker plus ordered chunks."""

    def __init__(
        self,
        store: IKeyValueStore,
        cleaner: Cleaner,
        chunk_size: int = 90_000,
        max_chunks: int = 50,
    ) -> None:
        """Initialize the chunker.

        Args:
            store: The underlying key-value store.
            cleaner: Cleaner used to drop stale or half-written entries.
            chunk_size: Maximum characters per chunk.
            max_chunks: Maximum number of chunks per value.
        """
        self._store = store
        self._cleaner = cleaner
        self._chunk_size = chunk_size
        self._max_chunks = max_chunks

    def write(self, key: str, serialized: str, ttl: int) -> WriteResult:
        """Store ``serialized`` under ``key`` in chunked form.

        Any previous entry for ``key`` is purged first, so a smaller value
        never leaves chunks of a larger one behind. Marker and chunks go
        out in a single ``put_all`` with the same TTL.

        Args:
            key: A validated cache key.
            serialized: The serialized value.
            ttl: Clamped TTL in seconds.

        Returns:
            The write outcome. Store errors are reported, not raised.
        """
        chunks = split_into_chunks(serialized, self._chunk_size)
        if len(chunks) > self._max_chunks:
            logger.warning(
                "Not caching %r: %d chunks needed, limit is %d",
                key,
                len(chunks),
                self._max_chunks,
            )
            self._cleaner.purge(key)
            return WriteResult(WriteStatus.TOO_MANY_CHUNKS)

        self._cleaner.purge(key)

        cache_key = CacheKey(key)
        values = {cache_key.count_marker: str(len(chunks))}
        for index, chunk in enumerate(chunks):
            values[cache_key.chunk(index)] = chunk

        try:
            self._store.put_all(values, ttl)
        except Exception:
            logger.warning("Chunked write failed for %r", key, exc_info=True)
            self._cleaner.purge(key)
            return WriteResult(WriteStatus.STORE_FAILURE)

        logger.debug("Cached %r in %d chunks (ttl=%ds)", key, len(chunks), ttl)
        return WriteResult(WriteStatus.STORED_CHUNKED, chunk_count=len(chunks))
