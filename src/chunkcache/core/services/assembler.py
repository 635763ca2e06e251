"""Reassembly of chunked cache entries."""

import logging
import re

from chunkcache.core.entities.cache_key import CacheKey
from chunkcache.core.entities.results import ReadResult, ReadStatus
from chunkcache.core.exceptions import SerializationError
from chunkcache.core.interfaces.kv_store import IKeyValueStore
from chunkcache.core.interfaces.serializer import ISerializer
from chunkcache.core.services.cleaner import Cleaner

logger = logging.getLogger(__name__)

# Plain ASCII decimal; int() alone would also take "1_0" or "３"
COUNT_PATTERN = re.compile(r"[0-9]+")


class Assembler:
    """Reads a chunked entry back and verifies it is complete.

    The store gives no multi-key atomicity, so the count marker and the
    chunks may come from different writes or may have expired
    independently. An entry is only reassembled when every chunk the
    marker announces is present; anything else is purged and reported
    as a miss.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        serializer: ISerializer,
        cleaner: Cleaner,
        max_chunks: int = 50,
    ) -> None:
        self._store = store
        self._serializer = serializer
        self._cleaner = cleaner
        self._max_chunks = max_chunks

    def read(self, key: str) -> ReadResult:
        """Read and reassemble the chunked entry for ``key``.

        Args:
            key: A validated cache key.

        Returns:
            A hit with the deserialized value, ``NO_CHUNKED_ENTRY`` when
            there is no count marker (the caller falls back to the inline
            entry), or a miss describing why the entry was discarded.
        """
        cache_key = CacheKey(key)

        try:
            raw_count = self._store.get(cache_key.count_marker)
        except Exception:
            logger.warning("Failed to read chunk marker for %r", key, exc_info=True)
            return ReadResult.miss(ReadStatus.STORE_FAILURE)

        if raw_count is None:
            return ReadResult.miss(ReadStatus.NO_CHUNKED_ENTRY)

        count = self._parse_count(raw_count)
        if count is None:
            logger.warning("Corrupt chunk marker for %r: %r", key, raw_count)
            self._cleaner.purge(key)
            return ReadResult.miss(ReadStatus.CORRUPT_MARKER)

        expected = cache_key.chunks(count)
        try:
            chunks = self._store.get_all(expected)
        except Exception:
            logger.warning("Failed to read chunks for %r", key, exc_info=True)
            return ReadResult.miss(ReadStatus.STORE_FAILURE)

        if len(chunks) != count or any(k not in chunks for k in expected):
            logger.warning(
                "Incomplete chunk set for %r: expected %d, found %d",
                key,
                count,
                len(chunks),
            )
            self._cleaner.purge(key)
            return ReadResult.miss(ReadStatus.INCOMPLETE_CHUNK_SET)

        try:
            value = self._serializer.deserialize("".join(chunks[k] for k in expected))
        except (SerializationError, TypeError) as e:
            logger.warning("Discarding unparsable chunked entry %r: %s", key, e)
            self._cleaner.purge(key)
            return ReadResult.miss(ReadStatus.PARSE_FAILURE)

        logger.debug("Reassembled %r from %d chunks", key, count)
        return ReadResult.hit(value)

    def _parse_count(self, raw: object) -> int | None:
        """Parse a count marker, returning None unless it is in range."""
        text = str(raw).strip()
        if not COUNT_PATTERN.fullmatch(text):
            return None
        count = int(text)
        if count < 1 or count > self._max_chunks:
            return None
        return count
