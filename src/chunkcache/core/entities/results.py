"""Internal result types for cache reads and writes.

These never leave the cache layer as exceptions. ``CacheService`` turns
them into plain return values (``None`` for a miss) and keeps the last
write status around for diagnostics.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class WriteStatus(Enum):
    """Outcome of a write."""

    STORED_INLINE = "stored_inline"
    STORED_CHUNKED = "stored_chunked"
    INVALID_KEY = "invalid_key"
    EMPTY_VALUE = "empty_value"
    UNSERIALIZABLE_VALUE = "unserializable_value"
    OVERSIZED_VALUE = "oversized_value"
    TOO_MANY_CHUNKS = "too_many_chunks"
    STORE_FAILURE = "store_failure"
    DISABLED = "disabled"


class ReadStatus(Enum):
    """Outcome of a read."""

    HIT = "hit"
    MISS = "miss"
    NO_CHUNKED_ENTRY = "no_chunked_entry"
    CORRUPT_MARKER = "corrupt_marker"
    INCOMPLETE_CHUNK_SET = "incomplete_chunk_set"
    PARSE_FAILURE = "parse_failure"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class WriteResult:
    """Result of a write attempt."""

    status: WriteStatus
    chunk_count: int = 0

    @property
    def stored(self) -> bool:
        """True if the value landed in the store."""
        return self.status in (WriteStatus.STORED_INLINE, WriteStatus.STORED_CHUNKED)


@dataclass(frozen=True)
class ReadResult:
    """Result of a read attempt.

    ``value`` is only meaningful when ``found`` is True; a cached JSON
    ``null`` never reaches here because ``None`` values are not stored.
    """

    status: ReadStatus
    value: Any = None

    @property
    def found(self) -> bool:
        """True on a cache hit."""
        return self.status is ReadStatus.HIT

    @classmethod
    def hit(cls, value: Any) -> "ReadResult":
        """Create a hit result."""
        return cls(status=ReadStatus.HIT, value=value)

    @classmethod
    def miss(cls, status: ReadStatus) -> "ReadResult":
        """Create a miss result with the given reason."""
        return cls(status=status)
