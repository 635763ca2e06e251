"""Exceptions used inside the cache layer.

None of these propagate out of ``CacheService``.
"""


class ChunkCacheError(Exception):
    """Base class for chunkcache errors."""

    pass


class SerializationError(ChunkCacheError):
    """Raised when serialization or deserialization fails."""

    pass


class OversizedValueError(ChunkCacheError):
    """Raised when a serialized value exceeds the absolute size ceiling."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(
            f"Serialized value is {size} characters, limit is {max_size}"
        )
        self.size = size
        self.max_size = max_size
