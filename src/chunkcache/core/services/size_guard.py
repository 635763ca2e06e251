"""Size guard for cached values."""

import logging
from typing import Any

from chunkcache.core.exceptions import ChunkCacheError, OversizedValueError
from chunkcache.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


class SizeGuard:
    """Serializes values and rejects those above the size ceiling."""

    def __init__(self, serializer: ISerializer, max_size: int = 1_000_000) -> None:
        """Initialize the guard.

        Args:
            serializer: Serializer used to produce the stored text.
            max_size: Largest serialized length, in characters, that may
                be stored.
        """
        self._serializer = serializer
        self._max_size = max_size

    def serialize(self, value: Any) -> str:
        """Serialize ``value`` and enforce the size ceiling.

        Args:
            value: The value to serialize.

        Returns:
            The serialized text.

        Raises:
            SerializationError: If the value cannot be serialized.
            OversizedValueError: If the text exceeds the ceiling.
        """
        serialized = self._serializer.serialize(value)
        if len(serialized) > self._max_size:
            raise OversizedValueError(len(serialized), self._max_size)
        return serialized

    def is_storable(self, value: Any) -> bool:
        """Check whether ``value`` can be serialized within the ceiling.

        Pure check; nothing is written.
        """
        try:
            self.serialize(value)
        except ChunkCacheError as e:
            logger.debug("Value is not storable: %s", e)
            return False
        return True
