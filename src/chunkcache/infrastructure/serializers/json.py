"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from chunkcache.core.exceptions import SerializationError


class JsonSerializer:
    """JSON serializer for cache values.

    Produces compact JSON text, so the length the size limits are
    measured against is the length of ``JSON.stringify`` output.
    """

    def __init__(self, ensure_ascii: bool = False) -> None:
        """Initialize the JSON serializer.

        Args:
            ensure_ascii: Escape non-ASCII characters. Off by default,
                which keeps CJK text at one character per character.
        """
        self._ensure_ascii = ensure_ascii

    def serialize(self, value: Any) -> str:
        """Serialize value to a JSON string.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            return json.dumps(
                value,
                default=self._default_encoder,
                separators=(",", ":"),
                ensure_ascii=self._ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: str) -> Any:
        """Deserialize a JSON string to a value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            return json.loads(data)
        except (json.JSONDecodeError, TypeError, RecursionError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        if isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
