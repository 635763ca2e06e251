"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for serializing/deserializing cached values.

    Serializers convert Python objects to text, because the chunked
    layout splits and measures values in characters.
    """

    def serialize(self, value: Any) -> str:
        """Serialize value to a string.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: str) -> Any:
        """Deserialize a string to a value.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
