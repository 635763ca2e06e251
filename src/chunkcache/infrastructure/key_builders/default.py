"""Default key builder implementation."""

from typing import Any

from chunkcache.core.services.key_validator import KeyValidator
from chunkcache.utils.hashing import hash_value

HASH_LENGTH = 16


class DefaultKeyBuilder:
    """Builds valid cache keys from arbitrary identifiers.

    Identifiers such as e-mail addresses contain characters a cache key
    may not, so they are hashed: ``build("userData", "a@b.c")`` gives
    ``userData_<16 hex chars>``.
    """

    def __init__(self, max_key_length: int = 100) -> None:
        """Initialize the key builder.

        Args:
            max_key_length: Maximum length of the built key.
        """
        self._validator = KeyValidator(max_key_length)

    def build(self, prefix: str, identifier: Any) -> str:
        """Build a cache key scoped under ``prefix``.

        Raises:
            ValueError: If ``prefix`` is not a valid key or leaves no room
                for the hash.
        """
        max_prefix = self._validator.max_length - HASH_LENGTH - 1
        if not self._validator.is_valid_key(prefix) or len(prefix) > max_prefix:
            raise ValueError(f"Invalid key prefix: {prefix!r}")
        return f"{prefix}_{hash_value(identifier)}"
