"""Cache key validation."""

import re
from typing import Any

KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class KeyValidator:
    """Accepts or rejects cache keys by syntax and length.

    A valid key is a string of 1 to ``max_length`` characters drawn from
    ``[A-Za-z0-9_-]``. Chunk keys are derived by appending ``_chunks`` or
    ``_{index}``, so the validated key is always a safe stem.
    """

    def __init__(self, max_length: int = 100) -> None:
        self._max_length = max_length

    @property
    def max_length(self) -> int:
        """Return the maximum key length."""
        return self._max_length

    def is_valid_key(self, key: Any) -> bool:
        """Check whether ``key`` may be used as a cache key.

        Args:
            key: The candidate key. Non-strings are rejected.

        Returns:
            True if the key is usable, False otherwise.
        """
        if not isinstance(key, str):
            return False
        if not 1 <= len(key) <= self._max_length:
            return False
        return KEY_PATTERN.fullmatch(key) is not None
