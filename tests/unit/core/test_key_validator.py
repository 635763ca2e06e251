"""Tests for KeyValidator."""

import pytest

from chunkcache.core.services.key_validator import KeyValidator


class TestKeyValidator:
    """Tests for KeyValidator."""

    @pytest.fixture
    def validator(self) -> KeyValidator:
        """Create a validator with the default length limit."""
        return KeyValidator()

    @pytest.mark.parametrize(
        "key",
        ["examData", "a", "user_data-42", "A" * 100, "0", "_-_"],
    )
    def test_valid_keys(self, validator: KeyValidator, key: str) -> None:
        """Test keys matching the pattern and length are accepted."""
        assert validator.is_valid_key(key) is True

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "A" * 101,
            "bad key!",
            "with space",
            "user@example.com",
            "dotted.key",
            "colon:key",
            "tab\tkey",
            "trailing\n",
            "中文",
        ],
    )
    def test_invalid_keys(self, validator: KeyValidator, key: str) -> None:
        """Test malformed keys are rejected."""
        assert validator.is_valid_key(key) is False

    @pytest.mark.parametrize("key", [None, 42, b"bytes", ["examData"]])
    def test_non_string_keys(self, validator: KeyValidator, key: object) -> None:
        """Test non-strings are rejected without raising."""
        assert validator.is_valid_key(key) is False

    def test_custom_max_length(self) -> None:
        """Test a custom length limit."""
        validator = KeyValidator(max_length=5)

        assert validator.max_length == 5
        assert validator.is_valid_key("abcde") is True
        assert validator.is_valid_key("abcdef") is False
