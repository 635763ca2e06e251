"""Tests for InMemoryKeyValueStore."""

import pytest

from chunkcache.infrastructure.backends.memory import InMemoryKeyValueStore
from tests.doubles import FakeClock


class TestInMemoryKeyValueStore:
    """Tests for InMemoryKeyValueStore."""

    @pytest.fixture
    def backend(self, clock: FakeClock) -> InMemoryKeyValueStore:
        """Create a backend for testing."""
        return InMemoryKeyValueStore(maxsize=100, timer=clock)

    def test_put_and_get(self, backend: InMemoryKeyValueStore) -> None:
        """Test basic put and get operations."""
        backend.put("key1", "value1", ttl=60)

        assert backend.get("key1") == "value1"
        assert backend.ttl_of("key1") == 60

    def test_get_missing_key(self, backend: InMemoryKeyValueStore) -> None:
        """Test getting a missing key returns None."""
        assert backend.get("nonexistent") is None
        assert backend.ttl_of("nonexistent") is None

    def test_put_all_and_get_all(self, backend: InMemoryKeyValueStore) -> None:
        """Test batch operations only return present keys."""
        backend.put_all({"a": "1", "b": "2"}, ttl=60)

        assert backend.get_all(["a", "b", "c"]) == {"a": "1", "b": "2"}
        assert backend.get_all([]) == {}

    def test_remove(self, backend: InMemoryKeyValueStore) -> None:
        """Test removing present and absent keys."""
        backend.put("key1", "value1", ttl=60)

        backend.remove("key1")
        backend.remove("key1")

        assert backend.get("key1") is None

    def test_remove_all(self, backend: InMemoryKeyValueStore) -> None:
        """Test removing several keys, some absent."""
        backend.put_all({"a": "1", "b": "2", "c": "3"}, ttl=60)

        backend.remove_all(["a", "b", "missing"])

        assert backend.keys() == ["c"]

    def test_per_key_expiry(self, backend: InMemoryKeyValueStore, clock: FakeClock) -> None:
        """Test each key expires on its own TTL."""
        backend.put("short", "1", ttl=60)
        backend.put("long", "2", ttl=120)

        clock.advance(90)

        assert backend.get("short") is None
        assert backend.get("long") == "2"
        assert "short" not in backend
        assert "long" in backend
        assert len(backend) == 1

    def test_lru_eviction(self, clock: FakeClock) -> None:
        """Test eviction when maxsize is reached."""
        backend = InMemoryKeyValueStore(maxsize=3, timer=clock)

        backend.put("key1", "value1", ttl=60)
        backend.put("key2", "value2", ttl=60)
        backend.put("key3", "value3", ttl=60)

        # Access key1 to make it recently used
        backend.get("key1")

        backend.put("key4", "value4", ttl=60)

        assert backend.get("key1") == "value1"
        assert backend.get("key2") is None
        assert backend.get("key3") == "value3"
        assert backend.get("key4") == "value4"

    def test_clear(self, backend: InMemoryKeyValueStore) -> None:
        """Test clearing all keys."""
        backend.put_all({"a": "1", "b": "2"}, ttl=60)

        backend.clear()

        assert len(backend) == 0

    def test_maxsize_property(self) -> None:
        """Test maxsize property."""
        assert InMemoryKeyValueStore(maxsize=500).maxsize == 500
