"""Pytest configuration for chunkcache tests."""

import pytest

from chunkcache import CacheConfig, CacheService, InMemoryKeyValueStore, JsonSerializer
from tests.doubles import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryKeyValueStore:
    """Create an in-memory store driven by the fake clock."""
    return InMemoryKeyValueStore(maxsize=1000, timer=clock)


@pytest.fixture
def serializer() -> JsonSerializer:
    """Create a serializer for testing."""
    return JsonSerializer()


@pytest.fixture
def cache(store: InMemoryKeyValueStore, serializer: JsonSerializer) -> CacheService:
    """Create a cache service with default limits."""
    return CacheService(store=store, serializer=serializer, config=CacheConfig())


@pytest.fixture
def small_config() -> CacheConfig:
    """Config with tiny limits so chunking needs little data."""
    return CacheConfig(chunk_size=10, max_chunks=3, max_size=1000)
