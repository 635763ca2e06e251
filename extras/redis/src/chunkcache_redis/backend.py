"""Redis key-value store implementation."""

from collections.abc import Iterable, Mapping
from typing import Optional

import redis


class RedisKeyValueStore:
    """Redis-backed key-value store for distributed deployments.

    Every key carries its own expiry, set with SETEX. Batch writes are
    pipelined without MULTI/EXEC: the chunked layer does not rely on
    cross-key atomicity.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "chunkcache",
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis store.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys. Empty for none.
            client: Pre-built client; ``redis_url`` is ignored if given.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix

    def put(self, key: str, value: str, ttl: int) -> None:
        """Store a single value for ``ttl`` seconds."""
        self._redis.setex(self._prefixed_key(key), ttl, value)

    def put_all(self, values: Mapping[str, str], ttl: int) -> None:
        """Store several values with the same TTL in one round trip."""
        pipe = self._redis.pipeline(transaction=False)
        for key, value in values.items():
            pipe.setex(self._prefixed_key(key), ttl, value)
        pipe.execute()

    def get(self, key: str) -> Optional[str]:
        """Retrieve a value, or None if absent or expired."""
        return self._decode(self._redis.get(self._prefixed_key(key)))

    def get_all(self, keys: Iterable[str]) -> dict[str, str]:
        """Retrieve the values of the keys that are present."""
        keys = list(keys)
        if not keys:
            return {}

        raw = self._redis.mget([self._prefixed_key(k) for k in keys])
        found: dict[str, str] = {}
        for key, value in zip(keys, raw):
            decoded = self._decode(value)
            if decoded is not None:
                found[key] = decoded
        return found

    def remove(self, key: str) -> None:
        """Delete a key. Absent keys are ignored by Redis."""
        self._redis.delete(self._prefixed_key(key))

    def remove_all(self, keys: Iterable[str]) -> None:
        """Delete several keys with one DEL."""
        prefixed = [self._prefixed_key(k) for k in keys]
        if prefixed:
            self._redis.delete(*prefixed)

    def _prefixed_key(self, key: str) -> str:
        """Add prefix to key if configured.

        Args:
            key: The cache key.

        Returns:
            The key with prefix.
        """
        if not self._key_prefix:
            return key
        return f"{self._key_prefix}:{key}"

    @staticmethod
    def _decode(value: Optional[bytes | str]) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisKeyValueStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
