"""Redis store for chunkcache."""

from chunkcache_redis.backend import RedisKeyValueStore

__all__ = ["RedisKeyValueStore"]
