"""Serializer implementations."""

from chunkcache.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
