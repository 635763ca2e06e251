"""Cache configuration entity."""

import os
from dataclasses import dataclass, fields
from datetime import timedelta


@dataclass
class CacheConfig:
    """Cache configuration.

    Holds the limits of the chunked cache layer. The defaults match the
    underlying script cache service: entries above ``chunk_size`` characters
    are split, at most ``max_chunks`` chunks are written per value, and
    nothing larger than ``max_size`` characters is ever stored.

    TTL values are in seconds.
    """

    enabled: bool = True
    chunk_size: int = 90_000
    max_chunks: int = 50
    max_size: int = 1_000_000
    default_ttl: int = 21_600
    min_ttl: int = 60
    max_ttl: int = 86_400
    max_key_length: int = 100

    def __post_init__(self) -> None:
        """Validate limits."""
        for name in ("chunk_size", "max_chunks", "max_size", "max_key_length"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.min_ttl <= 0 or self.min_ttl > self.max_ttl:
            raise ValueError("min_ttl must be positive and not above max_ttl")
        if not self.min_ttl <= self.default_ttl <= self.max_ttl:
            raise ValueError("default_ttl must lie within [min_ttl, max_ttl]")

    def clamp_ttl(self, ttl: int | float | timedelta | None) -> int:
        """Clamp a requested TTL into the configured bounds.

        Args:
            ttl: Seconds, a timedelta, or None for the default TTL.

        Returns:
            The effective TTL in whole seconds.
        """
        if ttl is None:
            return self.default_ttl
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        return max(self.min_ttl, min(self.max_ttl, int(ttl)))

    @classmethod
    def from_env(cls, prefix: str = "CHUNKCACHE_") -> "CacheConfig":
        """Build a config from environment variables.

        Each field may be overridden by ``{prefix}{FIELD_NAME}``, e.g.
        ``CHUNKCACHE_DEFAULT_TTL=3600`` or ``CHUNKCACHE_ENABLED=false``.
        """
        overrides: dict[str, int | bool] = {}
        for f in fields(cls):
            raw = os.getenv(f"{prefix}{f.name.upper()}")
            if raw is None:
                continue
            if f.name == "enabled":
                overrides[f.name] = raw.strip().lower() in ("1", "true", "yes", "on")
            else:
                overrides[f.name] = int(raw)
        return cls(**overrides)  # type: ignore[arg-type]
