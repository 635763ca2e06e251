"""Test doubles for the key-value store."""

from collections.abc import Iterable, Mapping

from chunkcache import InMemoryKeyValueStore


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingStore:
    """Store whose every operation raises, like an unreachable service."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def _fail(self, name: str) -> None:
        self.calls.append(name)
        raise ConnectionError("cache service unavailable")

    def put(self, key: str, value: str, ttl: int) -> None:
        self._fail("put")

    def put_all(self, values: Mapping[str, str], ttl: int) -> None:
        self._fail("put_all")

    def get(self, key: str) -> str | None:
        self._fail("get")
        return None

    def get_all(self, keys: Iterable[str]) -> dict[str, str]:
        self._fail("get_all")
        return {}

    def remove(self, key: str) -> None:
        self._fail("remove")

    def remove_all(self, keys: Iterable[str]) -> None:
        self._fail("remove_all")


class FailingWriteStore(InMemoryKeyValueStore):
    """In-memory store that rejects writes."""

    def put(self, key: str, value: str, ttl: int) -> None:
        raise ConnectionError("write rejected")

    def put_all(self, values: Mapping[str, str], ttl: int) -> None:
        raise ConnectionError("write rejected")
