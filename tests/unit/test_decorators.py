"""Tests for cache decorators."""

import pytest

from chunkcache import CacheService, InMemoryKeyValueStore, WellKnownKey
from chunkcache.decorators import cached, invalidates


class TestCachedDecorator:
    """Tests for @cached decorator."""

    def test_cached_function(self, cache: CacheService) -> None:
        """Test that @cached caches function results."""
        call_count = 0

        @cached(cache, key=WellKnownKey.EXAM_DATA.value)
        def load_exam_data() -> list[dict]:
            nonlocal call_count
            call_count += 1
            return [{"id": "S001", "score": 88}]

        assert load_exam_data() == [{"id": "S001", "score": 88}]
        assert load_exam_data() == [{"id": "S001", "score": 88}]
        assert call_count == 1

    def test_key_interpolation(self, cache: CacheService) -> None:
        """Test {arg} placeholders are filled from keyword arguments."""
        call_count = 0

        @cached(cache, key="dept_{code}")
        def get_department(code: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"code": code}

        assert get_department(code="A01") == {"code": "A01"}
        assert get_department(code="B02") == {"code": "B02"}
        assert get_department(code="A01") == {"code": "A01"}
        assert call_count == 2
        assert cache.get("dept_A01") == {"code": "A01"}

    def test_callable_key(self, cache: CacheService) -> None:
        """Test a key function receives the call arguments."""

        @cached(cache, key=lambda student_id: f"student_{student_id}")
        def get_student(student_id: str) -> dict:
            return {"id": student_id}

        get_student("S001")

        assert cache.get("student_S001") == {"id": "S001"}

    def test_unresolved_placeholder_is_not_cached(
        self, cache: CacheService, store: InMemoryKeyValueStore
    ) -> None:
        """Test a key left with a placeholder bypasses the cache."""
        call_count = 0

        @cached(cache, key="dept_{code}")
        def get_department(code: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"code": code}

        get_department("A01")
        get_department("A01")

        assert call_count == 2
        assert store.keys() == []

    def test_ttl(self, cache: CacheService, store: InMemoryKeyValueStore) -> None:
        """Test the decorator's TTL is applied."""

        @cached(cache, key="limitOfSchools", ttl=10)
        def get_limit() -> int:
            return 6

        get_limit()

        assert store.ttl_of("limitOfSchools") == 60

    def test_preserves_metadata(self, cache: CacheService) -> None:
        """Test functools.wraps is applied."""

        @cached(cache, key="k")
        def documented() -> int:
            """Docstring."""
            return 1

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestInvalidatesDecorator:
    """Tests for @invalidates decorator."""

    def test_invalidates_after_call(self, cache: CacheService) -> None:
        """Test keys are removed after the function returns."""
        cache.set(WellKnownKey.CHOICES_DATA.value, {"blob": "x" * 200_000})
        cache.set("student_S001", {"choices": []})

        @invalidates(cache, keys=[WellKnownKey.CHOICES_DATA.value, "student_{student_id}"])
        def submit_choices(student_id: str, choices: list[str]) -> bool:
            return True

        assert submit_choices(student_id="S001", choices=["A01"]) is True
        assert cache.get(WellKnownKey.CHOICES_DATA.value) is None
        assert cache.get("student_S001") is None

    def test_no_invalidation_on_error(self, cache: CacheService) -> None:
        """Test keys survive when the function raises."""
        cache.set("choicesData", {"a": 1})

        @invalidates(cache, keys=["choicesData"])
        def failing_submit() -> None:
            raise RuntimeError("sheet locked")

        with pytest.raises(RuntimeError):
            failing_submit()

        assert cache.get("choicesData") == {"a": 1}
