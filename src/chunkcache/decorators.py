"""Cache-aside decorators.

``@cached`` serves a function's result from the cache and stores it on a
miss; ``@invalidates`` removes keys after a function that changes the
underlying data has run. The cache service is passed in explicitly.
"""

import functools
import re
from collections.abc import Callable
from typing import Any, TypeVar

from chunkcache.core.services.cache_service import TTL, CacheService

F = TypeVar("F", bound=Callable[..., Any])

KeySpec = str | Callable[..., str]


def cached(
    cache: CacheService,
    key: KeySpec,
    ttl: TTL = None,
) -> Callable[[F], F]:
    """Decorator for caching function results.

    Args:
        cache: The cache service to read from and write to.
        key: Cache key or function building it. If a string, supports
            ``{arg_name}`` interpolation from keyword arguments. If callable,
            receives ``(*args, **kwargs)`` and returns the key string.
        ttl: TTL for stored results. Uses the config default if None.

    Returns:
        Decorated function.

    Example:
        @cached(cache, key=WellKnownKey.EXAM_DATA.value)
        def load_exam_data() -> list[dict]:
            return sheet.read_rows()
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            cache_key = _build_cache_key(key, args, kwargs)
            return cache.get_or_set(cache_key, lambda: func(*args, **kwargs), ttl)

        return wrapper  # type: ignore

    return decorator


def invalidates(
    cache: CacheService,
    keys: list[KeySpec],
) -> Callable[[F], F]:
    """Decorator for removing cache entries after a write.

    Keys are removed only if the function returns normally.

    Args:
        cache: The cache service to remove keys from.
        keys: Keys to remove, with the same interpolation as ``cached``.

    Returns:
        Decorated function.

    Example:
        @invalidates(cache, keys=[WellKnownKey.CHOICES_DATA.value])
        def submit_choices(student_id: str, choices: list[str]) -> None:
            sheet.write_row(student_id, choices)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            for key in keys:
                cache.remove(_build_cache_key(key, args, kwargs))
            return result

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    key: KeySpec,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> str:
    if callable(key):
        return key(*args, **kwargs)
    return _interpolate_string(key, kwargs)


def _interpolate_string(template: str, kwargs: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders from keyword arguments.

    Unknown placeholders are left as-is, which makes the key invalid,
    so the call is simply not cached.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in kwargs:
            return str(kwargs[name])
        return match.group(0)

    return re.sub(pattern, replacer, template)
