"""Cache key value objects."""

from dataclasses import dataclass
from enum import Enum

COUNT_MARKER_SUFFIX = "_chunks"


class WellKnownKey(Enum):
    """Logical cache keys used by the preference form.

    ``CacheService.clear_all()`` purges these when called without
    an explicit key list.
    """

    LIMIT_OF_SCHOOLS = "limitOfSchools"
    DEPARTMENT_OPTIONS = "departmentOptions"
    EXAM_DATA = "examData"
    CHOICES_DATA = "choicesData"


@dataclass(frozen=True)
class CacheKey:
    """Immutable logical cache key.

    Derives the physical keys of both storage shapes: the inline entry
    is stored under the key itself, a chunked entry under a count marker
    ``{key}_chunks`` plus ``{key}_0 .. {key}_{n-1}``.
    """

    name: str

    def __str__(self) -> str:
        """Return the inline entry key."""
        return self.name

    @property
    def count_marker(self) -> str:
        """Key of the chunk count marker."""
        return f"{self.name}{COUNT_MARKER_SUFFIX}"

    def chunk(self, index: int) -> str:
        """Key of the chunk at ``index``."""
        return f"{self.name}_{index}"

    def chunks(self, count: int) -> list[str]:
        """Keys of chunks ``0 .. count-1`` in index order."""
        return [self.chunk(i) for i in range(count)]

    def all_physical_keys(self, max_chunks: int) -> list[str]:
        """Every key either storage shape may have written.

        Args:
            max_chunks: Upper bound on the chunk count.

        Returns:
            Count marker, inline key and all possible chunk keys.
        """
        return [self.count_marker, self.name, *self.chunks(max_chunks)]
