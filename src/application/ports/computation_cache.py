"""Port for memoizing expensive, deterministic computations."""

from typing import Any, Callable, Mapping, Protocol, TypeVar

from src.domain.models.cache import CacheStats

T = TypeVar("T")


class ComputationCachePort(Protocol):
    """Port exposing a keyed, dependency-checked memoization layer."""

    def get_or_compute(
        self,
        kind: str,
        payload: Mapping[str, Any],
        compute_fn: Callable[[], T],
    ) -> T:
        """Return the cached value for ``payload`` or compute and store it."""

    def get_stats(self) -> CacheStats:
        """Return hit/miss and computation time statistics."""

    def clear(self) -> None:
        """Drop every cached entry."""

    def size(self) -> int:
        """Return the number of cached entries."""

    def invalidate_by_pattern(self, pattern: str) -> int:
        """Drop entries whose key contains ``pattern``."""


__all__ = ["ComputationCachePort"]
