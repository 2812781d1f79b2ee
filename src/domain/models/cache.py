"""Models for the computation cache."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached value with the fingerprints it was computed against.

    Attributes:
        data: Cached value.
        timestamp: Creation time in seconds since the epoch.
        dependencies: Dependency fingerprints active at computation time.
        computation_time: Seconds spent computing the value.
    """

    data: T
    timestamp: float
    dependencies: tuple[str, ...]
    computation_time: float


@dataclass(frozen=True)
class CacheStats:
    """Hit/miss counters and computation time statistics (seconds)."""

    hits: int = 0
    misses: int = 0
    total_computation_time: float = 0.0
    average_computation_time: float = 0.0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups


__all__ = ["CacheEntry", "CacheStats"]
