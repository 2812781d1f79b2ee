"""In-process computation cache for report calculations.

Entries are keyed by ``<kind>_<hash of the payload>`` and stay valid while
they are younger than the TTL and the payload's dependency fingerprints are
unchanged. A lock guards the entry map and the statistics. The compute
function runs outside the lock, so two callers missing on the same key both
compute and the later write wins.
"""

import hashlib
import json
import threading
import time
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from src.application.ports.computation_cache import ComputationCachePort
from src.domain.constants import (
    CACHE_EVICTION_MARGIN,
    DEFAULT_CACHE_MAX_SIZE,
    DEFAULT_CACHE_TTL_SECONDS,
)
from src.domain.models.cache import CacheEntry, CacheStats
from src.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")


def stable_serialize(value: Any) -> str:
    """Serialize ``value`` to JSON with sorted keys at every level."""
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        default=_json_default,
        ensure_ascii=False,
    )


def stable_hash(value: Any) -> str:
    """Return a short SHA-256 digest of the stable serialization."""
    digest = hashlib.sha256(stable_serialize(value).encode("utf-8"))
    return digest.hexdigest()[:16]


def build_cache_key(kind: str, payload: Mapping[str, Any]) -> str:
    return f"{kind}_{stable_hash(payload)}"


def build_dependencies(payload: Mapping[str, Any]) -> tuple[str, ...]:
    """Return the coarse fingerprints used to detect stale entries.

    Fingerprints cover the asset count and the ids with latest valuations,
    the entity count and sorted ids, and the filters.
    """
    deps: list[str] = []
    assets = payload.get("assets")
    if assets is not None:
        deps.append(f"assets_count_{len(assets)}")
        valuations = [
            {
                "id": _field(asset, "id"),
                "value": _field(asset, "latest_value"),
            }
            for asset in assets
        ]
        deps.append(f"assets_hash_{stable_hash(valuations)}")
    entities = payload.get("entities")
    if entities is not None:
        deps.append(f"entities_count_{len(entities)}")
        entity_ids = sorted(str(_field(entity, "id")) for entity in entities)
        deps.append(f"entities_ids_{'_'.join(entity_ids)}")
    filters = payload.get("filters")
    if filters is not None:
        deps.append(f"filters_{stable_hash(filters)}")
    return tuple(deps)


class ComputationCache(ComputationCachePort):
    """Memoize deterministic computations with TTL and dependency checks."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        max_size: int = DEFAULT_CACHE_MAX_SIZE,
        eviction_margin: int = CACHE_EVICTION_MARGIN,
        clock: Callable[[], float] = time.time,
        timer: Callable[[], float] = time.perf_counter,
        logger=None,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Maximum entry age.
            max_size: Entry count above which eviction runs.
            eviction_margin: Extra entries removed below ``max_size``.
            clock: Wall-clock source for entry timestamps.
            timer: Monotonic timer for computation durations.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            ValueError: If ``max_size`` is below one.
        """
        if max_size < 1:
            raise ValueError(f"Cache max_size must be at least 1: {max_size}")
        self._ttl = ttl_seconds
        self._max_size = max_size
        self._eviction_margin = eviction_margin
        self._clock = clock
        self._timer = timer
        self._logger = logger or get_app_logger()
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._total_computation_time = 0.0

    def get_or_compute(
        self,
        kind: str,
        payload: Mapping[str, Any],
        compute_fn: Callable[[], T],
    ) -> T:
        """Return a valid cached value or compute and store a new one.

        Args:
            kind: Computation kind, prefix of the cache key.
            payload: Inputs of the computation.
            compute_fn: Pure function of ``payload``.

        Returns:
            T: Cached or freshly computed value.

        Raises:
            Exception: Whatever ``compute_fn`` raises; nothing is cached.
        """
        key = build_cache_key(kind, payload)
        dependencies = build_dependencies(payload)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_valid(entry, dependencies):
                self._hits += 1
                self._logger.debug(
                    f"Cache hit for {kind} (key={key}, "
                    f"computation_time={entry.computation_time:.4f}s)"
                )
                return entry.data
            self._misses += 1

        started = self._timer()
        try:
            result = compute_fn()
        except Exception as exc:
            self._logger.error(f"Computation failed for {kind}: {exc}")
            raise
        computation_time = self._timer() - started

        with self._lock:
            self._entries[key] = CacheEntry(
                data=result,
                timestamp=self._clock(),
                dependencies=dependencies,
                computation_time=computation_time,
            )
            self._total_computation_time += computation_time
            self._logger.debug(
                f"Cache miss for {kind} (key={key}, "
                f"computation_time={computation_time:.4f}s, "
                f"size={len(self._entries)})"
            )
            self._evict_oldest()
        return result

    def get_stats(self) -> CacheStats:
        with self._lock:
            average = 0.0
            if self._misses:
                average = self._total_computation_time / self._misses
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                total_computation_time=self._total_computation_time,
                average_computation_time=average,
            )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        self._logger.info("Computation cache cleared")

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def invalidate_by_pattern(self, pattern: str) -> int:
        """Drop every entry whose key contains ``pattern``.

        Returns:
            int: Number of entries removed.
        """
        with self._lock:
            keys = [key for key in self._entries if pattern in key]
            for key in keys:
                del self._entries[key]
        self._logger.info(
            f"Cache invalidated for pattern '{pattern}': {len(keys)} entries"
        )
        return len(keys)

    def _is_valid(
        self,
        entry: CacheEntry,
        dependencies: tuple[str, ...],
    ) -> bool:
        if self._clock() - entry.timestamp >= self._ttl:
            return False
        return entry.dependencies == dependencies

    def _evict_oldest(self) -> None:
        # Caller holds the lock.
        if len(self._entries) <= self._max_size:
            return
        excess = min(
            len(self._entries) - 1,
            len(self._entries) - self._max_size + self._eviction_margin,
        )
        oldest = sorted(
            self._entries.items(),
            key=lambda item: item[1].timestamp,
        )[:excess]
        for key, _ in oldest:
            del self._entries[key]
        self._logger.debug(f"Cache trimmed: {len(oldest)} entries evicted")


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _json_default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, tuple):
        return list(value)
    raise TypeError(f"Cannot fingerprint value of type {type(value).__name__}")


__all__ = [
    "ComputationCache",
    "build_cache_key",
    "build_dependencies",
    "stable_hash",
    "stable_serialize",
]
