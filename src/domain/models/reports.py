"""Domain models for cached report computations."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from src.domain.models.records import AssetRecord, EntityRecord


class GrowthOutlook(str, Enum):
    OPTIMISTIC = "optimistic"
    REALISTIC = "realistic"
    PESSIMISTIC = "pessimistic"


@dataclass(frozen=True)
class ReportFilters:
    """Entity selection; an empty selection keeps every ownership."""

    entity_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReportInput:
    """Holdings, entities and filters a report is computed from."""

    assets: tuple[AssetRecord, ...]
    entities: tuple[EntityRecord, ...] = ()
    filters: ReportFilters = field(default_factory=ReportFilters)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-friendly payload for cache keys and fingerprints."""
        return {
            "assets": [asdict(asset) for asset in self.assets],
            "entities": [asdict(entity) for entity in self.entities],
            "filters": asdict(self.filters),
        }


@dataclass(frozen=True)
class TypeDistribution:
    asset_type: str
    value: float
    count: int
    percentage: float


@dataclass(frozen=True)
class AssetTypeDistribution:
    """Total value and its split by asset type."""

    total_value: float
    by_type: tuple[TypeDistribution, ...]


@dataclass(frozen=True)
class LiquidityBucket:
    """Assets grouped by how quickly they can be turned into cash."""

    level: str
    days: str
    value: float
    count: int
    percentage: float
    asset_ids: tuple[str, ...]


@dataclass(frozen=True)
class TypeImpact:
    value: float
    loss: float
    impact_rate: float


@dataclass(frozen=True)
class StressTestResult:
    """Loss of a stress scenario over the filtered holdings."""

    scenario: str
    description: str
    total_loss: float
    total_value: float
    impact_rate: float
    impacts_by_type: dict[str, TypeImpact]


@dataclass(frozen=True)
class GrowthProjection:
    """Projected value after ``years`` of per-type growth."""

    years: int
    total_value: float
    asset_projections: dict[str, float]
    growth: float
    growth_rate: float


__all__ = [
    "GrowthOutlook",
    "ReportFilters",
    "ReportInput",
    "TypeDistribution",
    "AssetTypeDistribution",
    "LiquidityBucket",
    "TypeImpact",
    "StressTestResult",
    "GrowthProjection",
]
