"""Domain models package."""

from .cache import CacheEntry, CacheStats
from .patrimony import (
    AssetSummary,
    DebtSummary,
    EntitySummary,
    PatrimonySnapshot,
)
from .projection import (
    TIME_HORIZONS,
    ProjectionAssumptions,
    ProjectionMetrics,
    ProjectionPoint,
    ProjectionResult,
    ScenarioComparison,
    ScenarioOutcome,
    SimulationState,
    TimeHorizon,
    resolve_time_horizon,
)
from .records import (
    ActionRecord,
    AssetRecord,
    DebtRecord,
    EntityRecord,
    OwnershipRecord,
)
from .reports import (
    AssetTypeDistribution,
    GrowthOutlook,
    GrowthProjection,
    LiquidityBucket,
    ReportFilters,
    ReportInput,
    StressTestResult,
    TypeDistribution,
    TypeImpact,
)
from .scenario import (
    ActionType,
    BuyAction,
    ExpenseAction,
    Financing,
    FinancingKind,
    InvestAction,
    Scenario,
    ScenarioAction,
    ScenarioChanges,
    ScenarioDraft,
    ScenarioType,
    SellAction,
    SellPriceMode,
    TaxAction,
    YieldAction,
    YieldTarget,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "AssetSummary",
    "DebtSummary",
    "EntitySummary",
    "PatrimonySnapshot",
    "TIME_HORIZONS",
    "ProjectionAssumptions",
    "ProjectionMetrics",
    "ProjectionPoint",
    "ProjectionResult",
    "ScenarioComparison",
    "ScenarioOutcome",
    "SimulationState",
    "TimeHorizon",
    "resolve_time_horizon",
    "ActionRecord",
    "AssetRecord",
    "DebtRecord",
    "EntityRecord",
    "OwnershipRecord",
    "AssetTypeDistribution",
    "GrowthOutlook",
    "GrowthProjection",
    "LiquidityBucket",
    "ReportFilters",
    "ReportInput",
    "StressTestResult",
    "TypeDistribution",
    "TypeImpact",
    "ActionType",
    "BuyAction",
    "ExpenseAction",
    "Financing",
    "FinancingKind",
    "InvestAction",
    "Scenario",
    "ScenarioAction",
    "ScenarioChanges",
    "ScenarioDraft",
    "ScenarioType",
    "SellAction",
    "SellPriceMode",
    "TaxAction",
    "YieldAction",
    "YieldTarget",
]
