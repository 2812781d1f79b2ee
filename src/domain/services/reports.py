"""Report computations over a user's holdings.

These functions are pure and deterministic for a given ``ReportInput``, which
is what lets ``ComputeReportsUseCase`` serve them through the computation
cache.
"""

from collections.abc import Iterable

from src.domain.constants import UNDEFINED_ASSET_TYPE
from src.domain.models.records import AssetRecord, OwnershipRecord
from src.domain.models.reports import (
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
from src.utils.decimal_utils import coerce_float


LIQUIDITY_LEVELS = {
    "Immediate": "0-1 days",
    "Short term": "1-7 days",
    "Medium term": "1-3 months",
    "Long term": "3+ months",
}

LIQUIDITY_BY_ASSET_TYPE = {
    "Épargne": "Immediate",
    "Compte courant": "Immediate",
    "Livret A": "Immediate",
    "Actions": "Short term",
    "ETF": "Short term",
    "Obligations": "Short term",
    "Cryptomonnaies": "Short term",
    "Assurance-vie": "Medium term",
    "PEA": "Medium term",
    "Immobilier": "Long term",
    "SCPI": "Long term",
}
DEFAULT_LIQUIDITY_LEVEL = "Medium term"

STRESS_SCENARIOS = (
    {
        "name": "Market crash",
        "description": "Equity markets fall by 30%",
        "impacts": {
            "Actions": -30,
            "ETF": -25,
            "Obligations": -5,
            "Immobilier": -10,
            "Épargne": 0,
            "Cryptomonnaies": -50,
            "default": -15,
        },
    },
    {
        "name": "Real estate crisis",
        "description": "Real estate prices fall by 20%",
        "impacts": {
            "Immobilier": -20,
            "SCPI": -15,
            "Actions": -10,
            "Obligations": 5,
            "Épargne": 0,
            "default": -5,
        },
    },
    {
        "name": "High inflation",
        "description": "Inflation of 6% per year",
        "impacts": {
            "Épargne": -6,
            "Obligations": -8,
            "Actions": 2,
            "Immobilier": 4,
            "Cryptomonnaies": 15,
            "default": -2,
        },
    },
    {
        "name": "Liquidity crisis",
        "description": "Access to funds is restricted",
        "impacts": {
            "Épargne": 0,
            "Actions": -15,
            "ETF": -12,
            "Obligations": -5,
            "Immobilier": -25,
            "SCPI": -20,
            "default": -10,
        },
    },
)

# Annual growth in percent per outlook.
GROWTH_ASSUMPTIONS = {
    "Actions": {"optimistic": 10, "realistic": 7, "pessimistic": 3},
    "ETF": {"optimistic": 9, "realistic": 6.5, "pessimistic": 2.5},
    "Obligations": {"optimistic": 4, "realistic": 2.5, "pessimistic": 0.5},
    "Immobilier": {"optimistic": 6, "realistic": 4, "pessimistic": 1},
    "Épargne": {"optimistic": 2, "realistic": 1.5, "pessimistic": 0.5},
    "Cryptomonnaies": {"optimistic": 25, "realistic": 12, "pessimistic": -5},
    "SCPI": {"optimistic": 5, "realistic": 3.5, "pessimistic": 1},
    "Assurance-vie": {"optimistic": 4, "realistic": 3, "pessimistic": 1.5},
    "default": {"optimistic": 6, "realistic": 4, "pessimistic": 1},
}

GROWTH_HORIZONS_YEARS = (1, 3, 5, 10, 15, 20)


def ownership_percentage(
    ownerships: Iterable[OwnershipRecord],
    filters: ReportFilters,
) -> float:
    """Return the share (0-100) held by the filtered entities."""
    selected = set(filters.entity_ids)
    total = sum(
        coerce_float(ownership.percentage)
        for ownership in ownerships
        if not selected or ownership.entity_id in selected
    )
    return max(0.0, min(100.0, total))


def held_value(asset: AssetRecord, filters: ReportFilters) -> float:
    """Return the latest valuation weighted by the filtered ownership."""
    share = ownership_percentage(asset.ownerships, filters)
    return coerce_float(asset.latest_value) * share / 100


def compute_asset_type_distribution(
    report_input: ReportInput,
) -> AssetTypeDistribution:
    """Split the held value by asset type."""
    values: dict[str, float] = {}
    counts: dict[str, int] = {}
    total_value = 0.0
    for asset in report_input.assets:
        value = held_value(asset, report_input.filters)
        asset_type = asset.asset_type or UNDEFINED_ASSET_TYPE
        values[asset_type] = values.get(asset_type, 0.0) + value
        counts[asset_type] = counts.get(asset_type, 0) + 1
        total_value += value

    return AssetTypeDistribution(
        total_value=total_value,
        by_type=tuple(
            TypeDistribution(
                asset_type=asset_type,
                value=value,
                count=counts[asset_type],
                percentage=_share(value, total_value),
            )
            for asset_type, value in values.items()
        ),
    )


def compute_liquidity_analysis(
    report_input: ReportInput,
) -> tuple[LiquidityBucket, ...]:
    """Group held value by how fast each asset type can be sold."""
    values: dict[str, float] = {}
    asset_ids: dict[str, list[str]] = {}
    total_value = 0.0
    for asset in report_input.assets:
        value = held_value(asset, report_input.filters)
        level = LIQUIDITY_BY_ASSET_TYPE.get(
            asset.asset_type or "",
            DEFAULT_LIQUIDITY_LEVEL,
        )
        values[level] = values.get(level, 0.0) + value
        asset_ids.setdefault(level, []).append(asset.id)
        total_value += value

    return tuple(
        LiquidityBucket(
            level=level,
            days=LIQUIDITY_LEVELS[level],
            value=values[level],
            count=len(asset_ids[level]),
            percentage=_share(values[level], total_value),
            asset_ids=tuple(asset_ids[level]),
        )
        for level in LIQUIDITY_LEVELS
        if level in values
    )


def compute_stress_test_results(
    report_input: ReportInput,
) -> tuple[StressTestResult, ...]:
    """Apply each stress scenario to the held value.

    Only negative impact rates count as losses.
    """
    results = []
    for scenario in STRESS_SCENARIOS:
        impacts = scenario["impacts"]
        total_loss = 0.0
        total_value = 0.0
        by_type: dict[str, dict[str, float]] = {}
        for asset in report_input.assets:
            value = held_value(asset, report_input.filters)
            asset_type = asset.asset_type or "default"
            impact_rate = impacts.get(asset_type, impacts["default"])
            loss = value * abs(impact_rate) / 100
            bucket = by_type.setdefault(
                asset_type,
                {"value": 0.0, "loss": 0.0, "impact_rate": impact_rate},
            )
            bucket["value"] += value
            bucket["loss"] += loss
            total_value += value
            if impact_rate < 0:
                total_loss += loss
        results.append(
            StressTestResult(
                scenario=scenario["name"],
                description=scenario["description"],
                total_loss=total_loss,
                total_value=total_value,
                impact_rate=_share(total_loss, total_value),
                impacts_by_type={
                    asset_type: TypeImpact(**bucket)
                    for asset_type, bucket in by_type.items()
                },
            )
        )
    return tuple(results)


def compute_growth_projections(
    report_input: ReportInput,
    outlook: GrowthOutlook,
) -> tuple[GrowthProjection, ...]:
    """Compound each asset at its type's growth rate for fixed horizons."""
    current = [
        (asset.asset_type or "default", held_value(asset, report_input.filters))
        for asset in report_input.assets
    ]
    total_current = sum(value for _, value in current)

    projections = []
    for years in GROWTH_HORIZONS_YEARS:
        by_type: dict[str, float] = {}
        total_projected = 0.0
        for asset_type, value in current:
            rates = GROWTH_ASSUMPTIONS.get(asset_type, GROWTH_ASSUMPTIONS["default"])
            projected = value * (1 + rates[outlook.value] / 100) ** years
            by_type[asset_type] = by_type.get(asset_type, 0.0) + projected
            total_projected += projected
        growth_rate = 0.0
        if total_current > 0:
            growth_rate = (total_projected / total_current - 1) * 100
        projections.append(
            GrowthProjection(
                years=years,
                total_value=total_projected,
                asset_projections=by_type,
                growth=total_projected - total_current,
                growth_rate=growth_rate,
            )
        )
    return tuple(projections)


def _share(value: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return value / total * 100


__all__ = [
    "LIQUIDITY_LEVELS",
    "STRESS_SCENARIOS",
    "GROWTH_ASSUMPTIONS",
    "GROWTH_HORIZONS_YEARS",
    "ownership_percentage",
    "held_value",
    "compute_asset_type_distribution",
    "compute_liquidity_analysis",
    "compute_stress_test_results",
    "compute_growth_projections",
]
