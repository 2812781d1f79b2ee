"""Tests for the holdings report computations."""

import pytest

from src.domain.models.records import AssetRecord, OwnershipRecord
from src.domain.models.reports import GrowthOutlook, ReportFilters, ReportInput
from src.domain.services.reports import (
    compute_asset_type_distribution,
    compute_growth_projections,
    compute_liquidity_analysis,
    compute_stress_test_results,
    held_value,
)


def _asset(asset_id, asset_type, value, ownerships=None) -> AssetRecord:
    return AssetRecord(
        id=asset_id,
        name=asset_id.title(),
        asset_type=asset_type,
        latest_value=value,
        ownerships=ownerships
        or [OwnershipRecord(entity_id="me", percentage=100)],
    )


def _input(*assets, entity_ids=()) -> ReportInput:
    return ReportInput(
        assets=tuple(assets),
        filters=ReportFilters(entity_ids=tuple(entity_ids)),
    )


def test_held_value_applies_filtered_ownership() -> None:
    """Only the selected entities' shares count, clamped to 100%."""
    shared = _asset(
        "flat",
        "Immobilier",
        200000,
        [
            OwnershipRecord(entity_id="me", percentage=50),
            OwnershipRecord(entity_id="partner", percentage=50),
        ],
    )
    overowned = _asset(
        "car",
        "Véhicule",
        10000,
        [
            OwnershipRecord(entity_id="me", percentage=80),
            OwnershipRecord(entity_id="company", percentage=40),
        ],
    )

    assert held_value(shared, ReportFilters(entity_ids=("me",))) == 100000
    assert held_value(shared, ReportFilters()) == 200000
    assert held_value(overowned, ReportFilters()) == 10000


def test_distribution_by_type() -> None:
    """Values, counts and shares are grouped by asset type."""
    result = compute_asset_type_distribution(
        _input(
            _asset("pea", "Actions", 30000),
            _asset("cto", "Actions", 10000),
            _asset("livret", "Livret A", 10000),
            _asset("misc", None, 0),
        )
    )

    by_type = {item.asset_type: item for item in result.by_type}
    assert result.total_value == 50000
    assert by_type["Actions"].count == 2
    assert by_type["Actions"].percentage == pytest.approx(80.0)
    assert by_type["Livret A"].value == 10000
    assert by_type["Undefined"].percentage == 0.0


def test_liquidity_levels_follow_asset_types() -> None:
    """Buckets are ordered from immediate to long term."""
    buckets = compute_liquidity_analysis(
        _input(
            _asset("flat", "Immobilier", 75000),
            _asset("livret", "Livret A", 20000),
            _asset("other", "Art", 5000),
        )
    )

    assert [bucket.level for bucket in buckets] == [
        "Immediate",
        "Medium term",
        "Long term",
    ]
    assert buckets[0].asset_ids == ("livret",)
    assert buckets[1].asset_ids == ("other",)
    assert buckets[2].percentage == pytest.approx(75.0)


def test_stress_test_counts_only_losses() -> None:
    """Gains in a scenario do not offset the losses."""
    results = compute_stress_test_results(
        _input(
            _asset("pea", "Actions", 10000),
            _asset("wallet", "Cryptomonnaies", 1000),
        )
    )

    by_name = {result.scenario: result for result in results}
    crash = by_name["Market crash"]
    assert crash.total_loss == pytest.approx(3000 + 500)
    assert crash.impact_rate == pytest.approx(3500 / 11000 * 100)
    assert crash.impacts_by_type["Actions"].impact_rate == -30

    inflation = by_name["High inflation"]
    assert inflation.total_loss == 0
    assert inflation.impacts_by_type["Cryptomonnaies"].loss == pytest.approx(150)


def test_stress_test_keeps_zero_impact_rates() -> None:
    """A 0% impact is not replaced by the scenario default."""
    results = compute_stress_test_results(_input(_asset("s", "Épargne", 1000)))

    crash = next(r for r in results if r.scenario == "Market crash")
    assert crash.total_loss == 0
    assert crash.impacts_by_type["Épargne"].impact_rate == 0


def test_growth_projections_compound_per_type() -> None:
    """Each horizon compounds at the outlook's per-type rate."""
    projections = compute_growth_projections(
        _input(_asset("pea", "Actions", 10000), _asset("x", "Art", 10000)),
        GrowthOutlook.PESSIMISTIC,
    )

    assert [p.years for p in projections] == [1, 3, 5, 10, 15, 20]
    one_year = projections[0]
    assert one_year.asset_projections["Actions"] == pytest.approx(10300)
    assert one_year.asset_projections["Art"] == pytest.approx(10100)
    assert one_year.growth == pytest.approx(400)
    assert one_year.growth_rate == pytest.approx(2.0)


def test_growth_projections_of_empty_holdings() -> None:
    """No holdings means zero growth rather than a division error."""
    projections = compute_growth_projections(_input(), GrowthOutlook.REALISTIC)

    assert all(p.total_value == 0 for p in projections)
    assert all(p.growth_rate == 0 for p in projections)
