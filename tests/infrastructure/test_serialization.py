"""Tests for the JSON storage encoding."""

import json
from datetime import date, datetime

from src.domain.models.patrimony import (
    AssetSummary,
    DebtSummary,
    EntitySummary,
    PatrimonySnapshot,
)
from src.domain.models.projection import ProjectionMetrics, ProjectionPoint
from src.infrastructure.serialization import (
    metrics_from_dict,
    metrics_to_dict,
    points_from_list,
    points_to_list,
    snapshot_from_dict,
    snapshot_to_dict,
)


def test_snapshot_encoding_uses_camel_case_keys() -> None:
    """Stored snapshots keep the record store's field names."""
    snapshot = PatrimonySnapshot(
        assets=(
            AssetSummary(
                id="flat",
                type="Immobilier",
                name="Flat",
                current_value=300000.0,
                debts=(DebtSummary(id="d", current_amount=1.0,
                                   interest_rate=0.01),),
                metadata={"rooms": 3},
            ),
        ),
        entities=(EntitySummary(id="e1", name="Me", entity_type="PERSON"),),
        total_value=300000.0,
        total_debt=1.0,
        net_value=299999.0,
        breakdown={"Immobilier": 300000.0},
        created_at=datetime(2024, 2, 1, 12, 30),
    )

    encoded = json.loads(json.dumps(snapshot_to_dict(snapshot)))

    assert encoded["snapshotDate"] == "2024-02-01T12:30:00"
    assert encoded["assets"][0]["currentValue"] == 300000.0
    assert encoded["assets"][0]["debts"][0]["interestRate"] == 0.01
    assert encoded["entities"][0]["type"] == "PERSON"
    assert snapshot_from_dict(encoded) == snapshot


def test_snapshot_decoding_tolerates_string_amounts() -> None:
    """Numeric strings written by other clients are accepted."""
    decoded = snapshot_from_dict(
        {
            "assets": [
                {"id": "a", "type": "ETF", "name": "A",
                 "currentValue": "12.50"},
            ],
            "totalValue": "12.50",
            "snapshotDate": "2024-01-01T00:00:00",
        }
    )

    assert decoded.assets[0].current_value == 12.5
    assert decoded.total_debt == 0.0
    assert decoded.entities == ()


def test_points_and_metrics_survive_json() -> None:
    """Dates are stored as ISO strings and restored as dates."""
    points = (
        ProjectionPoint(
            date=date(2024, 1, 1),
            total_value=10.0,
            liquid_value=2.0,
            net_value=10.0,
            breakdown={"ETF": 10.0},
            cashflow=0.0,
            debt=0.0,
        ),
    )
    metrics = ProjectionMetrics(
        initial_value=10.0,
        final_value=12.0,
        total_return=2.0,
        total_return_percentage=20.0,
        annualized_return=0.2,
        max_drawdown=5.0,
        max_drawdown_date=date(2024, 3, 1),
        volatility=1.0,
        sharpe_ratio=0.18,
        liquidity_ratio=20.0,
        debt_ratio=0.0,
        tax_impact=0.6,
        best_month=date(2024, 2, 1),
    )

    stored_points = json.loads(json.dumps(points_to_list(points)))
    stored_metrics = json.loads(json.dumps(metrics_to_dict(metrics)))

    assert stored_points[0]["date"] == "2024-01-01"
    assert stored_metrics["max_drawdown_date"] == "2024-03-01"
    assert points_from_list(stored_points) == points
    assert metrics_from_dict(stored_metrics) == metrics
