"""Tests for building patrimony snapshots."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.models.records import AssetRecord, DebtRecord, EntityRecord
from src.domain.services.snapshot import build_patrimony_snapshot

CREATED_AT = datetime(2024, 3, 1, 8, 30)


def test_snapshot_sums_values_debts_and_breakdown() -> None:
    """Totals and the type breakdown aggregate every asset."""
    assets = [
        AssetRecord(
            id="flat",
            name="Flat",
            asset_type="Immobilier",
            latest_value=Decimal("250000.00"),
            debts=[
                DebtRecord(id="d1", asset_id="flat",
                           current_amount=Decimal("120000"),
                           interest_rate=Decimal("0.015")),
            ],
        ),
        AssetRecord(id="pea", name="PEA", asset_type="Actions",
                    latest_value=30000.0),
        AssetRecord(id="etf", name="ETF", asset_type="Actions",
                    latest_value=None),
    ]
    entities = [EntityRecord(id="e1", user_id="u1", name="Alex")]

    snapshot = build_patrimony_snapshot(assets, entities,
                                        created_at=CREATED_AT)

    assert snapshot.total_value == 280000.0
    assert snapshot.total_debt == 120000.0
    assert snapshot.net_value == 160000.0
    assert dict(snapshot.breakdown) == {
        "Immobilier": 250000.0,
        "Actions": 30000.0,
    }
    assert snapshot.assets[2].current_value == 0.0
    assert snapshot.assets[0].debts[0].interest_rate == 0.015
    assert snapshot.entities[0].name == "Alex"
    assert snapshot.created_at == CREATED_AT


def test_user_without_assets_gets_zero_totals() -> None:
    """An empty portfolio is a valid snapshot."""
    snapshot = build_patrimony_snapshot([], [], created_at=CREATED_AT)

    assert snapshot.total_value == 0
    assert snapshot.total_debt == 0
    assert snapshot.net_value == 0
    assert dict(snapshot.breakdown) == {}
    assert snapshot.assets == ()


def test_snapshot_is_immutable() -> None:
    """Snapshot collections cannot be mutated after creation."""
    snapshot = build_patrimony_snapshot(
        [AssetRecord(id="a", name="A", asset_type="ETF", latest_value=1,
                     metadata={"isin": "IE00B4L5Y983"})],
        [],
        created_at=CREATED_AT,
    )

    with pytest.raises(TypeError):
        snapshot.breakdown["ETF"] = 5
    with pytest.raises(TypeError):
        snapshot.assets[0].metadata["isin"] = "other"
