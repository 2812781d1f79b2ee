"""Reduce record store rows into an immutable patrimony snapshot."""

from collections.abc import Iterable
from datetime import datetime

from src.domain.models.patrimony import (
    AssetSummary,
    DebtSummary,
    EntitySummary,
    PatrimonySnapshot,
)
from src.domain.models.records import AssetRecord, EntityRecord
from src.utils.decimal_utils import coerce_float


def build_patrimony_snapshot(
    assets: Iterable[AssetRecord],
    entities: Iterable[EntityRecord],
    *,
    created_at: datetime,
) -> PatrimonySnapshot:
    """Build a snapshot from assets, their debts, and owning entities.

    Args:
        assets: Asset rows with latest valuation and debts.
        entities: Entity rows owned by the user.
        created_at: Snapshot timestamp.

    Returns:
        PatrimonySnapshot: Totals, breakdown and summaries. A user without
        assets gets zero totals and an empty breakdown.
    """
    summaries = [_summarize_asset(asset) for asset in assets]
    total_value = sum((asset.current_value for asset in summaries), 0.0)
    total_debt = sum(
        (debt.current_amount for asset in summaries for debt in asset.debts),
        0.0,
    )
    return PatrimonySnapshot(
        assets=tuple(summaries),
        entities=tuple(
            EntitySummary(
                id=entity.id,
                name=entity.name,
                entity_type=entity.entity_type,
            )
            for entity in entities
        ),
        total_value=total_value,
        total_debt=total_debt,
        net_value=total_value - total_debt,
        breakdown=compute_breakdown(summaries),
        created_at=created_at,
    )


def compute_breakdown(assets: Iterable[AssetSummary]) -> dict[str, float]:
    """Sum current values by asset type label."""
    breakdown: dict[str, float] = {}
    for asset in assets:
        breakdown[asset.type] = breakdown.get(asset.type, 0.0) + asset.current_value
    return breakdown


def _summarize_asset(asset: AssetRecord) -> AssetSummary:
    return AssetSummary(
        id=asset.id,
        type=asset.asset_type,
        name=asset.name,
        current_value=coerce_float(asset.latest_value),
        debts=tuple(
            DebtSummary(
                id=debt.id,
                current_amount=coerce_float(debt.current_amount),
                interest_rate=coerce_float(debt.interest_rate),
            )
            for debt in asset.debts
        ),
        metadata=asset.metadata,
    )


__all__ = ["build_patrimony_snapshot", "compute_breakdown"]
