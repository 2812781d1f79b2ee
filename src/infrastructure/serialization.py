"""JSON encoding of snapshots and projection results for storage."""

from dataclasses import asdict
from datetime import date, datetime
from typing import Any

from src.domain.models.patrimony import (
    AssetSummary,
    DebtSummary,
    EntitySummary,
    PatrimonySnapshot,
)
from src.domain.models.projection import ProjectionMetrics, ProjectionPoint
from src.utils.decimal_utils import coerce_float


def snapshot_to_dict(snapshot: PatrimonySnapshot) -> dict[str, Any]:
    return {
        "assets": [
            {
                "id": asset.id,
                "type": asset.type,
                "name": asset.name,
                "currentValue": asset.current_value,
                "debts": [
                    {
                        "id": debt.id,
                        "currentAmount": debt.current_amount,
                        "interestRate": debt.interest_rate,
                    }
                    for debt in asset.debts
                ],
                "metadata": dict(asset.metadata),
            }
            for asset in snapshot.assets
        ],
        "entities": [
            {
                "id": entity.id,
                "name": entity.name,
                "type": entity.entity_type,
            }
            for entity in snapshot.entities
        ],
        "totalValue": snapshot.total_value,
        "totalDebt": snapshot.total_debt,
        "netValue": snapshot.net_value,
        "breakdown": dict(snapshot.breakdown),
        "snapshotDate": snapshot.created_at.isoformat(),
    }


def snapshot_from_dict(data: dict[str, Any]) -> PatrimonySnapshot:
    return PatrimonySnapshot(
        assets=tuple(
            AssetSummary(
                id=asset["id"],
                type=asset["type"],
                name=asset["name"],
                current_value=coerce_float(asset.get("currentValue")),
                debts=tuple(
                    DebtSummary(
                        id=debt["id"],
                        current_amount=coerce_float(debt.get("currentAmount")),
                        interest_rate=coerce_float(debt.get("interestRate")),
                    )
                    for debt in asset.get("debts", [])
                ),
                metadata=asset.get("metadata") or {},
            )
            for asset in data.get("assets", [])
        ),
        entities=tuple(
            EntitySummary(
                id=entity["id"],
                name=entity.get("name", ""),
                entity_type=entity.get("type"),
            )
            for entity in data.get("entities", [])
        ),
        total_value=coerce_float(data.get("totalValue")),
        total_debt=coerce_float(data.get("totalDebt")),
        net_value=coerce_float(data.get("netValue")),
        breakdown={
            key: coerce_float(value)
            for key, value in (data.get("breakdown") or {}).items()
        },
        created_at=datetime.fromisoformat(data["snapshotDate"]),
    )


def points_to_list(points: tuple[ProjectionPoint, ...]) -> list[dict[str, Any]]:
    encoded = []
    for point in points:
        item = asdict(point)
        item["date"] = point.date.isoformat()
        item["breakdown"] = dict(point.breakdown)
        encoded.append(item)
    return encoded


def points_from_list(items: list[dict[str, Any]]) -> tuple[ProjectionPoint, ...]:
    return tuple(
        ProjectionPoint(**{**item, "date": date.fromisoformat(item["date"])})
        for item in items
    )


def metrics_to_dict(metrics: ProjectionMetrics) -> dict[str, Any]:
    encoded = asdict(metrics)
    for key in ("max_drawdown_date", "best_month", "worst_month"):
        if encoded[key] is not None:
            encoded[key] = encoded[key].isoformat()
    return encoded


def metrics_from_dict(data: dict[str, Any]) -> ProjectionMetrics:
    decoded = dict(data)
    for key in ("max_drawdown_date", "best_month", "worst_month"):
        if decoded.get(key):
            decoded[key] = date.fromisoformat(decoded[key])
    return ProjectionMetrics(**decoded)


__all__ = [
    "snapshot_to_dict",
    "snapshot_from_dict",
    "points_to_list",
    "points_from_list",
    "metrics_to_dict",
    "metrics_from_dict",
]
