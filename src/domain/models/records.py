"""Rows read from the patrimony record store."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class DebtRecord:
    """Debt row attached to an asset."""

    id: str
    asset_id: str
    current_amount: float
    interest_rate: float


@dataclass(frozen=True)
class OwnershipRecord:
    """Share of an asset held by an entity, in percent."""

    entity_id: str
    percentage: float


@dataclass(frozen=True)
class AssetRecord:
    """Asset row with its latest valuation and attached debts.

    Attributes:
        id: Asset identifier.
        name: Display name.
        asset_type: Asset type label.
        latest_value: Most recent valuation, None when never valued.
        debts: Debts attached to the asset.
        ownerships: Entity shares of the asset.
        metadata: Free-form metadata.
    """

    id: str
    name: str
    asset_type: str
    latest_value: float | None
    debts: list[DebtRecord] = field(default_factory=list)
    ownerships: list[OwnershipRecord] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EntityRecord:
    """Entity row owned by a user."""

    id: str
    user_id: str
    name: str
    entity_type: str | None = None


@dataclass(frozen=True)
class ActionRecord:
    """Scenario action as stored: a type tag plus a parameter bag.

    Attributes:
        type: One of SELL, BUY, INVEST, YIELD, EXPENSE, TAX.
        name: Display name.
        execution_date: Month the action runs (day is ignored).
        amount: Amount whose meaning depends on the type.
        parameters: Type-specific parameters (camelCase keys).
        order: Tie-break for actions dated in the same month.
        target_asset_id: Asset targeted by the action.
        asset_type: Asset type tag.
        id: Record identifier once persisted.
    """

    type: str
    name: str
    execution_date: date
    amount: float = 0.0
    parameters: dict[str, Any] = field(default_factory=dict)
    order: int | None = None
    target_asset_id: str | None = None
    asset_type: str | None = None
    id: str | None = None


__all__ = [
    "DebtRecord",
    "OwnershipRecord",
    "AssetRecord",
    "EntityRecord",
    "ActionRecord",
]
