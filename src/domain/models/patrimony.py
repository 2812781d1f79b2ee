"""Domain models describing a user's patrimony."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping


def _frozen_mapping(values: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class DebtSummary:
    """Debt attached to an asset.

    Attributes:
        id: Debt identifier.
        current_amount: Remaining principal.
        interest_rate: Annual interest rate of the debt.
    """

    id: str
    current_amount: float
    interest_rate: float


@dataclass(frozen=True)
class AssetSummary:
    """Asset as captured in a snapshot.

    Attributes:
        id: Asset identifier.
        type: Asset type label (e.g. "Actions", "Immobilier").
        name: Display name.
        current_value: Latest valuation, 0 when never valued.
        debts: Debts attached to the asset.
        metadata: Free-form metadata from the record store.
    """

    id: str
    type: str
    name: str
    current_value: float
    debts: tuple[DebtSummary, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "debts", tuple(self.debts))
        object.__setattr__(self, "metadata", _frozen_mapping(self.metadata))


@dataclass(frozen=True)
class EntitySummary:
    """Owning entity (person, holding company, household)."""

    id: str
    name: str
    entity_type: str | None = None


@dataclass(frozen=True)
class PatrimonySnapshot:
    """Immutable capture of holdings at a point in time.

    Attributes:
        assets: Asset summaries.
        entities: Entities owned by the user.
        total_value: Sum of current asset values.
        total_debt: Sum of remaining debt.
        net_value: total_value minus total_debt.
        breakdown: Asset type label to summed value.
        created_at: When the snapshot was taken.
    """

    assets: tuple[AssetSummary, ...]
    entities: tuple[EntitySummary, ...]
    total_value: float
    total_debt: float
    net_value: float
    breakdown: Mapping[str, float]
    created_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "entities", tuple(self.entities))
        object.__setattr__(self, "breakdown", _frozen_mapping(self.breakdown))


__all__ = [
    "DebtSummary",
    "AssetSummary",
    "EntitySummary",
    "PatrimonySnapshot",
]
