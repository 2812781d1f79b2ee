"""Domain models for what-if scenarios and their actions."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Union

from src.domain.models.patrimony import PatrimonySnapshot


class ActionType(str, Enum):
    """Kinds of discrete financial events a scenario can schedule."""

    SELL = "SELL"
    BUY = "BUY"
    INVEST = "INVEST"
    YIELD = "YIELD"
    EXPENSE = "EXPENSE"
    TAX = "TAX"


class ScenarioType(str, Enum):
    SIMPLE = "SIMPLE"
    COMPLEX = "COMPLEX"


class SellPriceMode(str, Enum):
    MARKET = "MARKET"
    FIXED = "FIXED"
    PERCENTAGE = "PERCENTAGE"


class FinancingKind(str, Enum):
    CASH = "CASH"
    LOAN = "LOAN"
    MIXED = "MIXED"


class YieldTarget(str, Enum):
    ALL = "ALL"
    CATEGORY = "CATEGORY"
    SPECIFIC = "SPECIFIC"


@dataclass(frozen=True)
class Financing:
    """Financing terms of a purchase.

    Attributes:
        kind: Cash, loan or mixed financing.
        loan_amount: Financed amount, defaults to the purchase amount.
        interest_rate: Annual loan rate, defaults to the configured rate.
        duration_months: Loan duration, defaults to the configured duration.
    """

    kind: FinancingKind = FinancingKind.CASH
    loan_amount: float | None = None
    interest_rate: float | None = None
    duration_months: int | None = None

    @property
    def uses_loan(self) -> bool:
        return self.kind in (FinancingKind.LOAN, FinancingKind.MIXED)


@dataclass(frozen=True)
class _ActionBase:
    name: str
    execution_date: date
    order: int = 0
    amount: float = 0.0
    target_asset_id: str | None = None
    asset_type: str | None = None


@dataclass(frozen=True)
class SellAction(_ActionBase):
    """Sell the target asset at a market, fixed or relative price."""

    price_mode: SellPriceMode = SellPriceMode.MARKET
    sell_price: float | None = None
    capital_gains_tax: bool = False
    action_type: ActionType = field(default=ActionType.SELL, init=False)


@dataclass(frozen=True)
class BuyAction(_ActionBase):
    """Buy a new asset for ``amount``, optionally financed by a loan."""

    financing: Financing = field(default_factory=Financing)
    asset_name: str | None = None
    action_type: ActionType = field(default=ActionType.BUY, init=False)


@dataclass(frozen=True)
class InvestAction(_ActionBase):
    """Start a standing monthly investment plan."""

    monthly_amount: float = 0.0
    action_type: ActionType = field(default=ActionType.INVEST, init=False)


@dataclass(frozen=True)
class YieldAction(_ActionBase):
    """Start receiving a yield on the patrimony."""

    yield_percentage: float = 0.0
    target_assets: YieldTarget | None = None
    action_type: ActionType = field(default=ActionType.YIELD, init=False)


@dataclass(frozen=True)
class ExpenseAction(_ActionBase):
    """One-off or recurring expense of ``amount``."""

    is_recurring: bool = False
    action_type: ActionType = field(default=ActionType.EXPENSE, init=False)


@dataclass(frozen=True)
class TaxAction(_ActionBase):
    """One-off tax payment of ``amount``."""

    action_type: ActionType = field(default=ActionType.TAX, init=False)


ScenarioAction = Union[
    SellAction,
    BuyAction,
    InvestAction,
    YieldAction,
    ExpenseAction,
    TaxAction,
]


@dataclass(frozen=True)
class ScenarioDraft:
    """User-supplied fields to create a scenario."""

    name: str
    scenario_type: ScenarioType = ScenarioType.SIMPLE
    description: str | None = None
    actions: tuple[ScenarioAction, ...] = ()


@dataclass(frozen=True)
class ScenarioChanges:
    """Fields replaced by a scenario update.

    ``actions`` replaces the whole action list when not None.
    """

    name: str | None = None
    description: str | None = None
    is_active: bool | None = None
    actions: tuple[ScenarioAction, ...] | None = None


@dataclass(frozen=True)
class Scenario:
    """Named what-if case applied to a baseline snapshot."""

    id: str
    user_id: str
    name: str
    scenario_type: ScenarioType
    baseline: PatrimonySnapshot
    actions: tuple[ScenarioAction, ...]
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None

    def ordered_actions(self) -> list[ScenarioAction]:
        """Return actions sorted by their ordering index."""
        return sorted(self.actions, key=lambda action: action.order)


__all__ = [
    "ActionType",
    "ScenarioType",
    "SellPriceMode",
    "FinancingKind",
    "YieldTarget",
    "Financing",
    "SellAction",
    "BuyAction",
    "InvestAction",
    "YieldAction",
    "ExpenseAction",
    "TaxAction",
    "ScenarioAction",
    "ScenarioDraft",
    "ScenarioChanges",
    "Scenario",
]
