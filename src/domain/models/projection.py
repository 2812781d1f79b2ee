"""Domain models for simulated projections."""

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from src.domain.constants import (
    DEFAULT_CAPITAL_GAINS_TAX_RATE,
    DEFAULT_DEBT_INFLATION_RATE,
    DEFAULT_GROWTH_RATE,
    DEFAULT_LIQUID_SHARE,
    DEFAULT_LOAN_DURATION_MONTHS,
    DEFAULT_LOAN_INTEREST_RATE,
    DEFAULT_RISK_FREE_RATE,
    DEFAULT_TAX_IMPACT_RATE,
)
from src.domain.errors import UnknownTimeHorizonError
from src.domain.models.patrimony import AssetSummary


@dataclass(frozen=True)
class ProjectionAssumptions:
    """Market and tax assumptions used by the simulation.

    Attributes:
        growth_rate: Annual growth applied to total value.
        debt_inflation_rate: Annual debt inflation for baseline runs.
        capital_gains_tax_rate: Tax on realized gains when a sale opts in.
        tax_impact_rate: Flat share of total return reported as tax impact.
        risk_free_rate: Annual risk-free rate for the Sharpe ratio.
        liquid_share: Share of total value assumed to be liquid.
        loan_interest_rate: Default annual rate of purchase loans.
        loan_duration_months: Default duration of purchase loans.
    """

    growth_rate: float = DEFAULT_GROWTH_RATE
    debt_inflation_rate: float = DEFAULT_DEBT_INFLATION_RATE
    capital_gains_tax_rate: float = DEFAULT_CAPITAL_GAINS_TAX_RATE
    tax_impact_rate: float = DEFAULT_TAX_IMPACT_RATE
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE
    liquid_share: float = DEFAULT_LIQUID_SHARE
    loan_interest_rate: float = DEFAULT_LOAN_INTEREST_RATE
    loan_duration_months: int = DEFAULT_LOAN_DURATION_MONTHS


@dataclass(frozen=True)
class TimeHorizon:
    """Projection horizon expressed in months."""

    code: str
    label: str
    months: int


TIME_HORIZONS: tuple[TimeHorizon, ...] = (
    TimeHorizon(code="1M", label="1 month", months=1),
    TimeHorizon(code="6M", label="6 months", months=6),
    TimeHorizon(code="1Y", label="1 year", months=12),
    TimeHorizon(code="5Y", label="5 years", months=60),
    TimeHorizon(code="10Y", label="10 years", months=120),
)


def resolve_time_horizon(code: str) -> TimeHorizon:
    """Return the horizon matching a code such as ``"1Y"``.

    Raises:
        UnknownTimeHorizonError: If the code is not supported.
    """
    for horizon in TIME_HORIZONS:
        if horizon.code == code:
            return horizon
    raise UnknownTimeHorizonError(code)


@dataclass(frozen=True)
class SimulationState:
    """State carried from one simulated month to the next."""

    assets: Mapping[str, AssetSummary]
    total_value: float
    total_debt: float
    monthly_income: float = 0.0
    monthly_expenses: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets", MappingProxyType(dict(self.assets)))

    @property
    def net_cashflow(self) -> float:
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class ProjectionPoint:
    """One simulated month."""

    date: date
    total_value: float
    liquid_value: float
    net_value: float
    breakdown: Mapping[str, float]
    cashflow: float
    debt: float
    monthly_income: float | None = None
    monthly_expenses: float | None = None


@dataclass(frozen=True)
class ProjectionMetrics:
    """Statistics derived from a projection series.

    Percent-valued fields: total_return_percentage, max_drawdown, volatility,
    liquidity_ratio, debt_ratio. annualized_return is a fraction.
    """

    initial_value: float
    final_value: float
    total_return: float
    total_return_percentage: float
    annualized_return: float
    max_drawdown: float
    max_drawdown_date: date | None
    volatility: float
    sharpe_ratio: float | None
    liquidity_ratio: float
    debt_ratio: float
    tax_impact: float
    best_month: date | None = None
    worst_month: date | None = None


@dataclass(frozen=True)
class ProjectionResult:
    """Projection series with its metrics and narrative insights."""

    points: tuple[ProjectionPoint, ...]
    metrics: ProjectionMetrics
    insights: tuple[str, ...] = ()
    scenario_id: str | None = None
    time_horizon: str | None = None
    calculated_at: datetime | None = None


@dataclass(frozen=True)
class ScenarioOutcome:
    """Scenario projection compared against the baseline."""

    scenario_id: str
    name: str
    result: ProjectionResult
    better_than_baseline: bool
    delta_percentage: float


@dataclass(frozen=True)
class ScenarioComparison:
    """Baseline projection and the scenarios compared to it."""

    baseline: ProjectionResult
    scenarios: tuple[ScenarioOutcome, ...] = field(default_factory=tuple)


__all__ = [
    "ProjectionAssumptions",
    "TimeHorizon",
    "TIME_HORIZONS",
    "resolve_time_horizon",
    "SimulationState",
    "ProjectionPoint",
    "ProjectionMetrics",
    "ProjectionResult",
    "ScenarioOutcome",
    "ScenarioComparison",
]
