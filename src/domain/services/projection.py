"""Monthly projection engine for baseline and scenario runs."""

from collections.abc import Iterable, Sequence
from datetime import date

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models.patrimony import PatrimonySnapshot
from src.domain.models.projection import (
    ProjectionAssumptions,
    ProjectionPoint,
    ProjectionResult,
    ScenarioComparison,
    ScenarioOutcome,
    SimulationState,
    TimeHorizon,
    resolve_time_horizon,
)
from src.domain.models.scenario import Scenario, ScenarioAction
from src.domain.services.actions import apply_action
from src.domain.services.dates import add_months, same_month
from src.domain.services.metrics import compute_projection_metrics
from src.domain.services.snapshot import compute_breakdown


def initial_state(snapshot: PatrimonySnapshot) -> SimulationState:
    """Return the simulation state seeded from a snapshot."""
    return SimulationState(
        assets={asset.id: asset for asset in snapshot.assets},
        total_value=snapshot.total_value,
        total_debt=snapshot.total_debt,
    )


def apply_growth(
    state: SimulationState,
    year_fraction: float,
    growth_rate: float,
) -> SimulationState:
    """Compound total value and add the net cashflow for ``year_fraction``."""
    growth_factor = (1 + growth_rate) ** year_fraction
    total_value = state.total_value * growth_factor
    total_value += state.net_cashflow * MONTHS_PER_YEAR * year_fraction
    return SimulationState(
        assets=state.assets,
        total_value=total_value,
        total_debt=state.total_debt,
        monthly_income=state.monthly_income,
        monthly_expenses=state.monthly_expenses,
    )


def project_scenario(
    snapshot: PatrimonySnapshot,
    actions: Iterable[ScenarioAction],
    horizon: TimeHorizon,
    start_date: date,
    assumptions: ProjectionAssumptions | None = None,
) -> ProjectionResult:
    """Simulate a patrimony month by month under scheduled actions.

    For each month ``0..horizon.months`` the actions dated in that calendar
    month are applied in ascending ``order``, one month of growth and net
    cashflow is added, and a point is recorded.

    Args:
        snapshot: Baseline snapshot of the scenario.
        actions: Scheduled actions.
        horizon: Number of months to simulate.
        start_date: Date of month 0.
        assumptions: Growth, tax and loan assumptions.

    Returns:
        ProjectionResult: Points, metrics and insights.
    """
    assumptions = assumptions or ProjectionAssumptions()
    scheduled = sorted(actions, key=lambda action: action.order)
    state = initial_state(snapshot)
    insights: list[str] = []
    points: list[ProjectionPoint] = []

    for month in range(horizon.months + 1):
        current_date = add_months(start_date, month)
        for action in scheduled:
            if not same_month(action.execution_date, current_date):
                continue
            outcome = apply_action(state, action, assumptions)
            state = outcome.state
            if outcome.insight:
                insights.append(outcome.insight)
        state = apply_growth(
            state,
            1 / MONTHS_PER_YEAR,
            assumptions.growth_rate,
        )
        points.append(_state_point(state, current_date, assumptions))

    return ProjectionResult(
        points=tuple(points),
        metrics=compute_projection_metrics(points, assumptions),
        insights=tuple(insights),
        time_horizon=horizon.code,
    )


def project_baseline(
    snapshot: PatrimonySnapshot,
    horizon: TimeHorizon,
    start_date: date,
    assumptions: ProjectionAssumptions | None = None,
) -> ProjectionResult:
    """Project a snapshot without actions.

    Value compounds at the growth rate and debt inflates at the debt
    inflation rate; there is no cashflow.
    """
    assumptions = assumptions or ProjectionAssumptions()
    points: list[ProjectionPoint] = []
    for month in range(horizon.months + 1):
        year_fraction = month / MONTHS_PER_YEAR
        growth_factor = (1 + assumptions.growth_rate) ** year_fraction
        inflation_factor = (
            (1 + assumptions.debt_inflation_rate) ** year_fraction
        )
        total_value = snapshot.total_value * growth_factor
        total_debt = snapshot.total_debt * inflation_factor
        points.append(
            ProjectionPoint(
                date=add_months(start_date, month),
                total_value=total_value,
                liquid_value=total_value * assumptions.liquid_share,
                net_value=total_value - total_debt,
                breakdown={
                    asset_type: value * growth_factor
                    for asset_type, value in snapshot.breakdown.items()
                },
                cashflow=0.0,
                debt=total_debt,
            )
        )
    return ProjectionResult(
        points=tuple(points),
        metrics=compute_projection_metrics(points, assumptions),
        time_horizon=horizon.code,
    )


def compare_to_baseline(
    baseline: ProjectionResult,
    scenario_results: Sequence[tuple[Scenario, ProjectionResult]],
    assumptions: ProjectionAssumptions | None = None,
) -> ScenarioComparison:
    """Rank scenario projections against a run without their actions.

    Each scenario is measured against ``project_scenario`` run on its own
    snapshot without actions over the same months. A scenario without
    actions therefore has a zero delta. ``baseline`` is carried through
    for display.
    """
    assumptions = assumptions or ProjectionAssumptions()
    outcomes = []
    for scenario, result in scenario_results:
        reference = project_scenario(
            scenario.baseline,
            [],
            resolve_time_horizon(result.time_horizon),
            result.points[0].date,
            assumptions,
        )
        reference_final = reference.metrics.final_value
        final_value = result.metrics.final_value
        delta = final_value - reference_final
        delta_percentage = 0.0
        if reference_final != 0:
            delta_percentage = delta / reference_final * 100
        outcomes.append(
            ScenarioOutcome(
                scenario_id=scenario.id,
                name=scenario.name,
                result=result,
                better_than_baseline=final_value > reference_final,
                delta_percentage=delta_percentage,
            )
        )
    return ScenarioComparison(baseline=baseline, scenarios=tuple(outcomes))


def _state_point(
    state: SimulationState,
    current_date: date,
    assumptions: ProjectionAssumptions,
) -> ProjectionPoint:
    return ProjectionPoint(
        date=current_date,
        total_value=state.total_value,
        liquid_value=state.total_value * assumptions.liquid_share,
        net_value=state.total_value - state.total_debt,
        breakdown=compute_breakdown(state.assets.values()),
        cashflow=state.net_cashflow,
        debt=state.total_debt,
        monthly_income=state.monthly_income,
        monthly_expenses=state.monthly_expenses,
    )


__all__ = [
    "initial_state",
    "apply_growth",
    "project_scenario",
    "project_baseline",
    "compare_to_baseline",
]
