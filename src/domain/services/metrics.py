"""Risk and performance statistics over a projection series."""

import math
from collections.abc import Sequence
from datetime import date

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.errors import EmptyProjectionError
from src.domain.models.projection import (
    ProjectionAssumptions,
    ProjectionMetrics,
    ProjectionPoint,
)


def compute_projection_metrics(
    points: Sequence[ProjectionPoint],
    assumptions: ProjectionAssumptions | None = None,
) -> ProjectionMetrics:
    """Summarize an ordered projection series.

    Args:
        points: Time-ascending projection points.
        assumptions: Risk-free and tax-impact rates, defaults when None.

    Returns:
        ProjectionMetrics: Return, drawdown, volatility, Sharpe ratio,
        liquidity and debt ratios, and the estimated tax impact.

    Raises:
        EmptyProjectionError: If ``points`` is empty.
    """
    if not points:
        raise EmptyProjectionError()
    assumptions = assumptions or ProjectionAssumptions()

    initial = points[0]
    final = points[-1]
    initial_value = initial.total_value
    final_value = final.total_value
    total_return = final_value - initial_value
    total_return_percentage = _percent(total_return, initial_value)

    max_drawdown, max_drawdown_date = _max_drawdown(points)

    returns = monthly_returns(points)
    volatility = _standard_deviation(returns) * math.sqrt(MONTHS_PER_YEAR)

    years = len(points) / MONTHS_PER_YEAR
    annualized_return = _annualized_return(initial_value, final_value, years)
    sharpe_ratio = None
    if volatility > 0:
        sharpe_ratio = (annualized_return - assumptions.risk_free_rate) / volatility

    best_month, worst_month = _extreme_months(points, returns)

    return ProjectionMetrics(
        initial_value=initial_value,
        final_value=final_value,
        total_return=total_return,
        total_return_percentage=total_return_percentage,
        annualized_return=annualized_return,
        max_drawdown=max_drawdown * 100,
        max_drawdown_date=max_drawdown_date,
        volatility=volatility * 100,
        sharpe_ratio=sharpe_ratio,
        liquidity_ratio=_percent(final.liquid_value, final_value),
        debt_ratio=_percent(final.debt, final_value),
        tax_impact=total_return * assumptions.tax_impact_rate,
        best_month=best_month,
        worst_month=worst_month,
    )


def monthly_returns(points: Sequence[ProjectionPoint]) -> list[float]:
    """Return month-over-month relative changes of total value.

    A month following a zero value counts as a zero return.
    """
    returns = []
    for previous, current in zip(points, points[1:]):
        if previous.total_value == 0:
            returns.append(0.0)
            continue
        returns.append(
            (current.total_value - previous.total_value) / previous.total_value
        )
    return returns


def _max_drawdown(
    points: Sequence[ProjectionPoint],
) -> tuple[float, date | None]:
    peak = points[0].total_value
    max_drawdown = 0.0
    max_drawdown_date = None
    for point in points:
        if point.total_value > peak:
            peak = point.total_value
        if peak <= 0:
            continue
        drawdown = (peak - point.total_value) / peak
        if drawdown > max_drawdown:
            max_drawdown = drawdown
            max_drawdown_date = point.date
    return max_drawdown, max_drawdown_date


def _standard_deviation(values: Sequence[float]) -> float:
    # Population deviation, matching the monthly-return convention.
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def _annualized_return(
    initial_value: float,
    final_value: float,
    years: float,
) -> float:
    if initial_value <= 0 or final_value < 0:
        return 0.0
    return (final_value / initial_value) ** (1 / years) - 1


def _extreme_months(
    points: Sequence[ProjectionPoint],
    returns: Sequence[float],
) -> tuple[date | None, date | None]:
    if not returns:
        return None, None
    best_index = max(range(len(returns)), key=returns.__getitem__)
    worst_index = min(range(len(returns)), key=returns.__getitem__)
    return points[best_index + 1].date, points[worst_index + 1].date


def _percent(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator * 100


__all__ = ["compute_projection_metrics", "monthly_returns"]
