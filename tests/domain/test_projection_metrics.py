"""Tests for projection metrics."""

from datetime import date

import pytest

from src.domain.errors import EmptyProjectionError
from src.domain.models.projection import ProjectionAssumptions, ProjectionPoint
from src.domain.services.metrics import (
    compute_projection_metrics,
    monthly_returns,
)


def _points(values, debt: float = 0.0) -> list[ProjectionPoint]:
    return [
        ProjectionPoint(
            date=date(2024, month + 1, 1),
            total_value=value,
            liquid_value=value * 0.2,
            net_value=value - debt,
            breakdown={},
            cashflow=0.0,
            debt=debt,
        )
        for month, value in enumerate(values)
    ]


def test_empty_series_raises() -> None:
    """Metrics require at least one point."""
    with pytest.raises(EmptyProjectionError):
        compute_projection_metrics([])


def test_drawdown_tracks_the_deepest_fall() -> None:
    """Max drawdown is measured from the running peak."""
    metrics = compute_projection_metrics(_points([100, 120, 90, 110, 60, 130]))

    assert metrics.max_drawdown == pytest.approx(50.0)
    assert metrics.max_drawdown_date == date(2024, 5, 1)
    assert metrics.best_month == date(2024, 6, 1)
    assert metrics.worst_month == date(2024, 5, 1)


def test_returns_ratios_and_tax_impact() -> None:
    """Return, liquidity, debt and tax figures derive from the endpoints."""
    metrics = compute_projection_metrics(_points([1000, 1100, 1200], debt=300))

    assert metrics.initial_value == 1000
    assert metrics.final_value == 1200
    assert metrics.total_return == 200
    assert metrics.total_return_percentage == pytest.approx(20.0)
    assert metrics.liquidity_ratio == pytest.approx(20.0)
    assert metrics.debt_ratio == pytest.approx(25.0)
    assert metrics.tax_impact == pytest.approx(60.0)


def test_volatility_is_annualized_population_deviation() -> None:
    """Volatility uses the population deviation of monthly returns."""
    metrics = compute_projection_metrics(_points([100, 110, 99]))

    # Returns are +10% and -10%; the ratio uses the fractional volatility.
    assert metrics.volatility == pytest.approx(10 * 12 ** 0.5)
    expected_sharpe = (metrics.annualized_return - 0.02) / (
        metrics.volatility / 100
    )
    assert metrics.sharpe_ratio == pytest.approx(expected_sharpe)


def test_risk_free_rate_comes_from_assumptions() -> None:
    """The Sharpe ratio uses the configured risk-free rate."""
    points = _points([100, 110, 99])
    default = compute_projection_metrics(points)
    custom = compute_projection_metrics(
        points,
        ProjectionAssumptions(risk_free_rate=0.0),
    )

    assert custom.sharpe_ratio > default.sharpe_ratio


def test_single_point_series() -> None:
    """One point yields zero returns and no Sharpe ratio."""
    metrics = compute_projection_metrics(_points([500]))

    assert metrics.total_return == 0
    assert metrics.volatility == 0
    assert metrics.sharpe_ratio is None
    assert metrics.best_month is None


def test_zero_initial_value_does_not_divide_by_zero() -> None:
    """A zero start reports 0% return and 0 annualized return."""
    metrics = compute_projection_metrics(_points([0, 0, 100]))

    assert metrics.total_return_percentage == 0.0
    assert metrics.annualized_return == 0.0
    assert monthly_returns(_points([0, 100])) == [0.0]
