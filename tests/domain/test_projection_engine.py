"""Tests for the monthly projection engine."""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from src.domain.models.patrimony import AssetSummary, PatrimonySnapshot
from src.domain.models.projection import (
    ProjectionAssumptions,
    TimeHorizon,
    resolve_time_horizon,
)
from src.domain.models.scenario import (
    BuyAction,
    ExpenseAction,
    SellAction,
    SellPriceMode,
    TaxAction,
)
from src.domain.services.projection import (
    compare_to_baseline,
    project_baseline,
    project_scenario,
)


def _snapshot(total_value: float = 100000.0, total_debt: float = 0.0):
    return PatrimonySnapshot(
        assets=(
            AssetSummary(
                id="flat",
                type="Immobilier",
                name="Flat",
                current_value=total_value,
            ),
        ),
        entities=(),
        total_value=total_value,
        total_debt=total_debt,
        net_value=total_value - total_debt,
        breakdown={"Immobilier": total_value},
        created_at=datetime(2024, 1, 1, 9, 0),
    )


def test_one_year_without_actions_grows_by_default_rate() -> None:
    """A 100k snapshot grows about 5% over one year at default assumptions."""
    result = project_scenario(
        _snapshot(),
        [],
        resolve_time_horizon("1Y"),
        date(2024, 1, 1),
    )

    assert len(result.points) == 13
    assert result.points[-1].total_value == pytest.approx(105000, rel=0.01)
    assert result.metrics.total_return_percentage == pytest.approx(5.0)
    assert result.time_horizon == "1Y"
    assert result.insights == ()


def test_points_are_dated_month_by_month() -> None:
    """Point dates advance one calendar month, clamping the day."""
    result = project_scenario(
        _snapshot(),
        [],
        TimeHorizon(code="3M", label="3 months", months=3),
        date(2024, 1, 31),
    )

    assert [point.date for point in result.points] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
        date(2024, 4, 30),
    ]


def test_same_month_actions_apply_in_order() -> None:
    """Actions dated in one month apply by ascending order, not list order."""
    actions = [
        TaxAction(name="Second", execution_date=date(2024, 3, 20), order=2,
                  amount=1000),
        ExpenseAction(name="First", execution_date=date(2024, 3, 2), order=1,
                      amount=500),
    ]

    result = project_scenario(
        _snapshot(),
        actions,
        resolve_time_horizon("6M"),
        date(2024, 1, 1),
    )

    assert result.insights == (
        "One-off expense of 500.00 €",
        "Tax impact of 1,000.00 €",
    )


def test_actions_outside_the_horizon_are_ignored() -> None:
    """Actions dated after the last month never run."""
    late = TaxAction(name="Late", execution_date=date(2030, 1, 1), amount=10)

    with_action = project_scenario(
        _snapshot(),
        [late],
        resolve_time_horizon("1M"),
        date(2024, 1, 1),
    )
    without_action = project_scenario(
        _snapshot(),
        [],
        resolve_time_horizon("1M"),
        date(2024, 1, 1),
    )

    assert with_action.points == without_action.points
    assert with_action.insights == ()


def test_projection_is_deterministic() -> None:
    """Same inputs produce identical results."""
    actions = [
        ExpenseAction(
            name="Rent",
            execution_date=date(2024, 2, 1),
            amount=800,
            is_recurring=True,
        )
    ]
    horizon = resolve_time_horizon("5Y")

    first = project_scenario(_snapshot(), actions, horizon, date(2024, 1, 1))
    second = project_scenario(_snapshot(), actions, horizon, date(2024, 1, 1))

    assert first == second


def test_sold_asset_disappears_from_later_breakdowns() -> None:
    """After a sale the asset no longer contributes to the breakdown."""
    sale = SellAction(
        name="Sell flat",
        execution_date=date(2024, 2, 1),
        target_asset_id="flat",
        price_mode=SellPriceMode.FIXED,
        sell_price=120000,
    )

    result = project_scenario(
        _snapshot(),
        [sale],
        resolve_time_horizon("6M"),
        date(2024, 1, 1),
    )

    assert result.points[0].breakdown == {"Immobilier": 100000.0}
    assert all(point.breakdown == {} for point in result.points[1:])
    assert result.insights[0].startswith("Sale of Flat for 120,000.00 €")


def test_flat_series_has_no_sharpe_ratio() -> None:
    """Zero growth gives zero volatility and an undefined Sharpe ratio."""
    result = project_scenario(
        _snapshot(),
        [],
        resolve_time_horizon("1Y"),
        date(2024, 1, 1),
        ProjectionAssumptions(growth_rate=0.0),
    )

    assert result.metrics.total_return == 0
    assert result.metrics.max_drawdown == 0
    assert result.metrics.volatility == 0
    assert result.metrics.sharpe_ratio is None


def test_baseline_inflates_debt_and_scales_breakdown() -> None:
    """Baseline compounds value and debt without any cashflow."""
    result = project_baseline(
        _snapshot(total_debt=50000.0),
        resolve_time_horizon("1Y"),
        date(2024, 1, 1),
    )

    first, last = result.points[0], result.points[-1]
    assert first.total_value == pytest.approx(100000)
    assert last.total_value == pytest.approx(105000)
    assert last.debt == pytest.approx(51000)
    assert last.net_value == pytest.approx(54000)
    assert last.breakdown["Immobilier"] == pytest.approx(105000)
    assert all(point.cashflow == 0 for point in result.points)


def test_compare_to_baseline_flags_better_scenarios() -> None:
    """Scenarios are ranked by final value against the baseline."""
    horizon = resolve_time_horizon("1Y")
    baseline = project_baseline(_snapshot(), horizon, date(2024, 1, 1))
    costly = project_scenario(
        _snapshot(),
        [TaxAction(name="Tax", execution_date=date(2024, 1, 1), amount=20000)],
        horizon,
        date(2024, 1, 1),
    )
    scenario = SimpleNamespace(id="s-1", name="Costly", baseline=_snapshot())

    comparison = compare_to_baseline(baseline, [(scenario, costly)])

    outcome = comparison.scenarios[0]
    assert comparison.baseline is baseline
    assert outcome.scenario_id == "s-1"
    assert outcome.better_than_baseline is False
    assert outcome.delta_percentage < 0


def test_scenario_without_actions_matches_the_reference() -> None:
    """A scenario with no actions neither beats nor trails the baseline."""
    horizon = resolve_time_horizon("1Y")
    baseline = project_baseline(_snapshot(), horizon, date(2024, 1, 1))
    idle = project_scenario(_snapshot(), [], horizon, date(2024, 1, 1))
    scenario = SimpleNamespace(id="s-2", name="Idle", baseline=_snapshot())

    outcome = compare_to_baseline(baseline, [(scenario, idle)]).scenarios[0]

    assert outcome.better_than_baseline is False
    assert outcome.delta_percentage == pytest.approx(0.0)


def test_expense_then_purchase_in_first_month() -> None:
    """Order 0 expense and order 1 purchase both land before growth."""
    actions = [
        BuyAction(name="Car", execution_date=date(2024, 1, 1), order=1,
                  amount=10000),
        ExpenseAction(name="Fees", execution_date=date(2024, 1, 1), order=0,
                      amount=500),
    ]

    result = project_scenario(
        _snapshot(),
        actions,
        resolve_time_horizon("1M"),
        date(2024, 1, 1),
    )

    growth = 1.05 ** (1 / 12)
    assert result.points[0].total_value == pytest.approx(
        (100000 - 500 + 10000) * growth
    )
    assert result.insights[0] == "One-off expense of 500.00 €"
