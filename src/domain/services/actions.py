"""Apply scheduled scenario actions to a simulation state.

Every function here is pure: it receives a ``SimulationState`` and returns a
new one together with the insight sentence describing what happened.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from src.domain.models.patrimony import AssetSummary
from src.domain.models.projection import ProjectionAssumptions, SimulationState
from src.domain.models.scenario import (
    BuyAction,
    ExpenseAction,
    InvestAction,
    ScenarioAction,
    SellAction,
    SellPriceMode,
    TaxAction,
    YieldAction,
    YieldTarget,
)


@dataclass(frozen=True)
class ActionOutcome:
    """New state after an action and its insight (None when skipped)."""

    state: SimulationState
    insight: str | None


def apply_action(
    state: SimulationState,
    action: ScenarioAction,
    assumptions: ProjectionAssumptions | None = None,
) -> ActionOutcome:
    """Apply one action to ``state``.

    Args:
        state: State before the action.
        action: Scheduled action.
        assumptions: Tax and loan defaults, defaults when None.

    Returns:
        ActionOutcome: Resulting state and insight.

    Raises:
        TypeError: If ``action`` is not one of the known action classes.
    """
    assumptions = assumptions or ProjectionAssumptions()
    if isinstance(action, SellAction):
        return _apply_sell(state, action, assumptions)
    if isinstance(action, BuyAction):
        return _apply_buy(state, action, assumptions)
    if isinstance(action, InvestAction):
        return _apply_invest(state, action)
    if isinstance(action, YieldAction):
        return _apply_yield(state, action)
    if isinstance(action, ExpenseAction):
        return _apply_expense(state, action)
    if isinstance(action, TaxAction):
        return _apply_tax(state, action)
    raise TypeError(f"Unsupported scenario action: {type(action).__name__}")


def apply_actions(
    state: SimulationState,
    actions: Iterable[ScenarioAction],
    assumptions: ProjectionAssumptions | None = None,
) -> tuple[SimulationState, list[str]]:
    """Fold actions over ``state`` in ascending ``order``.

    Returns:
        tuple[SimulationState, list[str]]: Final state and insights in
        application order.
    """
    insights: list[str] = []
    for action in sorted(actions, key=lambda item: item.order):
        outcome = apply_action(state, action, assumptions)
        state = outcome.state
        if outcome.insight:
            insights.append(outcome.insight)
    return state, insights


def calculate_sell_price(asset: AssetSummary, action: SellAction) -> float:
    """Return the sale price of ``asset`` for the action's price mode."""
    if action.price_mode is SellPriceMode.FIXED:
        if action.sell_price:
            return action.sell_price
        return asset.current_value
    if action.price_mode is SellPriceMode.PERCENTAGE:
        return asset.current_value * (1 + (action.sell_price or 0) / 100)
    return asset.current_value


def calculate_monthly_payment(
    principal: float,
    annual_rate: float,
    months: int,
) -> float:
    """Return the constant monthly payment amortizing a loan.

    Args:
        principal: Borrowed amount.
        annual_rate: Annual interest rate (0.03 for 3%).
        months: Number of monthly payments.
    """
    if months <= 0:
        return principal
    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return principal / months
    compounded = (1 + monthly_rate) ** months
    return principal * monthly_rate * compounded / (compounded - 1)


def _apply_sell(
    state: SimulationState,
    action: SellAction,
    assumptions: ProjectionAssumptions,
) -> ActionOutcome:
    asset = state.assets.get(action.target_asset_id or "")
    if asset is None:
        return ActionOutcome(state=state, insight=None)

    sell_price = calculate_sell_price(asset, action)
    capital_gain = sell_price - asset.current_value
    tax = 0.0
    if action.capital_gains_tax:
        tax = max(0.0, capital_gain) * assumptions.capital_gains_tax_rate

    remaining = {
        asset_id: summary
        for asset_id, summary in state.assets.items()
        if asset_id != asset.id
    }
    insight = f"Sale of {asset.name} for {_money(sell_price)}"
    if capital_gain > 0:
        insight += f" (capital gain: {_money(capital_gain)})"
    return ActionOutcome(
        state=replace(
            state,
            assets=remaining,
            total_value=state.total_value + capital_gain - tax,
        ),
        insight=insight,
    )


def _apply_buy(
    state: SimulationState,
    action: BuyAction,
    assumptions: ProjectionAssumptions,
) -> ActionOutcome:
    total_debt = state.total_debt
    monthly_expenses = state.monthly_expenses
    financing = action.financing
    if financing.uses_loan:
        loan_amount = financing.loan_amount or action.amount
        total_debt += loan_amount
        monthly_expenses += calculate_monthly_payment(
            loan_amount,
            financing.interest_rate or assumptions.loan_interest_rate,
            financing.duration_months or assumptions.loan_duration_months,
        )
    label = action.asset_name or "new asset"
    return ActionOutcome(
        state=replace(
            state,
            total_value=state.total_value + action.amount,
            total_debt=total_debt,
            monthly_expenses=monthly_expenses,
        ),
        insight=f"Purchase of {label} for {_money(action.amount)}",
    )


def _apply_invest(
    state: SimulationState,
    action: InvestAction,
) -> ActionOutcome:
    return ActionOutcome(
        state=replace(
            state,
            monthly_expenses=state.monthly_expenses + action.monthly_amount,
        ),
        insight=(
            f"Scheduled investment of {_money(action.monthly_amount)}/month"
        ),
    )


def _apply_yield(
    state: SimulationState,
    action: YieldAction,
) -> ActionOutcome:
    monthly_income = state.monthly_income
    if action.target_assets is YieldTarget.ALL:
        monthly_yield = action.yield_percentage / 100 / 12
        monthly_income += state.total_value * monthly_yield
    return ActionOutcome(
        state=replace(state, monthly_income=monthly_income),
        insight=f"Yield of {action.yield_percentage:g}% applied",
    )


def _apply_expense(
    state: SimulationState,
    action: ExpenseAction,
) -> ActionOutcome:
    if action.is_recurring:
        return ActionOutcome(
            state=replace(
                state,
                monthly_expenses=state.monthly_expenses + action.amount,
            ),
            insight=f"New recurring expense of {_money(action.amount)}/month",
        )
    return ActionOutcome(
        state=replace(state, total_value=state.total_value - action.amount),
        insight=f"One-off expense of {_money(action.amount)}",
    )


def _apply_tax(state: SimulationState, action: TaxAction) -> ActionOutcome:
    return ActionOutcome(
        state=replace(state, total_value=state.total_value - action.amount),
        insight=f"Tax impact of {_money(action.amount)}",
    )


def _money(value: float) -> str:
    return f"{value:,.2f} €"


__all__ = [
    "ActionOutcome",
    "apply_action",
    "apply_actions",
    "calculate_sell_price",
    "calculate_monthly_payment",
]
