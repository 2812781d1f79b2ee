"""Convert stored action records into typed scenario actions and back."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from src.domain.errors import InvalidActionError
from src.domain.models.records import ActionRecord
from src.domain.models.scenario import (
    ActionType,
    BuyAction,
    ExpenseAction,
    Financing,
    FinancingKind,
    InvestAction,
    ScenarioAction,
    SellAction,
    SellPriceMode,
    TaxAction,
    YieldAction,
    YieldTarget,
)
from src.utils.decimal_utils import coerce_float


def decode_action(record: ActionRecord, index: int = 0) -> ScenarioAction:
    """Build the typed action described by a stored record.

    Args:
        record: Stored action with its type tag and parameters.
        index: Position in the submitted list, used when ``order`` is unset.

    Returns:
        ScenarioAction: Typed action.

    Raises:
        InvalidActionError: If the type is unknown or a parameter is unusable.
    """
    try:
        action_type = ActionType(str(record.type).upper())
    except ValueError as exc:
        raise InvalidActionError(
            f"Unknown action type '{record.type}' for action '{record.name}'"
        ) from exc

    params = record.parameters or {}
    common = {
        "name": record.name,
        "execution_date": _to_date(record.execution_date, record.name),
        "order": record.order if record.order is not None else index,
        "amount": _number(record.amount, "amount", record.name),
        "target_asset_id": record.target_asset_id,
        "asset_type": record.asset_type,
    }
    try:
        if action_type is ActionType.SELL:
            return SellAction(
                **common,
                price_mode=SellPriceMode(
                    params.get("sellPriceType") or SellPriceMode.MARKET.value
                ),
                sell_price=_optional_number(params, "sellPrice", record.name),
                capital_gains_tax=bool(params.get("capitalGainsTax", False)),
            )
        if action_type is ActionType.BUY:
            details = params.get("assetDetails") or {}
            return BuyAction(
                **common,
                financing=_decode_financing(
                    params.get("financing"),
                    record.name,
                ),
                asset_name=details.get("name"),
            )
        if action_type is ActionType.INVEST:
            return InvestAction(
                **common,
                monthly_amount=_optional_number(
                    params,
                    "monthlyAmount",
                    record.name,
                ) or 0.0,
            )
        if action_type is ActionType.YIELD:
            target = params.get("targetAssets")
            return YieldAction(
                **common,
                yield_percentage=_optional_number(
                    params,
                    "yieldPercentage",
                    record.name,
                ) or 0.0,
                target_assets=YieldTarget(target) if target else None,
            )
        if action_type is ActionType.EXPENSE:
            return ExpenseAction(
                **common,
                is_recurring=bool(params.get("isRecurring", False)),
            )
        return TaxAction(**common)
    except ValueError as exc:
        if isinstance(exc, InvalidActionError):
            raise
        raise InvalidActionError(
            f"Invalid parameters for action '{record.name}': {exc}"
        ) from exc


def decode_actions(records: Iterable[ActionRecord]) -> tuple[ScenarioAction, ...]:
    """Decode records, defaulting each order to its list position."""
    return tuple(
        decode_action(record, index) for index, record in enumerate(records)
    )


def encode_action(action: ScenarioAction) -> ActionRecord:
    """Return the stored form of a typed action."""
    return ActionRecord(
        type=action.action_type.value,
        name=action.name,
        execution_date=action.execution_date,
        amount=action.amount,
        parameters=_encode_parameters(action),
        order=action.order,
        target_asset_id=action.target_asset_id,
        asset_type=action.asset_type,
    )


def _encode_parameters(action: ScenarioAction) -> dict[str, Any]:
    if isinstance(action, SellAction):
        params: dict[str, Any] = {
            "sellPriceType": action.price_mode.value,
            "capitalGainsTax": action.capital_gains_tax,
        }
        if action.sell_price is not None:
            params["sellPrice"] = action.sell_price
        return params
    if isinstance(action, BuyAction):
        financing = action.financing
        params = {
            "financing": _drop_none(
                {
                    "type": financing.kind.value,
                    "loanAmount": financing.loan_amount,
                    "interestRate": financing.interest_rate,
                    "duration": financing.duration_months,
                }
            )
        }
        if action.asset_name:
            params["assetDetails"] = {"name": action.asset_name}
        return params
    if isinstance(action, InvestAction):
        return {"monthlyAmount": action.monthly_amount}
    if isinstance(action, YieldAction):
        params = {"yieldPercentage": action.yield_percentage}
        if action.target_assets is not None:
            params["targetAssets"] = action.target_assets.value
        return params
    if isinstance(action, ExpenseAction):
        return {"isRecurring": action.is_recurring}
    return {}


def _decode_financing(raw: Mapping[str, Any] | None, name: str) -> Financing:
    if not raw:
        return Financing()
    duration = raw.get("duration")
    return Financing(
        kind=FinancingKind(raw.get("type") or FinancingKind.CASH.value),
        loan_amount=_optional_number(raw, "loanAmount", name),
        interest_rate=_optional_number(raw, "interestRate", name),
        duration_months=int(duration) if duration else None,
    )


def _optional_number(
    params: Mapping[str, Any],
    key: str,
    name: str,
) -> float | None:
    value = params.get(key)
    if value is None:
        return None
    return _number(value, key, name)


def _number(value: Any, key: str, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidActionError(f"'{key}' of action '{name}' is not numeric")
    try:
        return coerce_float(value)
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise InvalidActionError(
            f"'{key}' of action '{name}' is not numeric: {value!r}"
        ) from exc


def _to_date(value: Any, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError as exc:
            raise InvalidActionError(
                f"Invalid execution date for action '{name}': {value}"
            ) from exc
    raise InvalidActionError(f"Missing execution date for action '{name}'")


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


__all__ = ["decode_action", "decode_actions", "encode_action"]
