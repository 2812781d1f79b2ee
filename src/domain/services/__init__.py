"""Domain services package."""

from .action_codec import decode_action, decode_actions, encode_action
from .actions import (
    ActionOutcome,
    apply_action,
    apply_actions,
    calculate_monthly_payment,
    calculate_sell_price,
)
from .dates import add_months, same_month
from .metrics import compute_projection_metrics, monthly_returns
from .projection import (
    apply_growth,
    compare_to_baseline,
    initial_state,
    project_baseline,
    project_scenario,
)
from .reports import (
    compute_asset_type_distribution,
    compute_growth_projections,
    compute_liquidity_analysis,
    compute_stress_test_results,
)
from .snapshot import build_patrimony_snapshot, compute_breakdown

__all__ = [
    "decode_action",
    "decode_actions",
    "encode_action",
    "ActionOutcome",
    "apply_action",
    "apply_actions",
    "calculate_monthly_payment",
    "calculate_sell_price",
    "add_months",
    "same_month",
    "compute_projection_metrics",
    "monthly_returns",
    "apply_growth",
    "compare_to_baseline",
    "initial_state",
    "project_baseline",
    "project_scenario",
    "compute_asset_type_distribution",
    "compute_growth_projections",
    "compute_liquidity_analysis",
    "compute_stress_test_results",
    "build_patrimony_snapshot",
    "compute_breakdown",
]
