"""CLI adapter to project a user's patrimony over a time horizon.

The user comes from ``PROJECTION_USER_ID``. When ``PROJECTION_SCENARIO_ID``
is set the stored scenario is projected and its result saved; otherwise the
baseline of the current holdings is projected.
"""

import os

import dotenv

from src.domain.models.projection import ProjectionResult
from src.infrastructure.container import (
    build_baseline_use_case,
    build_database_adapter,
    build_projection_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ProjectionSettings


def _format_summary(label: str, result: ProjectionResult) -> str:
    metrics = result.metrics
    lines = [
        f"{label}: {len(result.points)} points",
        f"  initial value: {metrics.initial_value:,.2f}",
        f"  final value: {metrics.final_value:,.2f}",
        f"  total return: {metrics.total_return_percentage:.2f}%",
        f"  max drawdown: {metrics.max_drawdown:.2f}%",
    ]
    if metrics.sharpe_ratio is not None:
        lines.append(f"  sharpe ratio: {metrics.sharpe_ratio:.2f}")
    lines.extend(f"  - {insight}" for insight in result.insights)
    return "\n".join(lines)


def main() -> None:
    """Run the baseline or scenario projection and print a summary."""
    dotenv.load_dotenv()
    logger = get_app_logger()
    user_id = os.getenv("PROJECTION_USER_ID")
    if not user_id:
        raise RuntimeError("Missing environment variable: PROJECTION_USER_ID")
    horizon = os.getenv("PROJECTION_HORIZON", "1Y").strip().upper()
    scenario_id = os.getenv("PROJECTION_SCENARIO_ID")

    db_adapter = build_database_adapter()
    settings = ProjectionSettings.from_env()
    if scenario_id:
        use_case = build_projection_use_case(db_adapter, settings)
        result = use_case.execute(user_id, scenario_id, horizon)
        label = f"Scenario {scenario_id} over {horizon}"
    else:
        use_case = build_baseline_use_case(db_adapter, settings)
        result = use_case.execute(user_id, horizon)
        label = f"Baseline over {horizon}"
    logger.info(f"Projection CLI finished for user={user_id} ({label})")

    print(_format_summary(label, result))


if __name__ == "__main__":  # pragma: no cover
    main()
