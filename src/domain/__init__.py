"""Domain package for business rules and core models."""

from .errors import (
    EmptyProjectionError,
    InvalidActionError,
    ScenarioNotFoundError,
    UnknownTimeHorizonError,
)
from .models import (
    PatrimonySnapshot,
    ProjectionAssumptions,
    ProjectionResult,
    Scenario,
    ScenarioAction,
)
from .services import (
    apply_action,
    build_patrimony_snapshot,
    compute_projection_metrics,
    project_baseline,
    project_scenario,
)

__all__ = [
    "EmptyProjectionError",
    "InvalidActionError",
    "ScenarioNotFoundError",
    "UnknownTimeHorizonError",
    "PatrimonySnapshot",
    "ProjectionAssumptions",
    "ProjectionResult",
    "Scenario",
    "ScenarioAction",
    "apply_action",
    "build_patrimony_snapshot",
    "compute_projection_metrics",
    "project_baseline",
    "project_scenario",
]
