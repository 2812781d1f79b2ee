"""Application use cases package."""

from .build_patrimony_snapshot import BuildPatrimonySnapshotUseCase
from .calculate_baseline import CalculateBaselineUseCase
from .calculate_projections import CalculateProjectionsUseCase
from .compare_scenarios import CompareScenariosUseCase
from .compute_reports import ComputeReportsUseCase
from .create_scenario import CreateScenarioUseCase
from .delete_scenario import DeleteScenarioUseCase
from .get_scenario import GetScenarioUseCase, ListScenariosUseCase
from .update_scenario import UpdateScenarioUseCase

__all__ = [
    "BuildPatrimonySnapshotUseCase",
    "CalculateBaselineUseCase",
    "CalculateProjectionsUseCase",
    "CompareScenariosUseCase",
    "ComputeReportsUseCase",
    "CreateScenarioUseCase",
    "DeleteScenarioUseCase",
    "GetScenarioUseCase",
    "ListScenariosUseCase",
    "UpdateScenarioUseCase",
]
