"""Composition root for wiring infrastructure adapters."""

from src.application.ports.computation_cache import ComputationCachePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.patrimony_repository import PatrimonyRepositoryPort
from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.build_patrimony_snapshot import (
    BuildPatrimonySnapshotUseCase,
)
from src.application.use_cases.calculate_baseline import (
    CalculateBaselineUseCase,
)
from src.application.use_cases.calculate_projections import (
    CalculateProjectionsUseCase,
)
from src.application.use_cases.compare_scenarios import (
    CompareScenariosUseCase,
)
from src.application.use_cases.compute_reports import ComputeReportsUseCase
from src.infrastructure.clock import SystemClock
from src.infrastructure.computation_cache import ComputationCache
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.patrimony_repository import (
    SqlAlchemyPatrimonyRepository,
)
from src.infrastructure.scenario_repository import (
    SqlAlchemyScenarioRepository,
)
from src.infrastructure.settings import ProjectionSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_patrimony_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PatrimonyRepositoryPort:
    """Return the repository reading assets and entities."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPatrimonyRepository(resolved_db)


def build_scenario_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ScenarioRepositoryPort:
    """Return the repository storing scenarios and projection results."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyScenarioRepository(resolved_db)


def build_computation_cache(
    settings: ProjectionSettings | None = None,
) -> ComputationCachePort:
    """Return a report cache sized from the settings."""
    resolved = settings or ProjectionSettings.from_env()
    return ComputationCache(
        ttl_seconds=resolved.cache_ttl_seconds,
        max_size=resolved.cache_max_size,
        logger=get_app_logger(),
    )


def build_snapshot_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> BuildPatrimonySnapshotUseCase:
    """Return the use case capturing the current patrimony."""
    return BuildPatrimonySnapshotUseCase(
        build_patrimony_repository(db_port),
        SystemClock(),
        logger=get_app_logger(),
    )


def build_baseline_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ProjectionSettings | None = None,
) -> CalculateBaselineUseCase:
    """Return the baseline projection use case."""
    resolved = settings or ProjectionSettings.from_env()
    return CalculateBaselineUseCase(
        build_snapshot_use_case(db_port),
        SystemClock(),
        resolved.assumptions,
    )


def build_projection_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ProjectionSettings | None = None,
) -> CalculateProjectionsUseCase:
    """Return the scenario projection use case."""
    resolved = settings or ProjectionSettings.from_env()
    return CalculateProjectionsUseCase(
        build_scenario_repository(db_port),
        SystemClock(),
        resolved.assumptions,
        logger=get_app_logger(),
    )


def build_compare_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ProjectionSettings | None = None,
) -> CompareScenariosUseCase:
    """Return the use case comparing active scenarios to the baseline."""
    resolved_db = db_port or build_database_adapter()
    resolved = settings or ProjectionSettings.from_env()
    return CompareScenariosUseCase(
        build_scenario_repository(resolved_db),
        build_baseline_use_case(resolved_db, resolved),
        SystemClock(),
        resolved.assumptions,
        logger=get_app_logger(),
    )


def build_reports_use_case(
    cache: ComputationCachePort | None = None,
) -> ComputeReportsUseCase:
    """Return the cached report use case."""
    return ComputeReportsUseCase(cache or build_computation_cache())


__all__ = [
    "build_database_adapter",
    "build_patrimony_repository",
    "build_scenario_repository",
    "build_computation_cache",
    "build_snapshot_use_case",
    "build_baseline_use_case",
    "build_projection_use_case",
    "build_compare_use_case",
    "build_reports_use_case",
]
