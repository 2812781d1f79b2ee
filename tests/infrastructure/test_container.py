"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.calculate_baseline import (
    CalculateBaselineUseCase,
)
from src.application.use_cases.compare_scenarios import (
    CompareScenariosUseCase,
)
from src.application.use_cases.compute_reports import ComputeReportsUseCase
from src.domain.models.projection import ProjectionAssumptions
from src.infrastructure import container
from src.infrastructure.computation_cache import ComputationCache
from src.infrastructure.patrimony_repository import (
    SqlAlchemyPatrimonyRepository,
)
from src.infrastructure.scenario_repository import (
    SqlAlchemyScenarioRepository,
)
from src.infrastructure.settings import ProjectionSettings


def test_repositories_share_the_given_database_port() -> None:
    """Builders wrap the provided database port."""
    db_port = MagicMock()

    patrimony = container.build_patrimony_repository(db_port)
    scenarios = container.build_scenario_repository(db_port)

    assert isinstance(patrimony, SqlAlchemyPatrimonyRepository)
    assert isinstance(scenarios, SqlAlchemyScenarioRepository)
    assert patrimony._db_port is db_port
    assert scenarios._db_port is db_port


def test_cache_uses_settings(monkeypatch) -> None:
    """Cache sizing comes from the settings."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    settings = ProjectionSettings(cache_ttl_seconds=5, cache_max_size=7)

    cache = container.build_computation_cache(settings)

    assert isinstance(cache, ComputationCache)
    assert cache._ttl == 5
    assert cache._max_size == 7
    assert isinstance(container.build_reports_use_case(cache),
                      ComputeReportsUseCase)


def test_projection_use_cases_receive_assumptions(monkeypatch) -> None:
    """Configured assumptions flow into the projection use cases."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    assumptions = ProjectionAssumptions(growth_rate=0.1)
    settings = ProjectionSettings(assumptions=assumptions)

    baseline = container.build_baseline_use_case(MagicMock(), settings)
    compare = container.build_compare_use_case(MagicMock(), settings)

    assert isinstance(baseline, CalculateBaselineUseCase)
    assert baseline._assumptions is assumptions
    assert isinstance(compare, CompareScenariosUseCase)
    assert compare._assumptions is assumptions
