"""Use case to project a scenario and persist the result."""

from dataclasses import replace

from src.application.ports.clock import ClockPort
from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.get_scenario import GetScenarioUseCase
from src.domain.models.projection import (
    ProjectionAssumptions,
    ProjectionResult,
    resolve_time_horizon,
)
from src.domain.services.projection import project_scenario
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class CalculateProjectionsUseCase:
    """Run the monthly simulation of a scenario over a time horizon."""

    def __init__(
        self,
        repository: ScenarioRepositoryPort,
        clock: ClockPort,
        assumptions: ProjectionAssumptions | None = None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port loading scenarios and saving results.
            clock: Port providing the simulation start date.
            assumptions: Growth, tax and loan assumptions.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording projection runs.
        """
        self._repository = repository
        self._get_scenario = GetScenarioUseCase(repository)
        self._clock = clock
        self._assumptions = assumptions or ProjectionAssumptions()
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        user_id: str,
        scenario_id: str,
        time_horizon: str,
    ) -> ProjectionResult:
        """Project the scenario and store the result.

        Args:
            user_id: Owner of the scenario.
            scenario_id: Scenario to project.
            time_horizon: Horizon code (1M, 6M, 1Y, 5Y, 10Y).

        Returns:
            ProjectionResult: Saved points, metrics and insights.

        Raises:
            UnknownTimeHorizonError: If the horizon code is not supported.
            ScenarioNotFoundError: If the scenario is missing or foreign.
        """
        horizon = resolve_time_horizon(time_horizon)
        scenario = self._get_scenario.execute(user_id, scenario_id)
        now = self._clock.now()
        result = project_scenario(
            scenario.baseline,
            scenario.ordered_actions(),
            horizon,
            now.date(),
            self._assumptions,
        )
        result = replace(result, scenario_id=scenario.id, calculated_at=now)
        saved = self._repository.save_result(result)
        self._logger.info(
            f"Scenario {scenario_id} projected over {horizon.code}: "
            f"final={result.metrics.final_value:.2f}, "
            f"insights={len(result.insights)}"
        )
        self._usage_logger.info(
            f"projection user={user_id} scenario={scenario_id} "
            f"horizon={horizon.code}"
        )
        return saved


__all__ = ["CalculateProjectionsUseCase"]
