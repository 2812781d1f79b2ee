"""Use case to delete a scenario."""

from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.get_scenario import GetScenarioUseCase
from src.infrastructure.logging.logger import get_app_logger


class DeleteScenarioUseCase:
    """Delete a scenario owned by the user."""

    def __init__(self, repository: ScenarioRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._get_scenario = GetScenarioUseCase(repository)
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, scenario_id: str) -> None:
        """Delete the scenario.

        Raises:
            ScenarioNotFoundError: If the scenario is missing or foreign.
        """
        self._get_scenario.execute(user_id, scenario_id)
        self._repository.delete(scenario_id)
        self._logger.info(f"Scenario {scenario_id} deleted")


__all__ = ["DeleteScenarioUseCase"]
