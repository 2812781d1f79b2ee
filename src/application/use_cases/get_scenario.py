"""Use cases to read a user's scenarios."""

from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.domain.errors import ScenarioNotFoundError
from src.domain.models.scenario import Scenario


class GetScenarioUseCase:
    """Return one scenario owned by the user."""

    def __init__(self, repository: ScenarioRepositoryPort) -> None:
        self._repository = repository

    def execute(self, user_id: str, scenario_id: str) -> Scenario:
        """Return the scenario with its actions in ascending order.

        Raises:
            ScenarioNotFoundError: If the scenario is missing or owned by
                another user.
        """
        scenario = self._repository.get(scenario_id)
        if scenario is None or scenario.user_id != user_id:
            raise ScenarioNotFoundError(scenario_id)
        return scenario


class ListScenariosUseCase:
    """Return every scenario of a user, newest first."""

    def __init__(self, repository: ScenarioRepositoryPort) -> None:
        self._repository = repository

    def execute(self, user_id: str) -> list[Scenario]:
        return self._repository.list_for_user(user_id)


__all__ = ["GetScenarioUseCase", "ListScenariosUseCase"]
