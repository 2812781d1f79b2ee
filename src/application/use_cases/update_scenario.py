"""Use case to update a scenario."""

from collections.abc import Iterable

from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.get_scenario import GetScenarioUseCase
from src.domain.models.records import ActionRecord
from src.domain.models.scenario import Scenario, ScenarioChanges
from src.domain.services.action_codec import decode_actions
from src.infrastructure.logging.logger import get_app_logger


class UpdateScenarioUseCase:
    """Replace a scenario's fields and, optionally, its whole action list."""

    def __init__(self, repository: ScenarioRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._get_scenario = GetScenarioUseCase(repository)
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        scenario_id: str,
        name: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
        actions: Iterable[ActionRecord] | None = None,
    ) -> Scenario:
        """Update the scenario after checking ownership.

        Raises:
            ScenarioNotFoundError: If the scenario is missing or foreign.
            InvalidActionError: If a replacement action is invalid.
        """
        changes = ScenarioChanges(
            name=name,
            description=description,
            is_active=is_active,
            actions=decode_actions(actions) if actions is not None else None,
        )
        self._get_scenario.execute(user_id, scenario_id)
        scenario = self._repository.update(scenario_id, changes)
        if changes.actions is not None:
            self._logger.info(
                f"Scenario {scenario_id} actions replaced "
                f"({len(changes.actions)} actions)"
            )
        return scenario


__all__ = ["UpdateScenarioUseCase"]
