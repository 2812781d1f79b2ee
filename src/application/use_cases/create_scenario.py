"""Use case to create a what-if scenario from the current patrimony."""

from collections.abc import Iterable

from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.build_patrimony_snapshot import (
    BuildPatrimonySnapshotUseCase,
)
from src.domain.models.records import ActionRecord
from src.domain.models.scenario import Scenario, ScenarioDraft, ScenarioType
from src.domain.services.action_codec import decode_actions
from src.infrastructure.logging.logger import get_app_logger


class CreateScenarioUseCase:
    """Snapshot the patrimony and persist a scenario with its actions."""

    def __init__(
        self,
        repository: ScenarioRepositoryPort,
        snapshot_builder: BuildPatrimonySnapshotUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port persisting scenarios.
            snapshot_builder: Use case capturing the baseline snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._snapshot_builder = snapshot_builder
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        name: str,
        actions: Iterable[ActionRecord] = (),
        scenario_type: ScenarioType = ScenarioType.SIMPLE,
        description: str | None = None,
    ) -> Scenario:
        """Create the scenario.

        Actions are validated before anything is read or written; an action
        without an explicit order takes its position in ``actions``.

        Args:
            user_id: Owner of the scenario.
            name: Scenario name.
            actions: Action records to schedule.
            scenario_type: Simple or complex scenario.
            description: Optional description.

        Returns:
            Scenario: Persisted scenario.

        Raises:
            InvalidActionError: If an action has an unknown type or unusable
                parameters.
        """
        draft = ScenarioDraft(
            name=name,
            scenario_type=scenario_type,
            description=description,
            actions=decode_actions(actions),
        )
        baseline = self._snapshot_builder.execute(user_id)
        scenario = self._repository.create(user_id, draft, baseline)
        self._logger.info(
            f"Scenario '{scenario.name}' created for user={user_id} "
            f"with {len(scenario.actions)} actions"
        )
        return scenario


__all__ = ["CreateScenarioUseCase"]
