"""Port for persisting scenarios, their actions and projection results."""

from typing import Protocol

from src.domain.models.patrimony import PatrimonySnapshot
from src.domain.models.projection import ProjectionResult
from src.domain.models.scenario import Scenario, ScenarioChanges, ScenarioDraft


class ScenarioRepositoryPort(Protocol):
    """Port exposing scenario storage.

    Reads are expected to be consistent immediately after writes.
    """

    def create(
        self,
        user_id: str,
        draft: ScenarioDraft,
        baseline: PatrimonySnapshot,
    ) -> Scenario:
        """Persist a scenario with its baseline snapshot and actions."""

    def list_for_user(self, user_id: str) -> list[Scenario]:
        """Return the user's scenarios, newest first."""

    def get(self, scenario_id: str) -> Scenario | None:
        """Return a scenario with actions in ascending order, or None."""

    def update(self, scenario_id: str, changes: ScenarioChanges) -> Scenario:
        """Apply changes; supplied actions replace the whole action list."""

    def delete(self, scenario_id: str) -> None:
        """Delete a scenario, its actions and results."""

    def save_result(self, result: ProjectionResult) -> ProjectionResult:
        """Insert or replace the result for its scenario and horizon."""


__all__ = ["ScenarioRepositoryPort"]
