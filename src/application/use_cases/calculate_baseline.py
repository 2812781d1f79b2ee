"""Use case to project the current patrimony without any scenario."""

from dataclasses import replace

from src.application.ports.clock import ClockPort
from src.application.use_cases.build_patrimony_snapshot import (
    BuildPatrimonySnapshotUseCase,
)
from src.domain.models.projection import (
    ProjectionAssumptions,
    ProjectionResult,
    resolve_time_horizon,
)
from src.domain.services.projection import project_baseline


class CalculateBaselineUseCase:
    """Project a freshly built snapshot with growth and debt inflation only."""

    def __init__(
        self,
        snapshot_builder: BuildPatrimonySnapshotUseCase,
        clock: ClockPort,
        assumptions: ProjectionAssumptions | None = None,
    ) -> None:
        self._snapshot_builder = snapshot_builder
        self._clock = clock
        self._assumptions = assumptions or ProjectionAssumptions()

    def execute(self, user_id: str, time_horizon: str) -> ProjectionResult:
        """Return the baseline projection; nothing is persisted.

        Raises:
            UnknownTimeHorizonError: If the horizon code is not supported.
        """
        horizon = resolve_time_horizon(time_horizon)
        snapshot = self._snapshot_builder.execute(user_id)
        now = self._clock.now()
        result = project_baseline(
            snapshot,
            horizon,
            now.date(),
            self._assumptions,
        )
        return replace(result, calculated_at=now)


__all__ = ["CalculateBaselineUseCase"]
