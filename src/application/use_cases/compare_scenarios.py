"""Use case to compare active scenarios against the baseline projection."""

from dataclasses import replace

from src.application.ports.clock import ClockPort
from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.application.use_cases.calculate_baseline import (
    CalculateBaselineUseCase,
)
from src.domain.models.projection import (
    ProjectionAssumptions,
    ScenarioComparison,
    resolve_time_horizon,
)
from src.domain.services.projection import (
    compare_to_baseline,
    project_scenario,
)
from src.infrastructure.logging.logger import get_app_logger


class CompareScenariosUseCase:
    """Project the baseline and every active scenario over one horizon."""

    def __init__(
        self,
        repository: ScenarioRepositoryPort,
        baseline: CalculateBaselineUseCase,
        clock: ClockPort,
        assumptions: ProjectionAssumptions | None = None,
        logger=None,
    ) -> None:
        self._repository = repository
        self._baseline = baseline
        self._clock = clock
        self._assumptions = assumptions or ProjectionAssumptions()
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, time_horizon: str) -> ScenarioComparison:
        """Return the baseline with each active scenario ranked against it.

        Scenario results are computed in memory and not persisted.
        """
        horizon = resolve_time_horizon(time_horizon)
        baseline = self._baseline.execute(user_id, horizon.code)
        now = self._clock.now()
        scenario_results = []
        for scenario in self._repository.list_for_user(user_id):
            if not scenario.is_active:
                continue
            result = project_scenario(
                scenario.baseline,
                scenario.ordered_actions(),
                horizon,
                now.date(),
                self._assumptions,
            )
            scenario_results.append(
                (
                    scenario,
                    replace(result, scenario_id=scenario.id, calculated_at=now),
                )
            )
        comparison = compare_to_baseline(
            baseline,
            scenario_results,
            self._assumptions,
        )
        better = sum(
            1 for outcome in comparison.scenarios if outcome.better_than_baseline
        )
        self._logger.info(
            f"Compared {len(comparison.scenarios)} scenarios over "
            f"{horizon.code}: {better} beat the baseline"
        )
        return comparison


__all__ = ["CompareScenariosUseCase"]
