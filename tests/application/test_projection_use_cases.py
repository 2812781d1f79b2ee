"""Tests for the snapshot, projection and comparison use cases."""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

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
from src.domain.errors import ScenarioNotFoundError, UnknownTimeHorizonError
from src.domain.models.patrimony import AssetSummary, PatrimonySnapshot
from src.domain.models.records import AssetRecord, EntityRecord
from src.domain.models.scenario import Scenario, ScenarioType, TaxAction

NOW = datetime(2024, 1, 15, 10, 0)


def _clock() -> MagicMock:
    clock = MagicMock()
    clock.now.return_value = NOW
    return clock


def _snapshot(total_value: float = 100000.0) -> PatrimonySnapshot:
    return PatrimonySnapshot(
        assets=(
            AssetSummary(id="a1", type="ETF", name="ETF",
                         current_value=total_value),
        ),
        entities=(),
        total_value=total_value,
        total_debt=0.0,
        net_value=total_value,
        breakdown={"ETF": total_value},
        created_at=NOW,
    )


def _scenario(scenario_id: str, actions=(), is_active: bool = True):
    return Scenario(
        id=scenario_id,
        user_id="u1",
        name=f"Scenario {scenario_id}",
        scenario_type=ScenarioType.SIMPLE,
        baseline=_snapshot(),
        actions=tuple(actions),
        is_active=is_active,
    )


def test_build_snapshot_reads_assets_and_entities() -> None:
    """The snapshot is built from repository rows at the clock time."""
    repository = MagicMock()
    repository.fetch_assets.return_value = [
        AssetRecord(id="a1", name="ETF", asset_type="ETF", latest_value=42.0)
    ]
    repository.fetch_entities.return_value = [
        EntityRecord(id="e1", user_id="u1", name="Me")
    ]
    logger = MagicMock()

    snapshot = BuildPatrimonySnapshotUseCase(
        repository, _clock(), logger=logger
    ).execute("u1")

    repository.fetch_assets.assert_called_once_with("u1")
    repository.fetch_entities.assert_called_once_with("u1")
    assert snapshot.total_value == 42.0
    assert snapshot.created_at == NOW
    logger.info.assert_called_once()


def test_build_snapshot_propagates_store_errors() -> None:
    """Read failures surface unchanged."""
    repository = MagicMock()
    repository.fetch_assets.side_effect = RuntimeError("db down")

    with pytest.raises(RuntimeError, match="db down"):
        BuildPatrimonySnapshotUseCase(
            repository, _clock(), logger=MagicMock()
        ).execute("u1")


def test_calculate_projections_saves_result() -> None:
    """The result is tagged with the scenario and stored."""
    repository = MagicMock()
    repository.get.return_value = _scenario(
        "s1",
        [TaxAction(name="Tax", execution_date=date(2024, 3, 1), amount=500)],
    )
    repository.save_result.side_effect = lambda result: result
    usage_logger = MagicMock()
    use_case = CalculateProjectionsUseCase(
        repository,
        _clock(),
        logger=MagicMock(),
        usage_logger=usage_logger,
    )

    result = use_case.execute("u1", "s1", "6M")

    saved = repository.save_result.call_args.args[0]
    assert saved is result
    assert result.scenario_id == "s1"
    assert result.time_horizon == "6M"
    assert result.calculated_at == NOW
    assert len(result.points) == 7
    assert result.points[0].date == date(2024, 1, 15)
    assert result.insights == ("Tax impact of 500.00 €",)
    usage_logger.info.assert_called_once()


def test_calculate_projections_rejects_unknown_horizon() -> None:
    """Unsupported horizon codes fail before reading the scenario."""
    repository = MagicMock()
    use_case = CalculateProjectionsUseCase(
        repository, _clock(), logger=MagicMock(), usage_logger=MagicMock()
    )

    with pytest.raises(UnknownTimeHorizonError):
        use_case.execute("u1", "s1", "3Y")

    repository.get.assert_not_called()


def test_calculate_projections_for_foreign_scenario() -> None:
    """Projecting someone else's scenario raises not found."""
    repository = MagicMock()
    repository.get.return_value = None
    use_case = CalculateProjectionsUseCase(
        repository, _clock(), logger=MagicMock(), usage_logger=MagicMock()
    )

    with pytest.raises(ScenarioNotFoundError):
        use_case.execute("u1", "missing", "1Y")

    repository.save_result.assert_not_called()


def test_calculate_baseline_projects_fresh_snapshot() -> None:
    """The baseline is not persisted and starts from today's snapshot."""
    snapshot_builder = MagicMock()
    snapshot_builder.execute.return_value = _snapshot()

    result = CalculateBaselineUseCase(snapshot_builder, _clock()).execute(
        "u1", "1Y"
    )

    assert result.points[-1].total_value == pytest.approx(105000)
    assert result.scenario_id is None
    assert result.calculated_at == NOW


def test_compare_scenarios_skips_inactive_ones() -> None:
    """Only active scenarios are projected and compared."""
    repository = MagicMock()
    repository.list_for_user.return_value = [
        _scenario(
            "costly",
            [TaxAction(name="Tax", execution_date=date(2024, 1, 20),
                       amount=30000)],
        ),
        _scenario("paused", is_active=False),
    ]
    snapshot_builder = MagicMock()
    snapshot_builder.execute.return_value = _snapshot()
    baseline = CalculateBaselineUseCase(snapshot_builder, _clock())

    comparison = CompareScenariosUseCase(
        repository, baseline, _clock(), logger=MagicMock()
    ).execute("u1", "1Y")

    assert [o.scenario_id for o in comparison.scenarios] == ["costly"]
    assert comparison.scenarios[0].better_than_baseline is False
    repository.save_result.assert_not_called()


def test_compare_scenarios_idle_scenario_has_no_delta() -> None:
    """A scenario without actions is not reported as beating the baseline."""
    repository = MagicMock()
    repository.list_for_user.return_value = [_scenario("idle")]
    snapshot_builder = MagicMock()
    snapshot_builder.execute.return_value = _snapshot()
    baseline = CalculateBaselineUseCase(snapshot_builder, _clock())

    comparison = CompareScenariosUseCase(
        repository, baseline, _clock(), logger=MagicMock()
    ).execute("u1", "1Y")

    outcome = comparison.scenarios[0]
    assert outcome.better_than_baseline is False
    assert outcome.delta_percentage == pytest.approx(0.0)
