"""SQLAlchemy-backed storage for scenarios, actions and projection results."""

import json
import uuid
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.scenario_repository import ScenarioRepositoryPort
from src.domain.models.patrimony import PatrimonySnapshot
from src.domain.models.projection import ProjectionResult
from src.domain.models.records import ActionRecord
from src.domain.models.scenario import (
    Scenario,
    ScenarioAction,
    ScenarioChanges,
    ScenarioDraft,
    ScenarioType,
)
from src.domain.services.action_codec import decode_action, encode_action
from src.infrastructure.serialization import (
    metrics_to_dict,
    points_to_list,
    snapshot_from_dict,
    snapshot_to_dict,
)


INSERT_SCENARIO_SQL = text(
    """
    INSERT INTO projection_scenarios (
        id, user_id, name, description, type,
        baseline_snapshot, is_active, created_at
    )
    VALUES (
        :id, :user_id, :name, :description, :type,
        :baseline_snapshot, :is_active, :created_at
    )
    """
)

INSERT_ACTION_SQL = text(
    """
    INSERT INTO projection_actions (
        id, scenario_id, type, name, execution_date, target_asset_id,
        asset_type, amount, parameters, action_order
    )
    VALUES (
        :id, :scenario_id, :type, :name, :execution_date, :target_asset_id,
        :asset_type, :amount, :parameters, :action_order
    )
    """
)

SELECT_SCENARIO_SQL = text(
    """
    SELECT id, user_id, name, description, type, baseline_snapshot,
           is_active, created_at
    FROM projection_scenarios
    WHERE id = :scenario_id
    """
)

SELECT_USER_SCENARIOS_SQL = text(
    """
    SELECT id, user_id, name, description, type, baseline_snapshot,
           is_active, created_at
    FROM projection_scenarios
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    """
)

SELECT_ACTIONS_SQL = text(
    """
    SELECT id, scenario_id, type, name, execution_date, target_asset_id,
           asset_type, amount, parameters, action_order
    FROM projection_actions
    WHERE scenario_id = :scenario_id
    ORDER BY action_order ASC
    """
)

SELECT_USER_ACTIONS_SQL = text(
    """
    SELECT a.id, a.scenario_id, a.type, a.name, a.execution_date,
           a.target_asset_id, a.asset_type, a.amount, a.parameters,
           a.action_order
    FROM projection_actions a
    JOIN projection_scenarios s ON s.id = a.scenario_id
    WHERE s.user_id = :user_id
    ORDER BY a.scenario_id, a.action_order ASC
    """
)

UPDATE_SCENARIO_SQL = text(
    """
    UPDATE projection_scenarios
    SET name = COALESCE(:name, name),
        description = COALESCE(:description, description),
        is_active = COALESCE(:is_active, is_active)
    WHERE id = :scenario_id
    """
)

DELETE_ACTIONS_SQL = text(
    "DELETE FROM projection_actions WHERE scenario_id = :scenario_id"
)
DELETE_RESULTS_SQL = text(
    "DELETE FROM projection_results WHERE scenario_id = :scenario_id"
)
DELETE_SCENARIO_SQL = text(
    "DELETE FROM projection_scenarios WHERE id = :scenario_id"
)

UPSERT_RESULT_SQL = text(
    """
    INSERT INTO projection_results (
        id, scenario_id, time_horizon, projection_data, metrics,
        insights, calculated_at
    )
    VALUES (
        :id, :scenario_id, :time_horizon, :projection_data, :metrics,
        :insights, :calculated_at
    )
    ON CONFLICT (scenario_id, time_horizon) DO UPDATE
    SET projection_data = EXCLUDED.projection_data,
        metrics = EXCLUDED.metrics,
        insights = EXCLUDED.insights,
        calculated_at = EXCLUDED.calculated_at
    """
)


class SqlAlchemyScenarioRepository(ScenarioRepositoryPort):
    """Scenario store backed by SQLAlchemy text statements.

    Snapshots, action parameters, projection points, metrics and insights are
    stored as JSON text. Every write runs in a single transaction.
    """

    def __init__(self, db_port: DatabaseEnginePort, clock=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
            clock: Optional callable returning the creation timestamp.
        """
        self._db_port = db_port
        self._clock = clock or datetime.now

    def create(
        self,
        user_id: str,
        draft: ScenarioDraft,
        baseline: PatrimonySnapshot,
    ) -> Scenario:
        scenario_id = str(uuid.uuid4())
        engine = self._db_port.get_wealth_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_SCENARIO_SQL,
                {
                    "id": scenario_id,
                    "user_id": user_id,
                    "name": draft.name,
                    "description": draft.description,
                    "type": draft.scenario_type.value,
                    "baseline_snapshot": json.dumps(snapshot_to_dict(baseline)),
                    "is_active": True,
                    "created_at": self._clock(),
                },
            )
            self._insert_actions(conn, scenario_id, draft.actions)
        return self._require(scenario_id)

    def list_for_user(self, user_id: str) -> list[Scenario]:
        engine = self._db_port.get_wealth_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_USER_SCENARIOS_SQL,
                {"user_id": user_id},
            ).all()
            action_rows = conn.execute(
                SELECT_USER_ACTIONS_SQL,
                {"user_id": user_id},
            ).all()
        actions: dict[str, list[Any]] = {}
        for action_row in action_rows:
            actions.setdefault(action_row.scenario_id, []).append(action_row)
        return [
            self._to_scenario(row, actions.get(row.id, [])) for row in rows
        ]

    def get(self, scenario_id: str) -> Scenario | None:
        params = {"scenario_id": scenario_id}
        engine = self._db_port.get_wealth_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_SCENARIO_SQL, params).first()
            if row is None:
                return None
            action_rows = conn.execute(SELECT_ACTIONS_SQL, params).all()
        return self._to_scenario(row, action_rows)

    def update(self, scenario_id: str, changes: ScenarioChanges) -> Scenario:
        params = {"scenario_id": scenario_id}
        engine = self._db_port.get_wealth_engine()
        with engine.begin() as conn:
            if changes.actions is not None:
                conn.execute(DELETE_ACTIONS_SQL, params)
                self._insert_actions(conn, scenario_id, changes.actions)
            conn.execute(
                UPDATE_SCENARIO_SQL,
                {
                    **params,
                    "name": changes.name,
                    "description": changes.description,
                    "is_active": changes.is_active,
                },
            )
        return self._require(scenario_id)

    def delete(self, scenario_id: str) -> None:
        params = {"scenario_id": scenario_id}
        engine = self._db_port.get_wealth_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_RESULTS_SQL, params)
            conn.execute(DELETE_ACTIONS_SQL, params)
            conn.execute(DELETE_SCENARIO_SQL, params)

    def save_result(self, result: ProjectionResult) -> ProjectionResult:
        engine = self._db_port.get_wealth_engine()
        with engine.begin() as conn:
            conn.execute(
                UPSERT_RESULT_SQL,
                {
                    "id": str(uuid.uuid4()),
                    "scenario_id": result.scenario_id,
                    "time_horizon": result.time_horizon,
                    "projection_data": json.dumps(points_to_list(result.points)),
                    "metrics": json.dumps(metrics_to_dict(result.metrics)),
                    "insights": json.dumps(list(result.insights)),
                    "calculated_at": result.calculated_at or self._clock(),
                },
            )
        return result

    def _require(self, scenario_id: str) -> Scenario:
        scenario = self.get(scenario_id)
        if scenario is None:
            raise RuntimeError(f"Scenario {scenario_id} vanished after write")
        return scenario

    @staticmethod
    def _insert_actions(
        conn,
        scenario_id: str,
        actions: Iterable[ScenarioAction],
    ) -> None:
        rows = []
        for action in actions:
            record = encode_action(action)
            rows.append(
                {
                    "id": str(uuid.uuid4()),
                    "scenario_id": scenario_id,
                    "type": record.type,
                    "name": record.name,
                    "execution_date": record.execution_date,
                    "target_asset_id": record.target_asset_id,
                    "asset_type": record.asset_type,
                    "amount": record.amount,
                    "parameters": json.dumps(record.parameters),
                    "action_order": record.order,
                }
            )
        if rows:
            conn.execute(INSERT_ACTION_SQL, rows)

    @staticmethod
    def _to_scenario(row, action_rows: Iterable[Any]) -> Scenario:
        actions = tuple(
            decode_action(
                ActionRecord(
                    id=action_row.id,
                    type=action_row.type,
                    name=action_row.name,
                    execution_date=action_row.execution_date,
                    amount=action_row.amount,
                    parameters=_load_json(action_row.parameters) or {},
                    order=action_row.action_order,
                    target_asset_id=action_row.target_asset_id,
                    asset_type=action_row.asset_type,
                ),
                index,
            )
            for index, action_row in enumerate(action_rows)
        )
        return Scenario(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            description=row.description,
            scenario_type=ScenarioType(row.type),
            baseline=snapshot_from_dict(_load_json(row.baseline_snapshot)),
            actions=actions,
            is_active=bool(row.is_active),
            created_at=row.created_at,
        )


def _load_json(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return value


__all__ = ["SqlAlchemyScenarioRepository"]
