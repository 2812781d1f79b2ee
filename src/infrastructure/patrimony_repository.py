"""SQLAlchemy-backed repository for a user's assets and entities."""

import json
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.patrimony_repository import PatrimonyRepositoryPort
from src.domain.models.records import (
    AssetRecord,
    DebtRecord,
    EntityRecord,
    OwnershipRecord,
)
from src.utils.decimal_utils import coerce_float


USER_ASSET_IDS_SQL = """
    SELECT DISTINCT o.asset_id
    FROM ownerships o
    JOIN entities e ON e.id = o.owner_entity_id
    WHERE e.user_id = :user_id
"""

SELECT_ASSETS_SQL = text(
    f"""
    SELECT a.id AS id,
           a.name AS name,
           t.name AS asset_type,
           a.metadata AS metadata,
           (
               SELECT v.value
               FROM valuations v
               WHERE v.asset_id = a.id
               ORDER BY v.valuation_date DESC
               LIMIT 1
           ) AS latest_value
    FROM assets a
    JOIN asset_types t ON t.id = a.asset_type_id
    WHERE a.id IN ({USER_ASSET_IDS_SQL})
    ORDER BY a.id
    """
)

SELECT_DEBTS_SQL = text(
    f"""
    SELECT d.id AS id,
           d.asset_id AS asset_id,
           d.current_amount AS current_amount,
           d.interest_rate AS interest_rate
    FROM debts d
    WHERE d.asset_id IN ({USER_ASSET_IDS_SQL})
    ORDER BY d.asset_id, d.id
    """
)

SELECT_OWNERSHIPS_SQL = text(
    f"""
    SELECT o.asset_id AS asset_id,
           o.owner_entity_id AS entity_id,
           o.percentage AS percentage
    FROM ownerships o
    WHERE o.asset_id IN ({USER_ASSET_IDS_SQL})
    ORDER BY o.asset_id, o.owner_entity_id
    """
)

SELECT_ENTITIES_SQL = text(
    """
    SELECT id, user_id, name, type AS entity_type
    FROM entities
    WHERE user_id = :user_id
    ORDER BY id
    """
)


class SqlAlchemyPatrimonyRepository(PatrimonyRepositoryPort):
    """Repository reading holdings with SQLAlchemy text queries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
        """
        self._db_port = db_port

    def fetch_assets(self, user_id: str) -> list[AssetRecord]:
        params = {"user_id": user_id}
        engine = self._db_port.get_wealth_engine()
        with engine.connect() as conn:
            asset_rows = conn.execute(SELECT_ASSETS_SQL, params).all()
            debt_rows = conn.execute(SELECT_DEBTS_SQL, params).all()
            ownership_rows = conn.execute(SELECT_OWNERSHIPS_SQL, params).all()

        debts: dict[str, list[DebtRecord]] = {}
        for row in debt_rows:
            debts.setdefault(row.asset_id, []).append(
                DebtRecord(
                    id=row.id,
                    asset_id=row.asset_id,
                    current_amount=coerce_float(row.current_amount),
                    interest_rate=coerce_float(row.interest_rate),
                )
            )
        ownerships: dict[str, list[OwnershipRecord]] = {}
        for row in ownership_rows:
            ownerships.setdefault(row.asset_id, []).append(
                OwnershipRecord(
                    entity_id=row.entity_id,
                    percentage=coerce_float(row.percentage),
                )
            )
        return [
            AssetRecord(
                id=row.id,
                name=row.name,
                asset_type=row.asset_type,
                latest_value=(
                    None
                    if row.latest_value is None
                    else coerce_float(row.latest_value)
                ),
                debts=debts.get(row.id, []),
                ownerships=ownerships.get(row.id, []),
                metadata=self._decode_metadata(row.metadata),
            )
            for row in asset_rows
        ]

    def fetch_entities(self, user_id: str) -> list[EntityRecord]:
        engine = self._db_port.get_wealth_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ENTITIES_SQL, {"user_id": user_id}).all()
        return [
            EntityRecord(
                id=row.id,
                user_id=row.user_id,
                name=row.name,
                entity_type=row.entity_type,
            )
            for row in rows
        ]

    @staticmethod
    def _decode_metadata(value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if isinstance(value, str):
            return json.loads(value) if value else {}
        return dict(value)


__all__ = ["SqlAlchemyPatrimonyRepository"]
