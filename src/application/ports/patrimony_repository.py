"""Port for reading a user's holdings from the record store."""

from typing import Protocol

from src.domain.models.records import AssetRecord, EntityRecord


class PatrimonyRepositoryPort(Protocol):
    """Port exposing read access to assets and entities."""

    def fetch_assets(self, user_id: str) -> list[AssetRecord]:
        """Return assets owned through any of the user's entities.

        Each asset carries its latest valuation, debts and ownerships.
        """

    def fetch_entities(self, user_id: str) -> list[EntityRecord]:
        """Return the entities belonging to the user."""


__all__ = ["PatrimonyRepositoryPort"]
