"""Use case to capture a user's current patrimony as a snapshot."""

from src.application.ports.clock import ClockPort
from src.application.ports.patrimony_repository import PatrimonyRepositoryPort
from src.domain.models.patrimony import PatrimonySnapshot
from src.domain.services.snapshot import build_patrimony_snapshot
from src.infrastructure.logging.logger import get_app_logger


class BuildPatrimonySnapshotUseCase:
    """Read holdings from the record store and reduce them to a snapshot."""

    def __init__(
        self,
        repository: PatrimonyRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port reading assets and entities.
            clock: Port providing the snapshot timestamp.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> PatrimonySnapshot:
        """Return the snapshot of the user's current holdings.

        Record store errors propagate unchanged.

        Args:
            user_id: Owner of the holdings.

        Returns:
            PatrimonySnapshot: Immutable capture of assets, debts, entities.
        """
        assets = self._repository.fetch_assets(user_id)
        entities = self._repository.fetch_entities(user_id)
        snapshot = build_patrimony_snapshot(
            assets,
            entities,
            created_at=self._clock.now(),
        )
        self._logger.info(
            f"Snapshot built for user={user_id}: assets={len(snapshot.assets)}, "
            f"total={snapshot.total_value:.2f}, debt={snapshot.total_debt:.2f}"
        )
        return snapshot


__all__ = ["BuildPatrimonySnapshotUseCase"]
