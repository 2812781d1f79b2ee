"""Database ports for the wealth tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the patrimony record store.

    Repositories can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_wealth_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """


__all__ = ["DatabaseEnginePort"]
