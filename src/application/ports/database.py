"""Database ports for the finance metrics engine.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the finance database.

    Application use cases and repositories can depend on this protocol
    instead of concrete database drivers or configuration details.
    """

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance records.
        """


__all__ = ["DatabaseEnginePort"]
