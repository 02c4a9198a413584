"""Database ports for the transaction calendar.

This module defines the application-layer protocol for accessing the
transaction store engine. Infrastructure implementations provide the
concrete adapter.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the transaction store.

    Sources depend on this protocol instead of connection URLs or pooling
    details.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the transaction store.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """


__all__ = ["DatabaseEnginePort"]
