"""Database infrastructure for the transaction calendar.

This module exposes helpers to create and reuse a SQLAlchemy engine connected
to the transaction store. It belongs to the infrastructure layer because it
deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine(db_url: str | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the transaction store.

    Args:
        db_url: Optional URL overriding the ``TXN_DB_URL`` variable.

    Returns:
        Engine: Lazily initialized engine connected to the store.
    """
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(db_url or _get_env_var("TXN_DB_URL"))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so sources depend only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the transaction store.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """
        return get_ledger_engine(self._db_url)


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
