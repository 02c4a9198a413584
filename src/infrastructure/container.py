"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.services.calendar import Clock
from src.domain.services.engine import AggregationEngine
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import (
    SOURCE_SQLALCHEMY,
    TransactionCalendarSettings,
)
from src.infrastructure.sources import (
    JsonFileTransactionSource,
    SqlAlchemyTransactionSource,
)


def build_settings() -> TransactionCalendarSettings:
    """Return settings sourced from the environment."""
    return TransactionCalendarSettings.from_env()


def build_database_adapter(
    settings: TransactionCalendarSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_transaction_source(
    settings: TransactionCalendarSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> TransactionSourcePort:
    """Return the configured transaction source."""
    resolved = settings or build_settings()
    if resolved.source == SOURCE_SQLALCHEMY:
        resolved_db = db_port or build_database_adapter(resolved)
        return SqlAlchemyTransactionSource(resolved_db)
    if resolved.json_file is None:
        raise RuntimeError("JSON source requires a TXN_JSON_FILE value.")
    return JsonFileTransactionSource(
        resolved.json_file,
        logger=get_app_logger(),
    )


def build_aggregation_engine(
    settings: TransactionCalendarSettings | None = None,
    clock: Clock | None = None,
) -> AggregationEngine:
    """Return an engine bound to the configured timezone and currency."""
    resolved = settings or build_settings()
    return AggregationEngine.for_timezone(
        resolved.timezone,
        clock=clock,
        currency_code=resolved.currency,
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_transaction_source",
    "build_aggregation_engine",
]
