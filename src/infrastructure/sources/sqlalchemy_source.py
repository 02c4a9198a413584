"""Transaction source reading a SQL ``transactions`` table."""

from datetime import datetime, timezone

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.models import Transaction
from src.domain.services.calendar import padded_month_window
from src.infrastructure.sources.records import transaction_from_record

_COLUMNS = """
    id, account_id, timestamp, amount, currency, merchant_name, type,
    status, raw_meta, created_at, updated_at
"""


class SqlAlchemyTransactionSource(TransactionSourcePort):
    """Source backed by the transaction store database.

    Timestamps are stored as ISO-8601 UTC strings, so range predicates
    compare them lexically.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the source.

        Args:
            db_port: Port providing access to the store engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        account_id: str | None = None,
    ) -> list[Transaction]:
        query, params = self._build_query(account_id, None, None)
        return self._run(query, params)

    def fetch_transactions_for_month(
        self,
        month_iso: str,
        account_id: str | None = None,
    ) -> list[Transaction]:
        start, end = padded_month_window(month_iso)
        query, params = self._build_query(account_id, start, end)
        return self._run(query, params)

    def _run(self, query, params: dict[str, str]) -> list[Transaction]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [transaction_from_record(row._mapping) for row in rows]

    @staticmethod
    def _build_query(
        account_id: str | None,
        start: datetime | None,
        end: datetime | None,
    ):
        base_sql = f"SELECT {_COLUMNS} FROM transactions WHERE 1=1"
        params: dict[str, str] = {}
        if account_id:
            base_sql += " AND account_id = :account_id"
            params["account_id"] = account_id
        if start:
            base_sql += " AND timestamp >= :start_ts"
            params["start_ts"] = _iso_utc(start)
        if end:
            base_sql += " AND timestamp <= :end_ts"
            params["end_ts"] = _iso_utc(end)
        base_sql += " ORDER BY timestamp DESC, id"
        return text(base_sql), params


def _iso_utc(value: datetime) -> str:
    naive = value.astimezone(timezone.utc).replace(tzinfo=None)
    return naive.isoformat(timespec="milliseconds") + "Z"


__all__ = ["SqlAlchemyTransactionSource"]
