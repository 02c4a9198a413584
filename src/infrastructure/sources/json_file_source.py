"""Transaction source reading the JSON export of the device store."""

from datetime import datetime
import json
from pathlib import Path

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.errors import TransactionSourceError
from src.domain.models import Transaction
from src.domain.services.aggregation import latest_first
from src.domain.services.calendar import padded_month_window, parse_instant
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sources.records import transaction_from_record


class JsonFileTransactionSource(TransactionSourcePort):
    """Source backed by a JSON array of transaction objects."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Location of the JSON file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_transactions(
        self,
        account_id: str | None = None,
    ) -> list[Transaction]:
        transactions = self._load()
        if account_id:
            transactions = [
                transaction
                for transaction in transactions
                if transaction.account_id == account_id
            ]
        return latest_first(transactions)

    def fetch_transactions_for_month(
        self,
        month_iso: str,
        account_id: str | None = None,
    ) -> list[Transaction]:
        start, end = padded_month_window(month_iso)
        return [
            transaction
            for transaction in self.fetch_transactions(account_id)
            if _within(transaction, start, end)
        ]

    def _load(self) -> list[Transaction]:
        if not self._path.exists():
            self._logger.warning(
                f"Transaction file not found at {self._path}; "
                "treating it as empty"
            )
            return []
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TransactionSourceError(
                f"Cannot read transactions from {self._path}: {exc}"
            ) from exc
        if not isinstance(payload, list):
            raise TransactionSourceError(
                f"Expected a JSON array of transactions in {self._path}"
            )
        transactions = [transaction_from_record(item) for item in payload]
        self._logger.info(
            f"Loaded {len(transactions)} transactions from {self._path}"
        )
        return transactions


def _within(transaction: Transaction, start: datetime, end: datetime) -> bool:
    return start <= parse_instant(transaction.timestamp) <= end


__all__ = ["JsonFileTransactionSource"]
