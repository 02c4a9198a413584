"""Use case to export a month of transactions as CSV."""

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.errors import EmptyExportError
from src.domain.services.calendar import parse_month
from src.domain.services.engine import AggregationEngine
from src.infrastructure.logging.logger import get_app_logger


class ExportTransactionsCsvUseCase:
    """Render the transactions of a month as CSV text."""

    def __init__(
        self,
        transaction_source: TransactionSourcePort,
        engine: AggregationEngine | None = None,
        logger=None,
    ) -> None:
        self._transaction_source = transaction_source
        self._engine = engine or AggregationEngine()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month_iso: str,
        account_id: str | None = None,
    ) -> str:
        """Return CSV text for the month.

        Raises:
            InvalidMonthError: If ``month_iso`` is malformed.
            EmptyExportError: If the month has no transactions.
        """
        parse_month(month_iso)
        rows = self._transaction_source.fetch_transactions_for_month(
            month_iso,
            account_id=account_id,
        )
        transactions = self._engine.transactions_in_month(rows, month_iso)
        if not transactions:
            raise EmptyExportError(
                f"No transactions to export for {month_iso}"
            )
        self._logger.info(
            f"Exporting {len(transactions)} transactions for {month_iso}"
        )
        return self._engine.to_csv(transactions)


__all__ = ["ExportTransactionsCsvUseCase"]
