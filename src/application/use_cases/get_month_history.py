"""Use case to build the calendar history of a month."""

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.models import MonthHistoryView
from src.domain.services.calendar import parse_month
from src.domain.services.engine import AggregationEngine
from src.domain.services.validation import validate_amount_sign
from src.infrastructure.logging.logger import get_app_logger


class GetMonthHistoryUseCase:
    """Compute day buckets and month totals from stored transactions."""

    def __init__(
        self,
        transaction_source: TransactionSourcePort,
        engine: AggregationEngine | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_source: Port providing stored transactions.
            engine: Aggregation engine; UTC with the system clock by default.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_source = transaction_source
        self._engine = engine or AggregationEngine()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month_iso: str | None = None,
        account_id: str | None = None,
    ) -> MonthHistoryView:
        """Return the day buckets and summary for a month.

        Args:
            month_iso: Month in ``YYYY-MM`` format; current month when None.
            account_id: Optional account restriction.

        Returns:
            MonthHistoryView: Buckets keyed by date plus the month summary.

        Raises:
            InvalidMonthError: If ``month_iso`` is malformed.
        """
        month = month_iso or self._engine.current_month_iso()
        parse_month(month)
        rows = self._transaction_source.fetch_transactions_for_month(
            month,
            account_id=account_id,
        )
        transactions = self._engine.transactions_in_month(rows, month)
        self._logger.info(
            f"Fetched {len(rows)} transactions, {len(transactions)} "
            f"inside {month}"
        )
        for transaction in transactions:
            validate_amount_sign(transaction, self._logger)

        day_totals = self._engine.group_by_day(transactions)
        summary = self._engine.summarize(day_totals, month=month)
        self._logger.info(
            f"Month history computed: month={summary.month}, "
            f"days={len(day_totals)}, spent={summary.total_spent}, "
            f"received={summary.total_received}"
        )
        return MonthHistoryView(
            month=summary.month,
            day_totals=day_totals,
            summary=summary,
        )


__all__ = ["GetMonthHistoryUseCase", "MonthHistoryView"]
