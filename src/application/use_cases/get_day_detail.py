"""Use case to list the transactions of a single day."""

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.models import DayDetailView, DayTotal
from src.domain.services.calendar import parse_date_key
from src.domain.services.engine import AggregationEngine
from src.infrastructure.logging.logger import get_app_logger


class GetDayDetailUseCase:
    """Return a day's transactions, newest first, with its bucket."""

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
        date_key: str,
        account_id: str | None = None,
    ) -> DayDetailView:
        """Return the transactions dated ``date_key``.

        Args:
            date_key: Local calendar date in ``YYYY-MM-DD`` format.
            account_id: Optional account restriction.

        Returns:
            DayDetailView: Transactions and a bucket, zero when the day is
            empty.

        Raises:
            InvalidDateKeyError: If ``date_key`` is not a calendar date.
        """
        day = parse_date_key(date_key)
        rows = self._transaction_source.fetch_transactions_for_month(
            f"{day.year:04d}-{day.month:02d}",
            account_id=account_id,
        )
        transactions = self._engine.transactions_on(rows, date_key)
        day_total = self._engine.group_by_day(transactions).get(
            date_key,
            DayTotal.empty(date_key),
        )
        self._logger.info(
            f"Found {len(transactions)} transactions on {date_key}"
        )
        return DayDetailView(
            date=date_key,
            transactions=transactions,
            day_total=day_total,
        )


__all__ = ["GetDayDetailUseCase", "DayDetailView"]
