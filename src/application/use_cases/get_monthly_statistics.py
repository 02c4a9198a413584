"""Use case to compute spending statistics for a month."""

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.models import MonthlyStatistics
from src.domain.services.calendar import parse_month
from src.domain.services.engine import AggregationEngine
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyStatisticsUseCase:
    """Compute totals, daily averages and category breakdown for a month."""

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
        month_iso: str | None = None,
        account_id: str | None = None,
    ) -> MonthlyStatistics:
        """Return statistics for ``month_iso`` (current month when None)."""
        month = month_iso or self._engine.current_month_iso()
        parse_month(month)
        rows = self._transaction_source.fetch_transactions_for_month(
            month,
            account_id=account_id,
        )
        statistics = self._engine.monthly_statistics(rows, month)
        self._logger.info(
            f"Statistics computed: month={statistics.month}, "
            f"transactions={statistics.summary.transaction_count}, "
            f"categories={len(statistics.categories)}"
        )
        return statistics


__all__ = ["GetMonthlyStatisticsUseCase", "MonthlyStatistics"]
