"""Use case to search stored transactions."""

from src.application.ports.transaction_source import TransactionSourcePort
from src.domain.models import Transaction
from src.domain.services.calendar import parse_month
from src.domain.services.engine import AggregationEngine
from src.infrastructure.logging.logger import get_app_logger


class SearchTransactionsUseCase:
    """Match transactions by merchant, category or type."""

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
        query: str,
        month_iso: str | None = None,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return transactions matching ``query``.

        Args:
            query: Case-insensitive text to look for.
            month_iso: Optional month restriction in ``YYYY-MM`` format.
            account_id: Optional account restriction.

        Returns:
            list[Transaction]: Matches in source order.
        """
        if month_iso:
            parse_month(month_iso)
            rows = self._transaction_source.fetch_transactions_for_month(
                month_iso,
                account_id=account_id,
            )
            rows = self._engine.transactions_in_month(rows, month_iso)
        else:
            rows = self._transaction_source.fetch_transactions(
                account_id=account_id,
            )
        matches = self._engine.search(rows, query)
        self._logger.info(
            f"Search '{query}' matched {len(matches)} of {len(rows)} "
            "transactions"
        )
        return matches


__all__ = ["SearchTransactionsUseCase"]
