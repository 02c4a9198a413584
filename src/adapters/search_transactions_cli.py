"""CLI adapter searching stored transactions.

Reads ``SEARCH_QUERY`` (required), ``SEARCH_MONTH`` and
``SEARCH_ACCOUNT_ID`` from the environment.
"""

import os

from src.application.use_cases.search_transactions import (
    SearchTransactionsUseCase,
)
from src.domain.errors import TransactionCalendarError
from src.infrastructure.container import (
    build_aggregation_engine,
    build_settings,
    build_transaction_source,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the transaction search."""
    logger = get_app_logger()
    query = os.getenv("SEARCH_QUERY", "").strip()
    if not query:
        logger.warning("SEARCH_QUERY is required to search transactions.")
        return

    settings = build_settings()
    try:
        engine = build_aggregation_engine(settings)
        use_case = SearchTransactionsUseCase(
            build_transaction_source(settings),
            engine=engine,
            logger=logger,
        )
        matches = use_case.execute(
            query,
            month_iso=os.getenv("SEARCH_MONTH") or None,
            account_id=os.getenv("SEARCH_ACCOUNT_ID") or None,
        )
    except (TransactionCalendarError, RuntimeError) as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    print(f"{len(matches)} transactions match '{query}'")
    for transaction in matches:
        print(
            f"{engine.local_date_key(transaction.timestamp)} "
            f"{transaction.merchant_name or 'Unknown'} "
            f"{engine.format_currency(transaction.amount, transaction.currency)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
