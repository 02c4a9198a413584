"""CLI adapter printing the calendar history of a month.

Reads ``HISTORY_MONTH`` (default: current month), ``HISTORY_ACCOUNT_ID`` and
``HISTORY_DAY`` from the environment, then prints the day buckets, the month
summary, the category breakdown and optionally the transactions of one day.
"""

import os

from src.application.use_cases.get_day_detail import GetDayDetailUseCase
from src.application.use_cases.get_month_history import (
    GetMonthHistoryUseCase,
)
from src.application.use_cases.get_monthly_statistics import (
    GetMonthlyStatisticsUseCase,
)
from src.domain.errors import TransactionCalendarError
from src.infrastructure.container import (
    build_aggregation_engine,
    build_settings,
    build_transaction_source,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Run the month history report."""
    logger = get_app_logger()
    settings = build_settings()
    month = os.getenv("HISTORY_MONTH") or None
    account_id = os.getenv("HISTORY_ACCOUNT_ID") or None
    day = os.getenv("HISTORY_DAY") or None

    try:
        engine = build_aggregation_engine(settings)
        source = build_transaction_source(settings)
        history = GetMonthHistoryUseCase(
            source,
            engine=engine,
            logger=logger,
        ).execute(month_iso=month, account_id=account_id)
        statistics = GetMonthlyStatisticsUseCase(
            source,
            engine=engine,
            logger=logger,
        ).execute(month_iso=history.month, account_id=account_id)
        detail = None
        if day:
            detail = GetDayDetailUseCase(
                source,
                engine=engine,
                logger=logger,
            ).execute(day, account_id=account_id)
    except (TransactionCalendarError, RuntimeError) as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    get_usage_logger().info(
        f"history_report month={history.month} account={account_id}"
    )
    fmt = engine.format_currency
    summary = history.summary
    print(f"Transaction history for {history.month} ({settings.timezone})")
    for bucket in history.day_totals.values():
        print(
            f"{bucket.date}: count={bucket.count}, "
            f"in={fmt(bucket.credit_total)}, out={fmt(bucket.debit_total)}, "
            f"net={fmt(bucket.total)}"
        )
    print(
        f"Summary: spent={fmt(summary.total_spent)}, "
        f"received={fmt(summary.total_received)}, net={fmt(summary.net)}, "
        f"transactions={summary.transaction_count}"
    )
    print(
        f"Daily averages over {statistics.days_with_transactions} days: "
        f"spent={fmt(statistics.avg_daily_spending)}, "
        f"received={fmt(statistics.avg_daily_received)}"
    )
    for category in statistics.categories:
        print(
            f"  {category.category}: {category.count} "
            f"({fmt(category.total)})"
        )
    if detail is not None:
        print(f"Transactions on {detail.date}:")
        for transaction in detail.transactions:
            print(
                f"  {transaction.timestamp} "
                f"{transaction.merchant_name or 'Unknown'} "
                f"{fmt(transaction.amount, transaction.currency)}"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
