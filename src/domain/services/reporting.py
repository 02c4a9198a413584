"""Month statistics, search and CSV export built on the aggregation core."""

from collections.abc import Iterable
import csv
from datetime import timezone, tzinfo
from decimal import Decimal
import io

from src.domain.constants import CSV_EXPORT_HEADERS, UNKNOWN_MERCHANT
from src.domain.models.transactions import (
    CategoryTotal,
    MonthlyStatistics,
    Transaction,
)
from src.domain.services.aggregation import (
    group_by_day,
    summarize,
    transactions_in_month,
)
from src.domain.services.calendar import local_date_key
from src.domain.services.normalization import type_label
from src.utils.decimal_utils import coerce_decimal, quantize_cents


def category_breakdown(
    transactions: Iterable[Transaction],
) -> list[CategoryTotal]:
    """Sum absolute amounts and counts per metadata category.

    Args:
        transactions: Transactions to break down.

    Returns:
        list[CategoryTotal]: Totals sorted by category name.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for transaction in transactions:
        category = transaction.category
        amount = abs(coerce_decimal(transaction.amount))
        totals[category] = totals.get(category, Decimal("0")) + amount
        counts[category] = counts.get(category, 0) + 1
    return [
        CategoryTotal(category=category, count=counts[category], total=total)
        for category, total in sorted(totals.items())
    ]


def compute_monthly_statistics(
    transactions: Iterable[Transaction],
    month_iso: str,
    tz: tzinfo = timezone.utc,
) -> MonthlyStatistics:
    """Compute month totals, daily averages and a category breakdown.

    Transactions outside the month are ignored. Averages divide by the
    number of days that have at least one transaction and are rounded to
    cents.

    Args:
        transactions: Candidate transactions, possibly spanning months.
        month_iso: Month in ``YYYY-MM`` format.
        tz: Timezone defining the local calendar.

    Returns:
        MonthlyStatistics: Statistics for the month.
    """
    month_transactions = transactions_in_month(transactions, month_iso, tz)
    day_totals = group_by_day(month_transactions, tz)
    summary = summarize(day_totals, month=month_iso)

    days = len(day_totals)
    if days:
        avg_spending = quantize_cents(summary.total_spent / days)
        avg_received = quantize_cents(summary.total_received / days)
    else:
        avg_spending = Decimal("0")
        avg_received = Decimal("0")

    return MonthlyStatistics(
        month=summary.month,
        summary=summary,
        days_with_transactions=days,
        avg_daily_spending=avg_spending,
        avg_daily_received=avg_received,
        categories=category_breakdown(month_transactions),
    )


def search_transactions(
    transactions: Iterable[Transaction],
    query: str,
) -> list[Transaction]:
    """Filter by case-insensitive match on merchant, category or type.

    A blank query returns every transaction.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(transactions)

    matches: list[Transaction] = []
    for transaction in transactions:
        category = (transaction.raw_meta or {}).get("category")
        haystacks = (
            transaction.merchant_name or "",
            str(category) if category else "",
            type_label(transaction.type),
        )
        if any(needle in value.lower() for value in haystacks):
            matches.append(transaction)
    return matches


def render_transactions_csv(
    transactions: Iterable[Transaction],
    tz: tzinfo = timezone.utc,
) -> str:
    """Render transactions as CSV text, one row per transaction.

    ``Date`` is the local calendar date and ``Amount`` the absolute amount
    with two decimals. Rows keep the input order.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_EXPORT_HEADERS)
    for transaction in transactions:
        amount = quantize_cents(abs(coerce_decimal(transaction.amount)))
        writer.writerow(
            (
                local_date_key(transaction.timestamp, tz),
                transaction.merchant_name or UNKNOWN_MERCHANT,
                type_label(transaction.type),
                f"{amount:.2f}",
                transaction.currency,
                transaction.status,
                transaction.category,
            )
        )
    return buffer.getvalue()


__all__ = [
    "category_breakdown",
    "compute_monthly_statistics",
    "search_transactions",
    "render_transactions_csv",
]
