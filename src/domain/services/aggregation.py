"""Calendar aggregation of transaction lists.

Every function here is a pure transformation: it reads the supplied
transactions, never mutates them, and recomputes its result from scratch.
Timestamps that are not ISO-8601 raise ``TimestampParseError`` before any
result is returned.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from src.domain.models.transactions import DayTotal, MonthSummary, Transaction
from src.domain.services.calendar import (
    local_date_key,
    month_bounds,
    parse_instant,
    parse_month,
)
from src.utils.decimal_utils import coerce_decimal


def group_by_day(
    transactions: Iterable[Transaction],
    tz: tzinfo = timezone.utc,
) -> dict[str, DayTotal]:
    """Bucket transactions by local calendar date.

    Args:
        transactions: Transactions in any order.
        tz: Timezone whose calendar defines the buckets.

    Returns:
        dict[str, DayTotal]: One bucket per date present, keyed and ordered
        by ``YYYY-MM-DD``.
    """
    counts: dict[str, int] = {}
    credits: dict[str, Decimal] = {}
    debits: dict[str, Decimal] = {}
    for transaction in transactions:
        key = local_date_key(transaction.timestamp, tz)
        amount = abs(coerce_decimal(transaction.amount))
        counts[key] = counts.get(key, 0) + 1
        if transaction.is_credit:
            credits[key] = credits.get(key, Decimal("0")) + amount
        else:
            debits[key] = debits.get(key, Decimal("0")) + amount

    return {
        key: DayTotal(
            date=key,
            count=counts[key],
            credit_total=credits.get(key, Decimal("0")),
            debit_total=debits.get(key, Decimal("0")),
        )
        for key in sorted(counts)
    }


def summarize(
    day_totals: Mapping[str, DayTotal],
    month: str | None = None,
) -> MonthSummary:
    """Reduce day buckets to spent, received and count totals.

    Without ``month`` every supplied bucket is folded, so callers passing a
    multi-month mapping get a multi-month summary. With ``month`` only the
    buckets dated inside that month are folded.

    Args:
        day_totals: Buckets keyed by ``YYYY-MM-DD``.
        month: Optional ``YYYY-MM`` restriction.

    Returns:
        MonthSummary: Reduced totals; zeros for an empty mapping.
    """
    buckets: Iterable[DayTotal] = day_totals.values()
    if month is not None:
        year, month_number = parse_month(month)
        month = f"{year:04d}-{month_number:02d}"
        prefix = f"{month}-"
        buckets = [
            bucket
            for key, bucket in day_totals.items()
            if key.startswith(prefix)
        ]

    total_spent = Decimal("0")
    total_received = Decimal("0")
    transaction_count = 0
    for bucket in buckets:
        total_spent += bucket.debit_total
        total_received += bucket.credit_total
        transaction_count += bucket.count

    return MonthSummary(
        total_spent=total_spent,
        total_received=total_received,
        transaction_count=transaction_count,
        month=month,
    )


def transactions_on(
    transactions: Iterable[Transaction],
    date_key: str,
    tz: tzinfo = timezone.utc,
) -> list[Transaction]:
    """Return the transactions dated ``date_key``, most recent first.

    Ties keep their input order.
    """
    matches = [
        transaction
        for transaction in transactions
        if local_date_key(transaction.timestamp, tz) == date_key
    ]
    return latest_first(matches)


def transactions_in_month(
    transactions: Iterable[Transaction],
    month_iso: str,
    tz: tzinfo = timezone.utc,
) -> list[Transaction]:
    """Return the transactions inside a local calendar month.

    The month runs from its first day 00:00:00.000 to its last day
    23:59:59.999 in ``tz``, both ends included. Input order is kept.

    Raises:
        InvalidMonthError: If ``month_iso`` is not a valid ``YYYY-MM``.
    """
    start, end = month_bounds(month_iso, tz)
    return [
        transaction
        for transaction in transactions
        if start <= parse_instant(transaction.timestamp) <= end
    ]


def transactions_between(
    transactions: Iterable[Transaction],
    start: datetime,
    end: datetime,
) -> list[Transaction]:
    """Return the transactions whose instant lies in ``[start, end]``.

    Naive bounds are read as UTC.

    Raises:
        ValueError: If ``start`` is after ``end``.
    """
    start = _as_aware(start)
    end = _as_aware(end)
    if start > end:
        raise ValueError(f"Range start {start} is after range end {end}")
    return [
        transaction
        for transaction in transactions
        if start <= parse_instant(transaction.timestamp) <= end
    ]


def total_count(day_totals: Mapping[str, DayTotal]) -> int:
    """Return the number of transactions across all buckets."""
    return sum(bucket.count for bucket in day_totals.values())


def latest_first(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Return transactions sorted by instant, most recent first."""
    return sorted(
        transactions,
        key=lambda transaction: parse_instant(transaction.timestamp),
        reverse=True,
    )


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


__all__ = [
    "group_by_day",
    "summarize",
    "transactions_on",
    "transactions_in_month",
    "transactions_between",
    "total_count",
    "latest_first",
]
