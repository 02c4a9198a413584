"""Stateless aggregation engine bound to a timezone and a clock."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models.transactions import (
    DayTotal,
    MonthlyStatistics,
    MonthSummary,
    Transaction,
)
from src.domain.services import aggregation, calendar, currency, reporting


@dataclass(frozen=True)
class AggregationEngine:
    """Calendar aggregation operations evaluated in one timezone.

    The engine holds no state between calls; instances are cheap and safe to
    share across threads.

    Attributes:
        tz: Timezone defining local calendar dates and months.
        clock: Optional "now" provider used by ``current_month_iso``.
        currency_code: Default currency for ``format_currency``.
    """

    tz: tzinfo = timezone.utc
    clock: calendar.Clock | None = None
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def for_timezone(
        cls,
        name: str | tzinfo | None,
        clock: calendar.Clock | None = None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> "AggregationEngine":
        """Build an engine from a timezone name such as ``Asia/Kolkata``."""
        return cls(
            tz=calendar.resolve_timezone(name),
            clock=clock,
            currency_code=currency_code,
        )

    def current_month_iso(self) -> str:
        return calendar.current_month_iso(self.clock, self.tz)

    def format_currency(
        self,
        amount: Decimal | int | float | str,
        currency_code: str | None = None,
    ) -> str:
        return currency.format_currency(
            amount,
            currency_code or self.currency_code,
        )

    def local_date_key(self, timestamp: str) -> str:
        return calendar.local_date_key(timestamp, self.tz)

    def group_by_day(
        self,
        transactions: Iterable[Transaction],
    ) -> dict[str, DayTotal]:
        return aggregation.group_by_day(transactions, self.tz)

    def summarize(
        self,
        day_totals: Mapping[str, DayTotal],
        month: str | None = None,
    ) -> MonthSummary:
        return aggregation.summarize(day_totals, month)

    def transactions_on(
        self,
        transactions: Iterable[Transaction],
        date_key: str,
    ) -> list[Transaction]:
        return aggregation.transactions_on(transactions, date_key, self.tz)

    def transactions_in_month(
        self,
        transactions: Iterable[Transaction],
        month_iso: str,
    ) -> list[Transaction]:
        return aggregation.transactions_in_month(
            transactions,
            month_iso,
            self.tz,
        )

    def transactions_between(
        self,
        transactions: Iterable[Transaction],
        start: datetime,
        end: datetime,
    ) -> list[Transaction]:
        return aggregation.transactions_between(transactions, start, end)

    def monthly_statistics(
        self,
        transactions: Iterable[Transaction],
        month_iso: str,
    ) -> MonthlyStatistics:
        return reporting.compute_monthly_statistics(
            transactions,
            month_iso,
            self.tz,
        )

    def search(
        self,
        transactions: Iterable[Transaction],
        query: str,
    ) -> list[Transaction]:
        return reporting.search_transactions(transactions, query)

    def to_csv(self, transactions: Iterable[Transaction]) -> str:
        return reporting.render_transactions_csv(transactions, self.tz)


__all__ = ["AggregationEngine"]
