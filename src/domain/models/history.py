"""View models returned by the history use cases."""

from dataclasses import dataclass

from src.domain.models.transactions import DayTotal, MonthSummary, Transaction


@dataclass(frozen=True)
class MonthHistoryView:
    """Calendar buckets and totals for one month."""

    month: str
    day_totals: dict[str, DayTotal]
    summary: MonthSummary


@dataclass(frozen=True)
class DayDetailView:
    """Transactions of one local date, most recent first."""

    date: str
    transactions: list[Transaction]
    day_total: DayTotal


__all__ = ["MonthHistoryView", "DayDetailView"]
