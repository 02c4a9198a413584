"""Domain models package."""

from .history import DayDetailView, MonthHistoryView
from .transactions import (
    CategoryTotal,
    DayTotal,
    MonthlyStatistics,
    MonthSummary,
    Transaction,
    TransactionType,
)

__all__ = [
    "CategoryTotal",
    "DayDetailView",
    "DayTotal",
    "MonthHistoryView",
    "MonthlyStatistics",
    "MonthSummary",
    "Transaction",
    "TransactionType",
]
