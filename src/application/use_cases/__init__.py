"""Application use cases package."""

from .export_transactions_csv import ExportTransactionsCsvUseCase
from .get_day_detail import DayDetailView, GetDayDetailUseCase
from .get_month_history import GetMonthHistoryUseCase, MonthHistoryView
from .get_monthly_statistics import (
    GetMonthlyStatisticsUseCase,
    MonthlyStatistics,
)
from .search_transactions import SearchTransactionsUseCase

__all__ = [
    "ExportTransactionsCsvUseCase",
    "GetDayDetailUseCase",
    "DayDetailView",
    "GetMonthHistoryUseCase",
    "MonthHistoryView",
    "GetMonthlyStatisticsUseCase",
    "MonthlyStatistics",
    "SearchTransactionsUseCase",
]
