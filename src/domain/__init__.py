"""Domain package for transaction models and calendar aggregation."""

from .constants import CREDIT_TYPES, DEFAULT_CURRENCY, DEFAULT_TIMEZONE
from .errors import (
    EmptyExportError,
    InvalidAmountError,
    InvalidDateKeyError,
    InvalidMonthError,
    TimestampParseError,
    TransactionCalendarError,
    TransactionSourceError,
    UnknownTimezoneError,
)
from .models import (
    CategoryTotal,
    DayTotal,
    MonthlyStatistics,
    MonthSummary,
    Transaction,
    TransactionType,
)
from .services import (
    AggregationEngine,
    current_month_iso,
    format_currency,
    group_by_day,
    local_date_key,
    summarize,
    transactions_in_month,
    transactions_on,
)

__all__ = [
    "AggregationEngine",
    "CategoryTotal",
    "CREDIT_TYPES",
    "DayTotal",
    "DEFAULT_CURRENCY",
    "DEFAULT_TIMEZONE",
    "EmptyExportError",
    "InvalidAmountError",
    "InvalidDateKeyError",
    "InvalidMonthError",
    "MonthlyStatistics",
    "MonthSummary",
    "TimestampParseError",
    "Transaction",
    "TransactionCalendarError",
    "TransactionSourceError",
    "TransactionType",
    "UnknownTimezoneError",
    "current_month_iso",
    "format_currency",
    "group_by_day",
    "local_date_key",
    "summarize",
    "transactions_in_month",
    "transactions_on",
]
