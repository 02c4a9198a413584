"""Domain services package."""

from .aggregation import (
    group_by_day,
    latest_first,
    summarize,
    total_count,
    transactions_between,
    transactions_in_month,
    transactions_on,
)
from .calendar import (
    current_month_iso,
    local_date_key,
    month_bounds,
    padded_month_window,
    parse_date_key,
    parse_instant,
    parse_month,
    resolve_timezone,
)
from .currency import currency_symbol, format_currency
from .engine import AggregationEngine
from .normalization import (
    normalize_currency_code,
    normalize_merchant_name,
    normalize_transaction_type,
    type_label,
)
from .reporting import (
    category_breakdown,
    compute_monthly_statistics,
    render_transactions_csv,
    search_transactions,
)
from .validation import validate_amount_sign

__all__ = [
    "AggregationEngine",
    "category_breakdown",
    "compute_monthly_statistics",
    "currency_symbol",
    "current_month_iso",
    "format_currency",
    "group_by_day",
    "latest_first",
    "local_date_key",
    "month_bounds",
    "padded_month_window",
    "normalize_currency_code",
    "normalize_merchant_name",
    "normalize_transaction_type",
    "parse_date_key",
    "parse_instant",
    "parse_month",
    "render_transactions_csv",
    "resolve_timezone",
    "search_transactions",
    "summarize",
    "total_count",
    "transactions_between",
    "transactions_in_month",
    "transactions_on",
    "type_label",
    "validate_amount_sign",
]
