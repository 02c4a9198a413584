"""Domain constants for transaction aggregation."""

DEFAULT_CURRENCY = "INR"
DEFAULT_TIMEZONE = "UTC"
LOCAL_TIMEZONE = "local"

CREDIT_TYPES = ("credit", "refund")

UNCATEGORIZED = "Uncategorized"
UNKNOWN_MERCHANT = "Unknown"

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "CA$",
}

CSV_EXPORT_HEADERS = (
    "Date",
    "Merchant",
    "Type",
    "Amount",
    "Currency",
    "Status",
    "Category",
)


__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_TIMEZONE",
    "LOCAL_TIMEZONE",
    "CREDIT_TYPES",
    "UNCATEGORIZED",
    "UNKNOWN_MERCHANT",
    "CURRENCY_SYMBOLS",
    "CSV_EXPORT_HEADERS",
]
