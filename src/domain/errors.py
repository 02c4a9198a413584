"""Domain errors raised by the transaction calendar engine."""


class TransactionCalendarError(Exception):
    """Base exception for transaction calendar failures."""


class TimestampParseError(TransactionCalendarError, ValueError):
    """A transaction timestamp is not a valid ISO-8601 string."""

    def __init__(self, timestamp) -> None:
        super().__init__(f"Invalid ISO-8601 timestamp: {timestamp!r}")
        self.timestamp = timestamp


class InvalidMonthError(TransactionCalendarError, ValueError):
    """A month value is not ``YYYY-MM`` with a month in 01-12."""

    def __init__(self, month_iso) -> None:
        super().__init__(
            f"Invalid month {month_iso!r}. Expected format YYYY-MM."
        )
        self.month_iso = month_iso


class InvalidDateKeyError(TransactionCalendarError, ValueError):
    """A calendar date key is not a valid ``YYYY-MM-DD`` date."""

    def __init__(self, date_key) -> None:
        super().__init__(
            f"Invalid date {date_key!r}. Expected format YYYY-MM-DD."
        )
        self.date_key = date_key


class InvalidAmountError(TransactionCalendarError, ValueError):
    """An amount is not a finite number."""


class UnknownTimezoneError(TransactionCalendarError, ValueError):
    """A timezone name is not a known IANA zone."""


class EmptyExportError(TransactionCalendarError):
    """An export was requested for a period without transactions."""


class TransactionSourceError(TransactionCalendarError, RuntimeError):
    """A transaction source could not read its backing store."""


__all__ = [
    "TransactionCalendarError",
    "TimestampParseError",
    "InvalidMonthError",
    "InvalidDateKeyError",
    "InvalidAmountError",
    "UnknownTimezoneError",
    "EmptyExportError",
    "TransactionSourceError",
]
