"""Calendar helpers mapping UTC instants onto local dates and months."""

from calendar import monthrange
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone, tzinfo
import re
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz as dateutil_tz

from src.domain.constants import DEFAULT_TIMEZONE, LOCAL_TIMEZONE
from src.domain.errors import (
    InvalidDateKeyError,
    InvalidMonthError,
    TimestampParseError,
    UnknownTimezoneError,
)

Clock = Callable[[], datetime]

_MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
_DATE_KEY_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MIN_UTC = datetime.min.replace(tzinfo=timezone.utc)
_MAX_UTC = datetime.max.replace(tzinfo=timezone.utc)


def resolve_timezone(value: str | tzinfo | None) -> tzinfo:
    """Resolve a timezone name into a tzinfo instance.

    Args:
        value: IANA zone name, ``"local"`` for the process zone, an existing
            tzinfo, or None for UTC.

    Returns:
        tzinfo: Resolved timezone.

    Raises:
        UnknownTimezoneError: If the name is not a known zone.
    """
    if isinstance(value, tzinfo):
        return value
    name = (value or DEFAULT_TIMEZONE).strip()
    if name.lower() == LOCAL_TIMEZONE:
        # Offset follows the process zone rules for each instant.
        return dateutil_tz.tzlocal()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimezoneError(f"Unknown timezone: {name!r}") from exc


def parse_instant(timestamp: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Timestamps without an offset are read as UTC.

    Args:
        timestamp: ISO-8601 string such as ``2025-12-01T10:00:00.000Z``.

    Returns:
        datetime: Aware datetime normalized to UTC.

    Raises:
        TimestampParseError: If the value is not valid ISO-8601.
    """
    if not isinstance(timestamp, str):
        raise TimestampParseError(timestamp)
    try:
        parsed = datetime.fromisoformat(timestamp.strip())
    except ValueError as exc:
        raise TimestampParseError(timestamp) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_local(timestamp: str, tz: tzinfo) -> datetime:
    """Return the instant of ``timestamp`` rendered in ``tz``."""
    return parse_instant(timestamp).astimezone(tz)


def local_date_key(timestamp: str, tz: tzinfo = timezone.utc) -> str:
    """Return the ``YYYY-MM-DD`` local calendar date of a timestamp.

    Args:
        timestamp: ISO-8601 UTC timestamp.
        tz: Timezone whose calendar is used for bucketing.

    Returns:
        str: Zero-padded calendar date key.
    """
    return to_local(timestamp, tz).date().isoformat()


def parse_month(month_iso: str) -> tuple[int, int]:
    """Validate a ``YYYY-MM`` string and return ``(year, month)``.

    Raises:
        InvalidMonthError: If the format or month number is invalid.
    """
    if not isinstance(month_iso, str):
        raise InvalidMonthError(month_iso)
    match = _MONTH_PATTERN.fullmatch(month_iso)
    if not match:
        raise InvalidMonthError(month_iso)
    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month <= 12:
        raise InvalidMonthError(month_iso)
    return year, month


def month_bounds(
    month_iso: str,
    tz: tzinfo = timezone.utc,
) -> tuple[datetime, datetime]:
    """Return the inclusive local interval covering a calendar month.

    The interval runs from the first day at 00:00:00.000 to the last day at
    23:59:59.999, both in ``tz``.

    Args:
        month_iso: Month in ``YYYY-MM`` format.
        tz: Timezone defining the local calendar.

    Returns:
        tuple[datetime, datetime]: Aware start and end datetimes.
    """
    year, month = parse_month(month_iso)
    last_day = monthrange(year, month)[1]
    start = datetime(year, month, 1, tzinfo=tz)
    end = datetime(year, month, last_day, 23, 59, 59, 999000, tzinfo=tz)
    return start, end


def padded_month_window(month_iso: str) -> tuple[datetime, datetime]:
    """Return a UTC window wide enough to cover the month in any timezone.

    Storage sources fetch with this window; zone offsets never exceed
    fourteen hours, so one day of padding on each side is enough.
    """
    start, end = month_bounds(month_iso, timezone.utc)
    padding = timedelta(days=1)
    if start - _MIN_UTC >= padding:
        start -= padding
    if _MAX_UTC - end >= padding:
        end += padding
    return start, end


def parse_date_key(date_key: str) -> date:
    """Validate a ``YYYY-MM-DD`` key and return the matching date.

    Raises:
        InvalidDateKeyError: If the key is not a real calendar date.
    """
    if not isinstance(date_key, str) or not _DATE_KEY_PATTERN.fullmatch(
        date_key
    ):
        raise InvalidDateKeyError(date_key)
    try:
        return date.fromisoformat(date_key)
    except ValueError as exc:
        raise InvalidDateKeyError(date_key) from exc


def current_month_iso(
    clock: Clock | None = None,
    tz: tzinfo = timezone.utc,
) -> str:
    """Return the current month in ``tz`` as ``YYYY-MM``.

    Args:
        clock: Zero-argument callable returning "now". Naive values are read
            as wall time in ``tz``. Defaults to the system UTC clock.
        tz: Timezone defining the local calendar.

    Returns:
        str: Current month key.
    """
    now = clock() if clock is not None else datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    local = now.astimezone(tz)
    return f"{local.year:04d}-{local.month:02d}"


__all__ = [
    "Clock",
    "resolve_timezone",
    "parse_instant",
    "to_local",
    "local_date_key",
    "parse_month",
    "month_bounds",
    "padded_month_window",
    "parse_date_key",
    "current_month_iso",
]
