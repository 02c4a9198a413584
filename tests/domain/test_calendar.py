"""Tests for calendar helpers."""

from datetime import date, datetime, timedelta, timezone
import os
import time
from zoneinfo import ZoneInfo

import pytest

from src.domain.errors import (
    InvalidDateKeyError,
    InvalidMonthError,
    TimestampParseError,
    UnknownTimezoneError,
)
from src.domain.services.calendar import (
    current_month_iso,
    local_date_key,
    month_bounds,
    padded_month_window,
    parse_date_key,
    parse_instant,
    parse_month,
    resolve_timezone,
)


def test_parse_instant_reads_zulu_suffix() -> None:
    """A trailing Z should parse as UTC."""
    result = parse_instant("2025-12-01T10:00:00.000Z")

    assert result == datetime(2025, 12, 1, 10, tzinfo=timezone.utc)


def test_parse_instant_normalizes_offsets_to_utc() -> None:
    """Offsets should be converted to the same UTC instant."""
    result = parse_instant("2025-12-01T15:30:00+05:30")

    assert result == datetime(2025, 12, 1, 10, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


def test_parse_instant_treats_naive_values_as_utc() -> None:
    """Timestamps without an offset are UTC encoded."""
    assert parse_instant("2025-12-01T10:00:00") == datetime(
        2025, 12, 1, 10, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "value",
    ["", "not-a-date", "2025-13-01T00:00:00Z", "01/12/2025", None, 1733047200],
)
def test_parse_instant_rejects_invalid_values(value) -> None:
    """Malformed timestamps raise TimestampParseError."""
    with pytest.raises(TimestampParseError):
        parse_instant(value)


def test_timestamp_parse_error_is_a_value_error() -> None:
    """Callers catching ValueError should also catch parse failures."""
    with pytest.raises(ValueError):
        parse_instant("garbage")


def test_local_date_key_uses_utc_by_default() -> None:
    """Without a timezone the UTC calendar applies."""
    assert local_date_key("2025-12-01T23:59:59.999Z") == "2025-12-01"


def test_local_date_key_shifts_forward_east_of_utc() -> None:
    """Late UTC evenings are the next day in Kolkata."""
    tz = ZoneInfo("Asia/Kolkata")

    assert local_date_key("2025-12-01T20:00:00.000Z", tz) == "2025-12-02"


def test_local_date_key_shifts_backward_west_of_utc() -> None:
    """Early UTC mornings are the previous day in New York."""
    tz = ZoneInfo("America/New_York")

    assert local_date_key("2025-12-01T03:00:00.000Z", tz) == "2025-11-30"


def test_local_date_key_zero_pads_small_years() -> None:
    """Keys always carry a four-digit year."""
    assert local_date_key("0099-01-05T12:00:00+00:00") == "0099-01-05"


def test_local_date_key_follows_daylight_saving_offsets() -> None:
    """The same UTC hour maps differently across a DST change."""
    tz = ZoneInfo("America/New_York")

    # EDT (UTC-4) in July, EST (UTC-5) in January.
    assert local_date_key("2025-07-02T03:30:00Z", tz) == "2025-07-01"
    assert local_date_key("2025-01-02T04:30:00Z", tz) == "2025-01-01"


def test_parse_month_returns_year_and_month() -> None:
    """Valid months split into integers."""
    assert parse_month("2025-12") == (2025, 12)
    assert parse_month("2024-01") == (2024, 1)


@pytest.mark.parametrize(
    "value",
    [
        "2025-13",
        "2025-00",
        "2025-1",
        "202512",
        "abcd-ef",
        "",
        "2025-12-01",
        None,
        " 2025-12",
        "2025-12\n",
        "\uff12\uff10\uff12\uff15-\uff11\uff12",
    ],
)
def test_parse_month_rejects_invalid_values(value) -> None:
    """Malformed or out-of-range months raise InvalidMonthError."""
    with pytest.raises(InvalidMonthError):
        parse_month(value)


def test_month_bounds_cover_whole_month_inclusively() -> None:
    """Bounds run from the first millisecond to the last one."""
    start, end = month_bounds("2024-02")

    assert start == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999000, tzinfo=timezone.utc)


def test_month_bounds_are_local_to_the_timezone() -> None:
    """Bounds are wall-clock times in the requested zone."""
    tz = ZoneInfo("Asia/Kolkata")

    start, end = month_bounds("2025-12", tz)

    assert start.astimezone(timezone.utc) == datetime(
        2025, 11, 30, 18, 30, tzinfo=timezone.utc
    )
    assert end.astimezone(timezone.utc) == datetime(
        2025, 12, 31, 18, 29, 59, 999000, tzinfo=timezone.utc
    )


def test_padded_month_window_adds_a_day_each_side() -> None:
    """The fetch window is wider than any zone's month."""
    start, end = padded_month_window("2025-12")

    assert start == datetime(2025, 11, 30, tzinfo=timezone.utc)
    assert end == datetime(2026, 1, 1, 23, 59, 59, 999000, tzinfo=timezone.utc)


def test_padded_month_window_clamps_at_calendar_limits() -> None:
    """The first and last supported months do not overflow."""
    start, _ = padded_month_window("0001-01")
    _, end = padded_month_window("9999-12")

    assert start == datetime(1, 1, 1, tzinfo=timezone.utc)
    assert end.year == 9999


def test_parse_date_key_validates_dates() -> None:
    """Only real YYYY-MM-DD dates are accepted."""
    assert parse_date_key("2025-12-01") == date(2025, 12, 1)
    for value in (
        "2025-12-32",
        "2025-2-01",
        "20251201",
        "",
        None,
        " 2025-12-01",
        "\uff12\uff10\uff12\uff15-\uff11\uff12-\uff10\uff11",
    ):
        with pytest.raises(InvalidDateKeyError):
            parse_date_key(value)


def test_current_month_iso_uses_injected_clock() -> None:
    """The clock decides which month is current."""
    def clock():
        return datetime(2025, 12, 15, 9, tzinfo=timezone.utc)

    assert current_month_iso(clock) == "2025-12"


def test_current_month_iso_rolls_over_in_local_timezone() -> None:
    """New Year's Eve in UTC is already January in Kolkata."""
    def clock():
        return datetime(2025, 12, 31, 20, tzinfo=timezone.utc)

    assert current_month_iso(clock, ZoneInfo("Asia/Kolkata")) == "2026-01"
    assert current_month_iso(clock) == "2025-12"


def test_current_month_iso_reads_naive_clock_as_local_wall_time() -> None:
    """Naive clock values are taken as wall time in the zone."""
    def clock():
        return datetime(2025, 5, 31, 23, 30)

    assert current_month_iso(clock, ZoneInfo("Asia/Kolkata")) == "2025-05"


def test_current_month_iso_defaults_to_system_clock() -> None:
    """Without a clock the result still has the YYYY-MM shape."""
    result = current_month_iso()

    assert len(result) == 7
    parse_month(result)


def test_resolve_timezone_accepts_names_and_instances() -> None:
    """Names resolve through zoneinfo and tzinfo instances pass through."""
    assert resolve_timezone("Asia/Kolkata") == ZoneInfo("Asia/Kolkata")
    assert resolve_timezone(None) == ZoneInfo("UTC")
    assert resolve_timezone(timezone.utc) is timezone.utc
    local_zone = resolve_timezone("local")
    assert local_zone.utcoffset(datetime(2025, 1, 1)) is not None


def test_resolve_timezone_rejects_unknown_names() -> None:
    """Unknown zones raise UnknownTimezoneError."""
    with pytest.raises(UnknownTimezoneError):
        resolve_timezone("Mars/Olympus_Mons")


@pytest.fixture
def new_york_process_zone():
    """Run the process in America/New_York, restoring TZ afterwards."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


def test_local_timezone_follows_daylight_saving(
    new_york_process_zone,
) -> None:
    """The local zone uses the offset in force at each instant."""
    tz = resolve_timezone("local")

    # 23:30 EDT before the November transition, 23:30 EST after it.
    assert local_date_key("2025-07-02T03:30:00Z", tz) == "2025-07-01"
    assert local_date_key("2025-11-02T03:30:00Z", tz) == "2025-11-01"
    assert local_date_key("2025-11-03T04:30:00Z", tz) == "2025-11-02"
    assert local_date_key("2025-12-01T04:30:00.000Z", tz) == "2025-11-30"


def test_local_timezone_month_bounds_use_winter_offset(
    new_york_process_zone,
) -> None:
    """Month edges in winter are computed with the standard offset."""
    start, end = month_bounds("2025-12", resolve_timezone("local"))

    assert start.astimezone(timezone.utc) == datetime(
        2025, 12, 1, 5, tzinfo=timezone.utc
    )
    assert end.astimezone(timezone.utc) == datetime(
        2026, 1, 1, 4, 59, 59, 999000, tzinfo=timezone.utc
    )
