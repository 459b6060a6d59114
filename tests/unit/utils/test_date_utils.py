from datetime import date, datetime, timedelta, timezone

import pytest

from app.utils.dates import (
    dt_to_iso,
    format_minutes,
    now,
    today,
    whole_years_between,
    years_before,
)


def test_dt_to_iso_converts_to_utc_and_adds_z_suffix():
    # 2025-01-01 12:00 in UTC+2 -> 10:00 UTC
    local_dt = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert dt_to_iso(local_dt) == "2025-01-01T10:00:00Z"


def test_now_returns_timezone_aware_utc_datetime():
    result = now()

    assert result.tzinfo is not None
    assert result.tzinfo.utcoffset(result) == timedelta(0)


def test_today_follows_now(fixed_now):
    assert today() == fixed_now.date()


def test_years_before_handles_leap_day():
    assert years_before(date(2025, 12, 18), 20) == date(2005, 12, 18)
    assert years_before(date(2024, 2, 29), 1) == date(2023, 2, 28)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(1995, 6, 1), date(2025, 6, 1), 30),
        (date(1995, 6, 2), date(2025, 6, 1), 29),
        (date(2025, 6, 1), date(2025, 6, 1), 0),
        (date(2030, 1, 1), date(2025, 1, 1), 0),
    ],
)
def test_whole_years_between(start, end, expected):
    assert whole_years_between(start, end) == expected


def test_format_minutes():
    assert format_minutes(0) == "0m"
    assert format_minutes(45) == "45m"
    assert format_minutes(90) == "1h 30m"
