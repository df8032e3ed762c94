"""Tests for date parsing, formatting, shifting and enumeration."""

from datetime import date

import pytest

from daytree.core.dates.codec import (
    enumerate_inclusive,
    format_key,
    from_date,
    parse_key,
    parse_period,
    shift,
    shift_by_period,
    to_date,
    week_start_for,
)
from daytree.errors import InvalidDateFormat, RangeOrderingViolation, UnrecognizedPeriodUnit
from daytree.models.calendar import CalendarKey, Period, TimeUnit


@pytest.mark.parametrize("text", ["2025-07-29", "2024-02-29", "0999-01-01", "2025-12-31"])
def test_format_reverses_parse(text: str) -> None:
    assert format_key(parse_key(text)) == text


def test_parse_key_returns_day_key() -> None:
    key = parse_key("2025-07-29")

    assert key == CalendarKey(2025, 7, 29)
    assert key.level == 3
    assert key.parent == CalendarKey(2025, 7)


@pytest.mark.parametrize(
    "text",
    [
        "2025-7-29",
        "25-07-29",
        "2025/07/29",
        "2025-07-29 ",
        "20250729",
        "2025-02-30",
        "",
        "\uff12\uff10\uff12\uff15-01-01",
    ],
)
def test_parse_key_rejects_malformed_dates(text: str) -> None:
    with pytest.raises(InvalidDateFormat):
        parse_key(text)


def test_date_conversions_round_trip() -> None:
    assert to_date(from_date(date(2025, 7, 29))) == date(2025, 7, 29)
    assert to_date(CalendarKey(2025, 7)) == date(2025, 7, 1)


def test_shift_by_one_day() -> None:
    assert shift("2025-07-29", 1, TimeUnit.DAY) == "2025-07-30"


def test_shift_month_rolls_overflow_forward() -> None:
    """Jan 31 + 1 month is Feb 31, which normalizes to Mar 3 in a non-leap year."""
    assert shift("2025-01-31", 1, "month") == "2025-03-03"
    assert shift("2024-01-31", 1, "month") == "2024-03-02"
    assert shift("2025-03-31", -1, "month") == "2025-03-03"


def test_shift_year_rolls_leap_day_forward() -> None:
    assert shift("2024-02-29", 1, "year") == "2025-03-01"
    assert shift("2024-02-29", 4, "year") == "2028-02-29"


def test_shift_week_and_negative_amounts() -> None:
    assert shift("2025-01-01", 2, "week") == "2025-01-15"
    assert shift("2025-01-01", -1, "day") == "2024-12-31"
    assert shift("2025-12-15", 1, "month") == "2026-01-15"


def test_shift_rejects_malformed_date() -> None:
    with pytest.raises(InvalidDateFormat):
        shift("July 29", 1, "day")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2w", Period(2, TimeUnit.WEEK)),
        ("-1m", Period(-1, TimeUnit.MONTH)),
        ("+3d", Period(3, TimeUnit.DAY)),
        (" 1y ", Period(1, TimeUnit.YEAR)),
    ],
)
def test_parse_period(text: str, expected: Period) -> None:
    assert parse_period(text) == expected


@pytest.mark.parametrize("text", ["2x", "w", "", "1.5d", "2W", "d2", "\uff12d"])
def test_parse_period_rejects_unknown_units(text: str) -> None:
    with pytest.raises(UnrecognizedPeriodUnit):
        parse_period(text)


def test_shift_by_period_accepts_text() -> None:
    assert shift_by_period("2025-01-01", "1w") == "2025-01-08"


def test_enumerate_single_day() -> None:
    assert enumerate_inclusive("2025-07-29", "2025-07-29") == ["2025-07-29"]


def test_enumerate_three_days() -> None:
    assert enumerate_inclusive("2025-07-29", "2025-07-31") == [
        "2025-07-29",
        "2025-07-30",
        "2025-07-31",
    ]


def test_enumerate_crosses_month_end() -> None:
    assert enumerate_inclusive("2025-02-27", "2025-03-02") == [
        "2025-02-27",
        "2025-02-28",
        "2025-03-01",
        "2025-03-02",
    ]


def test_enumerate_rejects_reversed_range() -> None:
    with pytest.raises(RangeOrderingViolation, match="after its end"):
        enumerate_inclusive("2025-07-31", "2025-07-29")


def test_week_start_for() -> None:
    thursday = date(2025, 7, 31)

    assert week_start_for(thursday, 0) == date(2025, 7, 28)
    assert week_start_for(thursday, 6) == date(2025, 7, 27)
    assert week_start_for(thursday, 3) == thursday
