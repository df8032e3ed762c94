"""ISO date text, calendar keys and date arithmetic."""

import re
from datetime import date, timedelta

from daytree.errors import InvalidDateFormat, RangeOrderingViolation, UnrecognizedPeriodUnit
from daytree.models.calendar import CalendarKey, Period, TimeUnit

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_PERIOD_RE = re.compile(r"([+-]?[0-9]+)([A-Za-z])")


def parse_key(text: str) -> CalendarKey:
    """Parse ``YYYY-MM-DD`` into a day key.

    Raises:
        InvalidDateFormat: If the text has any other shape or is not a real date.
    """
    match = _ISO_DATE_RE.fullmatch(text)
    if match is None:
        msg = f"Expected a YYYY-MM-DD date, got {text!r}"
        raise InvalidDateFormat(msg)
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError as e:
        msg = f"Not a calendar date: {text!r} ({e})"
        raise InvalidDateFormat(msg) from e
    return CalendarKey(year, month, day)


def format_key(key: CalendarKey) -> str:
    return str(key)


def to_date(key: CalendarKey) -> date:
    return date(key.year, key.month or 1, key.day or 1)


def from_date(value: date) -> CalendarKey:
    return CalendarKey(value.year, value.month, value.day)


def _as_date(value: str | CalendarKey | date) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, CalendarKey):
        return to_date(value)
    return to_date(parse_key(value))


def _add_months(value: date, months: int) -> date:
    # Day-of-month overflow rolls forward into the following month(s): Jan 31 + 1 month
    # is Feb 31, which normalizes to Mar 3 (or Mar 2 in leap years).
    year, month = divmod(value.year * 12 + value.month - 1 + months, 12)
    return date(year, month + 1, 1) + timedelta(days=value.day - 1)


def shift_date(value: date, amount: int, unit: TimeUnit | str) -> date:
    """Shift a date by a signed amount of calendar units."""
    unit = TimeUnit(unit) if isinstance(unit, str) else unit
    if unit is TimeUnit.DAY:
        return value + timedelta(days=amount)
    if unit is TimeUnit.WEEK:
        return value + timedelta(days=7 * amount)
    if unit is TimeUnit.MONTH:
        return _add_months(value, amount)
    return _add_months(value, 12 * amount)


def shift(value: str | CalendarKey | date, amount: int, unit: TimeUnit | str) -> str:
    """Shift a date and return it as ``YYYY-MM-DD``.

    Month and year shifts never clamp: ``shift("2025-01-31", 1, "month")`` is
    ``"2025-03-03"``.
    """
    return format_key(from_date(shift_date(_as_date(value), amount, unit)))


def parse_period(text: str) -> Period:
    """Parse a period such as ``2w``, ``+3d`` or ``-1m``.

    Raises:
        UnrecognizedPeriodUnit: If the text is not ``[+-]digits`` plus one of ``d w m y``.
    """
    match = _PERIOD_RE.fullmatch(text.strip())
    unit = TimeUnit.from_letter(match.group(2)) if match else None
    if match is None or unit is None:
        msg = f"Unrecognized period {text!r}: use e.g. 3d, 2w, -1m or 1y"
        raise UnrecognizedPeriodUnit(msg)
    return Period(int(match.group(1)), unit)


def shift_by_period(value: str | CalendarKey | date, period: Period | str) -> str:
    if isinstance(period, str):
        period = parse_period(period)
    return shift(value, period.amount, period.unit)


def enumerate_inclusive(start: str, end: str) -> list[str]:
    """Return every date from start to end inclusive, ascending.

    Raises:
        InvalidDateFormat: If either bound is malformed.
        RangeOrderingViolation: If start is after end.
    """
    first = to_date(parse_key(start))
    last = to_date(parse_key(end))
    if first > last:
        msg = f"Range start {start} is after its end {end}"
        raise RangeOrderingViolation(msg)
    return [
        format_key(from_date(first + timedelta(days=offset)))
        for offset in range((last - first).days + 1)
    ]


def today_key(today: date | None = None) -> CalendarKey:
    return from_date(today or date.today())


def week_start_for(day: date, week_start: int) -> date:
    """Move back to the most recent given weekday (0 = Monday ... 6 = Sunday)."""
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def as_day_key(value: str | CalendarKey) -> CalendarKey:
    """Accept ``YYYY-MM-DD`` text or a day key.

    Raises:
        InvalidDateFormat: If the text is malformed.
        ValueError: If the key is a year or month key.
    """
    if isinstance(value, CalendarKey):
        if value.level != 3:
            msg = f"Not a day key: {value}"
            raise ValueError(msg)
        return value
    return parse_key(value)
