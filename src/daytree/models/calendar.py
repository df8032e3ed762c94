"""Calendar keys and period values."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class CalendarKey:
    """Key of a year, month or day node.

    Unused components are 0, so keys of the same level sort chronologically.
    """

    year: int
    month: int = 0
    day: int = 0

    @property
    def level(self) -> int:
        """Outline level of the node this key identifies (1 year, 2 month, 3 day)."""
        if self.day:
            return 3
        if self.month:
            return 2
        return 1

    @property
    def parent(self) -> "CalendarKey | None":
        if self.day:
            return CalendarKey(self.year, self.month)
        if self.month:
            return CalendarKey(self.year)
        return None

    def __str__(self) -> str:
        if self.day:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if self.month:
            return f"{self.year:04d}-{self.month:02d}"
        return f"{self.year:04d}"


class TimeUnit(Enum):
    """Units accepted by date shifting."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_letter(cls, letter: str) -> "TimeUnit | None":
        return _UNIT_LETTERS.get(letter)


_UNIT_LETTERS = {
    "d": TimeUnit.DAY,
    "w": TimeUnit.WEEK,
    "m": TimeUnit.MONTH,
    "y": TimeUnit.YEAR,
}


@dataclass(frozen=True)
class Period:
    """A signed amount of calendar units, e.g. ``2w`` or ``-1m``."""

    amount: int
    unit: TimeUnit

    def __str__(self) -> str:
        return f"{self.amount}{self.unit.value[0]}"
