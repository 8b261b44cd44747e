"""Month geometry: leap years, month lengths and week-start offsets."""

from __future__ import annotations

from datetime import date
from enum import Enum

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})

# date.weekday() order
_WEEKDAY_ABBR = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")
_SATURDAY = 5
_SUNDAY = 6


class WeekStart(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def first_weekday(self) -> int:
        return _SUNDAY if self is WeekStart.SUNDAY else 0

    def offset_of(self, weekday: int) -> int:
        """Column of a ``date.weekday()`` value when rows start on this day."""
        return (weekday - self.first_weekday) % 7

    @property
    def saturday_col(self) -> int:
        return self.offset_of(_SATURDAY)

    @property
    def sunday_col(self) -> int:
        return self.offset_of(_SUNDAY)

    @property
    def labels(self) -> str:
        start = self.first_weekday
        return " ".join(_WEEKDAY_ABBR[start:] + _WEEKDAY_ABBR[:start])


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(value) -> int:
    """Number of days in the month of any object with ``year`` and ``month``."""
    month = value.month
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(value.year) else 28
    raise ValueError(f"invalid month: {month}")


def first_weekday_offset(value, week_start: WeekStart) -> int:
    """Blank cells before day 1 of ``value``'s month."""
    return week_start.offset_of(date(value.year, value.month, 1).weekday())
