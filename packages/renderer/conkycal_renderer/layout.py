"""Week-row layout of a single month and per-cell color selection."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .models import Cell, ColorScheme
from .monthmath import WeekStart, days_in_month, first_weekday_offset

COLUMNS = 7


@dataclass(frozen=True)
class StyleRule:
    """Colors a day with ``ColorScheme.<slot>`` when that slot is set and ``applies`` holds."""

    slot: str
    applies: Callable[["MonthLayout", int, int, "int | None"], bool]


# First match wins.
STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule("today", lambda layout, day, column, today: day == today),
    StyleRule("weekend", lambda layout, day, column, today: layout.is_weekend_column(column)),
    StyleRule("day", lambda layout, day, column, today: True),
)


@dataclass(frozen=True)
class MonthLayout:
    year: int
    month: int
    days: int
    offset: int
    week_start: WeekStart

    @classmethod
    def for_date(cls, value, week_start: WeekStart = WeekStart.SUNDAY) -> MonthLayout:
        return cls(
            year=value.year,
            month=value.month,
            days=days_in_month(value),
            offset=first_weekday_offset(value, week_start),
            week_start=week_start,
        )

    @property
    def saturday_col(self) -> int:
        return self.week_start.saturday_col

    @property
    def sunday_col(self) -> int:
        return self.week_start.sunday_col

    @property
    def rows(self) -> int:
        return -(-(self.offset + self.days) // COLUMNS)

    def is_weekend_column(self, column: int) -> bool:
        return column in (self.saturday_col, self.sunday_col)

    def color_for(self, day: int, column: int, colors: ColorScheme, today: int | None = None) -> str | None:
        for rule in STYLE_RULES:
            color = getattr(colors, rule.slot)
            if color is not None and rule.applies(self, day, column, today):
                return color
        return None

    def iter_cells(self, colors: ColorScheme | None = None, today: int | None = None) -> Iterator[Cell]:
        """Yield offset blanks then day cells, sharing one column counter.

        A day cell that starts a new row is flagged with ``wraps``; blanks never wrap.
        """
        colors = colors or ColorScheme()
        column = 0
        for _ in range(self.offset):
            yield Cell(day=None, column=column)
            column += 1

        for day in range(1, self.days + 1):
            wraps = column >= COLUMNS
            if wraps:
                column = 0
            yield Cell(day=day, column=column, color=self.color_for(day, column, colors, today), wraps=wraps)
            column += 1
