"""Text rendering of the month header and body with embedded conky markup."""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from datetime import date

from .layout import MonthLayout
from .markup import color_span
from .models import ColorScheme
from .monthmath import WeekStart

TITLE_WIDTH = 20


def render_title(value: date) -> str:
    return format(f"{calendar.month_name[value.month]} {value.year}", f"^{TITLE_WIDTH}")


def render_header(value: date, week_start: WeekStart, label_color: str | None = None) -> str:
    # One span covers both lines.
    return color_span(f"{render_title(value)}\n{week_start.labels}", label_color)


def iter_body(layout: MonthLayout, colors: ColorScheme, today: int | None = None) -> Iterator[str]:
    for cell in layout.iter_cells(colors, today):
        if cell.wraps:
            yield "\n"
        yield cell.render()
    yield "\n"


def render_body(layout: MonthLayout, colors: ColorScheme, today: int | None = None) -> str:
    return "".join(iter_body(layout, colors, today))


def render_calendar(
    today: date,
    week_start: WeekStart = WeekStart.SUNDAY,
    colors: ColorScheme | None = None,
) -> str:
    """Full calendar text for ``today``'s month, ending in a newline."""
    colors = colors or ColorScheme()
    layout = MonthLayout.for_date(today, week_start)
    header = render_header(today, week_start, colors.label)
    return f"{header}\n{render_body(layout, colors, today.day)}"
