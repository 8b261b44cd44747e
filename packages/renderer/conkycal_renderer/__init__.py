"""Renderer package for conky calendar layout and markup."""

from .layout import STYLE_RULES, MonthLayout, StyleRule
from .markup import color_span, parse_spans, strip_markup
from .models import Cell, ColorScheme, PreviewTheme
from .monthmath import WeekStart, days_in_month, first_weekday_offset, is_leap_year
from .render import render_body, render_calendar, render_header, render_title
from .themes import DEFAULT_THEME_NAME, get_theme, list_themes

try:  # pragma: no cover - optional at import time for test environments
    from .preview import PreviewRenderer
except Exception:  # pragma: no cover
    PreviewRenderer = None  # type: ignore[assignment,misc]

__all__ = [
    "Cell",
    "ColorScheme",
    "DEFAULT_THEME_NAME",
    "MonthLayout",
    "PreviewTheme",
    "STYLE_RULES",
    "StyleRule",
    "WeekStart",
    "color_span",
    "days_in_month",
    "first_weekday_offset",
    "get_theme",
    "is_leap_year",
    "list_themes",
    "parse_spans",
    "render_body",
    "render_calendar",
    "render_header",
    "render_title",
    "strip_markup",
]

if PreviewRenderer is not None:
    __all__.append("PreviewRenderer")
