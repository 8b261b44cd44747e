"""Render settings schema, resolved once per run from CLI args and the clock."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from conkycal_renderer import DEFAULT_THEME_NAME, ColorScheme, WeekStart, list_themes

LOG_LEVEL_ENV = "CONKY_CALENDAR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RenderConfig:
    week_start: WeekStart = WeekStart.SUNDAY
    colors: ColorScheme = field(default_factory=ColorScheme)
    today: date = field(default_factory=date.today)


@dataclass(frozen=True)
class PreviewConfig:
    path: Path | None = None
    theme: str = DEFAULT_THEME_NAME


@dataclass(frozen=True)
class AppConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    log_level: str = DEFAULT_LOG_LEVEL


def _normalize_log_level(value: str | None) -> str:
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in _LOG_LEVELS else DEFAULT_LOG_LEVEL


def _normalize_theme(value: str | None) -> str:
    return value if value in list_themes() else DEFAULT_THEME_NAME


def log_level_from_env(environ: Mapping[str, str] | None = None) -> str:
    environ = os.environ if environ is None else environ
    return _normalize_log_level(environ.get(LOG_LEVEL_ENV))


def colors_from_args(args: argparse.Namespace) -> ColorScheme:
    # Colors pass through verbatim; conky is the only judge of their syntax.
    return ColorScheme(
        label=getattr(args, "label_color", None),
        today=getattr(args, "today_color", None),
        weekend=getattr(args, "weekend_color", None),
        day=getattr(args, "day_color", None),
    )


def config_from_args(
    args: argparse.Namespace,
    now: datetime | date | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    now = now or datetime.now()
    today = now.date() if isinstance(now, datetime) else now
    week_start = WeekStart.MONDAY if getattr(args, "monday_as_first", False) else WeekStart.SUNDAY

    preview_path = getattr(args, "preview", None)
    return AppConfig(
        render=RenderConfig(week_start=week_start, colors=colors_from_args(args), today=today),
        preview=PreviewConfig(
            path=Path(preview_path).expanduser() if preview_path else None,
            theme=_normalize_theme(getattr(args, "preview_theme", None)),
        ),
        log_level=log_level_from_env(environ),
    )
