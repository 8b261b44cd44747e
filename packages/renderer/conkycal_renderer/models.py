"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

from .markup import color_span


@dataclass(frozen=True)
class ColorScheme:
    label: str | None = None
    today: str | None = None
    weekend: str | None = None
    day: str | None = None


@dataclass(frozen=True)
class Cell:
    """One 3-wide slot of the calendar body; ``day`` is None for offset blanks."""

    day: int | None
    column: int
    color: str | None = None
    wraps: bool = False

    @property
    def text(self) -> str:
        return format("" if self.day is None else self.day, "^3")

    def render(self) -> str:
        return color_span(self.text, self.color)


@dataclass(frozen=True)
class PreviewTheme:
    name: str
    background: str
    foreground: str
