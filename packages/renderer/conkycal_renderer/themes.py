"""Built-in preview backgrounds."""

from __future__ import annotations

from .models import PreviewTheme

DEFAULT_THEME_NAME = "Conky Dark"

THEMES: dict[str, PreviewTheme] = {
    "Conky Dark": PreviewTheme(name="Conky Dark", background="#1B1D23", foreground="#D8DEE9"),
    "Conky Light": PreviewTheme(name="Conky Light", background="#F4F4F0", foreground="#2E3440"),
    "Midnight": PreviewTheme(name="Midnight", background="#000000", foreground="#FFFFFF"),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> PreviewTheme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
