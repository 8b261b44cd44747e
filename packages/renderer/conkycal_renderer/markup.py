"""Conky ``${color}`` markup helpers."""

from __future__ import annotations

import re

COLOR_RESET = "${color}"

_COLOR_TOKEN_RE = re.compile(r"\$\{color(?: #([^}]*))?\}")


def color_open(color: str) -> str:
    return f"${{color #{color}}}"


def color_span(content: str, color: str | None) -> str:
    if color is None:
        return content
    return f"{color_open(color)}{content}{COLOR_RESET}"


def parse_spans(text: str) -> list[tuple[str, str | None]]:
    """Split rendered output into ``(segment, color)`` pairs.

    Only ``${color #X}`` and the bare ``${color}`` reset are interpreted;
    any other conky variable stays in the segment text untouched.
    """
    spans: list[tuple[str, str | None]] = []
    current: str | None = None
    pos = 0
    for match in _COLOR_TOKEN_RE.finditer(text):
        if match.start() > pos:
            spans.append((text[pos : match.start()], current))
        current = match.group(1)
        pos = match.end()
    if pos < len(text):
        spans.append((text[pos:], current))
    return spans


def strip_markup(text: str) -> str:
    return "".join(segment for segment, _ in parse_spans(text))
