"""PNG preview of conky-colored calendar text."""

from __future__ import annotations

import re
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .markup import parse_spans, strip_markup
from .models import PreviewTheme
from .themes import get_theme

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


def hex_to_rgb(value: str | None, fallback: tuple[int, int, int]) -> tuple[int, int, int]:
    """Parse ``RRGGBB`` or ``#RRGGBB``; anything else conky may accept maps to ``fallback``."""
    match = _HEX_RE.fullmatch(value or "")
    if match is None:
        return fallback
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


class PreviewRenderer:
    """Draws rendered calendar markup the way conky would color it."""

    def __init__(self, font_size: int = 16, padding: int = 12, line_spacing: int = 4) -> None:
        self.font_size = font_size
        self.padding = padding
        self.line_spacing = line_spacing

    def render_image(self, text: str, theme_name: str | None = None) -> Image.Image:
        theme = get_theme(theme_name)
        font = self._font(self.font_size)
        lines = strip_markup(text).rstrip("\n").split("\n")

        scratch = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        text_w = max((scratch.textlength(line, font=font) for line in lines), default=0)
        line_h = self._line_height(font)
        width = int(text_w) + 2 * self.padding
        height = len(lines) * line_h + 2 * self.padding

        background = hex_to_rgb(theme.background, (0, 0, 0))
        image = Image.new("RGB", (max(width, 1), max(height, 1)), background)
        self._draw_spans(ImageDraw.Draw(image), text, theme, font, line_h)
        return image

    def save(self, text: str, path: Path, theme_name: str | None = None) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render_image(text, theme_name).save(path, format="PNG")
        return path

    def _draw_spans(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        theme: PreviewTheme,
        font,
        line_h: int,
    ) -> None:
        foreground = hex_to_rgb(theme.foreground, (255, 255, 255))
        x = float(self.padding)
        y = self.padding
        for segment, color in parse_spans(text):
            fill = hex_to_rgb(color, foreground)
            parts = segment.split("\n")
            for idx, part in enumerate(parts):
                if idx > 0:
                    x = float(self.padding)
                    y += line_h
                if part:
                    draw.text((x, y), part, font=font, fill=fill)
                    x += draw.textlength(part, font=font)

    def _line_height(self, font) -> int:
        _, top, _, bottom = font.getbbox("Mg")
        return int(bottom - top) + self.line_spacing

    def _font(self, size: int):
        try:
            return ImageFont.truetype("DejaVuSansMono.ttf", size)
        except Exception:
            try:
                return ImageFont.truetype("cour.ttf", size)
            except Exception:
                return ImageFont.load_default()
