"""Drawing text with loaded bitmap fonts."""

from __future__ import annotations

from typing import Optional

from .font import VOID, Font, FontError, FontRegistry, Glyph
from .image import Image

__all__ = [
    "DEFAULT_PUT_SCALE",
    "draw_glyph",
    "fill_spacing",
    "string_put",
    "string_to_image",
]

DEFAULT_PUT_SCALE = 2


def _draw_scaled_pixel(image: Image, x: int, y: int, color: int,
                       scale: int) -> None:
    for t in range(scale):
        for s in range(scale):
            if x + t < image.width and y + s < image.height:
                image.put_pixel(x + t, y + s, color)


def draw_glyph(image: Image, glyph: Optional[Glyph], x: int, y: int,
               scale: int) -> None:
    """Draw ``glyph`` with its top-left corner at ``(x, y)``.

    Each glyph pixel becomes a ``scale`` x ``scale`` block. Blocks whose
    corner falls outside the image are skipped, the rest are clipped.
    A missing glyph, or the glyph for code 0, draws nothing.
    """
    if glyph is None or glyph.code == 0:
        return
    for px, py, color in glyph.pixels:
        left = x + px * scale
        top = y + py * scale
        if image.contains(left, top) and color != VOID:
            _draw_scaled_pixel(image, left, top, color, scale)


def fill_spacing(image: Image, font: Font, x: int, y: int,
                 scale: int) -> None:
    """Paint the gap after a glyph drawn at ``(x, y)``.

    The gap is ``font.space`` columns wide and takes the colour of the first
    entry of the colour table; nothing is painted when that colour is void.
    """
    if not font.table or font.table[0].color == VOID:
        return
    color = font.table[0].color
    start_x = x + font.width * scale
    for i in range(font.space * scale):
        for j in range(font.height * scale):
            column, row = start_x + i, y + j
            if image.contains(column, row):
                image.put_pixel(column, row, color)


def _draw_text(image: Image, font: Font, x: int, y: int, text: str,
               scale: int) -> None:
    advance = (font.width + font.space) * scale
    last = len(text) - 1
    for position, char in enumerate(text):
        draw_glyph(image, font.glyphs.get(ord(char)), x, y, scale)
        if position != last:
            fill_spacing(image, font, x, y, scale)
        x += advance


def string_put(registry: FontRegistry, image: Image, x: int, y: int,
               text: str, scale: int = DEFAULT_PUT_SCALE) -> None:
    """Draw ``text`` onto ``image`` at ``(x, y)`` with the first loaded font."""
    font = registry.first()
    if font is None:
        raise FontError("No font found")
    _draw_text(image, font, x, y, text, scale)


def string_to_image(registry: FontRegistry, font_name: str, text: str,
                    scale: int) -> Image:
    """Return a new image just large enough to hold ``text`` in ``font_name``."""
    font = registry.by_name(font_name)
    if font is None:
        raise FontError(f"Invalid font: {font_name!r}")
    image = Image(len(text) * (font.width + font.space) * scale,
                  font.height * scale)
    _draw_text(image, font, 0, 0, text, scale)
    return image