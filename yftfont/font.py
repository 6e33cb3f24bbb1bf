"""Loading of ``.yft`` bitmap fonts.

A font file is a brace-delimited text format. Blanks are insignificant and
both ``//`` and ``/* */`` comments are allowed. The header names the font,
its glyph size and its colour table::

    {font="MyCoolFont",width=9,height=5,space=3,colors=2,".cVoid","#cFill"}

Each colour pair maps one pointer character to a colour: ``Void`` (nothing
is drawn), ``Fill`` (white) or a ``0x``-prefixed hexadecimal value. The
header is followed by glyphs, one row string per line of pixels::

    {ascii=66,{"#######..","#......#.","#######..","#......#.","#######..",}}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from .numparse import atohexi, atoi

__all__ = [
    "VOID",
    "FILL",
    "MAX_FONTS",
    "MAX_COLORS",
    "MAX_GLYPH_PIXELS",
    "NAME_LIMIT",
    "ASCII_LIMIT",
    "FontError",
    "ColorPair",
    "Glyph",
    "Font",
    "FontRegistry",
    "strip_comments",
    "monoline",
    "parse_font",
    "parse_glyph",
    "read_font_file",
    "load_font",
]

VOID = 0x000000
FILL = 0xFFFFFF

VOID_STRING = "Void"
FILL_STRING = "Fill"

MAX_FONTS = 10
MAX_COLORS = 16
MAX_GLYPH_PIXELS = 256
NAME_LIMIT = 127
ASCII_LIMIT = 128

_BLANKS = " \f\n\r\t\v"
_NAME_QUOTE_AT = 6

PathLike = Union[str, Path]


class FontError(ValueError):
    """Raised when a font description cannot be read."""


@dataclass(frozen=True)
class ColorPair:
    """One entry of a font's colour table."""

    pointer: str
    color: int


@dataclass
class Glyph:
    """The coloured pixels of one character, as ``(x, y, color)`` triples."""

    code: int
    pixels: list[tuple[int, int, int]] = field(default_factory=list)


@dataclass
class Font:
    """A parsed bitmap font."""

    name: str = ""
    height: int = 0
    width: int = 0
    space: int = 0
    colors: int = 0
    table: list[ColorPair] = field(default_factory=list)
    glyphs: dict[int, Glyph] = field(default_factory=dict)

    def color_of(self, pointer: str) -> int:
        """Colour mapped to ``pointer``, or :data:`VOID` when it has none."""
        for pair in self.table:
            if not pair.pointer:
                break
            if pair.pointer == pointer:
                return pair.color
        return VOID


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments from ``text``.

    A line comment is removed together with its newline and the character
    that follows it. An unterminated comment cuts the text where it starts.
    """
    buf = text
    i = 0
    while i < len(buf):
        if buf.startswith("//", i):
            end = buf.find("\n", i)
            if end < 0:
                return buf[:i]
            buf = buf[:i] + buf[end + 2:]
        if buf.startswith("/*", i):
            end = buf.find("*/", i)
            if end < 0:
                return buf[:i]
            buf = buf[:i] + buf[end + 2:]
        i += 1
    return buf


def monoline(text: str) -> str:
    """Return ``text`` with every blank character removed."""
    return "".join(char for char in text if char not in _BLANKS)


def _quoted_length(line: str, start: int) -> int:
    """Length of the quoted text opening at ``start``; 0 if no quote is there."""
    quote = line[start:start + 1]
    if quote not in ("'", '"'):
        return 0
    end = line.find(quote, start + 1)
    return (len(line) if end < 0 else end) - (start + 1)


def _field(line: str, key: str) -> Optional[int]:
    position = line.find(key)
    if position < 0:
        return None
    return atoi(line[position + len(key):])


def _required_field(line: str, key: str) -> int:
    value = _field(line, key)
    if value is None:
        raise FontError(f"font header has no '{key}' field")
    return value


def _color_pair(line: str, start: int) -> ColorPair:
    """Parse a pair such as ``".cVoid"`` whose opening quote is at ``start``."""
    pointer = line[start + 1:start + 2]
    value_at = start + 3
    if line.startswith(VOID_STRING, value_at):
        return ColorPair(pointer, VOID)
    if line.startswith(FILL_STRING, value_at):
        return ColorPair(pointer, FILL)
    return ColorPair(pointer, atohexi(line[value_at:]) & 0xFFFFFFFF)


def _nth_quote(line: str, count: int) -> int:
    position = -1
    for _ in range(count):
        position = line.find('"', position + 1)
        if position < 0:
            raise FontError("font header has no colour table")
    return position


def _read_color_table(line: str, font: Font) -> int:
    """Fill ``font.table``; return the index just after the header."""
    n = len(line)
    i = _nth_quote(line, 3)
    while i < n and not line.startswith("}{", i):
        if len(font.table) >= MAX_COLORS:
            raise FontError(f"more than {MAX_COLORS} colours in the table")
        font.table.append(_color_pair(line, i))
        closing = line.find('"', i + 1)
        i = (n if closing < 0 else closing) + 1
        if i >= n or len(font.table) > font.colors:
            raise FontError("malformed colour table")
        separator = line[i]
        i += 1
        if separator == "}":
            break
    return i


def _read_row(row_text: str, start: int, y: int, font: Font,
              glyph: Glyph) -> None:
    """Add the coloured pixels of the row string opening at ``start``."""
    for x, pointer in enumerate(row_text[start + 1:]):
        if pointer == '"':
            return
        color = font.color_of(pointer)
        if color == VOID:
            continue
        if len(glyph.pixels) >= MAX_GLYPH_PIXELS:
            raise FontError(
                f"glyph {glyph.code} has more than {MAX_GLYPH_PIXELS} pixels")
        glyph.pixels.append((x, y, color))


def parse_glyph(miniline: str, font: Font) -> Glyph:
    """Parse one ``{ascii=N,{...}}`` block into ``font`` and return the glyph.

    The glyph is registered before its rows are read, so a block that turns
    out to be malformed leaves the rows read so far in place.
    """
    code = atoi(miniline[7:])
    if not 0 <= code < ASCII_LIMIT:
        raise FontError(f"glyph code {code} is outside 0..{ASCII_LIMIT - 1}")
    glyph = Glyph(code)
    font.glyphs[code] = glyph
    n = len(miniline)
    opener = miniline.find("{", 1)
    if opener < 0:
        raise FontError(f"glyph {code} has no rows")
    i = opener + 1
    y = 0
    while i < n and y < font.height and not miniline.startswith("}}", i):
        _read_row(miniline, i, y, font, glyph)
        comma = miniline.find(",", i)
        if comma < 0:
            raise FontError(f"glyph {code} ends inside a row")
        i = comma + 1
        y += 1
    if i >= n:
        raise FontError(f"glyph {code} is not closed")
    return glyph


def parse_font(line: str) -> Font:
    """Parse a whole font from its comment-free, blank-free text.

    Glyph blocks that cannot be read completely keep what was read of them;
    a block without its closing ``}}`` makes the whole font invalid.
    """
    font = Font()
    name_length = _quoted_length(line, _NAME_QUOTE_AT)
    start = _NAME_QUOTE_AT + 1
    font.name = line[start:start + name_length][:NAME_LIMIT]
    font.height = _required_field(line, "height=")
    font.width = _required_field(line, "width=")
    space = _field(line, "space=")
    if space is not None:
        font.space = space
    font.colors = _required_field(line, "colors=")
    i = _read_color_table(line, font)
    n = len(line)
    while i < n:
        try:
            parse_glyph(line[i:], font)
        except FontError:
            pass
        end = line.find("}}", i)
        if end < 0:
            raise FontError("glyph block is not closed")
        i = end + 2
    return font


def read_font_file(path: PathLike) -> str:
    """Return the whole text of the font file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


def load_font(path: PathLike) -> Font:
    """Read, clean and parse the font file at ``path``."""
    text = read_font_file(path)
    if not text:
        raise FontError(f"font file {path} is empty")
    return parse_font(monoline(strip_comments(text)))


class FontRegistry:
    """A bounded collection of loaded fonts, kept in loading order."""

    def __init__(self, capacity: int = MAX_FONTS) -> None:
        self._capacity = capacity
        self._fonts: list[Font] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[Font]:
        return iter(self._fonts)

    def load(self, path: PathLike) -> Font:
        """Load the font at ``path`` into the next free slot and return it."""
        if len(self._fonts) >= self._capacity:
            raise FontError("no free font slot")
        font = load_font(path)
        self._fonts.append(font)
        return font

    def get(self, index: int) -> Optional[Font]:
        """Font in slot ``index``, or ``None`` when the slot is empty."""
        if not 0 <= index < self._capacity:
            raise IndexError(f"font slot {index} out of range")
        return self._fonts[index] if index < len(self._fonts) else None

    def by_name(self, name: str) -> Optional[Font]:
        """First loaded font called ``name``."""
        return next((font for font in self._fonts if font.name == name), None)

    def first(self) -> Optional[Font]:
        """First loaded font that has a name."""
        return next((font for font in self._fonts if font.name), None)