"""An in-memory 32-bit pixel surface that text is rendered onto."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

__all__ = ["Image"]

_COLOR_MASK = 0xFFFFFFFF


@dataclass
class Image:
    """A ``width`` x ``height`` grid of 32-bit colours, initially all zero."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"image size {self.width}x{self.height} is negative")
        self.pixels = [0] * (self.width * self.height)

    def contains(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``; the colour is kept to 32 bits."""
        self.pixels[self._offset(x, y)] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        return self.pixels[self._offset(x, y)]

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the pixel rows from top to bottom."""
        for start in range(0, self.width * self.height, self.width or 1):
            if self.width == 0:
                return
            yield tuple(self.pixels[start:start + self.width])