"""Bitmap and font resource records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class BitmapInfo:
    """A bitmap of RGB565 pixels stored row by row."""

    width: int
    height: int
    data: Sequence[int]
    bits_per_pixel: int = 16

    def pixel(self, x: int, y: int) -> int:
        """Return the RGB565 value at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return self.data[y * self.width + x]


@dataclass(frozen=True)
class Lattice:
    """One glyph: its code, width and run-length encoded alpha data."""

    utf8_code: int
    width: int
    data: bytes


@dataclass
class FontInfo:
    """A font: glyph height and glyphs kept sorted by code."""

    height: int
    lattices: Sequence[Lattice] = ()

    def __post_init__(self) -> None:
        self.lattices = tuple(sorted(self.lattices, key=attrgetter("utf8_code")))

    @property
    def count(self) -> int:
        return len(self.lattices)