"""Process-wide registry of fonts, bitmaps and colours."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Optional

from .resource import BitmapInfo, FontInfo


class FontType(IntEnum):
    NULL = 0
    DEFAULT = 1
    CUSTOM1 = 2
    CUSTOM2 = 3
    CUSTOM3 = 4
    CUSTOM4 = 5
    CUSTOM5 = 6
    CUSTOM6 = 7


class BitmapType(IntEnum):
    CUSTOM1 = 0
    CUSTOM2 = 1
    CUSTOM3 = 2
    CUSTOM4 = 3
    CUSTOM5 = 4
    CUSTOM6 = 5


class ColorType(IntEnum):
    WND_FONT = 0
    WND_NORMAL = 1
    WND_PUSHED = 2
    WND_FOCUS = 3
    WND_BORDER = 4
    CUSTOM1 = 5
    CUSTOM2 = 6
    CUSTOM3 = 7
    CUSTOM4 = 8
    CUSTOM5 = 9
    CUSTOM6 = 10


class Theme:
    """Shared theme tables; an unknown index raises ValueError."""

    _fonts: ClassVar[dict[FontType, FontInfo]] = {}
    _bitmaps: ClassVar[dict[BitmapType, BitmapInfo]] = {}
    _colors: ClassVar[dict[ColorType, int]] = {}

    @classmethod
    def add_font(cls, index: int, font: Optional[FontInfo]) -> None:
        cls._fonts[FontType(index)] = font

    @classmethod
    def get_font(cls, index: int) -> Optional[FontInfo]:
        return cls._fonts.get(FontType(index))

    @classmethod
    def add_bitmap(cls, index: int, bmp: Optional[BitmapInfo]) -> None:
        cls._bitmaps[BitmapType(index)] = bmp

    @classmethod
    def get_bitmap(cls, index: int) -> Optional[BitmapInfo]:
        return cls._bitmaps.get(BitmapType(index))

    @classmethod
    def add_color(cls, index: int, color: int) -> None:
        cls._colors[ColorType(index)] = color

    @classmethod
    def get_color(cls, index: int) -> int:
        return cls._colors.get(ColorType(index), 0)

    @classmethod
    def reset(cls) -> None:
        """Forget every registered font, bitmap and colour."""
        cls._fonts.clear()
        cls._bitmaps.clear()
        cls._colors.clear()