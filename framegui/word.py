"""Text rendering with run-length encoded glyph lattices."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from itertools import repeat
from operator import attrgetter
from typing import Optional, Union

from .colors import Align, argb_a, rgb, rgb_b, rgb_g, rgb_r
from .rect import Rect
from .resource import FontInfo, Lattice

_BUFFER_LEN = 16
_ERROR_GLYPH_SIZE = 16

Text = Union[str, bytes]


def _utf8_length(lead: int) -> int:
    if lead < 0xC0:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    if lead < 0xF8:
        return 4
    if lead < 0xFC:
        return 5
    if lead < 0xFE:
        return 6
    return 1


def iter_utf8_codes(text: Text) -> Iterator[int]:
    """Yield each character's UTF-8 bytes packed big-endian into one integer."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    pos = 0
    while pos < len(data):
        lead = data[pos]
        if lead == 0:
            return
        size = _utf8_length(lead)
        if size > 4:
            raise ValueError(f"unsupported UTF-8 lead byte 0x{lead:02X}")
        chunk = data[pos:pos + size]
        if len(chunk) < size:
            raise ValueError("truncated UTF-8 sequence")
        yield int.from_bytes(chunk, "big")
        pos += size


def value_to_string(value: int, dot_position: int) -> str:
    """Format value with dot_position (0 to 3) decimal places implied."""
    if dot_position == 0:
        text = f"{value:d}"
    elif dot_position in (1, 2, 3):
        text = f"{value / 10 ** dot_position:.{dot_position}f}"
    else:
        raise ValueError(f"dot position {dot_position} not in 0..3")
    return text[:_BUFFER_LEN - 1]


def get_lattice(font: FontInfo, utf8_code: int) -> Optional[Lattice]:
    """Find the glyph for utf8_code, or None."""
    lattices = font.lattices
    index = bisect_left(lattices, utf8_code, key=attrgetter("utf8_code"))
    if index < len(lattices) and lattices[index].utf8_code == utf8_code:
        return lattices[index]
    return None


def get_str_size(text: Optional[Text], font: Optional[FontInfo]) -> tuple[int, int]:
    """Width and height of text; missing glyphs count as square."""
    if text is None or font is None:
        return 0, 0
    width = 0
    for code in iter_utf8_codes(text):
        lattice = get_lattice(font, code)
        width += lattice.width if lattice is not None else font.height
    return width, font.height


def get_string_pos(
    text: Optional[Text], font: Optional[FontInfo], rect: Rect, align_type: int
) -> tuple[int, int]:
    """Offset of aligned text inside rect."""
    x_size, y_size = get_str_size(text, font)
    height = rect.bottom - rect.top + 1
    width = rect.right - rect.left + 1

    horizontal = align_type & Align.HMASK
    if horizontal == Align.HCENTER:
        x = (width - x_size) // 2 if width > x_size else 0
    elif horizontal == Align.LEFT:
        x = 0
    elif horizontal == Align.RIGHT:
        x = width - x_size if width > x_size else 0
    else:
        raise ValueError(f"invalid horizontal alignment 0x{align_type:08X}")

    vertical = align_type & Align.VMASK
    if vertical == Align.VCENTER:
        y = (height - y_size) // 2 if height > y_size else 0
    elif vertical == Align.TOP:
        y = 0
    elif vertical == Align.BOTTOM:
        y = height - y_size if height > y_size else 0
    else:
        raise ValueError(f"invalid vertical alignment 0x{align_type:08X}")
    return x, y


def _expand_runs(data: bytes) -> Iterator[int]:
    for value, count in zip(data[0::2], data[1::2]):
        if count == 0:
            raise ValueError("lattice run of length 0")
        yield from repeat(value, count)


def _blend(font_color: int, bg_color: int, alpha: int) -> int:
    inverse = 255 - alpha
    r = (rgb_r(font_color) * alpha + rgb_r(bg_color) * inverse) >> 8
    g = (rgb_g(font_color) * alpha + rgb_g(bg_color) * inverse) >> 8
    b = (rgb_b(font_color) * alpha + rgb_b(bg_color) * inverse) >> 8
    return rgb(r, g, b)


def draw_lattice(
    surface, z_order: int, x: int, y: int, width: int, height: int,
    data: bytes, font_color: int, bg_color: int,
) -> None:
    """Draw a glyph of (alpha, count) runs, blending font and background colours."""
    pixels = _expand_runs(data)
    blended: dict[int, int] = {}
    for row in range(height):
        for col in range(width):
            alpha = next(pixels, None)
            if alpha is None:
                raise ValueError("lattice data too short")
            if alpha == 0:
                if argb_a(bg_color):
                    surface.draw_pixel(x + col, y + row, bg_color, z_order)
                continue
            if alpha not in blended:
                blended[alpha] = _blend(font_color, bg_color, alpha)
            surface.draw_pixel(x + col, y + row, blended[alpha], z_order)


def draw_single_char(
    surface, z_order: int, utf8_code: int, x: int, y: int,
    font: Optional[FontInfo], font_color: int, bg_color: int,
) -> int:
    """Draw one character and return its width; unknown characters show an X."""
    error_color = 0xFFFFFFFF
    if font is not None:
        lattice = get_lattice(font, utf8_code)
        if lattice is not None:
            draw_lattice(surface, z_order, x, y, lattice.width, font.height,
                         lattice.data, font_color, bg_color)
            return lattice.width
    else:
        error_color = rgb(255, 0, 0)

    size = _ERROR_GLYPH_SIZE
    for row in range(size):
        for col in range(size):
            on_cross = abs(col - row) <= 1 or abs(col + row - size) <= 1
            surface.draw_pixel(x + col, y + row, error_color if on_cross else 0, z_order)
    return size


def draw_string(
    surface, z_order: int, text: Optional[Text], x: int, y: int,
    font: Optional[FontInfo], font_color: int, bg_color: int,
    align_type: int = Align.LEFT,
) -> int:
    """Draw text from (x, y) left to right; return the width drawn."""
    if text is None:
        return 0
    offset = 0
    for code in iter_utf8_codes(text):
        offset += draw_single_char(surface, z_order, code, x + offset, y,
                                   font, font_color, bg_color)
    return offset


def draw_string_in_rect(
    surface, z_order: int, text: Optional[Text], rect: Rect,
    font: Optional[FontInfo], font_color: int, bg_color: int,
    align_type: int = Align.LEFT,
) -> None:
    """Draw text aligned inside rect."""
    if text is None:
        return
    x, y = get_string_pos(text, font, rect, align_type)
    draw_string(surface, z_order, text, rect.left + x, rect.top + y,
                font, font_color, bg_color, Align.LEFT)


def draw_value(
    surface, z_order: int, value: int, dot_position: int, x: int, y: int,
    font: Optional[FontInfo], font_color: int, bg_color: int,
    align_type: int = Align.LEFT,
) -> None:
    """Draw a fixed-point number at (x, y)."""
    draw_string(surface, z_order, value_to_string(value, dot_position), x, y,
                font, font_color, bg_color, align_type)


def draw_value_in_rect(
    surface, z_order: int, value: int, dot_position: int, rect: Rect,
    font: Optional[FontInfo], font_color: int, bg_color: int,
    align_type: int = Align.LEFT,
) -> None:
    """Draw a fixed-point number aligned inside rect."""
    draw_string_in_rect(surface, z_order, value_to_string(value, dot_position), rect,
                        font, font_color, bg_color, align_type)