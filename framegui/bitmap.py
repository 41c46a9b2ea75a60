"""Drawing RGB565 bitmaps onto surfaces with a transparent mask colour."""

from __future__ import annotations

from typing import Optional

from .colors import rgb16_to_32, rgb32_to_16
from .resource import BitmapInfo
from .surface import ZOrder

DEFAULT_MASK_COLOR = 0xFF080408


def _blit(surface, z_order, bitmap, x, y, src_x, src_y, width, height, mask_rgb) -> None:
    lower_fb = surface.frame_layers[z_order - 1].fb if z_order >= ZOrder.LEVEL_1 else None
    mask16 = rgb32_to_16(mask_rgb)
    for j in range(height):
        row = (src_y + j) * bitmap.width + src_x
        for i, value in enumerate(bitmap.data[row:row + width]):
            px, py = x + i, y + j
            if value != mask16:
                surface.draw_pixel(px, py, rgb16_to_32(value), z_order)
            elif lower_fb is not None and 0 <= px < surface.width and 0 <= py < surface.height:
                # Transparent pixel: show the layer underneath.
                surface.draw_pixel(px, py, rgb16_to_32(lower_fb[py * surface.width + px]), z_order)


def draw_bitmap(
    surface, z_order: int, bitmap: Optional[BitmapInfo], x: int, y: int,
    mask_rgb: int = DEFAULT_MASK_COLOR,
) -> None:
    """Draw a whole bitmap with its top-left corner at (x, y)."""
    if bitmap is None:
        return
    _blit(surface, z_order, bitmap, x, y, 0, 0, bitmap.width, bitmap.height, mask_rgb)


def draw_bitmap_region(
    surface, z_order: int, bitmap: Optional[BitmapInfo], x: int, y: int,
    src_x: int, src_y: int, width: int, height: int,
    mask_rgb: int = DEFAULT_MASK_COLOR,
) -> None:
    """Draw part of a bitmap; nothing is drawn if the part exceeds the bitmap."""
    if bitmap is None or src_x + width > bitmap.width or src_y + height > bitmap.height:
        return
    _blit(surface, z_order, bitmap, x, y, src_x, src_y, width, height, mask_rgb)