"""Drawing surfaces with stacked frame layers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .colors import rgb16_to_32, rgb32_to_16, round_rgb32
from .rect import Rect


class ZOrder(IntEnum):
    """Layer levels: pages, dialogs, pop-up controls."""

    LEVEL_0 = 0
    LEVEL_1 = 1
    LEVEL_2 = 2
    MAX = 3


@dataclass
class ExternalGfxOp:
    """Drawing callbacks used when there is no physical framebuffer."""

    draw_pixel: Optional[Callable[[int, int, int], None]] = None
    fill_rect: Optional[Callable[[int, int, int, int, int], None]] = None


@dataclass
class FrameLayer:
    """An RGB565 layer buffer and the part of it that shows on screen."""

    fb: Optional[list[int]] = None
    visible_rect: Rect = field(default_factory=Rect)


class Surface:
    """A drawing target that composes layers into its own and the physical framebuffer."""

    def __init__(self, display, width: int, height: int, color_bytes: int) -> None:
        self.display = display
        self.width = width
        self.height = height
        self.color_bytes = color_bytes
        self.phy_fb = display.phy_fb
        self.fb: Optional[list[int]] = None
        self.usr: object = None
        self.top_zorder = ZOrder.LEVEL_0
        self.max_zorder = ZOrder.LEVEL_0
        self.is_active = False
        self.frame_layers = [FrameLayer() for _ in range(ZOrder.MAX)]
        self.frame_layers[ZOrder.LEVEL_0].visible_rect = Rect(0, 0, width, height)

    def set_surface(self, usr: object, max_z_order: int) -> None:
        """Hand the surface to its user and allocate its buffers."""
        self.usr = usr
        self.max_zorder = ZOrder(max_z_order)
        if self.display.surface_cnt > 1:
            self.fb = [0] * (self.width * self.height)
        for level in range(ZOrder.LEVEL_0, self.max_zorder):
            self.frame_layers[level].fb = [0] * (self.width * self.height)

    def _encode(self, rgb: int) -> int:
        return rgb if self.color_bytes == 4 else rgb32_to_16(rgb)

    def _decode(self, value: int) -> int:
        return value if self.color_bytes == 4 else rgb16_to_32(value)

    def _require_inside(self, x0: int, y0: int, x1: int, y1: int) -> None:
        if min(x0, y0, x1, y1) < 0 or max(x0, x1) >= self.width or max(y0, y1) >= self.height:
            raise ValueError(f"rectangle ({x0}, {y0}, {x1}, {y1}) outside surface")

    def get_pixel(self, x: int, y: int, z_order: int) -> int:
        """Return the 32-bit colour at (x, y) on the given layer."""
        if not (0 <= x < self.width and 0 <= y < self.height) or z_order >= ZOrder.MAX:
            raise ValueError(f"pixel ({x}, {y}) on layer {z_order} out of range")
        if z_order == self.max_zorder:
            index = y * self.width + x
            if self.fb is not None:
                return self._decode(self.fb[index])
            if self.phy_fb is not None:
                return self._decode(self.phy_fb[index])
            return 0
        layer_fb = self.frame_layers[z_order].fb
        if layer_fb is None:
            raise ValueError(f"layer {z_order} has no buffer")
        return rgb16_to_32(layer_fb[y * self.width + x])

    def draw_pixel(self, x: int, y: int, rgb: int, z_order: int) -> None:
        """Draw one pixel on a layer; pixels off the surface are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        if z_order > self.max_zorder:
            raise ValueError(f"layer {z_order} above the surface's top layer")
        rgb = round_rgb32(rgb)
        if z_order == self.max_zorder:
            self._draw_pixel_on_fb(x, y, rgb)
            return
        if z_order > self.top_zorder:
            self.top_zorder = ZOrder(z_order)
        layer = self.frame_layers[z_order]
        if not layer.visible_rect.contains(x, y):
            raise ValueError(f"pixel ({x}, {y}) outside the visible part of layer {z_order}")
        layer.fb[x + y * self.width] = rgb32_to_16(rgb)
        if z_order == self.top_zorder:
            self._draw_pixel_on_fb(x, y, rgb)
            return
        covered = any(
            self.frame_layers[level].visible_rect.contains(x, y)
            for level in range(z_order + 1, ZOrder.MAX)
        )
        if not covered:
            self._draw_pixel_on_fb(x, y, rgb)

    def _draw_pixel_on_fb(self, x: int, y: int, rgb: int) -> None:
        value = self._encode(rgb)
        if self.fb is not None:
            self.fb[y * self.width + x] = value
        display_width = self.display.width
        if self.is_active and x < display_width and y < self.display.height:
            self.phy_fb[y * display_width + x] = value
            self.display.phy_write_index += 1

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, rgb: int, z_order: int) -> None:
        """Fill the inclusive rectangle on a layer."""
        rgb = round_rgb32(rgb)
        if z_order == self.max_zorder:
            self._fill_rect_on_fb(x0, y0, x1, y1, rgb)
            return
        if z_order == self.top_zorder:
            self._require_inside(x0, y0, x1, y1)
            layer_fb = self.frame_layers[z_order].fb
            value = rgb32_to_16(rgb)
            count = max(0, x1 - x0 + 1)
            for y in range(y0, y1 + 1):
                start = y * self.width + x0
                layer_fb[start:start + count] = [value] * count
            self._fill_rect_on_fb(x0, y0, x1, y1, rgb)
            return
        for y in range(y0, y1 + 1):
            self.draw_hline(x0, x1, y, rgb, z_order)

    def _fill_rect_on_fb(self, x0: int, y0: int, x1: int, y1: int, rgb: int) -> None:
        self._require_inside(x0, y0, x1, y1)
        value = self._encode(rgb)
        display_width = self.display.width
        display_height = self.display.height
        count = max(0, x1 - x0 + 1)
        for y in range(y0, y1 + 1):
            self.display.phy_write_index += 1
            if self.fb is not None:
                start = y * self.width + x0
                self.fb[start:start + count] = [value] * count
            if self.is_active and y < display_height:
                stop = min(x1, display_width - 1)
                if stop >= x0:
                    start = y * display_width + x0
                    self.phy_fb[start:start + stop - x0 + 1] = [value] * (stop - x0 + 1)

    def fill_rect_in(self, rect: Rect, rgb: int, z_order: int) -> None:
        """Fill a Rect on a layer."""
        self.fill_rect(rect.left, rect.top, rect.right, rect.bottom, rgb, z_order)

    def draw_hline(self, x0: int, x1: int, y: int, rgb: int, z_order: int) -> None:
        for x in range(x0, x1 + 1):
            self.draw_pixel(x, y, rgb, z_order)

    def draw_vline(self, x: int, y0: int, y1: int, rgb: int, z_order: int) -> None:
        for y in range(y0, y1 + 1):
            self.draw_pixel(x, y, rgb, z_order)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, rgb: int, z_order: int) -> None:
        """Draw a line with Bresenham's algorithm."""
        step_x = 1 if x2 >= x1 else -1
        step_y = 1 if y2 >= y1 else -1
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        if dx >= dy:
            e = dy - dx // 2
            for _ in range(dx + 1):
                self.draw_pixel(x1, y1, rgb, z_order)
                if e > 0:
                    y1 += step_y
                    e -= dx
                x1 += step_x
                e += dy
            return
        e = dx - dy // 2
        count = dy + 1
        if step_x < 0 and step_y < 0:
            # Steep lines going up and left start one row in.
            y1 -= 1
            count = dy
        for _ in range(count):
            self.draw_pixel(x1, y1, rgb, z_order)
            if e > 0:
                x1 += step_x
                e -= dy
            y1 += step_y
            e += dx

    def draw_rect(
        self, x0: int, y0: int, x1: int, y1: int, rgb: int, z_order: int, size: int = 1
    ) -> None:
        """Draw a rectangle outline size pixels thick."""
        for offset in range(size):
            self.draw_hline(x0 + offset, x1 - offset, y0 + offset, rgb, z_order)
            self.draw_hline(x0 + offset, x1 - offset, y1 - offset, rgb, z_order)
            self.draw_vline(x0 + offset, y0 + offset, y1 - offset, rgb, z_order)
            self.draw_vline(x1 - offset, y0 + offset, y1 - offset, rgb, z_order)

    def draw_rect_in(self, rect: Rect, rgb: int, size: int, z_order: int) -> None:
        """Draw the outline of a Rect."""
        self.draw_rect(rect.left, rect.top, rect.right, rect.bottom, rgb, z_order, size)

    def flush_screen(self, left: int, top: int, right: int, bottom: int) -> bool:
        """Copy part of the surface buffer to the screen; False if nothing to copy."""
        self._require_inside(left, top, right, bottom)
        if not self.is_active or self.phy_fb is None or self.fb is None:
            return False
        display_width = self.display.width
        display_height = self.display.height
        left = min(left, display_width - 1)
        right = min(right, display_width - 1)
        top = min(top, display_height - 1)
        bottom = min(bottom, display_height - 1)
        count = right - left
        for y in range(top, bottom):
            src = y * self.width + left
            dst = y * display_width + left
            self.phy_fb[dst:dst + count] = self.fb[src:src + count]
        self.display.phy_write_index += 1
        return True

    def is_valid(self, rect: Rect) -> bool:
        """Whether the rectangle lies on the surface."""
        if rect.left < 0 or rect.top < 0:
            return False
        return rect.right < self.width and rect.bottom < self.height

    def set_frame_layer_visible_rect(self, rect: Rect, z_order: int) -> None:
        """Show part of a layer, restoring the lower layer where it stops showing."""
        if 0 <= z_order < ZOrder.MAX and rect == self.frame_layers[z_order].visible_rect:
            return
        if not (0 <= rect.left < self.width and 0 <= rect.right < self.width
                and 0 <= rect.top < self.height and 0 <= rect.bottom < self.height):
            raise ValueError(f"{rect!r} outside surface")
        if not ZOrder.LEVEL_0 < z_order < ZOrder.MAX:
            raise ValueError(f"layer {z_order} cannot be given a visible rectangle")
        if z_order < self.top_zorder:
            raise ValueError(f"layer {z_order} is below the top layer {int(self.top_zorder)}")
        self.top_zorder = ZOrder(z_order)
        layer = self.frame_layers[z_order]
        old_rect = layer.visible_rect
        lower_fb = self.frame_layers[z_order - 1].fb
        for y in range(old_rect.top, old_rect.bottom + 1):
            for x in range(old_rect.left, old_rect.right + 1):
                if rect.contains(x, y):
                    continue
                if lower_fb is None:
                    raise ValueError(f"layer {z_order - 1} has no buffer to restore from")
                self._draw_pixel_on_fb(x, y, rgb16_to_32(lower_fb[x + y * self.width]))
        layer.visible_rect = rect.copy()
        if rect.is_empty():
            self.top_zorder = ZOrder(z_order - 1)


class SurfaceNoFb(Surface):
    """A surface that renders through external callbacks instead of a framebuffer."""

    def __init__(
        self, display, width: int, height: int, color_bytes: int,
        gfx_op: Optional[ExternalGfxOp],
    ) -> None:
        super().__init__(display, width, height, color_bytes)
        self.gfx_op = gfx_op

    def _fill_rect_on_fb(self, x0: int, y0: int, x1: int, y1: int, rgb: int) -> None:
        if self.gfx_op is None:
            return
        if self.gfx_op.fill_rect is not None:
            self.gfx_op.fill_rect(x0, y0, x1, y1, rgb)
            return
        if self.gfx_op.draw_pixel is not None and self.is_active:
            for y in range(y0, y1 + 1):
                for x in range(x0, x1 + 1):
                    self.gfx_op.draw_pixel(x, y, rgb)
        if self.fb is None or y1 < y0:
            return
        value = self._encode(rgb)
        count = max(0, x1 - x0 + 1)
        start = y0 * self.width + x0
        self.fb[start:start + count] = [value] * count

    def _draw_pixel_on_fb(self, x: int, y: int, rgb: int) -> None:
        if self.gfx_op is not None and self.gfx_op.draw_pixel is not None and self.is_active:
            self.gfx_op.draw_pixel(x, y, rgb)
        if self.fb is not None:
            self.fb[y * self.width + x] = self._encode(rgb)