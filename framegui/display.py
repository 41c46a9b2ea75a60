"""A display: the physical framebuffer and the surfaces that draw to it."""

from __future__ import annotations

import struct
from typing import Optional

from .colors import rgb16_to_32, rgb32_to_16
from .platform import build_bmp
from .surface import ExternalGfxOp, Surface, SurfaceNoFb, ZOrder

SURFACE_CNT_MAX = 6


class Display:
    """Owns a framebuffer (a list of pixel values, or None) and a pool of surfaces."""

    def __init__(
        self,
        phy_fb: Optional[list[int]],
        display_width: int,
        display_height: int,
        surface_width: int,
        surface_height: int,
        color_bytes: int,
        surface_cnt: int,
        gfx_op: Optional[ExternalGfxOp] = None,
    ) -> None:
        if color_bytes not in (2, 4):
            raise ValueError("only 16-bit and 32-bit colour are supported")
        if surface_cnt > SURFACE_CNT_MAX:
            raise ValueError(f"at most {SURFACE_CNT_MAX} surfaces")
        self.width = display_width
        self.height = display_height
        self.color_bytes = color_bytes
        self.phy_fb = phy_fb
        self.phy_read_index = 0
        self.phy_write_index = 0
        self.surface_cnt = surface_cnt
        self.surfaces: list[Surface] = [
            Surface(self, surface_width, surface_height, color_bytes)
            if phy_fb is not None
            else SurfaceNoFb(self, surface_width, surface_height, color_bytes, gfx_op)
            for _ in range(surface_cnt)
        ]

    def alloc_surface(self, usr: object, max_zorder: int) -> Surface:
        """Give a free surface to usr."""
        if max_zorder >= ZOrder.MAX:
            raise ValueError(f"invalid top layer {max_zorder}")
        if any(surface.usr is usr for surface in self.surfaces):
            raise ValueError("a surface is already allocated to this user")
        for surface in self.surfaces:
            if surface.usr is None:
                surface.set_surface(usr, max_zorder)
                return surface
        raise RuntimeError("no free surface")

    def merge_surface(
        self, s0: Surface, s1: Surface, x0: int, x1: int, y0: int, y1: int, offset: int
    ) -> None:
        """Show s0 shifted left by offset with the start of s1 filling the gap."""
        surface_width = s0.width
        surface_height = s0.height
        if (offset < 0 or offset > surface_width
                or not 0 <= y0 < surface_height or not 0 <= y1 < surface_height
                or not 0 <= x0 < surface_width or not 0 <= x1 < surface_width):
            raise ValueError("merge area outside surface")
        width = x1 - x0 + 1
        if width < 0 or width > surface_width or width < offset:
            raise ValueError("invalid merge width")
        if s0.fb is None or s1.fb is None:
            raise ValueError("merged surfaces need their own buffers")

        x0 = min(x0, self.width - 1)
        x1 = min(x1, self.width - 1)
        y0 = min(y0, self.height - 1)
        y1 = min(y1, self.height - 1)

        if self.phy_fb is not None:
            left_len = width - offset
            for y in range(y0, y1 + 1):
                src = y * s0.width + x0 + offset
                dst = y * self.width + x0
                self.phy_fb[dst:dst + left_len] = s0.fb[src:src + left_len]
                src = y * s1.width + x0
                dst = y * self.width + x0 + left_len
                self.phy_fb[dst:dst + offset] = s1.fb[src:src + offset]
        else:
            gfx_op = getattr(s0, "gfx_op", None)
            draw_pixel = gfx_op.draw_pixel if gfx_op is not None else None
            if draw_pixel is None:
                raise ValueError("no external draw_pixel to merge with")
            decode = (lambda v: v) if self.color_bytes == 4 else rgb16_to_32
            for y in range(y0, y1 + 1):
                for x in range(x0, x1 - offset + 1):
                    draw_pixel(x, y, decode(s0.fb[y * self.width + x + offset]))
                for x in range(x1 - offset, x1 + 1):
                    draw_pixel(x, y, decode(s1.fb[y * self.width + x + offset - x1 + x0]))

        self.phy_write_index += 1

    def get_updated_fb(self, force_update: bool = False) -> Optional[list[int]]:
        """Return the framebuffer if it changed since the last call, else None."""
        if force_update:
            return self.phy_fb
        if self.phy_read_index == self.phy_write_index:
            return None
        self.phy_read_index = self.phy_write_index
        return self.phy_fb

    def snap_shot(self, file_name) -> None:
        """Save the framebuffer as a 16-bit BMP file."""
        if self.phy_fb is None:
            raise RuntimeError("display has no physical framebuffer")
        count = self.width * self.height
        pixels = self.phy_fb[:count]
        if self.color_bytes == 4:
            pixels = [rgb32_to_16(value) for value in pixels]
        data = struct.pack(f"<{count}H", *(value & 0xFFFF for value in pixels))
        build_bmp(file_name, self.width, self.height, data)