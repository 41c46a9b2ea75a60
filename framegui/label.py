"""Static text label widget."""

from __future__ import annotations

from .colors import Align
from .theme import ColorType, FontType, Theme
from .wnd import Wnd, WndAttr
from .word import draw_string_in_rect


class Label(Wnd):
    """Left-aligned text on the parent's background colour; never takes focus."""

    def clone(self) -> Label:
        return type(self)()

    def pre_create_wnd(self) -> None:
        self.attr = WndAttr.VISIBLE
        self.font_color = Theme.get_color(ColorType.WND_FONT)
        self.font_type = Theme.get_font(FontType.DEFAULT)

    def on_paint(self) -> None:
        if not self.text:
            return
        rect = self.screen_rect()
        bg = self.parent.bg_color if self.parent is not None else self.bg_color
        self.surface.fill_rect(rect.left, rect.top, rect.right, rect.bottom, bg, self.z_order)
        draw_string_in_rect(self.surface, self.z_order, self.text, rect, self.font_type,
                            self.font_color, bg, Align.LEFT | Align.VCENTER)