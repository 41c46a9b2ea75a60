"""Push button widget."""

from __future__ import annotations

from collections.abc import Callable

from .cmd_target import CallbackType, MessageEntry, MsgType
from .colors import Align
from .theme import ColorType, FontType, Theme
from .wnd import KeyType, TouchAction, Wnd, WndAttr, WndStatus
from .word import draw_string_in_rect

GL_BN_CLICKED = 0x1111


def on_bn_clicked(ctrl_id: int, handler: Callable[..., object]) -> MessageEntry:
    """Map a click of button ctrl_id to handler(target, ctrl_id)."""
    return MessageEntry(MsgType.WND, GL_BN_CLICKED, ctrl_id, CallbackType.VWV, handler)


class Button(Wnd):
    """A button that notifies its parent when clicked."""

    def clone(self) -> Button:
        return type(self)()

    def pre_create_wnd(self) -> None:
        self.attr = WndAttr.VISIBLE | WndAttr.FOCUS
        self.font_type = Theme.get_font(FontType.DEFAULT)
        self.font_color = Theme.get_color(ColorType.WND_FONT)

    def on_focus(self) -> None:
        self.status = WndStatus.FOCUSED
        self.on_paint()

    def on_kill_focus(self) -> None:
        self.status = WndStatus.NORMAL
        self.on_paint()

    def on_touch(self, x: int, y: int, action: TouchAction) -> bool:
        if action == TouchAction.DOWN:
            self.parent.set_child_focus(self)
            self.status = WndStatus.PUSHED
            self.on_paint()
        else:
            self.status = WndStatus.FOCUSED
            self.on_paint()
            self.notify_parent(GL_BN_CLICKED, self.resource_id, 0)
        return True

    def on_key(self, key: KeyType) -> bool:
        """Enter clicks the button and stops the key; other keys go to the parent."""
        if key == KeyType.ENTER:
            self.notify_parent(GL_BN_CLICKED, self.resource_id, 0)
            return False
        return True

    def on_paint(self) -> None:
        rect = self.screen_rect()
        if self.status == WndStatus.NORMAL:
            bg = Theme.get_color(ColorType.WND_NORMAL)
            self.surface.fill_rect_in(rect, bg, self.z_order)
        elif self.status == WndStatus.FOCUSED:
            bg = Theme.get_color(ColorType.WND_FOCUS)
            self.surface.fill_rect_in(rect, bg, self.z_order)
        elif self.status == WndStatus.PUSHED:
            bg = Theme.get_color(ColorType.WND_PUSHED)
            self.surface.fill_rect_in(rect, bg, self.z_order)
            self.surface.draw_rect_in(rect, Theme.get_color(ColorType.WND_BORDER), 2, self.z_order)
        else:
            raise ValueError(f"cannot paint a button in status {self.status!r}")
        if self.text:
            draw_string_in_rect(self.surface, self.z_order, self.text, rect, self.font_type,
                                self.font_color, bg, Align.HCENTER | Align.VCENTER)