"""Drop-down list widget."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .cmd_target import CallbackType, MessageEntry, MsgType
from .colors import Align, argb, rgb
from .rect import Rect
from .theme import ColorType, FontType, Theme
from .wnd import TouchAction, Wnd, WndAttr, WndStatus
from .word import draw_string_in_rect

MAX_ITEM_NUM = 4
GL_LIST_CONFIRM = 0x1
ITEM_HEIGHT = 45


def on_list_confirm(ctrl_id: int, handler: Callable[..., object]) -> MessageEntry:
    """Map list ctrl_id's confirmation to handler(target, ctrl_id, selected_index)."""
    return MessageEntry(MsgType.WND, GL_LIST_CONFIRM, ctrl_id, CallbackType.VWL, handler)


class ListBox(Wnd):
    """Shows the selected item; when pushed, drops down the full list."""

    def __init__(self) -> None:
        super().__init__()
        self.items: list[str] = []
        self.selected_item = 0
        self.list_wnd_rect = Rect()  # relative to the parent window
        self.list_screen_rect = Rect()  # relative to the screen

    def clone(self) -> ListBox:
        return type(self)()

    def add_item(self, text: str) -> None:
        """Append an item; at most MAX_ITEM_NUM items are held."""
        if len(self.items) >= MAX_ITEM_NUM:
            raise OverflowError(f"a list box holds at most {MAX_ITEM_NUM} items")
        self.items.append(text)
        self._update_list_size()

    def clear_item(self) -> None:
        """Remove every item and reset the selection."""
        self.items.clear()
        self.selected_item = 0
        self._update_list_size()

    @property
    def item_count(self) -> int:
        return len(self.items)

    def select_item(self, index: int) -> None:
        """Select the item at index."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"item {index} out of range")
        self.selected_item = index

    def pre_create_wnd(self) -> None:
        self.attr = WndAttr.VISIBLE | WndAttr.FOCUS
        self.items = []
        self.selected_item = 0
        self.font_type = Theme.get_font(FontType.DEFAULT)
        self.font_color = Theme.get_color(ColorType.WND_FONT)

    def on_focus(self) -> None:
        self.status = WndStatus.FOCUSED
        self.on_paint()

    def on_kill_focus(self) -> None:
        self.status = WndStatus.NORMAL
        self.on_paint()

    def _selected_text(self) -> Optional[str]:
        if 0 <= self.selected_item < len(self.items):
            return self.items[self.selected_item]
        return None

    def on_paint(self) -> None:
        rect = self.screen_rect()
        centered = Align.HCENTER | Align.VCENTER
        if self.status in (WndStatus.NORMAL, WndStatus.FOCUSED):
            if self.z_order > self.parent.z_order:
                self.surface.set_frame_layer_visible_rect(Rect(), self.z_order)
                self.z_order = self.parent.z_order
                self.attr = WndAttr.VISIBLE | WndAttr.FOCUS
            color_type = ColorType.WND_NORMAL if self.status == WndStatus.NORMAL else ColorType.WND_FOCUS
            bg = Theme.get_color(color_type)
            self.surface.fill_rect_in(rect, bg, self.z_order)
            draw_string_in_rect(self.surface, self.z_order, self._selected_text(), rect,
                                self.font_type, self.font_color, bg, centered)
        elif self.status == WndStatus.PUSHED:
            self.surface.fill_rect_in(rect, Theme.get_color(ColorType.WND_PUSHED), self.z_order)
            self.surface.draw_rect_in(rect, Theme.get_color(ColorType.WND_BORDER), 2, self.z_order)
            draw_string_in_rect(self.surface, self.z_order, self._selected_text(), rect,
                                self.font_type, rgb(2, 124, 165), argb(0, 0, 0, 0), centered)
            if self.items:
                if self.z_order == self.parent.z_order:
                    self.z_order += 1
                self.surface.set_frame_layer_visible_rect(self.list_screen_rect, self.z_order)
                self.attr = WndAttr.VISIBLE | WndAttr.FOCUS | WndAttr.MODAL
                self._show_list()
        else:
            raise ValueError(f"cannot paint a list box in status {self.status!r}")

    def on_touch(self, x: int, y: int, action: TouchAction) -> bool:
        if action == TouchAction.DOWN:
            self._on_touch_down(x, y)
        else:
            self._on_touch_up(x, y)
        return True

    def _on_touch_down(self, x: int, y: int) -> None:
        if self.wnd_rect.contains(x, y):
            if self.status == WndStatus.NORMAL:
                self.parent.set_child_focus(self)
        elif self.list_wnd_rect.contains(x, y):
            Wnd.on_touch(self, x, y, TouchAction.DOWN)
        elif self.status == WndStatus.PUSHED:
            self.status = WndStatus.FOCUSED
            self.on_paint()
            self.notify_parent(GL_LIST_CONFIRM, self.resource_id, self.selected_item)

    def _on_touch_up(self, x: int, y: int) -> None:
        if self.status == WndStatus.FOCUSED:
            self.status = WndStatus.PUSHED
            self.on_paint()
        elif self.status == WndStatus.PUSHED:
            if self.wnd_rect.contains(x, y):
                self.status = WndStatus.FOCUSED
                self.on_paint()
            elif self.list_wnd_rect.contains(x, y):
                self.status = WndStatus.FOCUSED
                index = (y - self.list_wnd_rect.top) // ITEM_HEIGHT
                self.select_item(min(index, len(self.items) - 1))
                self.on_paint()
                self.notify_parent(GL_LIST_CONFIRM, self.resource_id, self.selected_item)
            else:
                Wnd.on_touch(self, x, y, TouchAction.UP)

    def _update_list_size(self) -> None:
        extent = len(self.items) * ITEM_HEIGHT
        top = self.wnd_rect.bottom + 1
        self.list_wnd_rect = Rect(self.wnd_rect.left, top, self.wnd_rect.right, top + extent)
        screen = self.screen_rect()
        top = screen.bottom + 1
        self.list_screen_rect = Rect(screen.left, top, screen.right, top + extent)

    def _show_list(self) -> None:
        centered = Align.HCENTER | Align.VCENTER
        for index, text in enumerate(self.items):
            top = self.list_screen_rect.top + index * ITEM_HEIGHT
            item_rect = Rect(self.list_screen_rect.left, top,
                             self.list_screen_rect.right, top + ITEM_HEIGHT)
            if index == self.selected_item:
                bg = Theme.get_color(ColorType.WND_FOCUS)
            else:
                bg = rgb(17, 17, 17)
            self.surface.fill_rect_in(item_rect, bg, self.z_order)
            draw_string_in_rect(self.surface, self.z_order, text, item_rect, self.font_type,
                                self.font_color, bg, centered)