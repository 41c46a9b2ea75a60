"""Spin box widget with up and down arrow buttons."""

from __future__ import annotations

from collections.abc import Callable

from .button import GL_BN_CLICKED, Button, on_bn_clicked
from .cmd_target import CallbackType, MessageEntry, MsgType
from .colors import Align
from .rect import Rect
from .theme import ColorType, FontType, Theme
from .wnd import TouchAction, Wnd, WndAttr, WndStatus
from .word import draw_value_in_rect

GL_SPIN_CONFIRM = 0x2222
GL_SPIN_CHANGE = 0x3333

ARROW_BT_HEIGHT = 55
ID_BT_ARROW_UP = 1
ID_BT_ARROW_DOWN = 2


def on_spin_confirm(ctrl_id: int, handler: Callable[..., object]) -> MessageEntry:
    """Map spin box ctrl_id's confirmation to handler(target, ctrl_id, value)."""
    return MessageEntry(MsgType.WND, GL_SPIN_CONFIRM, ctrl_id, CallbackType.VWL, handler)


def on_spin_change(ctrl_id: int, handler: Callable[..., object]) -> MessageEntry:
    """Map spin box ctrl_id's value changes to handler(target, ctrl_id, value)."""
    return MessageEntry(MsgType.WND, GL_SPIN_CHANGE, ctrl_id, CallbackType.VWL, handler)


class SpinBox(Wnd):
    """A number that the arrow buttons step between min_value and max_value."""

    def __init__(self) -> None:
        super().__init__()
        self.cur_value = 0
        self._value = 0
        self.step = 1
        self.max_value = 6
        self.min_value = 1
        self.digit = 0
        self.bt_up = Button()
        self.bt_down = Button()
        self.bt_up_rect = Rect()
        self.bt_down_rect = Rect()

    def clone(self) -> SpinBox:
        return type(self)()

    @property
    def value(self) -> int:
        """The confirmed value."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = self.cur_value = value

    def set_max_min(self, max_value: int, min_value: int) -> None:
        self.max_value = max_value
        self.min_value = min_value

    def pre_create_wnd(self) -> None:
        self.attr = WndAttr.VISIBLE | WndAttr.FOCUS
        self.font_type = Theme.get_font(FontType.DEFAULT)
        self.font_color = Theme.get_color(ColorType.WND_FONT)
        self.max_value = 6
        self.min_value = 1
        self.digit = 0
        self.step = 1

        rect = self.screen_rect()
        half = rect.width() // 2
        top = rect.bottom + 1
        self.bt_up_rect = Rect(rect.left, top, rect.left + half - 1, top + ARROW_BT_HEIGHT)
        self.bt_down_rect = Rect(rect.left + half, top, rect.right, top + ARROW_BT_HEIGHT)

    def find_msg_entry(self, msg_type, msg_id, ctrl_id):
        if msg_type == MsgType.WND:
            entry = _SPIN_MESSAGES.get((msg_id, ctrl_id))
            if entry is not None:
                return entry
        return super().find_msg_entry(msg_type, msg_id, ctrl_id)

    def on_touch(self, x: int, y: int, action: TouchAction) -> bool:
        if action == TouchAction.DOWN:
            self._on_touch_down(x, y)
        else:
            self._on_touch_up(x, y)
        return Wnd.on_touch(self, x, y, action)

    def _on_touch_down(self, x: int, y: int) -> None:
        if not self.wnd_rect.contains(x, y):
            return  # maybe an arrow button
        if self.status == WndStatus.NORMAL:
            self.parent.set_child_focus(self)

    def _on_touch_up(self, x: int, y: int) -> None:
        if not self.wnd_rect.contains(x, y):
            return
        if self.status == WndStatus.FOCUSED:
            self.status = WndStatus.PUSHED
            self.on_paint()
        elif self.status == WndStatus.PUSHED:
            self._value = self.cur_value
            self.status = WndStatus.FOCUSED
            self.on_paint()
            self.notify_parent(GL_SPIN_CONFIRM, self.resource_id, self._value)

    def on_focus(self) -> None:
        self.status = WndStatus.FOCUSED
        self.on_paint()

    def on_kill_focus(self) -> None:
        self.cur_value = self._value
        self.status = WndStatus.NORMAL
        self.on_paint()

    def _show_arrow_buttons(self) -> None:
        height = self.wnd_rect.height()
        self.bt_up.connect(self, ID_BT_ARROW_UP, "\u25b2", 0, height,
                           self.bt_up_rect.width(), self.bt_up_rect.height())
        self.bt_up.show_window()
        self.bt_down.connect(self, ID_BT_ARROW_DOWN, "\u25bc", self.bt_up_rect.width(), height,
                             self.bt_down_rect.width(), self.bt_down_rect.height())
        self.bt_down.show_window()
        self.attr = WndAttr.VISIBLE | WndAttr.FOCUS | WndAttr.MODAL

    def _hide_arrow_buttons(self) -> None:
        self.bt_up.disconnect()
        self.bt_down.disconnect()
        self.attr = WndAttr.VISIBLE | WndAttr.FOCUS

    def on_paint(self) -> None:
        rect = self.screen_rect()
        parent_z = self.parent.z_order
        centered = Align.HCENTER | Align.VCENTER
        if self.status in (WndStatus.NORMAL, WndStatus.FOCUSED):
            if self.z_order > parent_z:
                self._hide_arrow_buttons()
                self.surface.set_frame_layer_visible_rect(Rect(), self.z_order)
                self.z_order = parent_z
            color_type = ColorType.WND_NORMAL if self.status == WndStatus.NORMAL else ColorType.WND_FOCUS
            bg = Theme.get_color(color_type)
            self.surface.fill_rect_in(rect, bg, self.z_order)
            draw_value_in_rect(self.surface, parent_z, self.cur_value, self.digit, rect,
                               self.font_type, self.font_color, bg, centered)
        elif self.status == WndStatus.PUSHED:
            if self.z_order == parent_z:
                self.z_order += 1
            arrows = Rect(rect.left, self.bt_down_rect.top, rect.right, self.bt_down_rect.bottom)
            self.surface.set_frame_layer_visible_rect(arrows, self.z_order)
            self._show_arrow_buttons()
            bg = Theme.get_color(ColorType.WND_PUSHED)
            self.surface.fill_rect(rect.left, rect.top, rect.right, rect.bottom, bg, parent_z)
            self.surface.draw_rect(rect.left, rect.top, rect.right, rect.bottom,
                                   Theme.get_color(ColorType.WND_BORDER), parent_z, 2)
            draw_value_in_rect(self.surface, parent_z, self.cur_value, self.digit, rect,
                               self.font_type, self.font_color, bg, centered)
        else:
            raise ValueError(f"cannot paint a spin box in status {self.status!r}")

    def on_arrow_up_bt_click(self, ctrl_id: int) -> None:
        """Step the value up unless that passes max_value."""
        if self.cur_value + self.step > self.max_value:
            return
        self.cur_value += self.step
        self.notify_parent(GL_SPIN_CHANGE, self.resource_id, self.cur_value)
        self.on_paint()

    def on_arrow_down_bt_click(self, ctrl_id: int) -> None:
        """Step the value down unless that passes min_value."""
        if self.cur_value - self.step < self.min_value:
            return
        self.cur_value -= self.step
        self.notify_parent(GL_SPIN_CHANGE, self.resource_id, self.cur_value)
        self.on_paint()


_SPIN_MESSAGES: dict[tuple[int, int], MessageEntry] = {
    (GL_BN_CLICKED, ID_BT_ARROW_UP): on_bn_clicked(ID_BT_ARROW_UP, SpinBox.on_arrow_up_bt_click),
    (GL_BN_CLICKED, ID_BT_ARROW_DOWN): on_bn_clicked(ID_BT_ARROW_DOWN, SpinBox.on_arrow_down_bt_click),
}