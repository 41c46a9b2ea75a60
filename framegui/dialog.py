"""Dialog windows shown on the layer above their surface's pages."""

from __future__ import annotations

from typing import ClassVar, Optional

from .colors import Align, argb, rgb
from .display import SURFACE_CNT_MAX
from .rect import Rect
from .surface import Surface, ZOrder
from .theme import FontType, Theme
from .wnd import Wnd, WndAttr
from .word import draw_string


class Dialog(Wnd):
    """A window on layer 1; each surface shows at most one dialog at a time."""

    _the_dialogs: ClassVar[dict[Surface, Optional[Dialog]]] = {}

    def clone(self) -> Dialog:
        return type(self)()

    def pre_create_wnd(self) -> None:
        self.attr = WndAttr.NONE
        self.z_order = ZOrder.LEVEL_1
        self.bg_color = rgb(33, 42, 53)

    def on_paint(self) -> None:
        rect = self.screen_rect()
        self.surface.fill_rect_in(rect, self.bg_color, self.z_order)
        if self.text:
            draw_string(self.surface, self.z_order, self.text, rect.left + 35, rect.top,
                        Theme.get_font(FontType.DEFAULT), rgb(255, 255, 255),
                        argb(0, 0, 0, 0), Align.LEFT)

    @classmethod
    def open_dialog(cls, dialog: Optional[Dialog], modal_mode: bool = True) -> None:
        """Show dialog on its surface, hiding any dialog already there."""
        if dialog is None:
            raise ValueError("no dialog to open")
        current = cls.get_the_dialog(dialog.surface)
        if current is dialog:
            return
        if current is not None:
            current.attr = WndAttr.NONE
        dialog.surface.set_frame_layer_visible_rect(dialog.screen_rect(), ZOrder.LEVEL_1)
        attr = WndAttr.VISIBLE | WndAttr.FOCUS
        if modal_mode:
            attr |= WndAttr.MODAL
        dialog.attr = attr
        dialog.show_window()
        dialog._set_me_the_dialog()

    @classmethod
    def close_dialog(cls, surface: Surface) -> bool:
        """Hide the surface's dialog; return whether there was one."""
        dialog = cls.get_the_dialog(surface)
        if dialog is None:
            return False
        dialog.attr = WndAttr.NONE
        surface.set_frame_layer_visible_rect(Rect(), dialog.z_order)
        Dialog._the_dialogs[surface] = None
        return True

    @classmethod
    def get_the_dialog(cls, surface: Surface) -> Optional[Dialog]:
        """The dialog shown on surface, or None."""
        return Dialog._the_dialogs.get(surface)

    @classmethod
    def clear_dialogs(cls) -> None:
        """Forget every surface's dialog."""
        Dialog._the_dialogs.clear()

    def _set_me_the_dialog(self) -> None:
        dialogs = Dialog._the_dialogs
        if self.surface not in dialogs and len(dialogs) >= SURFACE_CNT_MAX:
            raise RuntimeError("no free dialog slot")
        dialogs[self.surface] = self