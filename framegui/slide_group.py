"""A group of full-surface pages, one of which is shown at a time."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .surface import ZOrder
from .wnd import KeyType, TouchAction, Wnd, WndTree

MAX_PAGES = 5


class SlideGroup(Wnd):
    """Holds up to MAX_PAGES slides, each drawn on its own surface."""

    def __init__(self) -> None:
        super().__init__()
        self.slides: list[Optional[Wnd]] = [None] * MAX_PAGES
        self.active_slide_index = 0

    def clone(self) -> SlideGroup:
        return type(self)()

    def set_active_slide(self, index: int, is_redraw: bool = True) -> None:
        """Make slide index the visible one, optionally copying it to the screen."""
        if not 0 <= index < MAX_PAGES:
            raise IndexError(f"slide {index} out of range")
        if self.slides[index] is None:
            raise ValueError(f"no slide at {index}")
        self.active_slide_index = index
        for position, slide in enumerate(self.slides):
            if slide is None:
                continue
            if position == index:
                slide.surface.is_active = True
                self.add_child_to_tail(slide)
                if is_redraw:
                    rc = self.screen_rect()
                    slide.surface.flush_screen(rc.left, rc.top, rc.right, rc.bottom)
            else:
                slide.surface.is_active = False

    def get_slide(self, index: int) -> Optional[Wnd]:
        return self.slides[index]

    @property
    def active_slide(self) -> Optional[Wnd]:
        return self.slides[self.active_slide_index]

    def _connect_on_new_surface(self, slide: Wnd, max_zorder: int, connect) -> Wnd:
        old_surface = self.surface
        new_surface = old_surface.display.alloc_surface(slide, max_zorder)
        new_surface.is_active = False
        self.surface = new_surface
        try:
            return connect()
        finally:
            self.surface = old_surface

    def _store(self, slide: Wnd) -> int:
        if any(existing is slide for existing in self.slides):
            raise ValueError("slide already added")
        for position, existing in enumerate(self.slides):
            if existing is None:
                self.slides[position] = slide
                slide.show_window()
                return position
        raise RuntimeError("no free slide slot")

    def add_slide(
        self, slide: Optional[Wnd], resource_id: int, x: int, y: int, width: int, height: int,
        child_tree: Optional[Sequence[WndTree]] = None, max_zorder: int = ZOrder.LEVEL_0,
    ) -> int:
        """Connect slide on a surface of its own; return its slot."""
        if slide is None:
            raise ValueError("no slide given")

        def connect() -> Wnd:
            slide.connect(self, resource_id, None, x, y, width, height, child_tree)
            return slide

        self._connect_on_new_surface(slide, max_zorder, connect)
        return self._store(slide)

    def add_clone_slide(
        self, slide: Optional[Wnd], resource_id: int, x: int, y: int, width: int, height: int,
        child_tree: Optional[Sequence[WndTree]] = None, max_zorder: int = ZOrder.LEVEL_0,
    ) -> Wnd:
        """Connect a copy of slide on a surface of its own; return the copy."""
        if slide is None:
            raise ValueError("no slide given")
        page = self._connect_on_new_surface(
            slide, max_zorder,
            lambda: slide.connect_clone(self, resource_id, None, x, y, width, height, child_tree),
        )
        self._store(page)
        return page

    def disable_all_slides(self) -> None:
        """Stop every slide from drawing to the screen."""
        for slide in self.slides:
            if slide is not None:
                slide.surface.is_active = False

    def on_touch(self, x: int, y: int, action: TouchAction) -> bool:
        x -= self.wnd_rect.left
        y -= self.wnd_rect.top
        slide = self.active_slide
        if slide is not None:
            slide.on_touch(x, y, action)
        return True

    def on_key(self, key: KeyType) -> bool:
        slide = self.active_slide
        if slide is not None:
            slide.on_key(key)
        return True