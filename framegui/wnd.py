"""Window tree: geometry, focus, touch and key routing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Optional

from .cmd_target import CmdTarget, MsgType
from .rect import Rect
from .surface import ZOrder


class WndAttr(IntFlag):
    """Window attribute bits."""

    NONE = 0
    VISIBLE = 0x80000000
    DISABLED = 0x40000000
    FOCUS = 0x20000000
    MODAL = 0x10000000  # takes touch input wherever it lands


class WndStatus(IntEnum):
    NORMAL = 0
    PUSHED = 1
    FOCUSED = 2
    DISABLED = 3


class KeyType(IntEnum):
    FORWARD = 0
    BACKWARD = 1
    ENTER = 2


class TouchAction(IntEnum):
    DOWN = 0
    UP = 1


@dataclass
class WndTree:
    """Description of a child window to connect under a parent."""

    wnd: Wnd
    resource_id: int
    text: Optional[str] = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    child_tree: Optional[Sequence[WndTree]] = None


class Wnd(CmdTarget):
    """A window in a tree of parent, children and siblings."""

    def __init__(self) -> None:
        self.status = WndStatus.NORMAL
        self._attr = WndAttr.VISIBLE | WndAttr.FOCUS
        self.wnd_rect = Rect()
        self.parent: Optional[Wnd] = None
        self.top_child: Optional[Wnd] = None
        self.prev_sibling: Optional[Wnd] = None
        self.next_sibling: Optional[Wnd] = None
        self.text: Optional[str] = None
        self.font_type = None
        self.font_color = 0
        self.bg_color = 0
        self.resource_id = 0
        self.z_order: int = ZOrder.LEVEL_0
        self.focus_child: Optional[Wnd] = None
        self.surface = None

    # --- creation -------------------------------------------------------

    def connect(
        self,
        parent: Optional[Wnd],
        resource_id: int,
        text: Optional[str],
        x: int,
        y: int,
        width: int,
        height: int,
        child_tree: Optional[Sequence[WndTree]] = None,
    ) -> None:
        """Attach this window under parent and create its children."""
        if resource_id == 0:
            raise ValueError("resource id must not be 0")
        self.resource_id = resource_id
        self.text = text
        self.parent = parent
        self.status = WndStatus.NORMAL
        if parent is not None:
            self.z_order = parent.z_order
            self.surface = parent.surface
        if self.surface is None:
            raise ValueError("window has no surface")
        self.set_wnd_pos(x, y, width, height)
        if not self.surface.is_valid(self.screen_rect()):
            raise ValueError(f"window {resource_id} lies outside its surface")
        self.pre_create_wnd()
        if parent is not None:
            parent.add_child_to_tail(self)
        self.load_child_wnd(child_tree)
        self.load_cmd_msg()
        self.on_init_children()

    def load_child_wnd(self, child_tree: Optional[Sequence[WndTree]]) -> int:
        """Connect every window of child_tree under this one; return the count."""
        if not child_tree:
            return 0
        count = 0
        for node in child_tree:
            if node.wnd.resource_id != 0:
                raise ValueError("a window cannot be connected twice")
            node.wnd.connect(
                self, node.resource_id, node.text,
                node.x, node.y, node.width, node.height, node.child_tree,
            )
            count += 1
        return count

    def connect_clone(
        self,
        parent: Optional[Wnd],
        resource_id: int,
        text: Optional[str],
        x: int,
        y: int,
        width: int,
        height: int,
        child_tree: Optional[Sequence[WndTree]] = None,
    ) -> Wnd:
        """Connect a fresh copy of this window and return the copy."""
        if resource_id == 0:
            raise ValueError("resource id must not be 0")
        wnd = self.clone()
        wnd.resource_id = resource_id
        wnd.text = text
        wnd.parent = parent
        wnd.status = WndStatus.NORMAL
        if parent is not None:
            wnd.z_order = parent.z_order
            wnd.surface = parent.surface
        else:
            wnd.surface = self.surface
        if wnd.surface is None:
            raise ValueError("window has no surface")
        wnd.set_wnd_pos(x, y, width, height)
        if not wnd.surface.is_valid(wnd.screen_rect()):
            raise ValueError(f"window {resource_id} lies outside its surface")
        wnd.pre_create_wnd()
        if parent is not None:
            parent.add_child_to_tail(wnd)
        wnd.load_clone_child_wnd(child_tree)
        wnd.load_cmd_msg()
        wnd.on_init_children()
        return wnd

    def load_clone_child_wnd(self, child_tree: Optional[Sequence[WndTree]]) -> int:
        """Connect copies of every window of child_tree; return the count."""
        if not child_tree:
            return 0
        count = 0
        for node in child_tree:
            node.wnd.connect_clone(
                self, node.resource_id, node.text,
                node.x, node.y, node.width, node.height, node.child_tree,
            )
            count += 1
        return count

    def disconnect(self) -> None:
        """Detach this window and all its children from the tree."""
        if self.resource_id == 0:
            return
        child = self.top_child
        while child is not None:
            following = child.next_sibling
            child.disconnect()
            child = following
        if self.parent is not None:
            self.parent.unlink_child(self)
        self.focus_child = None
        self.resource_id = 0

    def clone(self) -> Wnd:
        """Return a new, unconnected window of the same class."""
        return type(self)()

    # --- hooks ----------------------------------------------------------

    def pre_create_wnd(self) -> None:
        """Called before the window joins its parent."""

    def on_init_children(self) -> None:
        """Called after the children have been connected."""

    def on_paint(self) -> None:
        """Draw the window."""

    def on_focus(self) -> None:
        """Called when the window gains focus."""

    def on_kill_focus(self) -> None:
        """Called when the window loses focus."""

    def show_window(self) -> None:
        """Paint this window and its children if visible."""
        if self._attr & WndAttr.VISIBLE:
            self.on_paint()
            for child in self.children():
                child.show_window()

    # --- tree -----------------------------------------------------------

    def children(self) -> Iterator[Wnd]:
        """Iterate over the children, first to last."""
        child = self.top_child
        while child is not None:
            following = child.next_sibling
            yield child
            child = following

    def find_child(self, resource_id: int) -> Optional[Wnd]:
        """Return the first child with the given id."""
        return next((c for c in self.children() if c.resource_id == resource_id), None)

    @property
    def attr(self) -> WndAttr:
        return self._attr

    @attr.setter
    def attr(self, value: int) -> None:
        self._attr = WndAttr(value)
        if self._attr & WndAttr.DISABLED:
            self.status = WndStatus.DISABLED
        elif self.status == WndStatus.DISABLED:
            self.status = WndStatus.NORMAL

    def is_focus_wnd(self) -> bool:
        """Whether the window is visible, enabled and can take focus."""
        a = self._attr
        return bool(a & WndAttr.VISIBLE) and not a & WndAttr.DISABLED and bool(a & WndAttr.FOCUS)

    # --- geometry -------------------------------------------------------

    def set_wnd_pos(self, x: int, y: int, width: int, height: int) -> None:
        """Place the window relative to its parent."""
        self.wnd_rect.left = x
        self.wnd_rect.top = y
        self.wnd_rect.right = x + width - 1
        self.wnd_rect.bottom = y + height - 1

    def screen_rect(self) -> Rect:
        """The window's rectangle in screen coordinates."""
        rect = Rect()
        rect.set_rect(0, 0, self.wnd_rect.width() - 1, self.wnd_rect.height() - 1)
        return self.rect_to_screen(rect)

    def _ancestors(self) -> Iterator[Wnd]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    def wnd_to_screen(self, x: int, y: int) -> tuple[int, int]:
        """Convert a point in window coordinates to screen coordinates."""
        x += self.wnd_rect.left
        y += self.wnd_rect.top
        for parent in self._ancestors():
            x += parent.wnd_rect.left
            y += parent.wnd_rect.top
        return x, y

    def rect_to_screen(self, rect: Rect) -> Rect:
        """Convert a rectangle in window coordinates to screen coordinates."""
        left, top = self.wnd_to_screen(rect.left, rect.top)
        result = Rect()
        result.set_rect(left, top, left + rect.width() - 1, top + rect.height() - 1)
        return result

    def screen_to_wnd(self, x: int, y: int) -> tuple[int, int]:
        """Convert a screen point to window coordinates."""
        x -= self.wnd_rect.left
        y -= self.wnd_rect.top
        for parent in self._ancestors():
            x -= parent.wnd_rect.left
            y -= parent.wnd_rect.top
        return x, y

    def rect_to_wnd(self, rect: Rect) -> Rect:
        """Convert a screen rectangle to window coordinates."""
        left, top = self.screen_to_wnd(rect.left, rect.top)
        result = Rect()
        result.set_rect(left, top, left + rect.width() - 1, top + rect.height() - 1)
        return result

    # --- focus and links ------------------------------------------------

    def set_child_focus(self, focus_child: Wnd) -> Optional[Wnd]:
        """Give focus to a child, up through the ancestors; return the focused child."""
        if focus_child is None:
            raise ValueError("no window to focus")
        if focus_child.parent is not self:
            raise ValueError("window to focus is not a child of this window")
        old = self.focus_child
        if focus_child.is_focus_wnd() and focus_child is not old:
            if old is not None:
                old.on_kill_focus()
            self.focus_child = focus_child
            if self.parent is not None:
                self.parent.set_child_focus(self)
            focus_child.on_focus()
        return self.focus_child

    def add_child_to_tail(self, child: Optional[Wnd]) -> None:
        """Append child after the last child, unless already present."""
        if child is None or self.find_child(child.resource_id) is child:
            return
        last = self.last_child()
        if last is None:
            self.top_child = child
            child.prev_sibling = None
        else:
            last.next_sibling = child
            child.prev_sibling = last
        child.next_sibling = None

    def last_child(self) -> Optional[Wnd]:
        """The last child, or None."""
        last = None
        for last in self.children():
            pass
        return last

    def unlink_child(self, child: Optional[Wnd]) -> bool:
        """Remove child from the sibling list; return whether it was found."""
        if child is None or child.parent is not self or self.top_child is None:
            return False
        if self.top_child is child:
            self.top_child = child.next_sibling
            if child.next_sibling is not None:
                child.next_sibling.prev_sibling = None
        else:
            node = self.top_child
            while node.next_sibling is not None and node.next_sibling is not child:
                node = node.next_sibling
            if node.next_sibling is None:
                return False
            node.next_sibling = child.next_sibling
            if child.next_sibling is not None:
                child.next_sibling.prev_sibling = node
        if self.focus_child is child:
            self.focus_child = None
        child.next_sibling = None
        child.prev_sibling = None
        return True

    def notify_parent(self, msg_id: int, ctrl_id: int, param: int) -> None:
        """Deliver a notification to the parent's message map."""
        if self.parent is None:
            return
        entry = self.parent.find_msg_entry(MsgType.WND, msg_id, ctrl_id)
        if entry is not None:
            self.parent.dispatch(entry, ctrl_id, param)

    # --- input ----------------------------------------------------------

    def on_touch(self, x: int, y: int, action: TouchAction) -> bool:
        """Route a touch to the topmost child under it; return whether handled."""
        x -= self.wnd_rect.left
        y -= self.wnd_rect.top
        target: Optional[Wnd] = None
        target_z = ZOrder.LEVEL_0
        for child in self.children():
            if not child._attr & WndAttr.VISIBLE:
                continue
            if child.wnd_rect.contains(x, y) or child._attr & WndAttr.MODAL:
                if child.is_focus_wnd() and child.z_order >= target_z:
                    target = child
                    target_z = child.z_order
        if target is None:
            return False
        return target.on_touch(x, y, action)

    def on_key(self, key: KeyType) -> bool:
        """Handle a key; forward/backward move the focus between children."""
        key = KeyType(key)
        old = self.focus_child
        while old is not None and old.focus_child is not None:
            old = old.focus_child
        if old is not None and not old.on_key(key):
            return True
        if key == KeyType.ENTER:
            return True
        if old is None:
            child = self.top_child
            while child is not None:
                if child._attr & WndAttr.VISIBLE and child.is_focus_wnd():
                    child.parent.set_child_focus(child)
                    child = child.top_child
                    continue
                child = child.next_sibling
            return True

        def step(wnd: Wnd) -> Optional[Wnd]:
            return wnd.next_sibling if key == KeyType.FORWARD else wnd.prev_sibling

        nxt = step(old)
        while nxt is not None and not nxt.is_focus_wnd():
            nxt = step(nxt)
        if nxt is None:
            siblings = old.parent
            nxt = siblings.top_child if key == KeyType.FORWARD else siblings.last_child()
            while nxt is not None and not nxt.is_focus_wnd():
                nxt = step(nxt)
        if nxt is not None:
            nxt.parent.set_child_focus(nxt)
        return True