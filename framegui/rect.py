"""Integer rectangles with inclusive corners."""

from __future__ import annotations


class Rect:
    """A rectangle whose right and bottom edges are inclusive."""

    __slots__ = ("left", "top", "right", "bottom")

    def __init__(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> None:
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    def __repr__(self) -> str:
        return f"Rect({self.left}, {self.top}, {self.right}, {self.bottom})"

    def set_rect(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set the corners, ordering them so left <= right and top <= bottom."""
        self.left = min(left, right)
        self.top = min(top, bottom)
        self.right = max(left, right)
        self.bottom = max(top, bottom)

    def clear(self) -> None:
        """Reset every edge to zero."""
        self.left = self.top = self.right = self.bottom = 0

    def offset(self, x: int, y: int) -> None:
        """Move the rectangle by x and y."""
        self.left += x
        self.right += x
        self.top += y
        self.bottom += y

    def is_empty(self) -> bool:
        return self.top == self.bottom or self.left == self.right

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def width(self) -> int:
        return self.right - self.left + 1

    def height(self) -> int:
        return self.bottom - self.top + 1

    def copy(self) -> Rect:
        return Rect(self.left, self.top, self.right, self.bottom)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.left, self.top, self.right, self.bottom) == (
            other.left,
            other.top,
            other.right,
            other.bottom,
        )

    __hash__ = None  # type: ignore[assignment]

    def __and__(self, other: Rect) -> Rect:
        result = Rect(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )
        if result.left >= result.right or result.top >= result.bottom:
            result.clear()
        return result