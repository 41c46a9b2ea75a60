"""Grid of text cells."""

from __future__ import annotations

from typing import Optional

from .colors import Align, argb
from .rect import Rect
from .wnd import Wnd
from .word import draw_string_in_rect

MAX_COL_NUM = 30
MAX_ROW_NUM = 30


class Table(Wnd):
    """A table with per-row heights and per-column widths."""

    def __init__(self) -> None:
        super().__init__()
        self.align_type: int = Align.HCENTER | Align.VCENTER
        self.row_num = 0
        self.col_num = 0
        self.row_heights = [0] * MAX_ROW_NUM
        self.col_widths = [0] * MAX_COL_NUM

    def clone(self) -> Table:
        return type(self)()

    def set_row_heights(self, height: int) -> None:
        """Give every row the same height."""
        for index in range(min(self.row_num, MAX_ROW_NUM)):
            self.row_heights[index] = height

    def set_col_widths(self, width: int) -> None:
        """Give every column the same width."""
        for index in range(min(self.col_num, MAX_COL_NUM)):
            self.col_widths[index] = width

    def set_row_height(self, index: int, height: int) -> int:
        """Set one row's height; return its index."""
        if not 0 <= index < min(self.row_num, MAX_ROW_NUM):
            raise IndexError(f"row {index} out of range")
        self.row_heights[index] = height
        return index

    def set_col_width(self, index: int, width: int) -> int:
        """Set one column's width; return its index."""
        if not 0 <= index < min(self.col_num, MAX_COL_NUM):
            raise IndexError(f"column {index} out of range")
        self.col_widths[index] = width
        return index

    def set_item(self, row: int, col: int, text: Optional[str], color: int) -> None:
        """Fill a cell with color and draw its text."""
        self.draw_item(row, col, text, color)

    def draw_item(self, row: int, col: int, text: Optional[str], color: int) -> None:
        rect = self.get_item_rect(row, col)
        self.surface.fill_rect(rect.left + 1, rect.top + 1, rect.right - 1, rect.bottom - 1,
                               color, self.z_order)
        draw_string_in_rect(self.surface, self.z_order, text, rect, self.font_type,
                            self.font_color, argb(0, 0, 0, 0), self.align_type)

    def get_item_rect(self, row: int, col: int) -> Rect:
        """Screen rectangle of a cell, clipped to the table."""
        if not 0 <= row < MAX_ROW_NUM or not 0 <= col < MAX_COL_NUM:
            raise IndexError(f"cell ({row}, {col}) out of range")
        x = sum(self.col_widths[:col])
        y = sum(self.row_heights[:row])
        table = self.screen_rect()
        left = table.left + x
        top = table.top + y
        right = min(left + self.col_widths[col], table.right)
        bottom = min(top + self.row_heights[row], table.bottom)
        return Rect(left, top, right, bottom)