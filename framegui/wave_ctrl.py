"""Scrolling waveform display fed from a wave buffer."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .colors import Align, argb, rgb_b, rgb_g, rgb_r
from .colors import rgb as _make_rgb
from .wave_buffer import WaveBuffer
from .wnd import Wnd
from .word import draw_string

WAVE_CURSOR_WIDTH = 8
WAVE_LINE_WIDTH = 1
WAVE_MARGIN = 5
FRAME_LEN_MAP_SIZE = 64


class WaveDrawMode(IntEnum):
    FILL_MODE = 0
    SCAN_MODE = 1


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _clamp(value: int, high: int, low: int) -> int:
    value = high if value > high else value
    return low if value < low else value


class WaveCtrl(Wnd):
    """Draws one column per sample frame, erasing ahead of the cursor."""

    def __init__(self) -> None:
        super().__init__()
        self.wave: Optional[WaveBuffer] = None
        self.bg_fb: Optional[list[int]] = None
        self.wave_name: Optional[str] = None
        self.wave_unit: Optional[str] = None
        self.wave_name_font = None
        self.wave_unit_font = None
        self.max_data = 500
        self.min_data = 0
        self.wave_speed = 1
        self.wave_data_rate = 0
        self.wave_refresh_rate = 1000
        self.frame_len_map = [0] * FRAME_LEN_MAP_SIZE
        self.frame_len_map_index = 0
        self.wave_name_color = self.wave_unit_color = self.wave_color = _make_rgb(255, 0, 0)
        self.back_color = _make_rgb(0, 0, 0)
        self.wave_left = self.wave_right = self.wave_top = self.wave_bottom = 0
        self.wave_cursor = 0

    def clone(self) -> WaveCtrl:
        return type(self)()

    def on_init_children(self) -> None:
        rect = self.screen_rect()
        self.wave_left = rect.left + WAVE_MARGIN
        self.wave_right = rect.right - WAVE_MARGIN
        self.wave_top = rect.top + WAVE_MARGIN
        self.wave_bottom = rect.bottom - WAVE_MARGIN
        self.wave_cursor = self.wave_left
        self.bg_fb = [0] * (rect.width() * rect.height())

    def set_max_min(self, max_data: int, min_data: int) -> None:
        self.max_data = max_data
        self.min_data = min_data

    def set_wave_in_out_rate(self, data_rate: int, refresh_rate: int) -> None:
        """Spread data_rate samples per second over refreshes every refresh_rate ms."""
        self.wave_data_rate = data_rate
        self.wave_refresh_rate = refresh_rate
        reads_per_second = self.wave_speed * 1000 // refresh_rate
        if reads_per_second == 0:
            raise ValueError("wave speed too low for the refresh rate")
        self.frame_len_map = [
            (data_rate * i // reads_per_second - data_rate * (i - 1) // reads_per_second) & 0xFF
            for i in range(1, FRAME_LEN_MAP_SIZE + 1)
        ]
        self.frame_len_map_index = 0

    def set_wave_speed(self, speed: int) -> None:
        """Set the pixels drawn per refresh."""
        self.wave_speed = speed
        self.set_wave_in_out_rate(self.wave_data_rate, self.wave_refresh_rate)

    def _buffer(self) -> WaveBuffer:
        if self.wave is None:
            raise ValueError("no wave buffer attached")
        return self.wave

    def clear_data(self) -> None:
        self._buffer().clear_data()

    def is_data_enough(self) -> bool:
        needed = self.frame_len_map[self.frame_len_map_index] * self.wave_speed
        return bool(len(self._buffer()) - needed)

    def refresh_wave(self, frame: int) -> None:
        """Draw wave_speed new columns from the buffer for refresh number frame."""
        wave = self._buffer()
        if self.max_data == self.min_data:
            raise ValueError("max and min data must differ")
        span = self.max_data - self.min_data
        height = self.wave_bottom - self.wave_top
        for offset in range(self.wave_speed):
            high, low, mid = wave.read_wave_data_by_frame(
                self.frame_len_map[self.frame_len_map_index], frame & 0xFF, offset)
            self.frame_len_map_index = (self.frame_len_map_index + 1) % FRAME_LEN_MAP_SIZE

            y_max = self.wave_bottom + WAVE_LINE_WIDTH - _div(height * (low - self.min_data), span)
            y_min = self.wave_bottom - WAVE_LINE_WIDTH - _div(height * (high - self.min_data), span)
            y_mid = self.wave_bottom - _div(height * (mid - self.min_data), span)

            y_min = _clamp(y_min, self.wave_bottom, self.wave_top)
            y_max = _clamp(y_max, self.wave_bottom, self.wave_top)
            y_mid = _clamp(y_mid, self.wave_bottom, self.wave_top)

            if self.wave_cursor > self.wave_right:
                self.wave_cursor = self.wave_left
            self.draw_smooth_vline(y_min, y_max, y_mid, self.wave_color)
            self.restore_background()
            self.wave_cursor += 1

    def draw_smooth_vline(self, y_min: int, y_max: int, mid: int, rgb: int) -> None:
        """Draw a column fading from rgb at mid towards y_min and y_max."""
        dy = y_max - y_min
        r, g, b = rgb_r(rgb), rgb_g(rgb), rgb_b(rgb)
        index = (dy >> 1) + 2
        self.surface.draw_pixel(self.wave_cursor, mid, rgb, self.z_order)
        if dy < 1:
            return
        for i in range(1, (dy >> 1) + 2):
            weight = index - i
            faded = _make_rgb((r * weight // index) & 0xFF, (g * weight // index) & 0xFF,
                              (b * weight // index) & 0xFF)
            if mid + i <= y_max:
                self.surface.draw_pixel(self.wave_cursor, mid + i, faded, self.z_order)
            if mid - i >= y_min:
                self.surface.draw_pixel(self.wave_cursor, mid - i, faded, self.z_order)

    def on_paint(self) -> None:
        rect = self.screen_rect()
        self.surface.fill_rect(rect.left, rect.top, rect.right, rect.bottom,
                               self.back_color, self.z_order)
        draw_string(self.surface, self.z_order, self.wave_name, self.wave_left + 10, rect.top,
                    self.wave_name_font, self.wave_name_color, argb(0, 0, 0, 0), Align.LEFT)
        draw_string(self.surface, self.z_order, self.wave_unit, self.wave_left + 60, rect.top,
                    self.wave_unit_font, self.wave_unit_color, argb(0, 0, 0, 0), Align.LEFT)
        self.save_background()

    def clear_wave(self) -> None:
        self.surface.fill_rect(self.wave_left, self.wave_top, self.wave_right, self.wave_bottom,
                               self.back_color, self.z_order)
        self.wave_cursor = self.wave_left

    def restore_background(self) -> None:
        """Erase the column just ahead of the cursor from the saved background."""
        x = self.wave_cursor + WAVE_CURSOR_WIDTH
        if x > self.wave_right:
            x -= self.wave_right - self.wave_left + 1
        rect = self.screen_rect()
        width = rect.width()
        for y in range(self.wave_top - 1, self.wave_bottom + 2):
            color = self.bg_fb[(y - rect.top) * width + (x - rect.left)] if self.bg_fb else 0
            self.surface.draw_pixel(x, y, color, self.z_order)

    def save_background(self) -> None:
        """Copy the control's current pixels into the background store."""
        if not self.bg_fb:
            return
        rect = self.screen_rect()
        self.bg_fb = [
            self.surface.get_pixel(x, y, self.z_order)
            for y in range(rect.top, rect.bottom + 1)
            for x in range(rect.left, rect.right + 1)
        ]