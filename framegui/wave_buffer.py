"""Ring buffer of wave samples read out in per-frame min/max bands."""

from __future__ import annotations

from collections import deque

WAVE_BUFFER_LEN = 1024
WAVE_READ_CACHE_LEN = 8


class BufferFullError(Exception):
    """Raised when a sample is written to a full wave buffer."""


def _to_short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class WaveBuffer:
    """Holds up to WAVE_BUFFER_LEN - 1 samples."""

    def __init__(self) -> None:
        self._data: deque[int] = deque()
        self._min_old = self._max_old = 0
        self._min_older = self._max_older = 0
        self._last_data = 0
        self._cache_min = [0] * WAVE_READ_CACHE_LEN
        self._cache_mid = [0] * WAVE_READ_CACHE_LEN
        self._cache_max = [0] * WAVE_READ_CACHE_LEN
        self._cache_sum = 0
        self._refresh_sequence = 0

    def __len__(self) -> int:
        return len(self._data)

    def write_wave_data(self, data: int) -> None:
        """Append one sample; raise BufferFullError when full."""
        if len(self._data) >= WAVE_BUFFER_LEN - 1:
            raise BufferFullError("wave buffer full")
        self._data.append(_to_short(data))

    def read_wave_data_by_frame(self, frame_len: int, sequence: int, offset: int) -> tuple[int, int, int]:
        """Consume up to frame_len samples and return (max, min, mid).

        Repeated calls with the same sequence and an offset already read
        return the cached result without consuming samples.
        """
        if self._refresh_sequence != sequence:
            self._refresh_sequence = sequence
            self._cache_sum = 0
        elif offset < self._cache_sum:
            return self._cache_max[offset], self._cache_min[offset], self._cache_mid[offset]

        if self._cache_sum >= WAVE_READ_CACHE_LEN:
            raise RuntimeError("too many reads for one refresh sequence")
        self._cache_sum += 1

        tmp_min = tmp_max = self._last_data
        mid = (self._min_old + self._max_old) >> 1
        for _ in range(frame_len):
            if not self._data:
                break
            value = self._data.popleft()
            self._last_data = value
            tmp_min = min(tmp_min, value)
            tmp_max = max(tmp_max, value)

        low = min(self._min_old, tmp_min, self._min_older)
        high = max(self._max_old, tmp_max, self._max_older)
        self._cache_min[offset] = low
        self._cache_max[offset] = high
        self._cache_mid[offset] = mid

        self._min_older, self._max_older = self._min_old, self._max_old
        self._min_old, self._max_old = tmp_min, tmp_max
        return high, low, mid

    def clear_data(self) -> None:
        """Drop every stored sample."""
        self._data.clear()

    def reset(self) -> None:
        """Discard unread samples."""
        self._data.clear()