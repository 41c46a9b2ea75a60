"""Logging, wall-clock time, periodic timers and BMP snapshots."""

from __future__ import annotations

import struct
import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

REAL_TIME_TASK_CYCLE_MS = 50
MAX_TIMER_CNT = 10
TIMER_UNIT_MS = 50

_FILE_HEAD = struct.Struct("<HIHHI")
_INFO_HEAD = struct.Struct("<IiiHHIIiiIIIII")


def log_out(text: str) -> None:
    """Write a log line to standard output."""
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass(frozen=True)
class TimeInfo:
    """Broken-down local time."""

    year: int = 0
    month: int = 0
    date: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0


def get_time_in_second() -> int:
    """Seconds since the epoch."""
    return int(time.time())


def second_to_day(second: int) -> TimeInfo:
    """Break a timestamp into local calendar fields."""
    t = time.localtime(second)
    return TimeInfo(
        year=t.tm_year,
        month=t.tm_mon,
        day=t.tm_mday,
        hour=t.tm_hour,
        minute=t.tm_min,
        second=t.tm_sec,
    )


def get_time() -> TimeInfo:
    """The current local time."""
    return second_to_day(get_time_in_second())


@dataclass
class _TimerSlot:
    interval: int
    callback: Callable[[object, object], None]
    elapse: int = 0


class TimerManager:
    """A fixed number of periodic timers counted in ticks of unit_ms."""

    def __init__(self, capacity: int = MAX_TIMER_CNT, unit_ms: int = TIMER_UNIT_MS) -> None:
        self.capacity = capacity
        self.unit_ms = unit_ms
        self._slots: list[Optional[_TimerSlot]] = [None] * capacity
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def add(self, interval: int, callback: Callable[[object, object], None]) -> int:
        """Register a callback fired every interval ticks; return its slot."""
        if callback is None or interval <= 0:
            raise ValueError("timer needs a callback and a positive interval")
        with self._lock:
            for index, slot in enumerate(self._slots):
                if slot is None:
                    self._slots[index] = _TimerSlot(interval, callback)
                    return index
        raise RuntimeError("no free timer slot")

    def tick(self) -> int:
        """Advance every timer by one tick; return how many fired."""
        due = []
        with self._lock:
            for slot in self._slots:
                if slot is None:
                    continue
                slot.elapse += 1
                if slot.elapse == slot.interval:
                    slot.elapse = 0
                    due.append(slot.callback)
        for callback in due:
            callback(None, None)
        return len(due)

    def start(self) -> None:
        """Tick in a background thread until stopped."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self) -> None:
        while not self._stop.is_set():
            self.tick()
            self._stop.wait(self.unit_ms / 1000)


_default_timers = TimerManager()


def register_timer(milli_second: int, func: Callable[[object, object], None]) -> int:
    """Call func every milli_second milliseconds from a shared timer thread."""
    index = _default_timers.add(milli_second // TIMER_UNIT_MS, func)
    _default_timers.start()
    return index


class _RealTimer:
    def __init__(self) -> None:
        self.func: Optional[Callable[[object], None]] = None
        self.thread: Optional[threading.Thread] = None
        self.lock = threading.Lock()

    def start(self, func: Callable[[object], None]) -> None:
        with self.lock:
            self.func = func
            if self.thread is None:
                self.thread = threading.Thread(target=self._run, daemon=True)
                self.thread.start()

    def _run(self) -> None:
        while True:
            time.sleep(REAL_TIME_TASK_CYCLE_MS / 1000)
            func = self.func
            if func is not None:
                func(None)


_real_timer = _RealTimer()


def start_real_timer(func: Optional[Callable[[object], None]]) -> None:
    """Call func every REAL_TIME_TASK_CYCLE_MS milliseconds."""
    if func is None:
        return
    _real_timer.start(func)


def thread_sleep(milli_seconds: int) -> None:
    """Sleep for the given number of milliseconds."""
    time.sleep(milli_seconds / 1000)


def build_bmp(filename, width: int, height: int, data) -> None:
    """Write RGB565 pixel data, top row first, as a 16-bit BMP file."""
    raw = memoryview(data).cast("B")
    row = width * 2
    size = row * height
    if len(raw) < size:
        raise ValueError("pixel data shorter than width * height * 2 bytes")
    offset = _FILE_HEAD.size + _INFO_HEAD.size
    with open(filename, "wb") as fp:
        fp.write(_FILE_HEAD.pack(0x4D42, size + offset, 0, 0, offset))
        fp.write(
            _INFO_HEAD.pack(
                40, width, height, 1, 16, 3, size, 0, 0, 0, 0, 0xF800, 0x07E0, 0x001F
            )
        )
        for y in reversed(range(height)):
            fp.write(raw[y * row:(y + 1) * row])