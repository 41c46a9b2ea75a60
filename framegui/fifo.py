"""A thread-safe byte queue with a fixed capacity."""

from __future__ import annotations

import threading
from dataclasses import dataclass

FIFO_BUFFER_LEN = 1024


@dataclass(frozen=True)
class MessageInfo:
    """An input message with two parameters."""

    msg_id: int
    param1: int = 0
    param2: int = 0


class FifoFullError(Exception):
    """Raised when a write does not fit in the queue."""


class Fifo:
    """Byte queue: writes are all-or-nothing, reads block until filled."""

    def __init__(self, capacity: int = FIFO_BUFFER_LEN) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._limit = capacity - 1
        self._buf = bytearray()
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._buf)

    def write(self, data) -> int:
        """Append data whole; raise FifoFullError if it does not fit."""
        chunk = bytes(data)
        with self._cond:
            if len(self._buf) + len(chunk) > self._limit:
                raise FifoFullError("fifo full")
            self._buf.extend(chunk)
            self._cond.notify_all()
        return len(chunk)

    def read(self, length: int) -> bytes:
        """Return exactly length bytes, waiting for writers as needed."""
        out = bytearray()
        with self._cond:
            while len(out) < length:
                while not self._buf:
                    self._cond.wait()
                take = min(length - len(out), len(self._buf))
                out += self._buf[:take]
                del self._buf[:take]
        return bytes(out)