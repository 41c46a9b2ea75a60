import struct
import threading
from datetime import datetime

import pytest

from framegui.platform import (
    TimerManager,
    build_bmp,
    get_time,
    log_out,
    register_timer,
    second_to_day,
    start_real_timer,
)


def test_log_out_writes_text(capsys):
    log_out("hello")
    assert capsys.readouterr().out == "hello"


def test_second_to_day_matches_local_time():
    stamp = 1_000_000_000
    info = second_to_day(stamp)
    expected = datetime.fromtimestamp(stamp)
    assert (info.year, info.month, info.day) == (expected.year, expected.month, expected.day)
    assert (info.hour, info.minute, info.second) == (expected.hour, expected.minute, expected.second)


def test_get_time_is_current_year():
    assert get_time().year == datetime.now().year


def test_timer_fires_on_interval():
    calls = []
    manager = TimerManager()
    manager.add(3, lambda a, b: calls.append((a, b)))
    manager.tick()
    manager.tick()
    assert calls == []
    assert manager.tick() == 1
    assert calls == [(None, None)]


def test_timer_rejects_bad_arguments():
    manager = TimerManager()
    with pytest.raises(ValueError):
        manager.add(0, lambda a, b: None)
    with pytest.raises(ValueError):
        manager.add(1, None)


def test_timer_capacity():
    manager = TimerManager(capacity=2)
    assert [manager.add(1, lambda a, b: None) for _ in range(2)] == [0, 1]
    with pytest.raises(RuntimeError):
        manager.add(1, lambda a, b: None)


def test_timer_thread_runs():
    fired = threading.Event()
    manager = TimerManager(unit_ms=1)
    manager.add(1, lambda a, b: fired.set())
    manager.start()
    try:
        assert fired.wait(2)
    finally:
        manager.stop()


def test_register_timer_runs_callback():
    fired = threading.Event()
    register_timer(100, lambda a, b: fired.set())
    assert fired.wait(3)


def test_register_timer_too_short():
    with pytest.raises(ValueError):
        register_timer(10, lambda a, b: None)


def test_start_real_timer_calls_function():
    fired = threading.Event()
    start_real_timer(lambda arg: fired.set())
    assert fired.wait(3)


def test_build_bmp_layout(tmp_path):
    path = tmp_path / "shot.bmp"
    top = struct.pack("<HH", 0x1111, 0x2222)
    bottom = struct.pack("<HH", 0x3333, 0x4444)
    build_bmp(path, 2, 2, top + bottom)
    content = path.read_bytes()
    kind, file_size, _, _, offset = struct.unpack_from("<HIHHI", content, 0)
    assert kind == 0x4D42
    assert offset == 66
    assert file_size == len(content) == offset + 8
    info = struct.unpack_from("<IiiHHIIiiIIIII", content, 14)
    assert info[:5] == (40, 2, 2, 1, 16)
    assert info[-3:] == (0xF800, 0x07E0, 0x001F)
    assert content[offset:] == bottom + top


def test_build_bmp_short_data(tmp_path):
    with pytest.raises(ValueError):
        build_bmp(tmp_path / "x.bmp", 4, 4, b"\x00" * 10)