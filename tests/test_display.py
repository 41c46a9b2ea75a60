import struct

import pytest

from framegui.colors import rgb, rgb32_to_16, round_rgb32
from framegui.display import Display
from framegui.surface import ExternalGfxOp, ZOrder

RED = rgb(255, 0, 0)
BLUE = rgb(0, 0, 255)


def test_unsupported_colour_depth():
    with pytest.raises(ValueError):
        Display([0] * 4, 2, 2, 2, 2, 3, 1)


def test_too_many_surfaces():
    with pytest.raises(ValueError):
        Display([0] * 4, 2, 2, 2, 2, 4, 7)


def test_alloc_surface_rules():
    display = Display([0] * 4, 2, 2, 2, 2, 4, 2)
    first = display.alloc_surface("a", ZOrder.LEVEL_0)
    assert first.usr == "a"
    with pytest.raises(ValueError):
        display.alloc_surface("a", ZOrder.LEVEL_0)
    second = display.alloc_surface("b", ZOrder.LEVEL_1)
    assert second is not first and second.max_zorder == ZOrder.LEVEL_1
    with pytest.raises(RuntimeError):
        display.alloc_surface("c", ZOrder.LEVEL_0)
    with pytest.raises(ValueError):
        Display([0] * 4, 2, 2, 2, 2, 4, 1).alloc_surface("x", ZOrder.MAX)


def test_get_updated_fb_tracks_writes():
    display = Display([0] * 4, 2, 2, 2, 2, 4, 1)
    surface = display.alloc_surface("root", ZOrder.LEVEL_0)
    surface.is_active = True
    assert display.get_updated_fb() is None
    surface.draw_pixel(0, 0, RED, ZOrder.LEVEL_0)
    assert display.get_updated_fb() is display.phy_fb
    assert display.get_updated_fb() is None
    assert display.get_updated_fb(force_update=True) is display.phy_fb


def test_merge_surface_with_framebuffer():
    display = Display([0] * 8, 4, 2, 4, 2, 4, 2)
    s0 = display.alloc_surface("a", ZOrder.LEVEL_0)
    s1 = display.alloc_surface("b", ZOrder.LEVEL_0)
    s0.fill_rect(0, 0, 3, 1, RED, ZOrder.LEVEL_0)
    s1.fill_rect(0, 0, 3, 1, BLUE, ZOrder.LEVEL_0)
    assert display.phy_fb == [0] * 8
    display.merge_surface(s0, s1, 0, 3, 0, 1, 1)
    a, b = round_rgb32(RED), round_rgb32(BLUE)
    assert display.phy_fb == [a, a, a, b] * 2


def test_merge_surface_rejects_bad_offset():
    display = Display([0] * 8, 4, 2, 4, 2, 4, 2)
    s0 = display.alloc_surface("a", ZOrder.LEVEL_0)
    s1 = display.alloc_surface("b", ZOrder.LEVEL_0)
    with pytest.raises(ValueError):
        display.merge_surface(s0, s1, 0, 3, 0, 1, 5)
    with pytest.raises(ValueError):
        display.merge_surface(s0, s1, 0, 4, 0, 1, 0)


def test_merge_surface_through_external_draw():
    drawn = {}
    op = ExternalGfxOp(draw_pixel=lambda x, y, c: drawn.__setitem__((x, y), c))
    display = Display(None, 4, 1, 4, 1, 4, 2, gfx_op=op)
    s0 = display.alloc_surface("a", ZOrder.LEVEL_0)
    s1 = display.alloc_surface("b", ZOrder.LEVEL_0)
    s0.fill_rect(0, 0, 3, 0, RED, ZOrder.LEVEL_0)
    s1.fill_rect(0, 0, 3, 0, BLUE, ZOrder.LEVEL_0)
    display.merge_surface(s0, s1, 0, 3, 0, 0, 1)
    a, b = round_rgb32(RED), round_rgb32(BLUE)
    assert drawn == {(0, 0): a, (1, 0): a, (2, 0): b, (3, 0): b}


def _read_bmp(path):
    data = path.read_bytes()
    assert data[:2] == b"BM"
    size, = struct.unpack_from("<I", data, 2)
    offset, = struct.unpack_from("<I", data, 10)
    width, height = struct.unpack_from("<ii", data, 18)
    return data, size, offset, width, height


def test_snap_shot_16_bit(tmp_path):
    fb = list(range(1, 7))
    display = Display(fb, 3, 2, 3, 2, 2, 1)
    path = tmp_path / "shot.bmp"
    display.snap_shot(path)
    data, size, offset, width, height = _read_bmp(path)
    assert size == len(data) == offset + 3 * 2 * 2
    assert (width, height) == (3, 2)
    assert struct.unpack_from("<3H", data, offset) == tuple(fb[3:6])
    assert struct.unpack_from("<3H", data, offset + 6) == tuple(fb[0:3])


def test_snap_shot_32_bit_converts_to_rgb565(tmp_path):
    display = Display([round_rgb32(RED)] * 4, 2, 2, 2, 2, 4, 1)
    path = tmp_path / "shot.bmp"
    display.snap_shot(path)
    data, _, offset, _, _ = _read_bmp(path)
    assert struct.unpack_from("<4H", data, offset) == (rgb32_to_16(RED),) * 4


def test_snap_shot_without_framebuffer(tmp_path):
    display = Display(None, 2, 2, 2, 2, 4, 1)
    with pytest.raises(RuntimeError):
        display.snap_shot(tmp_path / "none.bmp")