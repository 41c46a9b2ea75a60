import pytest

from framegui.colors import (
    argb,
    argb_a,
    rgb,
    rgb16_to_32,
    rgb32_to_16,
    rgb_b,
    rgb_g,
    rgb_r,
    round_rgb32,
)


def test_rgb_is_opaque_red():
    assert rgb(255, 0, 0) == 0xFFFF0000


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (12, 200, 99), (255, 255, 255), (33, 42, 53)])
def test_channels_round_trip(r, g, b):
    color = rgb(r, g, b)
    assert (rgb_r(color), rgb_g(color), rgb_b(color)) == (r, g, b)
    assert argb_a(color) == 0xFF


@pytest.mark.parametrize("a", [0, 1, 128, 255])
def test_argb_alpha(a):
    assert argb_a(argb(a, 1, 2, 3)) == a
    assert rgb_b(argb(a, 1, 2, 3)) == 3


def test_known_conversions():
    assert rgb32_to_16(0xFFFFFFFF) == 0xFFFF
    assert rgb16_to_32(0) == 0xFF000000
    assert round_rgb32(0xFFFFFFFF) == 0xFFF8FCF8


def test_rgb565_round_trip():
    for value in range(0, 0x10000, 37):
        assert rgb32_to_16(rgb16_to_32(value)) == value


@pytest.mark.parametrize("color", [rgb(1, 2, 3), rgb(250, 17, 190), rgb(255, 255, 255)])
def test_rounding_matches_565(color):
    assert rgb16_to_32(rgb32_to_16(color)) == round_rgb32(color)