import pytest

from framegui.resource import BitmapInfo, FontInfo
from framegui.theme import BitmapType, ColorType, FontType, Theme


@pytest.fixture(autouse=True)
def clean_theme():
    Theme.reset()
    yield
    Theme.reset()


def test_font_round_trip():
    font = FontInfo(16)
    Theme.add_font(FontType.DEFAULT, font)
    assert Theme.get_font(FontType.DEFAULT) is font
    assert Theme.get_font(FontType.CUSTOM1) is None


def test_bitmap_round_trip():
    bmp = BitmapInfo(1, 1, [0])
    Theme.add_bitmap(BitmapType.CUSTOM3, bmp)
    assert Theme.get_bitmap(BitmapType.CUSTOM3) is bmp


def test_color_round_trip_and_default():
    Theme.add_color(ColorType.WND_FOCUS, 0xFF123456)
    assert Theme.get_color(ColorType.WND_FOCUS) == 0xFF123456
    assert Theme.get_color(ColorType.WND_BORDER) == 0


def test_plain_int_index_accepted():
    Theme.add_color(int(ColorType.CUSTOM6), 7)
    assert Theme.get_color(ColorType.CUSTOM6) == 7


@pytest.mark.parametrize(
    "call",
    [
        lambda: Theme.add_font(len(FontType), None),
        lambda: Theme.get_bitmap(len(BitmapType)),
        lambda: Theme.add_color(len(ColorType), 1),
        lambda: Theme.get_color(-1),
    ],
)
def test_out_of_range_index(call):
    with pytest.raises(ValueError):
        call()


def test_reset_clears():
    Theme.add_color(ColorType.WND_FONT, 5)
    Theme.reset()
    assert Theme.get_color(ColorType.WND_FONT) == 0