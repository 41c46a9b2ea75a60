import pytest

from framegui.colors import rgb, round_rgb32
from framegui.display import Display
from framegui.label import Label
from framegui.resource import FontInfo, Lattice
from framegui.surface import ZOrder
from framegui.theme import ColorType, FontType, Theme
from framegui.wnd import Wnd, WndAttr

W, H = 80, 60
BG = rgb(0x20, 0x40, 0x60)
FONT = rgb(0xF8, 0xF8, 0xF8)


@pytest.fixture(autouse=True)
def theme():
    Theme.reset()
    Theme.add_color(ColorType.WND_FONT, FONT)
    Theme.add_font(FontType.DEFAULT, FontInfo(height=8, lattices=[Lattice(ord("A"), 4, bytes([0, 32]))]))
    yield
    Theme.reset()


@pytest.fixture
def scene():
    display = Display([0] * (W * H), W, H, W, H, 4, 1)
    root = Wnd()
    root.bg_color = BG
    surface = display.alloc_surface(root, ZOrder.LEVEL_0)
    surface.is_active = True
    root.surface = surface
    root.connect(None, 1, None, 0, 0, W, H)
    return root, surface


def test_label_attributes(scene):
    root, _ = scene
    label = Label()
    label.connect(root, 3, "A", 10, 10, 30, 20)
    assert label.attr == WndAttr.VISIBLE
    assert not label.is_focus_wnd()
    assert label.font_color == FONT
    assert label.font_type is Theme.get_font(FontType.DEFAULT)


def test_label_paints_parent_background(scene):
    root, surface = scene
    label = Label()
    label.connect(root, 3, "A", 10, 10, 30, 20)
    label.on_paint()
    rect = label.screen_rect()
    assert all(
        surface.get_pixel(x, y, 0) == round_rgb32(BG)
        for x in range(rect.left, rect.right + 1)
        for y in range(rect.top, rect.bottom + 1)
    )
    assert surface.get_pixel(rect.right + 1, rect.top, 0) == 0


def test_label_without_text_paints_nothing(scene):
    root, surface = scene
    label = Label()
    label.connect(root, 3, None, 10, 10, 30, 20)
    label.show_window()
    assert surface.get_pixel(10, 10, 0) == 0
    assert surface.get_pixel(39, 29, 0) == 0


def test_label_is_skipped_by_touch(scene):
    root, _ = scene
    label = Label()
    label.connect(root, 3, "A", 10, 10, 30, 20)
    assert root.on_touch(15, 15, 0) is False


def test_clone(scene):
    copy = Label().clone()
    assert isinstance(copy, Label)
    assert copy.parent is None