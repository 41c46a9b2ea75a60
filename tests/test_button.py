import pytest

from framegui.button import GL_BN_CLICKED, Button, on_bn_clicked
from framegui.colors import rgb, round_rgb32
from framegui.display import Display
from framegui.surface import ZOrder
from framegui.theme import ColorType, Theme
from framegui.wnd import KeyType, TouchAction, Wnd, WndAttr, WndStatus

W, H = 100, 80
NORMAL = rgb(0x10, 0x20, 0x30)
FOCUS = rgb(0x40, 0x50, 0x60)
PUSHED = rgb(0x70, 0x80, 0x90)
BORDER = rgb(0xA0, 0xB0, 0xC0)
FONT = rgb(0xF0, 0xF0, 0xF0)


class Panel(Wnd):
    message_map = (on_bn_clicked(2, lambda panel, ctrl_id: panel.clicks.append(ctrl_id)),)

    def __init__(self):
        super().__init__()
        self.clicks = []


@pytest.fixture(autouse=True)
def theme():
    Theme.reset()
    Theme.add_color(ColorType.WND_NORMAL, NORMAL)
    Theme.add_color(ColorType.WND_FOCUS, FOCUS)
    Theme.add_color(ColorType.WND_PUSHED, PUSHED)
    Theme.add_color(ColorType.WND_BORDER, BORDER)
    Theme.add_color(ColorType.WND_FONT, FONT)
    yield
    Theme.reset()


@pytest.fixture
def scene():
    display = Display([0] * (W * H), W, H, W, H, 4, 1)
    root = Panel()
    surface = display.alloc_surface(root, ZOrder.LEVEL_0)
    surface.is_active = True
    root.surface = surface
    root.connect(None, 1, None, 0, 0, W, H)
    button = Button()
    button.connect(root, 2, None, 10, 10, 40, 20)
    return root, button, surface


def test_pre_create_sets_attributes(scene):
    _, button, _ = scene
    assert button.attr == WndAttr.VISIBLE | WndAttr.FOCUS
    assert button.font_color == FONT
    assert button.is_focus_wnd()


def test_normal_paint_fills_rect(scene):
    _, button, surface = scene
    button.on_paint()
    assert surface.get_pixel(10, 10, 0) == round_rgb32(NORMAL)
    assert surface.get_pixel(49, 29, 0) == round_rgb32(NORMAL)
    assert surface.get_pixel(50, 30, 0) == 0


def test_touch_down_pushes_and_focuses(scene):
    root, button, surface = scene
    assert root.on_touch(20, 15, TouchAction.DOWN) is True
    assert button.status == WndStatus.PUSHED
    assert root.focus_child is button
    assert surface.get_pixel(10, 10, 0) == round_rgb32(BORDER)
    assert surface.get_pixel(11, 11, 0) == round_rgb32(BORDER)
    assert surface.get_pixel(30, 20, 0) == round_rgb32(PUSHED)


def test_touch_up_notifies_parent(scene):
    root, button, surface = scene
    button.on_touch(0, 0, TouchAction.DOWN)
    assert button.on_touch(0, 0, TouchAction.UP) is True
    assert button.status == WndStatus.FOCUSED
    assert root.clicks == [2]
    assert surface.get_pixel(10, 10, 0) == round_rgb32(FOCUS)


def test_enter_key_clicks_and_stops(scene):
    root, button, _ = scene
    assert button.on_key(KeyType.ENTER) is False
    assert root.clicks == [button.resource_id]


def test_other_keys_pass_to_parent(scene):
    root, button, _ = scene
    assert button.on_key(KeyType.FORWARD) is True
    assert root.clicks == []


def test_focus_changes_status(scene):
    _, button, surface = scene
    button.on_focus()
    assert button.status == WndStatus.FOCUSED
    button.on_kill_focus()
    assert button.status == WndStatus.NORMAL
    assert surface.get_pixel(10, 10, 0) == round_rgb32(NORMAL)


def test_on_bn_clicked_entry():
    entry = on_bn_clicked(7, print)
    assert entry.msg_id == GL_BN_CLICKED
    assert entry.ctrl_id == 7


def test_clone_is_fresh_button(scene):
    _, button, _ = scene
    copy = button.clone()
    assert isinstance(copy, Button)
    assert copy.resource_id == 0