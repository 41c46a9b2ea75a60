import pytest

from framegui.colors import rgb, rgb16_to_32, round_rgb32
from framegui.dialog import Dialog
from framegui.display import Display
from framegui.surface import ZOrder
from framegui.theme import Theme
from framegui.wnd import Wnd, WndAttr

WIDTH, HEIGHT = 200, 150


@pytest.fixture(autouse=True)
def _clean():
    Theme.reset()
    Dialog.clear_dialogs()
    yield
    Dialog.clear_dialogs()
    Theme.reset()


@pytest.fixture
def setup():
    display = Display([0] * (WIDTH * HEIGHT), WIDTH, HEIGHT, WIDTH, HEIGHT, 4, 1)
    root = Wnd()
    surface = display.alloc_surface(root, ZOrder.LEVEL_1)
    surface.is_active = True
    root.surface = surface
    root.connect(None, 0x100, None, 0, 0, WIDTH, HEIGHT)
    dialog = Dialog()
    dialog.connect(root, 2, None, 20, 20, 100, 80)
    return root, dialog, surface


def test_pre_create_defaults(setup):
    _, dialog, _ = setup
    assert dialog.attr == WndAttr.NONE
    assert dialog.z_order == ZOrder.LEVEL_1
    assert dialog.bg_color == rgb(33, 42, 53)


def test_open_modal_dialog_paints(setup):
    _, dialog, surface = setup
    Dialog.open_dialog(dialog)
    assert Dialog.get_the_dialog(surface) is dialog
    assert dialog.attr == WndAttr.VISIBLE | WndAttr.FOCUS | WndAttr.MODAL
    assert surface.get_pixel(30, 60, ZOrder.LEVEL_1) == round_rgb32(rgb(33, 42, 53))
    assert surface.frame_layers[ZOrder.LEVEL_1].visible_rect == dialog.screen_rect()


def test_open_non_modal(setup):
    _, dialog, _ = setup
    Dialog.open_dialog(dialog, False)
    assert dialog.attr == WndAttr.VISIBLE | WndAttr.FOCUS


def test_open_none_raises():
    with pytest.raises(ValueError):
        Dialog.open_dialog(None)


def test_second_dialog_replaces_first(setup):
    root, first, surface = setup
    second = Dialog()
    second.connect(root, 3, None, 40, 40, 60, 60)
    Dialog.open_dialog(first)
    Dialog.open_dialog(second)
    assert Dialog.get_the_dialog(surface) is second
    assert first.attr == WndAttr.NONE


def test_reopen_same_dialog_keeps_it(setup):
    _, dialog, surface = setup
    Dialog.open_dialog(dialog)
    Dialog.open_dialog(dialog, False)
    assert dialog.attr & WndAttr.MODAL
    assert Dialog.get_the_dialog(surface) is dialog


def test_close_dialog_restores_lower_layer(setup):
    _, dialog, surface = setup
    Dialog.open_dialog(dialog)
    assert Dialog.close_dialog(surface) is True
    assert Dialog.get_the_dialog(surface) is None
    assert dialog.attr == WndAttr.NONE
    assert surface.top_zorder == ZOrder.LEVEL_0
    assert surface.get_pixel(30, 60, ZOrder.LEVEL_1) == rgb16_to_32(0)


def test_close_without_dialog(setup):
    _, _, surface = setup
    assert Dialog.close_dialog(surface) is False


def test_clone_is_unconnected(setup):
    _, dialog, _ = setup
    copy = dialog.clone()
    assert copy.resource_id == 0 and copy.parent is None