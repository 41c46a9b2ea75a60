# framegui

framegui is a small widget toolkit that draws into frame buffers held in
memory. A `Display` owns a physical frame buffer, which is a plain list of
pixel values. It hands out `Surface` objects with up to three z-order layers.
A tree of `Wnd` widgets paints onto those surfaces. Colours are passed around
as 32-bit ARGB values and are kept at RGB565 precision, so a 16-bit frame
buffer can be saved straight to a BMP file.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `framegui.colors`: `rgb`, `argb`, the channel getters `rgb_r`, `rgb_g`,
  `rgb_b` and `argb_a`, and the conversions `rgb32_to_16`, `rgb16_to_32` and
  `round_rgb32`. `Align` holds the text alignment flags.
- `framegui.rect`: `Rect`, a rectangle whose right and bottom edges are
  inclusive. It offers `contains`, `offset`, `set_rect`, `is_empty`,
  `width()` / `height()`, and intersection through `&`.
- `framegui.display`: `Display` allocates surfaces (`alloc_surface`), merges
  two surfaces side by side for slide animations (`merge_surface`), reports
  whether the frame buffer changed (`get_updated_fb`), and saves it as a
  16-bit BMP (`snap_shot`).
- `framegui.surface`:
  - `Surface` draws pixels, lines, rectangles and filled rectangles on a
    chosen `ZOrder` layer. Its `set_frame_layer_visible_rect` shows part of
    an upper layer and restores the layer underneath where it stops showing.
  - `SurfaceNoFb` sends pixels to the callbacks of an `ExternalGfxOp`
    instead of a physical frame buffer.
- `framegui.wnd`: `Wnd` is the base class of every widget. It keeps parent,
  child and sibling links and converts between window and screen
  coordinates. It moves focus with `on_key`, routes touches with `on_touch`,
  and delivers notifications to the parent's message map (`notify_parent`).
  `WndTree` describes child windows to create in one `connect` call.
- `framegui.cmd_target`: `CmdTarget`, `MessageEntry` and `on_user_msg` for
  message maps and process-wide user messages (`CmdTarget.handle_usr_msg`).
- `framegui.word` and `framegui.resource`:
  - `word` draws text with run-length encoded, anti-aliased glyph fonts
    (`FontInfo`, `Lattice`). It provides `draw_string`,
    `draw_string_in_rect`, `draw_value` and `get_str_size`.
  - `BitmapInfo` images are drawn with `framegui.bitmap.draw_bitmap` and
    `draw_bitmap_region`, which treat one mask colour as transparent.
- `framegui.theme`: `Theme`, the shared registry of fonts, bitmaps and
  colours, indexed by `FontType`, `BitmapType` and `ColorType`.
- Widgets:
  - `Button` (`framegui.button`)
  - `Label` (`framegui.label`)
  - `Table` (`framegui.table`)
  - `ListBox` (`framegui.list_box`)
  - `SpinBox` (`framegui.spinbox`)
  - `Dialog` (`framegui.dialog`)
  - `SlideGroup` (`framegui.slide_group`)
  - `WaveCtrl` (`framegui.wave_ctrl`), fed by a `WaveBuffer`
    (`framegui.wave_buffer`)

  Helpers such as `on_bn_clicked`, `on_list_confirm`, `on_spin_confirm` and
  `on_spin_change` build message-map entries for a parent window's
  `message_map`.
- `framegui.fifo`: `Fifo`, a thread-safe byte queue whose reads block. A
  write that does not fit raises `FifoFullError`.
- `framegui.platform`:
  - `TimerManager` and `register_timer` run periodic callbacks.
  - `start_real_timer` calls a function every 50 ms.
  - `get_time` and `second_to_day` break time down into fields.
  - `build_bmp` writes RGB565 data as a BMP file.

## A first window

```python
from framegui.button import Button
from framegui.colors import rgb
from framegui.display import Display
from framegui.surface import ZOrder
from framegui.theme import ColorType, Theme
from framegui.wnd import Wnd, WndTree

Theme.add_color(ColorType.WND_NORMAL, rgb(44, 44, 44))
Theme.add_color(ColorType.WND_FOCUS, rgb(78, 198, 76))
Theme.add_color(ColorType.WND_PUSHED, rgb(33, 42, 53))
Theme.add_color(ColorType.WND_BORDER, rgb(46, 59, 73))
Theme.add_color(ColorType.WND_FONT, rgb(255, 255, 255))

display = Display([0] * (320 * 240), 320, 240, 320, 240, 2, 1, None)
root = Wnd()
surface = display.alloc_surface(root, ZOrder.LEVEL_0)
surface.is_active = True
root.surface = surface

ok = Button()
root.connect(None, 1, None, 0, 0, 320, 240,
             [WndTree(ok, 2, "OK", 10, 10, 100, 40)])
root.show_window()

display.snap_shot("screen.bmp")
```

If no font is registered, each character is drawn as a red "X" placeholder.
If the font has no glyph for a character, that character is drawn as a white
"X". Register a `FontInfo` with `Theme.add_font` to get real text.

## What it does not do

- framegui only draws into memory. It does not open a window on screen, and
  it does not read a mouse, touch panel or keyboard. Your program shows the
  frame buffer, for example from `Display.get_updated_fb`. It also passes
  input in by calling `on_touch` and `on_key` on the root window.
- There is no text-entry widget and no on-screen keyboard.
- There is no swipe-gesture handling for `SlideGroup`. Pages change only
  when your code calls `set_active_slide`.