import pytest

from framegui.resource import BitmapInfo, FontInfo, Lattice


def test_bitmap_pixel_row_major():
    bmp = BitmapInfo(3, 2, [10, 11, 12, 20, 21, 22])
    assert bmp.pixel(0, 0) == 10
    assert bmp.pixel(2, 1) == 22
    assert bmp.bits_per_pixel == 16


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, 2), (0, -1)])
def test_bitmap_pixel_out_of_range(x, y):
    bmp = BitmapInfo(3, 2, [0] * 6)
    with pytest.raises(IndexError):
        bmp.pixel(x, y)


def test_font_sorts_lattices():
    glyphs = [Lattice(ord("c"), 5, b""), Lattice(ord("a"), 4, b""), Lattice(ord("b"), 6, b"")]
    font = FontInfo(16, glyphs)
    assert [g.utf8_code for g in font.lattices] == [ord("a"), ord("b"), ord("c")]
    assert font.count == len(glyphs)


def test_empty_font():
    font = FontInfo(12)
    assert font.count == 0
    assert font.lattices == ()