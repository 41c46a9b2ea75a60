"""Colour packing helpers and text alignment flags."""

from __future__ import annotations

from enum import IntFlag

_MASK32 = 0xFFFFFFFF


class Align(IntFlag):
    """Horizontal and vertical text alignment bits."""

    HCENTER = 0x00000000
    LEFT = 0x01000000
    RIGHT = 0x02000000
    HMASK = 0x03000000
    VCENTER = 0x00000000
    TOP = 0x00100000
    BOTTOM = 0x00200000
    VMASK = 0x00300000


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack alpha, red, green and blue into a 32-bit ARGB value."""
    return ((a << 24) | (r << 16) | (g << 8) | b) & _MASK32


def rgb(r: int, g: int, b: int) -> int:
    """Pack an opaque colour into a 32-bit ARGB value."""
    return ((0xFF << 24) | (r << 16) | (g << 8) | b) & _MASK32


def argb_a(color: int) -> int:
    """Return the alpha channel of a 32-bit colour."""
    return ((color & _MASK32) >> 24) & 0xFF


def rgb_r(color: int) -> int:
    """Return the red channel of a 32-bit colour."""
    return ((color & _MASK32) >> 16) & 0xFF


def rgb_g(color: int) -> int:
    """Return the green channel of a 32-bit colour."""
    return ((color & _MASK32) >> 8) & 0xFF


def rgb_b(color: int) -> int:
    """Return the blue channel of a 32-bit colour."""
    return color & 0xFF


def rgb32_to_16(color: int) -> int:
    """Convert a 32-bit colour to RGB565."""
    color &= _MASK32
    return ((color & 0xFF) >> 3) | ((color & 0xFC00) >> 5) | ((color & 0xF80000) >> 8)


def rgb16_to_32(color: int) -> int:
    """Convert an RGB565 colour to opaque 32-bit ARGB."""
    return (
        (0xFF << 24)
        | ((color & 0x1F) << 3)
        | ((color & 0x7E0) << 5)
        | ((color & 0xF800) << 8)
    )


def round_rgb32(color: int) -> int:
    """Drop the low bits that RGB565 cannot hold."""
    return color & 0xFFF8FCF8