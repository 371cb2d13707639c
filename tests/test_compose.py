import pytest

from colorbuf import (
    BLACK,
    RGBA8,
    WHITE,
    Color,
    InvalidDimensions,
    SubRegionView,
    blank_bitmap,
    blend_onto,
    copy_into,
    fill,
)


def test_fill_covers_every_pixel():
    buf = blank_bitmap("RGB", 3, 2)
    fill(buf, WHITE)
    assert buf.tobytes() == bytes([0xFF] * 18)


def test_fill_through_view():
    buf = blank_bitmap(RGBA8, 3, 3)
    with SubRegionView(buf, 1, 1, 2, 2) as view:
        fill(view, WHITE)
    assert buf.get_pixel(0, 0) == Color(0.0, 0.0, 0.0, 0.0)
    assert buf.get_pixel(2, 2) == WHITE


def test_copy_into():
    src = blank_bitmap("ARGB", 2, 1)
    src.set_pixel(1, 0, Color(0.2, 0.4, 0.6, 0.8))
    dest = blank_bitmap(RGBA8, 2, 1)
    copy_into(dest, src)
    assert dest.tobytes() == bytes([0, 0, 0, 0, 51, 102, 153, 204])


def test_blend_onto_opaque_replaces():
    bg = blank_bitmap(RGBA8, 2, 2)
    fill(bg, BLACK)
    fg = blank_bitmap(RGBA8, 2, 2)
    fill(fg, WHITE)
    blend_onto(bg, fg, 2.2)
    assert bg.tobytes() == bytes([0xFF] * 16)


def test_blend_onto_transparent_keeps_background():
    bg = blank_bitmap(RGBA8, 1, 1)
    bg.set_pixel(0, 0, WHITE)
    fg = blank_bitmap(RGBA8, 1, 1)
    blend_onto(bg, fg, 2.2)
    assert bg.get_pixel(0, 0) == WHITE


def test_size_mismatch():
    with pytest.raises(InvalidDimensions):
        copy_into(blank_bitmap(RGBA8, 2, 2), blank_bitmap(RGBA8, 2, 1))
    with pytest.raises(InvalidDimensions):
        blend_onto(blank_bitmap(RGBA8, 2, 2), blank_bitmap(RGBA8, 1, 2), 2.2)
