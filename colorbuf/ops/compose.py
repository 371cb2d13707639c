from __future__ import annotations

from ..buffer import PixelBuffer
from ..color import Color, blend_with_gamma
from ..errors import InvalidDimensions


def fill(buffer: PixelBuffer, color: Color) -> None:
    """Set every pixel of `buffer` to `color`."""
    for y in range(buffer.height):
        for x in range(buffer.width):
            buffer.set_pixel(x, y, color)


def copy_into(dest: PixelBuffer, source: PixelBuffer) -> None:
    """Copy `source` pixel by pixel into `dest` of the same size."""
    _require_same_size(dest, source)
    for y in range(source.height):
        for x in range(source.width):
            dest.set_pixel(x, y, source.get_pixel(x, y))


def blend_onto(background: PixelBuffer, foreground: PixelBuffer, gamma: float) -> None:
    """Composite `foreground` over `background` in place, see `blend_with_gamma`."""
    _require_same_size(background, foreground)
    for y in range(foreground.height):
        for x in range(foreground.width):
            blended = blend_with_gamma(background.get_pixel(x, y), foreground.get_pixel(x, y), gamma)
            background.set_pixel(x, y, blended)


def _require_same_size(a: PixelBuffer, b: PixelBuffer) -> None:
    if a.width != b.width or a.height != b.height:
        raise InvalidDimensions(f"Buffer sizes differ: {a.width}x{a.height} and {b.width}x{b.height}")
