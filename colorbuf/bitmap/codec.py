from __future__ import annotations

import logging
from typing import Union

from ..buffer import PixelBuffer
from ..color import Color
from ..errors import InvalidDimensions, UndefinedAlphaDivision
from .encoding import pack_pixel, unpack_pixel
from .types import ChannelLayout, ChannelOrder

logger = logging.getLogger(__name__)


class BitmapColorBuf(PixelBuffer):
    """Pixel buffer backed by a raw, header-less bitmap payload.

    Args:
        layout: Channel order and bit depth of `data` (an order name is accepted).
        rows: Number of rows in the bitmap.
        pixels_per_row: Width of the bitmap in pixels.
        stride: Bytes between the starts of consecutive rows. For tightly packed
            bitmaps this is `pixels_per_row * layout.bytes_per_pixel`.
        data: The payload. The buffer takes it over: a `bytearray` is used in
            place and must not be touched by the caller afterwards, anything
            else is copied.

    Raises:
        InvalidDimensions: if a dimension is negative, `stride` is shorter than
            a row of pixels, or `data` holds fewer than `rows * stride` bytes.
    """

    def __init__(
        self,
        layout: Union[ChannelLayout, ChannelOrder, str],
        rows: int,
        pixels_per_row: int,
        stride: int,
        data: Union[bytes, bytearray, memoryview],
    ) -> None:
        layout = ChannelLayout.parse(layout)
        if rows < 0 or pixels_per_row < 0:
            raise InvalidDimensions(f"Bitmap size must not be negative: {pixels_per_row}x{rows}")
        min_stride = layout.min_stride(pixels_per_row)
        if stride < min_stride:
            raise InvalidDimensions(f"Stride {stride} is shorter than a row of {pixels_per_row} {layout} pixels ({min_stride})")
        if len(data) < rows * stride:
            raise InvalidDimensions(f"Bitmap needs {rows * stride} bytes, got {len(data)}")
        self._data = data if isinstance(data, bytearray) else bytearray(data)
        self._layout = layout
        self._rows = rows
        self._pixels_per_row = pixels_per_row
        self._stride = stride
        logger.debug("Bitmap %dx%d %s, stride %d", pixels_per_row, rows, layout, stride)

    @property
    def width(self) -> int:
        return self._pixels_per_row

    @property
    def height(self) -> int:
        return self._rows

    @property
    def layout(self) -> ChannelLayout:
        return self._layout

    @property
    def stride(self) -> int:
        return self._stride

    def tobytes(self) -> bytes:
        """Return a copy of the payload, row padding included."""
        return bytes(self._data)

    def _get(self, x: int, y: int) -> Color:
        return unpack_pixel(self._data, self._layout.offset(x, y, self._stride), self._layout)

    def _set(self, x: int, y: int, color: Color) -> None:
        if not self._layout.has_alpha:
            color = self._unpremultiply(color)
        index = self._layout.offset(x, y, self._stride)
        self._data[index : index + self._layout.bytes_per_pixel] = pack_pixel(color, self._layout)

    @staticmethod
    def _unpremultiply(color: Color) -> Color:
        # Layouts without alpha store r, g, b divided by alpha.
        if color.a == 0:
            raise UndefinedAlphaDivision("Cannot store a fully transparent color without an alpha channel")
        return Color(color.r / color.a, color.g / color.a, color.b / color.a, 1.0)


def blank_bitmap(layout: Union[ChannelLayout, ChannelOrder, str], width: int, height: int) -> BitmapColorBuf:
    """Create a zero-filled, tightly packed bitmap buffer."""
    layout = ChannelLayout.parse(layout)
    if width < 0 or height < 0:
        raise InvalidDimensions(f"Bitmap size must not be negative: {width}x{height}")
    stride = layout.min_stride(width)
    return BitmapColorBuf(layout, height, width, stride, bytearray(stride * height))
