"""Manipulating 2D buffers of color.

`PixelBuffer` is the contract every pixel source implements. Colors are
straight alpha `Color` values with channels between 0 and 1, and `(0, 0)` is
the top-left corner of a buffer.
"""
from .bitmap import (
    ARGB8,
    RGB8,
    RGBA8,
    BitDepth,
    BitmapColorBuf,
    ChannelLayout,
    ChannelOrder,
    blank_bitmap,
    encode_bitmap,
    to_bitmap,
)
from .buffer import PixelBuffer
from .color import BLACK, TRANSPARENT, WHITE, Color, blend_with_gamma
from .errors import (
    BufferBorrowed,
    BufferTooSmall,
    ColorBufError,
    CoordinateOutOfRange,
    InvalidChannelValue,
    InvalidDimensions,
    UndefinedAlphaDivision,
)
from .ops import SubRegionView, blend_onto, copy_into, fill

__version__ = "0.1.0"

__all__ = [
    "ARGB8",
    "BitDepth",
    "BitmapColorBuf",
    "BLACK",
    "blank_bitmap",
    "blend_onto",
    "blend_with_gamma",
    "BufferBorrowed",
    "BufferTooSmall",
    "ChannelLayout",
    "ChannelOrder",
    "Color",
    "ColorBufError",
    "CoordinateOutOfRange",
    "copy_into",
    "encode_bitmap",
    "fill",
    "InvalidChannelValue",
    "InvalidDimensions",
    "PixelBuffer",
    "RGB8",
    "RGBA8",
    "SubRegionView",
    "to_bitmap",
    "TRANSPARENT",
    "UndefinedAlphaDivision",
    "WHITE",
]
