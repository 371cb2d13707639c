from .codec import BitmapColorBuf, blank_bitmap
from .encoding import (
    dequantize_channel,
    encode_bitmap,
    pack_pixel,
    quantize_channel,
    to_bitmap,
    unpack_pixel,
)
from .types import ARGB8, RGB8, RGBA8, BitDepth, ChannelLayout, ChannelOrder

__all__ = [
    "ARGB8",
    "BitDepth",
    "BitmapColorBuf",
    "blank_bitmap",
    "ChannelLayout",
    "ChannelOrder",
    "dequantize_channel",
    "encode_bitmap",
    "pack_pixel",
    "quantize_channel",
    "RGB8",
    "RGBA8",
    "to_bitmap",
    "unpack_pixel",
]
