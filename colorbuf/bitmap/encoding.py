from __future__ import annotations

import logging
import math
from typing import Dict, Tuple, Union

from ..buffer import PixelBuffer
from ..color import Color
from ..errors import BufferTooSmall, InvalidChannelValue
from .types import BitDepth, ChannelLayout, ChannelOrder

logger = logging.getLogger(__name__)

Writable = Union[bytearray, memoryview]
LayoutLike = Union[ChannelLayout, ChannelOrder, str]


def quantize_channel(value: float, depth: BitDepth) -> int:
    """Map a channel value to its stored integer, rounding to nearest and clamping.

    NaN and infinite values raise InvalidChannelValue.
    """
    if not math.isfinite(value):
        raise InvalidChannelValue(f"Channel value must be finite, got {value}")
    max_value = depth.max_value
    raw = int(round(value * max_value))
    if raw < 0:
        return 0
    if raw > max_value:
        return max_value
    return raw


def dequantize_channel(raw: int, depth: BitDepth) -> float:
    """Map a stored integer back to a channel value in [0, 1]."""
    return raw / depth.max_value


def pack_pixel(color: Color, layout: ChannelLayout) -> bytes:
    """Serialize a color in the layout's byte order. Alpha is dropped for RGB."""
    depth = layout.depth
    width = depth.bytes_per_channel
    out = bytearray()
    for slot in layout.order.slots:
        raw = quantize_channel(getattr(color, slot), depth)
        out += raw.to_bytes(width, "little")
    return bytes(out)


def unpack_pixel(data: Union[bytes, bytearray, memoryview], offset: int, layout: ChannelLayout) -> Color:
    """Read one pixel starting at `offset`. Layouts without alpha decode as opaque."""
    depth = layout.depth
    width = depth.bytes_per_channel
    values: Dict[str, float] = {"a": 1.0}
    pos = offset
    for slot in layout.order.slots:
        raw = int.from_bytes(data[pos : pos + width], "little")
        values[slot] = dequantize_channel(raw, depth)
        pos += width
    return Color(values["r"], values["g"], values["b"], values["a"])


def to_bitmap(buffer: PixelBuffer, layout: LayoutLike, output: Writable) -> int:
    """Write `buffer` into `output` as a tightly packed bitmap and return its stride.

    The stride is `layout.bytes_per_pixel * buffer.width`; rows carry no padding.
    The size of `output` is checked before anything is written. If this raises,
    `output` must not be used as a bitmap.
    """
    layout = ChannelLayout.parse(layout)
    width = buffer.width
    height = buffer.height
    bpp = layout.bytes_per_pixel
    stride = layout.min_stride(width)
    required = height * stride
    if len(output) < required:
        raise BufferTooSmall(required, len(output))

    logger.debug("Encoding %dx%d buffer as %s, stride %d", width, height, layout, stride)
    for y in range(height):
        row = y * stride
        for x in range(width):
            index = row + x * bpp
            output[index : index + bpp] = pack_pixel(buffer.get_pixel(x, y), layout)
    return stride


def encode_bitmap(buffer: PixelBuffer, layout: LayoutLike) -> Tuple[int, bytes]:
    """Encode `buffer` into a fresh payload. Returns `(stride, data)`."""
    layout = ChannelLayout.parse(layout)
    output = bytearray(layout.min_stride(buffer.width) * buffer.height)
    stride = to_bitmap(buffer, layout, output)
    return stride, bytes(output)
