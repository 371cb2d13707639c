from __future__ import annotations

import os
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

from ..bitmap import BitmapColorBuf, ChannelLayout, ChannelOrder, encode_bitmap
from ..buffer import PixelBuffer

DEFAULT_ORDER = ChannelOrder.RGBA


def load_bitmap(path: str, order: Union[ChannelOrder, str] = DEFAULT_ORDER) -> BitmapColorBuf:
    """Open an image file with Pillow and return its pixels as a bitmap buffer."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return image_to_buffer(img, order)
    except UnidentifiedImageError as exc:
        raise ValueError(f"Not an image: {path}") from exc


def image_to_buffer(img: Image.Image, order: Union[ChannelOrder, str] = DEFAULT_ORDER) -> BitmapColorBuf:
    """Pack a Pillow image into a tightly packed bitmap buffer in `order`."""
    layout = ChannelLayout.parse(order)
    data = _packed_bytes(img, layout.order)
    return BitmapColorBuf(layout, img.height, img.width, layout.min_stride(img.width), bytearray(data))


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Render any pixel buffer into an RGBA Pillow image."""
    _, data = encode_bitmap(buffer, ChannelLayout(ChannelOrder.RGBA))
    return Image.frombytes("RGBA", (buffer.width, buffer.height), data)


def save_buffer(buffer: PixelBuffer, path: str) -> None:
    img = buffer_to_image(buffer)
    ext = os.path.splitext(path)[1].lower()
    if ext in (".jpg", ".jpeg"):
        img = img.convert("RGB")
    img.save(path)


def _packed_bytes(img: Image.Image, order: ChannelOrder) -> bytes:
    if order is ChannelOrder.RGB:
        return _normalize_image(img, "RGB").tobytes()
    rgba = _normalize_image(img, "RGBA")
    if order is ChannelOrder.ARGB:
        r, g, b, a = rgba.split()
        # Pillow has no ARGB mode; merge the bands in ARGB order under an RGBA label.
        return Image.merge("RGBA", (a, r, g, b)).tobytes()
    return rgba.tobytes()


def _normalize_image(img: Image.Image, mode: str) -> Image.Image:
    if img.mode != mode:
        return img.convert(mode)
    return img
