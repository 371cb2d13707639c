from __future__ import annotations

from typing import Optional

from ..buffer import PixelBuffer
from ..color import Color
from ..errors import BufferBorrowed, InvalidDimensions


class SubRegionView(PixelBuffer):
    """Pixel buffer exposing a rectangle of another buffer without copying it.

    The view checks out `backing` for as long as it lives. Until `release()`
    is called, the `with` block ends or the view is garbage collected, the
    backing buffer rejects direct access and cannot be wrapped by a second
    view. Views can wrap views.

    The rectangle may touch the far edges of the backing buffer, so
    `start_x + width <= backing.width` and `start_y + height <= backing.height`.
    """

    def __init__(self, backing: PixelBuffer, start_x: int, start_y: int, width: int, height: int) -> None:
        if min(start_x, start_y, width, height) < 0:
            raise InvalidDimensions(f"Region ({start_x}, {start_y}) {width}x{height} must not be negative")
        if start_x + width > backing.width or start_y + height > backing.height:
            raise InvalidDimensions(
                f"Region ({start_x}, {start_y}) {width}x{height} does not fit in "
                f"{backing.width}x{backing.height}"
            )
        backing._check_out(self)
        self._backing: Optional[PixelBuffer] = backing
        self._start_x = start_x
        self._start_y = start_y
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def origin(self) -> tuple:
        return self._start_x, self._start_y

    @property
    def released(self) -> bool:
        return self._backing is None

    def release(self) -> None:
        """Give the backing buffer back to its owner. Releasing twice is a no-op."""
        if self._backing is None:
            return
        if self.borrowed:
            raise BufferBorrowed("Sub-region view is itself checked out by another view")
        self._backing._check_in(self)
        self._backing = None

    def __enter__(self) -> "SubRegionView":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _get(self, x: int, y: int) -> Color:
        return self._require_backing()._read_pixel(self._start_x + x, self._start_y + y)

    def _set(self, x: int, y: int, color: Color) -> None:
        self._require_backing()._write_pixel(self._start_x + x, self._start_y + y, color)

    def _require_backing(self) -> PixelBuffer:
        if self._backing is None:
            raise BufferBorrowed("Sub-region view has been released")
        return self._backing
