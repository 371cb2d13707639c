"""The pixel buffer contract shared by every pixel source.

Coordinates run from `(0, 0)` at the top-left corner to
`(width - 1, height - 1)`. Accessing anything outside of that range raises
`CoordinateOutOfRange`; values are never clamped.

A buffer can be checked out by a single sub-region view. While it is
checked out its public accessors raise `BufferBorrowed`, and only the view
reaches the pixels through `_read_pixel` / `_write_pixel`. The buffer only
holds a weak reference to the view, so dropping an unreleased view ends the
check-out.
"""
from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Optional

from .color import Color
from .errors import BufferBorrowed, CoordinateOutOfRange


class PixelBuffer(ABC):
    _borrower: Optional["weakref.ReferenceType[object]"] = None

    @property
    @abstractmethod
    def width(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def height(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def _get(self, x: int, y: int) -> Color:
        """Read a pixel already known to be in range."""
        raise NotImplementedError

    @abstractmethod
    def _set(self, x: int, y: int, color: Color) -> None:
        """Write a pixel already known to be in range."""
        raise NotImplementedError

    def get_pixel(self, x: int, y: int) -> Color:
        self._ensure_available()
        return self._read_pixel(x, y)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._ensure_available()
        self._write_pixel(x, y, color)

    @property
    def borrowed(self) -> bool:
        return self._current_borrower() is not None

    def _read_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return self._get(x, y)

    def _write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._set(x, y, color)

    def _check_bounds(self, x: int, y: int) -> None:
        width = self.width
        height = self.height
        if x < 0 or y < 0 or x >= width or y >= height:
            raise CoordinateOutOfRange(x, y, width, height)

    def _current_borrower(self) -> Optional[object]:
        # A view that was dropped without release() no longer holds the buffer.
        if self._borrower is None:
            return None
        borrower = self._borrower()
        if borrower is None:
            self._borrower = None
        return borrower

    def _ensure_available(self) -> None:
        if self._current_borrower() is not None:
            raise BufferBorrowed(f"{type(self).__name__} is checked out by a sub-region view")

    def _check_out(self, borrower: object) -> None:
        self._ensure_available()
        self._borrower = weakref.ref(borrower)

    def _check_in(self, borrower: object) -> None:
        if self._current_borrower() is borrower:
            self._borrower = None
