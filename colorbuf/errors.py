from __future__ import annotations


class ColorBufError(Exception):
    """Base class for every error raised by colorbuf."""


class CoordinateOutOfRange(ColorBufError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside of {width}x{height}")
        self.x = x
        self.y = y


class InvalidDimensions(ColorBufError, ValueError):
    pass


class BufferTooSmall(ColorBufError, ValueError):
    def __init__(self, required: int, actual: int) -> None:
        super().__init__(f"Output needs {required} bytes, got {actual}")
        self.required = required
        self.actual = actual


class UndefinedAlphaDivision(ColorBufError, ZeroDivisionError):
    pass


class BufferBorrowed(ColorBufError, RuntimeError):
    pass


class InvalidChannelValue(ColorBufError, ValueError):
    pass
