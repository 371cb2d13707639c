from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class ChannelOrder(Enum):
    """How the channels of a pixel are arranged, lowest address first."""

    RGBA = ("r", "g", "b", "a")
    ARGB = ("a", "r", "g", "b")
    RGB = ("r", "g", "b")

    @property
    def slots(self) -> Tuple[str, ...]:
        return self.value

    @property
    def has_alpha(self) -> bool:
        return "a" in self.value


class BitDepth(Enum):
    """Bits stored per channel."""

    EIGHT = 8

    @property
    def bytes_per_channel(self) -> int:
        return (self.value + 7) // 8

    @property
    def max_value(self) -> int:
        return (1 << self.value) - 1


@dataclass(frozen=True)
class ChannelLayout:
    """Channel order and bit depth of a packed bitmap payload."""

    order: ChannelOrder
    depth: BitDepth = BitDepth.EIGHT

    @classmethod
    def parse(cls, value: Union[str, "ChannelLayout", ChannelOrder]) -> "ChannelLayout":
        """Build a layout from an order name such as "ARGB" (8-bit depth)."""
        if isinstance(value, ChannelLayout):
            return value
        if isinstance(value, ChannelOrder):
            return cls(value)
        try:
            return cls(ChannelOrder[value.strip().upper()])
        except KeyError:
            names = ", ".join(order.name for order in ChannelOrder)
            raise ValueError(f"Unknown channel order: {value} (expected one of {names})") from None

    @property
    def bytes_per_pixel(self) -> int:
        return len(self.order.slots) * self.depth.bytes_per_channel

    @property
    def has_alpha(self) -> bool:
        return self.order.has_alpha

    def min_stride(self, pixels_per_row: int) -> int:
        """Return the stride of a row without padding."""
        return pixels_per_row * self.bytes_per_pixel

    def offset(self, x: int, y: int, stride: int) -> int:
        """Return the byte offset of pixel (x, y)."""
        return y * stride + x * self.bytes_per_pixel

    def __str__(self) -> str:
        return f"{self.order.name}/{self.depth.value}"


RGBA8 = ChannelLayout(ChannelOrder.RGBA)
ARGB8 = ChannelLayout(ChannelOrder.ARGB)
RGB8 = ChannelLayout(ChannelOrder.RGB)
