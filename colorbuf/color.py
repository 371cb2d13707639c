"""Straight-alpha RGBA color values and gamma-aware compositing."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """Single straight alpha RGBA color. Channels range from 0 to 1 but are not clamped."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def opaque(cls, r: float, g: float, b: float) -> "Color":
        return cls(r, g, b, 1.0)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def blend_with_gamma(background: Color, foreground: Color, gamma: float) -> Color:
    """Composite `foreground` over `background` in linear light.

    Each color channel is decoded with `gamma`, mixed by the foreground alpha
    and encoded again with `1 / gamma`. The resulting alpha is
    `a_fg + a_bg * (1 - a_fg)`.

    Inputs outside of [0, 1] are not rejected. A negative channel raises
    ValueError (math domain error) and `gamma == 0` raises ZeroDivisionError.
    """
    fg_a = foreground.a
    bg_weight = 1.0 - fg_a

    def mix(bg: float, fg: float) -> float:
        linear = math.pow(fg, gamma) * fg_a + math.pow(bg, gamma) * bg_weight
        return math.pow(linear, 1.0 / gamma)

    return Color(
        mix(background.r, foreground.r),
        mix(background.g, foreground.g),
        mix(background.b, foreground.b),
        fg_a + background.a * bg_weight,
    )
