"""sRGB hex to HSL conversion."""

from __future__ import annotations

import math
import re
from typing import NamedTuple

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class HslColor(NamedTuple):
    """Hue in degrees, saturation and lightness in whole percent."""

    h: int
    s: int
    l: int  # noqa: E741

    def css(self) -> str:
        """Render as the space separated ``"H S% L%"`` triple."""
        return f"{self.h} {self.s}% {self.l}%"


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_hsl(value: str) -> HslColor | None:
    """Convert a 6-digit sRGB hex string to HSL.

    A leading ``#`` is optional and digits are case-insensitive. Anything else
    returns ``None`` rather than raising.
    """
    if not isinstance(value, str):
        return None
    match = _HEX_RE.fullmatch(value)
    if match is None:
        return None

    r, g, b = (int(part, 16) / 255 for part in match.groups())
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            hue = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / d + 2
        else:
            hue = (r - g) / d + 4
        hue /= 6

    return HslColor(
        h=_round_half_up(hue * 360),
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def _round_half_up(value: float) -> int:
    # Inputs are never negative, so this matches round-half-away-from-zero.
    return int(math.floor(value + 0.5))
