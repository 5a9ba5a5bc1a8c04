"""Conversions between hex, RGB and HSL color representations.

All three forms describe the same color:

- Hex: ``#rrggbb``, case-insensitive on input, lowercase on output. The
  leading ``#`` is optional on input.
- RGB: :class:`~accessible_colors.models.RGB`, integer channels 0-255.
- HSL: :class:`~accessible_colors.models.HSL`, float channels 0.0-1.0.

Hex -> RGB -> Hex is exact. RGB -> HSL -> RGB goes through floats, so compare
HSL values approximately.

The HSL formulas follow http://en.wikipedia.org/wiki/HSL_color_space.
"""

import math
import re
from typing import Any

from accessible_colors.exceptions import InvalidColorError
from accessible_colors.models import HSL, RGB

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def _round_channel(value: float) -> int:
    """Scale a 0-1 channel to 0-255, rounding halves up."""
    return int(math.floor(value * 255 + 0.5))


def is_valid_hex(value: Any) -> bool:
    """Check whether a value is a well-formed 6-digit hex color."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Decode a hex color into its red, green and blue channels.

    Raises:
        InvalidColorError: If the value is not ``#`` plus exactly 6 hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(hex_color, "expected a string")
    if not hex_color:
        raise InvalidColorError(hex_color, "empty string")

    match = _HEX_RE.fullmatch(hex_color)
    if match is None:
        raise InvalidColorError(hex_color)

    value = int(match.group(1), 16)
    return RGB(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255)


def rgb_to_hex(rgb: RGB) -> str:
    """Encode an RGB color as ``#rrggbb``."""
    return rgb.to_hex()


def normalize_hex(hex_color: str) -> str:
    """Return the canonical lowercase ``#rrggbb`` form of a hex color."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert an HSL color to RGB.

    Args:
        hsl: Hue, saturation and lightness in 0.0-1.0

    Returns:
        The RGB color with channels in 0-255
    """
    h, s, l = hsl.h, hsl.s, hsl.l  # noqa: E741

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(r=_round_channel(r), g=_round_channel(g), b=_round_channel(b))


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert an RGB color to HSL.

    Args:
        rgb: Red, green and blue in 0-255

    Returns:
        The HSL color with channels in 0.0-1.0
    """
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2  # noqa: E741

    if high == low:
        return HSL(h=0.0, s=0.0, l=l)  # achromatic

    d = high - low
    s = d / (2 - high - low) if l > 0.5 else d / (high + low)

    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return HSL(h=h / 6, s=s, l=l)


def hex_to_hsl(hex_color: str) -> HSL:
    """Decode a hex color straight to HSL."""
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSL) -> str:
    """Encode an HSL color as ``#rrggbb``."""
    return rgb_to_hex(hsl_to_rgb(hsl))
