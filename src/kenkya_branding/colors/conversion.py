"""
Hex / RGB / HSL conversion for brand colors.

Every function here is total: malformed hex falls back to black and
out-of-range HSL input is wrapped (hue) or clamped (saturation, lightness).
Use :func:`parse_hex` when an invalid value must be told apart from a
legitimate ``#000000``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


class RGB(NamedTuple):
    """Red, green and blue channels, each 0-255."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees (0-359), saturation and lightness in percent (0-100)."""
    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True)
class ColorInfo:
    """A color in all three representations.

    ``hex`` is the canonical uppercase ``#RRGGBB`` form.
    """
    hex: str
    rgb: RGB
    hsl: HSL


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def parse_hex(value: str) -> RGB | None:
    """Parse ``#RRGGBB`` (``#`` optional, any case). Returns None if malformed."""
    match = HEX_PATTERN.match(value.strip())
    if match is None:
        return None
    return RGB(*(int(group, 16) for group in match.groups()))


def is_valid_hex(value: str) -> bool:
    return parse_hex(value) is not None


def normalize_hex(value: str) -> str:
    """Trim, uppercase and ensure a leading ``#``."""
    value = value.strip().upper()
    return value if value.startswith("#") else f"#{value}"


def hex_to_rgb(value: str) -> RGB:
    """Convert a hex string to RGB, falling back to black when malformed."""
    rgb = parse_hex(value)
    return rgb if rgb is not None else RGB(0, 0, 0)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 0-255 RGB channels to integer HSL.

    Args:
        r: Red channel.
        g: Green channel.
        b: Blue channel.

    Returns:
        HSL with hue in whole degrees and saturation/lightness in whole percent.
    """
    rf, gf, bf = r / 255, g / 255, b / 255
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == rf:
            hue = ((gf - bf) / d + (6 if gf < bf else 0)) / 6
        elif high == gf:
            hue = ((bf - rf) / d + 2) / 6
        else:
            hue = ((rf - gf) / d + 4) / 6

    # A hue just under 360 rounds up to 360, which is the same angle as 0
    return HSL(
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise hue-to-channel helper of the p/q HSL conversion."""
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


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to 0-255 RGB.

    Hue is wrapped into [0, 360); saturation and lightness are clamped to
    [0, 100].
    """
    h = (h % 360) / 360
    s = min(100, max(0, s)) / 100
    l = min(100, max(0, l)) / 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB as a lowercase ``#rrggbb`` string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def get_color_info(value: str) -> ColorInfo:
    """Build the hex/RGB/HSL triple for a hex string."""
    rgb = hex_to_rgb(value)
    hsl = rgb_to_hsl(*rgb)
    return ColorInfo(hex=value.strip().upper(), rgb=rgb, hsl=hsl)

