"""
Derived palette variations for the branding guide.

Two deterministic HSL transforms are applied slot by slot:

- vibrant: hue +30 degrees, saturation +10 (capped at 100), lightness kept
- soft: saturation -25 (floor 20), lightness +15 (capped at 85), hue kept

Each slot of a variation depends only on the same slot of the original.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Union

from kenkya_branding.colors.conversion import (
    HSL,
    ColorInfo,
    get_color_info,
    hsl_to_rgb,
    rgb_to_hex,
)
from kenkya_branding.colors.palette import Palette

logger = logging.getLogger(__name__)

ColorLike = Union[ColorInfo, str]

VIBRANT_HUE_SHIFT = 30
VIBRANT_SATURATION_BOOST = 10
SOFT_DESATURATION = 25
SOFT_MIN_SATURATION = 20
SOFT_LIGHTEN = 15
SOFT_MAX_LIGHTNESS = 85


def vibrant_hsl(hsl: HSL) -> HSL:
    return HSL(
        (hsl.h + VIBRANT_HUE_SHIFT) % 360,
        min(100, hsl.s + VIBRANT_SATURATION_BOOST),
        hsl.l,
    )


def soft_hsl(hsl: HSL) -> HSL:
    return HSL(
        hsl.h,
        max(SOFT_MIN_SATURATION, hsl.s - SOFT_DESATURATION),
        min(SOFT_MAX_LIGHTNESS, hsl.l + SOFT_LIGHTEN),
    )


def _as_info(color: ColorLike) -> ColorInfo:
    return color if isinstance(color, ColorInfo) else get_color_info(color)


def _apply(transform: Callable[[HSL], HSL], colors: Iterable[ColorLike]) -> list[ColorInfo]:
    result = []
    for color in colors:
        hsl = transform(_as_info(color).hsl)
        rgb = hsl_to_rgb(*hsl)
        result.append(get_color_info(rgb_to_hex(*rgb)))
    return result


def vibrant_variation(colors: Iterable[ColorLike]) -> list[ColorInfo]:
    """Analogous hue shift with raised saturation."""
    return _apply(vibrant_hsl, colors)


def soft_variation(colors: Iterable[ColorLike]) -> list[ColorInfo]:
    """Desaturated, lighter tones."""
    return _apply(soft_hsl, colors)


VARIATIONS: dict[str, Callable[[Iterable[ColorLike]], list[ColorInfo]]] = {
    "vibrant": vibrant_variation,
    "soft": soft_variation,
}


def variation_hexes(colors: Iterable[ColorLike], kind: str) -> list[str]:
    """Return the ``kind`` variation ("vibrant" or "soft") as hex strings."""
    try:
        variation = VARIATIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown variation: {kind}") from None
    return [c.hex for c in variation(colors)]


@dataclass(frozen=True)
class PaletteSet:
    """The original palette together with both derived variations."""
    original: Palette
    vibrant: Palette
    soft: Palette

    def sections(self) -> list[tuple[str, Palette]]:
        return [("original", self.original), ("vibrant", self.vibrant), ("soft", self.soft)]


def build_palette_set(palette: Palette) -> PaletteSet:
    """Derive the vibrant and soft variations of ``palette``."""
    palette_set = PaletteSet(
        original=palette,
        vibrant=Palette(tuple(vibrant_variation(palette))),
        soft=Palette(tuple(soft_variation(palette))),
    )
    logger.debug(
        "Palette set for %s: vibrant=%s soft=%s",
        palette.hexes, palette_set.vibrant.hexes, palette_set.soft.hexes,
    )
    return palette_set
