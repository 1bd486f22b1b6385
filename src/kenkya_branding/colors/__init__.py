"""
Color conversion, logo color extraction and palette variations.
"""

from kenkya_branding.colors.conversion import (
    HSL,
    RGB,
    ColorInfo,
    get_color_info,
    hex_to_rgb,
    hsl_to_rgb,
    is_valid_hex,
    parse_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from kenkya_branding.colors.extraction import (
    extract_dominant_colors,
    extract_from_image,
    extract_from_path,
)
from kenkya_branding.colors.palette import Palette, format_palette_string, parse_palette_string
from kenkya_branding.colors.variations import (
    PaletteSet,
    build_palette_set,
    soft_variation,
    variation_hexes,
    vibrant_variation,
)

__all__ = [
    "HSL",
    "RGB",
    "ColorInfo",
    "get_color_info",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_valid_hex",
    "parse_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "extract_dominant_colors",
    "extract_from_image",
    "extract_from_path",
    "Palette",
    "format_palette_string",
    "parse_palette_string",
    "PaletteSet",
    "build_palette_set",
    "soft_variation",
    "variation_hexes",
    "vibrant_variation",
]
