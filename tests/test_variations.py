"""
Tests for the vibrant and soft palette variations.
"""

from __future__ import annotations

import pytest

from kenkya_branding.colors.conversion import HSL, get_color_info
from kenkya_branding.colors.palette import parse_palette_string
from kenkya_branding.colors.variations import (
    build_palette_set,
    soft_hsl,
    soft_variation,
    variation_hexes,
    vibrant_hsl,
    vibrant_variation,
)


def _close(actual: HSL, expected: tuple[int, int, int], tolerance: int = 1) -> bool:
    hue_diff = abs(actual.h - expected[0]) % 360
    hue_diff = min(hue_diff, 360 - hue_diff)
    return (
        hue_diff <= tolerance
        and abs(actual.s - expected[1]) <= tolerance
        and abs(actual.l - expected[2]) <= tolerance
    )


class TestVibrant:
    """Tests for the analogous, more saturated variation."""

    def test_hsl_transform(self):
        assert vibrant_hsl(HSL(210, 100, 56)) == HSL(240, 100, 56)

    def test_hue_wraps_and_saturation_caps(self):
        assert vibrant_hsl(HSL(340, 95, 40)) == HSL(10, 100, 40)

    def test_dodger_blue(self):
        [color] = vibrant_variation(["#1E90FF"])
        assert color.hex == "#1F1FFF"
        assert color.hsl == HSL(240, 100, 56)


class TestSoft:
    """Tests for the desaturated, lighter variation."""

    def test_hsl_transform(self):
        assert soft_hsl(HSL(210, 100, 56)) == HSL(210, 75, 71)

    def test_saturation_floor_and_lightness_cap(self):
        assert soft_hsl(HSL(90, 30, 80)) == HSL(90, 20, 85)

    def test_dodger_blue(self):
        [color] = soft_variation([get_color_info("#1E90FF")])
        assert color.hsl.h == 210
        assert color.hsl.l == 71
        assert abs(color.hsl.s - 75) <= 1


class TestPaletteSet:
    """Tests for deriving all three palettes together."""

    def test_same_length_and_order(self):
        palette = parse_palette_string("#E91E63, #9C27B0, #10B981")
        palette_set = build_palette_set(palette)

        assert palette_set.original is palette
        assert len(palette_set.vibrant) == 3
        assert len(palette_set.soft) == 3
        for original, vibrant in zip(palette, palette_set.vibrant):
            expected = vibrant_hsl(original.hsl)
            assert _close(vibrant.hsl, expected), (original.hex, vibrant.hsl, expected)

    def test_slots_are_independent(self):
        palette = parse_palette_string("#E91E63, #2196F3")
        palette_set = build_palette_set(palette)

        # Recomputing slot 0 alone leaves slot 1 of the other palettes as it was
        [vibrant_first] = vibrant_variation([palette[0]])
        assert vibrant_first == palette_set.vibrant[0]
        assert soft_variation([palette[1]])[0] == palette_set.soft[1]
        assert palette[1].hex == "#2196F3"

    def test_sections_order(self):
        palette_set = build_palette_set(parse_palette_string("#1E90FF"))
        assert [name for name, _ in palette_set.sections()] == ["original", "vibrant", "soft"]


def test_stored_palette_to_vibrant_hexes():
    palette = parse_palette_string("#E91E63, #2196F3")
    assert [c.hsl for c in palette] == [HSL(340, 82, 52), HSL(207, 90, 54)]

    hexes = variation_hexes(palette, "vibrant")

    assert len(hexes) == 2
    for original, value in zip(palette, hexes):
        derived = get_color_info(value).hsl
        expected = ((original.hsl.h + 30) % 360, min(100, original.hsl.s + 10), original.hsl.l)
        assert _close(derived, expected), (original.hex, derived, expected)


def test_variations_accept_plain_hex_strings():
    assert variation_hexes(["#1E90FF"], "soft") == [c.hex for c in soft_variation(["#1e90ff"])]


def test_unknown_variation():
    with pytest.raises(ValueError):
        variation_hexes(["#1E90FF"], "neon")
