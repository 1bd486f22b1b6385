"""
Tests for palette parsing, formatting and slot editing.
"""

from __future__ import annotations

import pytest

from kenkya_branding.colors.palette import (
    MAX_COLORS,
    Palette,
    format_palette_string,
    parse_palette_string,
)


class TestParsePaletteString:
    """Tests for reading the stored comma-separated form."""

    def test_three_colors(self):
        palette = parse_palette_string("#E91E63, #9C27B0, #10B981")
        assert palette.hexes == ["#E91E63", "#9C27B0", "#10B981"]

    def test_normalizes_and_skips_blanks(self):
        palette = parse_palette_string(" #e91e63 ,, #2196f3 ,")
        assert palette.hexes == ["#E91E63", "#2196F3"]

    def test_keeps_at_most_three(self):
        palette = parse_palette_string("#111111, #222222, #333333, #444444")
        assert len(palette) == MAX_COLORS
        assert palette.hexes[-1] == "#333333"

    @pytest.mark.parametrize("value", ["", None, " , "])
    def test_empty(self, value):
        palette = parse_palette_string(value)
        assert len(palette) == 0
        assert palette.accent is None

    def test_accent_is_first_color(self):
        palette = parse_palette_string("#2196F3, #E91E63")
        assert palette.accent.hex == "#2196F3"


class TestFormatPaletteString:
    """Tests for writing the stored form."""

    def test_palette(self):
        palette = parse_palette_string("#e91e63,#2196f3")
        assert format_palette_string(palette) == "#E91E63, #2196F3"

    def test_plain_hexes(self):
        assert format_palette_string(["#E91E63", "#9C27B0"]) == "#E91E63, #9C27B0"

    def test_parse_of_formatted_is_identity(self):
        palette = parse_palette_string("#E91E63, #9C27B0, #10B981")
        assert parse_palette_string(format_palette_string(palette)) == palette


class TestPaletteEditing:
    """Tests for immutable slot replacement and removal."""

    def test_replace_slot(self):
        palette = parse_palette_string("#E91E63, #2196F3")
        edited = palette.with_color(1, "#10b981")

        assert edited.hexes == ["#E91E63", "#10B981"]
        assert palette.hexes == ["#E91E63", "#2196F3"]

    def test_append_slot(self):
        edited = Palette().with_color(0, "#6366f1").with_color(1, "#E91E63")
        assert edited.hexes == ["#6366F1", "#E91E63"]

    def test_append_to_full_palette_is_truncated(self):
        palette = parse_palette_string("#111111, #222222, #333333")
        assert palette.with_color(3, "#444444").hexes == ["#111111", "#222222", "#333333"]

    def test_remove_slot(self):
        palette = parse_palette_string("#111111, #222222, #333333")
        assert palette.without(1).hexes == ["#111111", "#333333"]
        assert len(palette) == 3

    def test_out_of_range(self):
        palette = parse_palette_string("#111111")
        with pytest.raises(IndexError):
            palette.with_color(2, "#222222")
        with pytest.raises(IndexError):
            palette.without(1)
