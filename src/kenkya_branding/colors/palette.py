"""
Brand palettes and their stored string form.

A palette is persisted as a comma-separated list of hex codes, for example
``"#E91E63, #9C27B0, #10B981"``. Editing never mutates a palette; every
change returns a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from kenkya_branding.colors.conversion import ColorInfo, get_color_info

MAX_COLORS = 3
SEPARATOR = ", "


@dataclass(frozen=True)
class Palette:
    """An ordered list of up to three brand colors.

    The first color is the accent (used e.g. for the guide's header divider).
    """
    colors: tuple[ColorInfo, ...] = ()

    @classmethod
    def from_hexes(cls, hexes: Iterable[str]) -> Palette:
        return cls(tuple(get_color_info(h) for h in hexes)[:MAX_COLORS])

    @property
    def accent(self) -> ColorInfo | None:
        return self.colors[0] if self.colors else None

    @property
    def hexes(self) -> list[str]:
        return [c.hex for c in self.colors]

    def with_color(self, index: int, hex_value: str) -> Palette:
        """Replace the color at ``index``, or append when ``index`` is one past the end."""
        if not 0 <= index <= len(self.colors):
            raise IndexError(f"Palette slot {index} out of range")
        colors = list(self.colors)
        color = get_color_info(hex_value)
        if index < len(colors):
            colors[index] = color
        else:
            colors.append(color)
        return Palette(tuple(colors[:MAX_COLORS]))

    def without(self, index: int) -> Palette:
        """Drop the color at ``index``."""
        if not 0 <= index < len(self.colors):
            raise IndexError(f"Palette slot {index} out of range")
        return Palette(self.colors[:index] + self.colors[index + 1:])

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    def __getitem__(self, index: int) -> ColorInfo:
        return self.colors[index]


def parse_palette_string(value: str | None) -> Palette:
    """Parse the stored comma-separated form. Blank entries are skipped."""
    if not value:
        return Palette()
    entries = [part.strip() for part in value.split(",")]
    return Palette.from_hexes(e for e in entries if e)


def format_palette_string(palette: Palette | Iterable[str]) -> str:
    """Join a palette (or plain hex strings) into the stored form."""
    hexes = palette.hexes if isinstance(palette, Palette) else list(palette)
    return SEPARATOR.join(hexes)
