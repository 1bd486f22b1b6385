"""
Branding color-guide PDF.

Renders a one-page A4 guide with the client's palette and its two derived
variations. Each swatch is annotated with its hex, RGB and HSL values.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from kenkya_branding.colors.conversion import ColorInfo
from kenkya_branding.colors.palette import Palette, parse_palette_string
from kenkya_branding.colors.variations import build_palette_set
from kenkya_branding.config import GuideConfig

logger = logging.getLogger(__name__)

TITLE = "GUIA DE CORES DA MARCA"

SECTIONS = {
    "original": ("PALETA PRINCIPAL", "Cores originais definidas pelo cliente"),
    "vibrant": ("VARIAÇÃO VIBRANTE", "Tons análogos com saturação elevada"),
    "soft": ("VARIAÇÃO SUAVE", "Tons dessaturados e mais claros"),
}

RECOMMENDATIONS = [
    "• Paleta Principal: Identidade visual primária, logotipos, headers",
    "• Variação Vibrante: CTAs, destaques, elementos de ação",
    "• Variação Suave: Backgrounds, cards, elementos secundários",
]


def guide_filename(business_name: str) -> str:
    """``branding-<name>.pdf`` with whitespace runs turned into dashes."""
    slug = re.sub(r"\s+", "-", business_name.strip().lower())
    return f"branding-{slug}.pdf"


def _gray(c: canvas.Canvas, level: int, stroke: bool = False) -> None:
    value = level / 255
    if stroke:
        c.setStrokeColorRGB(value, value, value)
    else:
        c.setFillColorRGB(value, value, value)


def _fill(c: canvas.Canvas, color: ColorInfo) -> None:
    c.setFillColorRGB(color.rgb.r / 255, color.rgb.g / 255, color.rgb.b / 255)


class BrandingGuide:
    """Draws the branding guide with reportlab.

    Layout positions are given in millimetres from the top-left corner and
    flipped to reportlab's bottom-left origin when drawing.

    Args:
        config: Guide configuration. Uses defaults if None.
    """

    def __init__(self, config: GuideConfig | None = None) -> None:
        self.config = config or GuideConfig()
        self.page_width, self.page_height = A4

    def _y(self, top_mm: float) -> float:
        return self.page_height - top_mm * mm

    def render(
        self,
        business_name: str,
        palette: Palette | str,
        logo: str | Path | Image.Image | None = None,
        output_path: str | Path | None = None,
        generated_on: date | None = None,
    ) -> Path:
        """Write the guide PDF and return its path.

        Args:
            business_name: Client's business name, shown uppercased.
            palette: Palette or its stored comma-separated form.
            logo: Optional logo file or image, placed at the top right.
            output_path: Target file. Defaults to ``branding-<name>.pdf``
                inside ``config.output_dir``.
            generated_on: Date printed in the header. Defaults to today.

        Returns:
            Path to the written PDF.
        """
        if isinstance(palette, str):
            palette = parse_palette_string(palette)
        if not palette.colors:
            raise ValueError(f"No brand colors defined for {business_name!r}")

        if output_path is None:
            output_path = Path(self.config.output_dir) / guide_filename(business_name)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        palette_set = build_palette_set(palette)
        margin = self.config.margin_mm

        c = canvas.Canvas(str(output_path), pagesize=A4)
        c.setTitle(f"{business_name} - {TITLE}")

        _gray(c, 252)
        c.rect(0, 0, self.page_width, self.page_height, stroke=0, fill=1)

        top = self._draw_header(c, business_name, palette, generated_on or date.today())
        if logo is not None:
            self._draw_logo(c, logo)

        for key, section_palette in palette_set.sections():
            title, subtitle = SECTIONS[key]
            top = self._draw_palette_section(c, title, subtitle, section_palette, top)

        top += 5
        c.setFont("Helvetica-Bold", 11)
        _gray(c, 30)
        c.drawString(margin * mm, self._y(top), "RECOMENDAÇÕES DE USO")
        top += 8
        c.setFont("Helvetica", 9)
        _gray(c, 80)
        for line in RECOMMENDATIONS:
            c.drawString(margin * mm, self._y(top), line)
            top += 6

        c.setFont("Helvetica", 8)
        _gray(c, 180)
        c.drawCentredString(self.page_width / 2, 15 * mm, self.config.footer)

        c.showPage()
        c.save()

        logger.info(
            "Branding guide written: %s", output_path,
            extra={"path": str(output_path), "palette": palette.hexes},
        )
        return output_path

    def _draw_header(
        self, c: canvas.Canvas, business_name: str, palette: Palette, generated_on: date
    ) -> float:
        margin = self.config.margin_mm
        top = 25.0

        c.setFont("Helvetica-Bold", 28)
        _gray(c, 25)
        c.drawString(margin * mm, self._y(top), business_name.upper())
        top += 10

        c.setFont("Helvetica", 12)
        _gray(c, 100)
        c.drawString(margin * mm, self._y(top), TITLE)
        top += 5

        accent = palette.accent
        c.setStrokeColorRGB(accent.rgb.r / 255, accent.rgb.g / 255, accent.rgb.b / 255)
        c.setLineWidth(2 * mm)
        c.line(margin * mm, self._y(top), (margin + 50) * mm, self._y(top))
        top += 20

        c.setFont("Helvetica", 8)
        _gray(c, 150)
        c.drawString(margin * mm, self._y(top - 5), f"Gerado em {generated_on.strftime('%d/%m/%Y')}")
        return top

    def _draw_logo(self, c: canvas.Canvas, logo: str | Path | Image.Image) -> None:
        """Fit the logo into the top-right corner. Unreadable logos are skipped."""
        try:
            reader = ImageReader(str(logo) if isinstance(logo, Path) else logo)
            img_width, img_height = reader.getSize()
        except OSError as e:
            logger.warning("Could not load logo: %s", e)
            return

        max_size = self.config.logo_max_mm
        aspect = img_width / img_height
        width = max_size
        height = max_size / aspect
        if height > max_size:
            height = max_size
            width = max_size * aspect

        x = self.page_width - (self.config.margin_mm + width) * mm
        c.drawImage(reader, x, self._y(15 + height), width * mm, height * mm, mask="auto")

    def _draw_swatch(self, c: canvas.Canvas, x: float, top: float, color: ColorInfo) -> None:
        size = self.config.swatch_size_mm
        _fill(c, color)
        _gray(c, 200, stroke=True)
        c.setLineWidth(0.3 * mm)
        c.roundRect(x * mm, self._y(top + size), size * mm, size * mm, 3 * mm, stroke=1, fill=1)

        text_x = (x + size + 5) * mm
        c.setFont("Helvetica-Bold", 8)
        _gray(c, 40)
        c.drawString(text_x, self._y(top + 6), color.hex)

        c.setFont("Helvetica", 7)
        _gray(c, 100)
        r, g, b = color.rgb
        h, s, l = color.hsl  # noqa: E741
        c.drawString(text_x, self._y(top + 12), f"RGB: {r}, {g}, {b}")
        c.drawString(text_x, self._y(top + 18), f"HSL: {h}°, {s}%, {l}%")

    def _draw_palette_section(
        self, c: canvas.Canvas, title: str, subtitle: str, palette: Palette, top: float
    ) -> float:
        """Draw one palette block and return the top of the next one."""
        margin = self.config.margin_mm
        size = self.config.swatch_size_mm
        page_width_mm = self.page_width / mm

        c.setFont("Helvetica-Bold", 14)
        _gray(c, 30)
        c.drawString(margin * mm, self._y(top), title)

        c.setFont("Helvetica-Oblique", 9)
        _gray(c, 120)
        c.drawString(margin * mm, self._y(top + 7), subtitle)

        _gray(c, 230, stroke=True)
        c.setLineWidth(0.5 * mm)
        c.line(margin * mm, self._y(top + 12), (page_width_mm - margin) * mm, self._y(top + 12))

        swatch_top = top + 20
        x = margin
        for color in palette:
            self._draw_swatch(c, x, swatch_top, color)
            x += self.config.swatch_spacing_mm

        # Harmony bar split evenly between the colors
        bar_top = swatch_top + size + 12
        bar_height = 8
        bar_width = (page_width_mm - margin * 2) / len(palette)
        for i, color in enumerate(palette):
            _fill(c, color)
            c.rect(
                (margin + i * bar_width) * mm,
                self._y(bar_top + bar_height),
                bar_width * mm,
                bar_height * mm,
                stroke=0,
                fill=1,
            )

        return bar_top + bar_height + 20
