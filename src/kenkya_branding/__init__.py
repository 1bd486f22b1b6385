"""
Kenkya Branding — brand color tools for the Kenkya Sites intake workflow.

This package implements:
- Hex / RGB / HSL conversion for brand colors
- Dominant color extraction from uploaded logos
- Vibrant and soft palette variations derived from the client's palette
- A branding color-guide PDF rendered from the three palettes
"""

__version__ = "0.1.0"
__author__ = "Kenkya Sites"
