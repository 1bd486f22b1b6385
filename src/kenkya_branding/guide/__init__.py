"""
Branding color-guide rendering.
"""

from kenkya_branding.guide.pdf import BrandingGuide, guide_filename

__all__ = ["BrandingGuide", "guide_filename"]
