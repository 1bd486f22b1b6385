"""
Dominant color extraction from logo images.

Pixels are sampled from an RGBA buffer, near-transparent, near-white and
near-black pixels are dropped, and the survivors are bucketed on a coarse
grid. The most populated buckets are reported by their mean color.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from PIL import Image

from kenkya_branding.colors.conversion import rgb_to_hex
from kenkya_branding.config import ExtractionConfig

logger = logging.getLogger(__name__)

PixelBuffer = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray]


def _as_rgba(pixels: PixelBuffer, width: int, height: int) -> np.ndarray:
    """View a row-major RGBA buffer as an ``(N, 4)`` integer array."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels).reshape(-1)

    expected = width * height * 4
    if flat.size != expected:
        raise ValueError(
            f"Pixel buffer has {flat.size} values, expected {expected} "
            f"for a {width}x{height} RGBA image"
        )
    return flat.reshape(-1, 4).astype(np.int64)


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype(np.int64)


def extract_dominant_colors(
    pixels: PixelBuffer,
    width: int,
    height: int,
    count: int = 3,
    stride: int = 1,
    config: ExtractionConfig | None = None,
) -> list[str]:
    """Extract up to ``count`` representative colors ranked by frequency.

    Args:
        pixels: Row-major RGBA buffer, 4 values per pixel.
        width: Image width in pixels.
        height: Image height in pixels.
        count: Maximum number of colors to return.
        stride: Sample every ``stride``-th pixel, starting with the first.
        config: Filtering thresholds and bucket size. Uses defaults if None.

    Returns:
        Hex color strings, most frequent first. Empty when every sampled
        pixel was filtered out.
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    if stride < 1:
        raise ValueError(f"stride must be positive, got {stride}")
    config = config or ExtractionConfig()

    rgba = _as_rgba(pixels, width, height)[::stride]
    rgb = rgba[:, :3]
    brightness = rgb.sum(axis=1) / 3

    keep = (
        (rgba[:, 3] >= config.alpha_threshold)
        & (brightness <= config.white_threshold)
        & (brightness >= config.black_threshold)
    )
    rgb = rgb[keep]
    if len(rgb) == 0:
        logger.debug("No usable pixels among %d sampled", len(rgba))
        return []

    size = config.bucket_size
    grid = _round_half_up(rgb / size) * size
    # Grid values stay below 512, so 9 bits per channel make a unique key
    keys = (grid[:, 0] << 18) | (grid[:, 1] << 9) | grid[:, 2]
    _, first_seen, bucket_of, counts = np.unique(
        keys, return_index=True, return_inverse=True, return_counts=True
    )
    bucket_of = bucket_of.reshape(-1)

    sums = np.stack(
        [np.bincount(bucket_of, weights=rgb[:, c], minlength=len(counts)) for c in range(3)],
        axis=1,
    )

    # Most pixels first, ties in order of first appearance
    order = np.lexsort((first_seen, -counts))[:count]
    means = _round_half_up(sums[order] / counts[order, None])

    colors = [rgb_to_hex(int(r), int(g), int(b)) for r, g, b in means]
    logger.debug(
        "Extracted %d colors from %d buckets (%d of %d pixels kept)",
        len(colors), len(counts), len(rgb), len(rgba),
    )
    return colors


def extract_from_image(
    image: Image.Image,
    count: int | None = None,
    config: ExtractionConfig | None = None,
) -> list[str]:
    """Extract dominant colors from a Pillow image.

    The image is converted to RGBA and downscaled so its longer side is at
    most ``config.max_dimension`` before sampling.
    """
    config = config or ExtractionConfig()
    img = image.convert("RGBA")
    img.thumbnail((config.max_dimension, config.max_dimension))

    data = np.asarray(img)
    return extract_dominant_colors(
        data,
        img.width,
        img.height,
        count=count if count is not None else config.count,
        stride=config.sample_stride,
        config=config,
    )


def extract_from_path(
    path: str | Path,
    count: int | None = None,
    config: ExtractionConfig | None = None,
) -> list[str]:
    """Open an image file and extract its dominant colors."""
    with Image.open(path) as image:
        colors = extract_from_image(image, count=count, config=config)
    logger.info(
        "Extracted %d colors from %s", len(colors), path,
        extra={"path": str(path), "count": len(colors)},
    )
    return colors
