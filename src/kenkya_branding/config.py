"""
OmegaConf-based configuration management.

Provides hierarchical, merge-able configuration for color extraction and
branding guide generation. Supports YAML config files and programmatic
overrides on top of the dataclass defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from omegaconf import OmegaConf

logger = logging.getLogger(__name__)


@dataclass
class ExtractionConfig:
    """Configuration for dominant color extraction from logos."""
    count: int = 3
    sample_stride: int = 4
    max_dimension: int = 150
    alpha_threshold: int = 128
    white_threshold: float = 245.0
    black_threshold: float = 10.0
    bucket_size: int = 32


@dataclass
class GuideConfig:
    """Configuration for the branding color-guide PDF."""
    output_dir: str = "branding"
    margin_mm: float = 25.0
    swatch_size_mm: float = 28.0
    swatch_spacing_mm: float = 70.0
    logo_max_mm: float = 40.0
    footer: str = "Documento gerado automaticamente • Kenkya Sites"


@dataclass
class BrandingConfig:
    """Top-level configuration.

    Can be loaded from YAML and overridden programmatically.
    """
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    guide: GuideConfig = field(default_factory=GuideConfig)

    # Logging
    log_dir: Optional[str] = None
    log_level: str = "INFO"


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> BrandingConfig:
    """Load configuration from a YAML file with optional overrides.

    Priority order:
    1. Programmatic overrides (highest)
    2. YAML config file
    3. Dataclass defaults (lowest)

    Args:
        config_path: Path to a YAML config file.
        overrides: Nested dictionary of overrides, e.g.
            ``{"extraction": {"count": 2}}``.

    Returns:
        Merged BrandingConfig.
    """
    merged = OmegaConf.structured(BrandingConfig())

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            merged = OmegaConf.merge(merged, OmegaConf.load(config_path))
            logger.info("Config loaded from: %s", config_path)
        else:
            logger.warning("Config file not found: %s, using defaults", config_path)

    if overrides:
        merged = OmegaConf.merge(merged, OmegaConf.create(overrides))

    return OmegaConf.to_object(merged)


def save_config(config: BrandingConfig, path: str | Path) -> Path:
    """Save configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Output file path.

    Returns:
        Path to saved config file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    conf = OmegaConf.structured(config)
    with open(path, "w") as f:
        OmegaConf.save(conf, f)

    logger.info("Config saved to: %s", path)
    return path


def config_to_yaml(config: BrandingConfig) -> str:
    return OmegaConf.to_yaml(OmegaConf.structured(config))
