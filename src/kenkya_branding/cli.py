"""
Kenkya Branding CLI — command-line access to the color tools.

Provides subcommands:
    kenkya-branding info        — Show hex/RGB/HSL for colors
    kenkya-branding extract     — Extract dominant colors from a logo
    kenkya-branding variations  — Show a palette with its vibrant and soft variations
    kenkya-branding guide       — Render the branding color-guide PDF
    kenkya-branding config      — Manage configuration files

All commands respect a YAML config (``--config``) when one is present.
"""

from __future__ import annotations

import argparse
import logging
import sys

from kenkya_branding.colors.conversion import ColorInfo, get_color_info, is_valid_hex, normalize_hex
from kenkya_branding.colors.palette import format_palette_string, parse_palette_string
from kenkya_branding.config import BrandingConfig, config_to_yaml, load_config, save_config

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="kenkya-branding",
        description="Kenkya Sites — brand color tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kenkya-branding info "#1E90FF" "#e91e63"
  kenkya-branding extract logo.png --count 3
  kenkya-branding variations "#E91E63, #2196F3"
  kenkya-branding guide "#E91E63, #2196F3" --name "Padaria Central" --logo logo.png
  kenkya-branding config init branding.yaml
        """,
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug-level logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ── info ─────────────────────────────────────────────────────
    info_parser = subparsers.add_parser("info", help="Show hex, RGB and HSL for colors")
    info_parser.add_argument("colors", type=str, nargs="+", help="Hex colors, e.g. #1E90FF")

    # ── extract ──────────────────────────────────────────────────
    extract_parser = subparsers.add_parser("extract", help="Extract dominant colors from an image")
    extract_parser.add_argument("image", type=str, help="Path to the logo image")
    extract_parser.add_argument(
        "--count", "-n",
        type=int,
        help="Number of colors to extract (overrides config)",
    )

    # ── variations ───────────────────────────────────────────────
    variations_parser = subparsers.add_parser(
        "variations", help="Show a palette with its vibrant and soft variations"
    )
    variations_parser.add_argument(
        "palette", type=str, help='Comma-separated hex colors, e.g. "#E91E63, #2196F3"'
    )

    # ── guide ────────────────────────────────────────────────────
    guide_parser = subparsers.add_parser("guide", help="Render the branding color-guide PDF")
    guide_parser.add_argument("palette", type=str, help="Comma-separated hex colors")
    guide_parser.add_argument("--name", type=str, required=True, help="Business name")
    guide_parser.add_argument("--logo", type=str, help="Optional logo image")
    guide_parser.add_argument("--output", "-o", type=str, help="Output PDF path")

    # ── config ───────────────────────────────────────────────────
    config_parser = subparsers.add_parser("config", help="Manage configuration files")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    show_parser = config_subparsers.add_parser("show", help="Display the effective config")
    show_parser.add_argument("config_file", type=str, nargs="?")

    init_parser = config_subparsers.add_parser("init", help="Write a config with defaults")
    init_parser.add_argument("output_path", type=str, help="Output path for new config")

    return parser


def _describe(color: ColorInfo) -> str:
    r, g, b = color.rgb
    h, s, l = color.hsl  # noqa: E741
    return f"{color.hex:<8} RGB: {r:>3}, {g:>3}, {b:>3}   HSL: {h:>3}°, {s:>3}%, {l:>3}%"


def cmd_info(args: argparse.Namespace, config: BrandingConfig) -> None:
    """Execute the 'info' subcommand."""
    for value in args.colors:
        line = _describe(get_color_info(value))
        if not is_valid_hex(value):
            line += "   (invalid, shown as black)"
        print(line)


def cmd_extract(args: argparse.Namespace, config: BrandingConfig) -> None:
    """Execute the 'extract' subcommand."""
    from kenkya_branding.colors.extraction import extract_from_path

    colors = extract_from_path(args.image, count=args.count, config=config.extraction)
    if not colors:
        print("No colors detected, please choose them manually.")
        return

    for value in colors:
        print(_describe(get_color_info(value)))
    print(f"\n  Stored as: {format_palette_string(normalize_hex(c) for c in colors)}")


def cmd_variations(args: argparse.Namespace, config: BrandingConfig) -> None:
    """Execute the 'variations' subcommand."""
    from kenkya_branding.colors.variations import build_palette_set

    palette = parse_palette_string(args.palette)
    if not palette.colors:
        raise ValueError("Palette is empty")

    palette_set = build_palette_set(palette)
    for name, section in palette_set.sections():
        print(f"\n  {name.upper()}")
        for color in section:
            print(f"    {_describe(color)}")
    print()


def cmd_guide(args: argparse.Namespace, config: BrandingConfig) -> None:
    """Execute the 'guide' subcommand."""
    from kenkya_branding.guide.pdf import BrandingGuide

    guide = BrandingGuide(config.guide)
    path = guide.render(args.name, args.palette, logo=args.logo, output_path=args.output)
    print(f"✅ Branding guide written: {path}")


def cmd_config(args: argparse.Namespace, config: BrandingConfig) -> None:
    """Execute the 'config' subcommand."""
    if args.config_command == "show":
        if args.config_file:
            config = load_config(args.config_file)
        print(config_to_yaml(config))

    elif args.config_command == "init":
        path = save_config(BrandingConfig(), args.output_path)
        print(f"✅ Config initialized: {path}")

    else:
        print("Usage: kenkya-branding config {show|init}")


COMMANDS = {
    "info": cmd_info,
    "extract": cmd_extract,
    "variations": cmd_variations,
    "guide": cmd_guide,
    "config": cmd_config,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    from kenkya_branding.logging_setup import setup_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = load_config(args.config)
    setup_logging(
        log_dir=config.log_dir,
        level=logging.DEBUG if args.verbose else config.log_level,
    )

    try:
        COMMANDS[args.command](args, config)
    except (ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
