#!/usr/bin/env python3
"""
Banner CLI — render text as block-letter art in the terminal.

Usage:
    python tools/banner_cli.py "Hello"                    # standard style
    python tools/banner_cli.py "Hello\\nWorld" --style shadow
    python tools/banner_cli.py "Hi" --font-dir ./banners --style thinkertoy
    python tools/banner_cli.py --list-styles
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.banner.errors import FontLoadError, RequestError
from src.banner.registry import FontRegistry
from src.banner.service import generate_art
from src.config.banner_config import BannerConfig
from src.utils.logging_config import setup_logging

logger = logging.getLogger("bannerart.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render text as banner art")
    parser.add_argument("text", nargs="?", default=None, help="Text to render (\\n starts a new line)")
    parser.add_argument("--style", default="standard", help="Font style (default: standard)")
    parser.add_argument("--font-dir", type=Path, default=None, help="Directory holding <style>.txt fonts")
    parser.add_argument("--list-styles", action="store_true", help="List available styles and exit")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.WARNING, debug=args.debug)

    config = BannerConfig.from_env()
    if args.font_dir is not None:
        config.font_dir = args.font_dir

    if args.list_styles:
        for style, path in config.font_paths():
            marker = "" if path.exists() else "  (missing)"
            print(f"{style}{marker}")
        return 0

    if args.text is None:
        print("error: no text given", file=sys.stderr)
        return 1

    if args.style not in config.styles:
        print(f"error: unknown style {args.style!r}; available: {', '.join(config.styles)}", file=sys.stderr)
        return 1

    # Only the requested style is loaded
    try:
        registry = FontRegistry.load([(args.style, config.font_path(args.style))])
        art = generate_art(registry, args.text, args.style)
    except FontLoadError as e:
        logger.debug("Font load failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RequestError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    sys.stdout.write(art)
    return 0


if __name__ == "__main__":
    sys.exit(main())
