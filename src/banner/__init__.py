"""
bannerart core: font loading and block-letter rendering.

Loads positional 8-row fonts into immutable glyph tables and renders text
into multi-line banner art.
"""

from .errors import (
    BannerError,
    EmptyInputError,
    FontIntegrityError,
    FontLoadError,
    RequestError,
    TextTooLongError,
    UnknownStyleError,
)
from .font_loader import GlyphTable, load_font, parse_font
from .registry import FontRegistry
from .renderer import render
from .service import generate_art

__all__ = [
    "BannerError",
    "EmptyInputError",
    "FontIntegrityError",
    "FontLoadError",
    "FontRegistry",
    "GlyphTable",
    "RequestError",
    "TextTooLongError",
    "UnknownStyleError",
    "generate_art",
    "load_font",
    "parse_font",
    "render",
]
