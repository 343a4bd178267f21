"""
Request validation and dispatch to the renderer.

This is the seam between transport (HTTP, CLI) and the core: callers pass
raw text and a style name and get back art or a RequestError.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.banner.errors import EmptyInputError, TextTooLongError
from src.banner.registry import FontRegistry
from src.banner.renderer import render

logger = logging.getLogger("bannerart.service")


def validate_text(text: str, max_length: Optional[int] = None) -> None:
    """Reject blank text and, when *max_length* is set, text that is too long."""
    if text.strip() == "":
        raise EmptyInputError()
    if max_length and len(text) > max_length:
        raise TextTooLongError(len(text), max_length)


def generate_art(
    registry: FontRegistry,
    text: str,
    style: str,
    max_length: Optional[int] = None,
) -> str:
    """Render *text* with the glyph table registered as *style*.

    Text is validated before the style is looked up.

    Raises:
        EmptyInputError: text is empty or whitespace-only.
        TextTooLongError: text is longer than *max_length*.
        UnknownStyleError: *style* is not registered.
    """
    validate_text(text, max_length)
    table = registry.get(style)
    art = render(text, table)
    logger.debug("Rendered %d chars with style %r (%d bytes)", len(text), style, len(art))
    return art
