"""
Banner error taxonomy.

Load-time errors (FontLoadError, FontIntegrityError) are fatal: the server
refuses to start rather than serve a style whose font is malformed.
Request-time errors (UnknownStyleError, EmptyInputError, TextTooLongError)
reject a single request and leave every other style and request untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class BannerError(Exception):
    """Base class for all banner errors."""
    pass


class FontLoadError(BannerError):
    """Raised when a font resource cannot be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to load font {self.path}: {reason}")


class FontIntegrityError(FontLoadError):
    """Raised when a font resource does not have the expected line count."""

    def __init__(self, path: str | Path, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(
            path, f"font file has {actual} lines; expected {expected} lines"
        )


class RequestError(BannerError):
    """Base class for per-request validation errors."""

    message = "Invalid request"


class EmptyInputError(RequestError):
    """Raised when the text to render is empty or whitespace-only."""

    message = "Text cannot be empty"

    def __init__(self):
        super().__init__(self.message)


class TextTooLongError(RequestError):
    """Raised when the text to render exceeds the configured limit."""

    message = "Text is too long"

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"{self.message} ({length} > {limit} characters)")


class UnknownStyleError(RequestError):
    """Raised when a style name has no loaded glyph table."""

    message = "Invalid style selected"

    def __init__(self, style: str, available: Sequence[str] = ()):
        self.style = style
        self.available = list(available)
        super().__init__(
            f"unknown style {style!r}; available: {', '.join(self.available) or 'none'}"
        )
