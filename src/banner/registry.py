"""
Font Registry — immutable index of GlyphTables by style name.

Built once at startup from (style, path) pairs and handed to request handlers
by reference. Nothing mutates it afterwards, so concurrent renders share it
without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from src.banner.errors import UnknownStyleError
from src.banner.font_loader import EXPECTED_LINE_COUNT, GlyphTable, load_font

logger = logging.getLogger("bannerart.registry")


class FontRegistry:
    """Read-only style name -> GlyphTable lookup."""

    def __init__(self, tables: Mapping[str, GlyphTable]):
        self._tables = MappingProxyType(dict(tables))

    @classmethod
    def load(
        cls,
        fonts: Iterable[tuple[str, str | Path]],
        expected_lines: int = EXPECTED_LINE_COUNT,
    ) -> "FontRegistry":
        """Load every font in order and build a registry.

        Fails on the first font that cannot be loaded; no partial registry
        is ever returned.

        Raises:
            FontLoadError / FontIntegrityError from the loader.
        """
        tables: dict[str, GlyphTable] = {}
        for style, path in fonts:
            if style in tables:
                raise ValueError(f"style {style!r} listed more than once")
            tables[style] = load_font(path, name=style, expected_lines=expected_lines)
        logger.info("Font registry ready: %s", ", ".join(tables) or "(empty)")
        return cls(tables)

    @property
    def styles(self) -> list[str]:
        return list(self._tables)

    def get(self, style: str) -> GlyphTable:
        """Return the table for *style*.

        Raises:
            UnknownStyleError: if no table is registered under that name.
        """
        try:
            return self._tables[style]
        except KeyError:
            raise UnknownStyleError(style, self.styles) from None

    def __contains__(self, style: object) -> bool:
        return style in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"FontRegistry(styles={self.styles})"
