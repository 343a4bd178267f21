"""
Banner Font Loader — parses a positional font resource into a GlyphTable.

Font format
-----------
A plain-text file of exactly ``EXPECTED_LINE_COUNT`` lines. Every glyph is
``GLYPH_HEIGHT`` rows followed by one blank separator row; the last glyph has
no separator. Glyphs carry no header: block N (0-indexed) is the glyph for
code point ``FIRST_CODEPOINT + N``, so the standard 854-line font covers the
95 printable ASCII characters from space to tilde.

The line count is the only integrity check the format allows. Rows of the
wrong width or glyphs in the wrong order load without complaint.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from src.banner.errors import FontIntegrityError, FontLoadError

logger = logging.getLogger("bannerart.font_loader")

GLYPH_HEIGHT = 8
FIRST_CODEPOINT = 32  # ASCII space
EXPECTED_LINE_COUNT = 854  # 94 glyphs x 9 rows + 8 rows for the last glyph
DEFAULT_CHAR = " "

Glyph = tuple[str, ...]


class GlyphTable(Mapping[str, Glyph]):
    """Read-only mapping from a single character to its Glyph.

    Lookups through :meth:`glyph_for` fall back to the glyph of
    ``default_char`` when the character is not in the table.
    """

    def __init__(self, glyphs: Mapping[str, Glyph], name: str = "", default_char: str = DEFAULT_CHAR):
        if default_char not in glyphs:
            raise ValueError(f"glyph table {name!r} has no glyph for default char {default_char!r}")
        self._glyphs = MappingProxyType(dict(glyphs))
        self.name = name
        self.default_char = default_char

    def __getitem__(self, char: str) -> Glyph:
        return self._glyphs[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"GlyphTable(name={self.name!r}, glyphs={len(self)})"

    @property
    def height(self) -> int:
        return len(self._glyphs[self.default_char])

    def glyph_for(self, char: str) -> Glyph:
        """Return the glyph for *char*, or the default glyph if it is missing."""
        glyph = self._glyphs.get(char)
        if glyph is None:
            glyph = self._glyphs[self.default_char]
        return glyph


def read_font_lines(path: str | Path) -> list[str]:
    """Read a font resource as a list of rows without line terminators.

    Trailing spaces are kept; they set the width of each glyph.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise FontLoadError(path, str(e)) from e


def parse_font(
    lines: Iterable[str],
    source: str | Path = "<memory>",
    name: str = "",
    expected_lines: int = EXPECTED_LINE_COUNT,
) -> GlyphTable:
    """Build a GlyphTable from already-read font rows.

    Raises:
        FontIntegrityError: if the number of rows differs from *expected_lines*.
    """
    rows = list(lines)
    if len(rows) != expected_lines:
        logger.error("Font %s has %d lines, expected %d", source, len(rows), expected_lines)
        raise FontIntegrityError(source, len(rows), expected_lines)

    block = GLYPH_HEIGHT + 1
    glyphs: dict[str, Glyph] = {}
    for start in range(0, len(rows) - GLYPH_HEIGHT + 1, block):
        glyphs[chr(FIRST_CODEPOINT + start // block)] = tuple(rows[start:start + GLYPH_HEIGHT])

    return GlyphTable(glyphs, name=name)


def load_font(
    path: str | Path,
    name: str | None = None,
    expected_lines: int = EXPECTED_LINE_COUNT,
) -> GlyphTable:
    """Load a font resource from disk.

    Args:
        path: Font file to read.
        name: Style name for the table (defaults to the file stem).
        expected_lines: Exact line count the file must have.

    Raises:
        FontLoadError: if the file cannot be read.
        FontIntegrityError: if the line count is wrong.
    """
    path = Path(path)
    table = parse_font(
        read_font_lines(path),
        source=path,
        name=name if name is not None else path.stem,
        expected_lines=expected_lines,
    )
    logger.info("Loaded font %r from %s (%d glyphs)", table.name, path, len(table))
    return table
