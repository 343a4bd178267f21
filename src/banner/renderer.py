"""
Banner Renderer — turns text into block-letter art using a GlyphTable.

Output layout for each logical line of input:
  - an empty line renders as a single blank line
  - otherwise up to GLYPH_HEIGHT composite rows, right-trimmed; rows that are
    blank after trimming are dropped
  - a blank separator line follows every logical line except the last
Two blank lines always terminate the art. Empty input renders as the
terminator alone.
"""

from __future__ import annotations

from src.banner.font_loader import GLYPH_HEIGHT, GlyphTable

ESCAPED_NEWLINE = "\\n"
TERMINATOR_LINES = 2


def split_logical_lines(text: str) -> list[str]:
    """Expand literal ``\\n`` escapes and split *text* into logical lines."""
    return text.replace(ESCAPED_NEWLINE, "\n").split("\n")


def composite_rows(line: str, table: GlyphTable) -> list[str]:
    """Build the GLYPH_HEIGHT scanlines for one non-empty logical line."""
    glyphs = [table.glyph_for(char) for char in line]
    return ["".join(glyph[row] for glyph in glyphs) for row in range(GLYPH_HEIGHT)]


def render_lines(text: str, table: GlyphTable) -> list[str]:
    """Render *text* as a list of output lines (without terminators)."""
    out: list[str] = []
    if text == "":
        out.extend([""] * TERMINATOR_LINES)
        return out

    logical_lines = split_logical_lines(text)

    for i, line in enumerate(logical_lines):
        if line == "":
            out.append("")
            continue

        for row in composite_rows(line, table):
            row = row.rstrip(" ")
            if row:
                out.append(row)

        if i < len(logical_lines) - 1:
            out.append("")

    out.extend([""] * TERMINATOR_LINES)
    return out


def render(text: str, table: GlyphTable) -> str:
    """Render *text* as block-letter art.

    Every output line, including the trailing blank ones, ends with a newline,
    so ``render("", table) == "\\n\\n"``.
    """
    return "".join(f"{line}\n" for line in render_lines(text, table))
