"""Tests for the banner renderer."""

import pytest

from conftest import BUNDLED_FONT_DIR, SYNTHETIC_INK_ROWS
from src.banner.font_loader import GLYPH_HEIGHT, load_font
from src.banner.renderer import (
    composite_rows,
    render,
    render_lines,
    split_logical_lines,
)


def _block(ink: str) -> list[str]:
    """Expected output rows for one rendered line of the synthetic font."""
    return [ink] * SYNTHETIC_INK_ROWS


TERMINATOR = ["", ""]


# ---------------------------------------------------------------------------
# Input normalization
# ---------------------------------------------------------------------------


class TestSplitLogicalLines:
    def test_single_line(self):
        assert split_logical_lines("abc") == ["abc"]

    def test_real_newline(self):
        assert split_logical_lines("a\nb") == ["a", "b"]

    def test_literal_backslash_n(self):
        assert split_logical_lines("a\\nb") == ["a", "b"]

    def test_mixed_breaks_and_blank_lines(self):
        assert split_logical_lines("a\\n\nb\n") == ["a", "", "b", ""]

    def test_empty(self):
        assert split_logical_lines("") == [""]

    def test_other_escapes_left_alone(self):
        assert split_logical_lines("a\\tb") == ["a\\tb"]


# ---------------------------------------------------------------------------
# Composite rows
# ---------------------------------------------------------------------------


class TestCompositeRows:
    def test_always_glyph_height_rows(self, glyph_table):
        rows = composite_rows("AB", glyph_table)
        assert len(rows) == GLYPH_HEIGHT
        assert rows[0] == "AA BB "
        assert rows[-1] == "      "

    def test_missing_char_uses_space_glyph(self, glyph_table):
        assert composite_rows("AéB", glyph_table) == composite_rows("A B", glyph_table)


# ---------------------------------------------------------------------------
# Render
# ---------------------------------------------------------------------------


class TestRender:
    def test_empty_text_is_terminator_only(self, glyph_table):
        assert render("", glyph_table) == "\n\n"

    def test_single_char(self, glyph_table):
        assert render("A", glyph_table) == "AA\n" * SYNTHETIC_INK_ROWS + "\n\n"

    def test_blank_scanlines_dropped(self, glyph_table):
        lines = render_lines("A", glyph_table)
        assert lines == _block("AA") + TERMINATOR
        assert len(lines) - len(TERMINATOR) < GLYPH_HEIGHT

    def test_no_trailing_spaces(self, glyph_table):
        for line in render_lines("Hello, World!", glyph_table):
            assert line == line.rstrip(" ")

    def test_two_lines_separated_by_blank(self, glyph_table):
        assert render_lines("A\nB", glyph_table) == _block("AA") + [""] + _block("BB") + TERMINATOR

    def test_literal_escape_same_as_real_newline(self, glyph_table):
        assert render("A\\nB", glyph_table) == render("A\nB", glyph_table)
        assert render("Hi\\n\\nyo", glyph_table) == render("Hi\n\nyo", glyph_table)

    def test_multi_line_is_concatenation_of_single_renders(self, glyph_table):
        a = render_lines("Ab", glyph_table)[:-2]
        b = render_lines("cD", glyph_table)[:-2]
        assert render_lines("Ab\ncD", glyph_table) == a + [""] + b + TERMINATOR

    def test_interior_blank_line_preserved(self, glyph_table):
        expected = _block("AA") + [""] + [""] + _block("BB") + TERMINATOR
        assert render_lines("A\n\nB", glyph_table) == expected

    def test_trailing_newline(self, glyph_table):
        assert render_lines("A\n", glyph_table) == _block("AA") + [""] + [""] + TERMINATOR

    def test_leading_newline(self, glyph_table):
        assert render_lines("\nA", glyph_table) == [""] + _block("AA") + TERMINATOR

    def test_only_newline(self, glyph_table):
        assert render("\n", glyph_table) == "\n\n\n\n"

    def test_inner_spaces_kept(self, glyph_table):
        assert render_lines("A B", glyph_table)[0] == "AA    BB"

    def test_missing_chars_render_like_spaces(self, glyph_table):
        assert render("AéB", glyph_table) == render("A B", glyph_table)
        assert render("→x←", glyph_table) == render(" x ", glyph_table)

    def test_only_missing_chars_render_blank(self, glyph_table):
        assert render("ééé", glyph_table) == "\n\n"

    def test_whitespace_only_line(self, glyph_table):
        assert render("   ", glyph_table) == "\n\n"

    def test_every_line_newline_terminated(self, glyph_table):
        art = render("Ab\ncd", glyph_table)
        assert art.endswith("\n\n")
        assert art.count("\n") == len(render_lines("Ab\ncd", glyph_table))

    def test_pure(self, glyph_table):
        before = dict(glyph_table)
        assert render("Same", glyph_table) == render("Same", glyph_table)
        assert dict(glyph_table) == before


# ---------------------------------------------------------------------------
# Bundled standard font
# ---------------------------------------------------------------------------


class TestRenderStandardFont:
    @pytest.fixture(scope="class")
    def standard(self):
        return load_font(BUNDLED_FONT_DIR / "standard.txt")

    def test_hi(self, standard):
        expected = (
            " _    _   _\n"
            "| |  | | (_)\n"
            "| |__| |  _\n"
            "|  __  | | |\n"
            "| |  | | | |\n"
            "|_|  |_| |_|\n"
            "\n"
            "\n"
        )
        assert render("Hi", standard) == expected

    def test_single_letter_shape(self, standard):
        lines = render_lines("A", standard)
        body, tail = lines[:-2], lines[-2:]
        assert tail == TERMINATOR
        assert 0 < len(body) <= GLYPH_HEIGHT
        assert all(line and line == line.rstrip(" ") for line in body)

    def test_descenders_rendered(self, standard):
        lines = render_lines("g", standard)[:-2]
        assert len(lines) == 6
        assert lines[-1] == " |___/"
