"""
Shared test fixtures and configuration for the bannerart test suite.

Synthetic fonts keep renderer and server tests independent of the artwork in
banners/: every printable character X is drawn as ``XX`` on the first six
rows and left blank on the last two, and the space glyph is three spaces wide.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = str(Path(__file__).resolve().parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from src.banner.font_loader import EXPECTED_LINE_COUNT, FIRST_CODEPOINT, GLYPH_HEIGHT, parse_font
from src.banner.registry import FontRegistry

BUNDLED_FONT_DIR = Path(project_root) / "banners"
BUNDLED_STYLES = ("standard", "shadow", "thinkertoy")
SYNTHETIC_INK_ROWS = 6
GLYPH_COUNT = 95


# ---------------------------------------------------------------------------
# Synthetic font helpers
# ---------------------------------------------------------------------------

def synthetic_glyph(char: str, mark: str = "") -> list[str]:
    """Glyph rows for *char*: ``XX `` on the ink rows, blank below."""
    if char == " ":
        return ["   "] * GLYPH_HEIGHT
    ink = f"{char}{mark or char} "
    return [ink] * SYNTHETIC_INK_ROWS + [" " * len(ink)] * (GLYPH_HEIGHT - SYNTHETIC_INK_ROWS)


def make_font_lines(mark: str = "") -> list[str]:
    """Build the 854 rows of a synthetic font."""
    lines: list[str] = []
    for i in range(GLYPH_COUNT):
        lines.extend(synthetic_glyph(chr(FIRST_CODEPOINT + i), mark))
        if i < GLYPH_COUNT - 1:
            lines.append("")
    assert len(lines) == EXPECTED_LINE_COUNT
    return lines


def write_font(path: Path, lines: list[str], newline: str = "\n", final_newline: bool = True) -> Path:
    text = newline.join(lines)
    if final_newline:
        text += newline
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def font_lines():
    return make_font_lines()


@pytest.fixture
def glyph_table(font_lines):
    return parse_font(font_lines, name="synthetic")


@pytest.fixture
def font_dir(tmp_path):
    """Directory with synthetic 'standard' and 'shadow' fonts.

    The shadow font draws X as ``X#`` so the two styles render differently.
    """
    directory = tmp_path / "banners"
    write_font(directory / "standard.txt", make_font_lines())
    write_font(directory / "shadow.txt", make_font_lines(mark="#"))
    return directory


@pytest.fixture
def registry(font_dir):
    return FontRegistry.load([
        ("standard", font_dir / "standard.txt"),
        ("shadow", font_dir / "shadow.txt"),
    ])
