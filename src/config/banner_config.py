"""
Central configuration for the banner art service.

Values come from environment variables (a project-level .env file is loaded
first if present), with sensible defaults. Fonts follow the convention
``<font_dir>/<style>.txt``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_FONT_DIR = _PROJECT_ROOT / "banners"
DEFAULT_STYLES = ("standard", "shadow", "thinkertoy")
FONT_SUFFIX = ".txt"


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class BannerConfig:
    """Runtime settings for the banner art server and CLI."""

    host: str = "0.0.0.0"
    port: int = 8080
    font_dir: Path = DEFAULT_FONT_DIR
    styles: list[str] = field(default_factory=lambda: list(DEFAULT_STYLES))
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    max_text_length: Optional[int] = 2000  # None disables the check

    def __post_init__(self):
        self.font_dir = Path(self.font_dir)
        if not self.styles:
            raise ValueError("at least one style must be configured")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        if self.max_text_length is not None and self.max_text_length <= 0:
            self.max_text_length = None

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "BannerConfig":
        """Build a config from BANNER_* environment variables.

        Variables already set in the environment win over the .env file.
        """
        load_dotenv(env_file if env_file is not None else _PROJECT_ROOT / ".env")
        return cls(
            host=os.getenv("BANNER_HOST", "0.0.0.0"),
            port=int(os.getenv("BANNER_PORT", "8080")),
            font_dir=Path(os.getenv("BANNER_FONT_DIR", str(DEFAULT_FONT_DIR))),
            styles=_split_list(os.getenv("BANNER_STYLES", ",".join(DEFAULT_STYLES))),
            cors_origins=_split_list(os.getenv("BANNER_CORS_ORIGINS", "*")),
            max_text_length=int(os.getenv("BANNER_MAX_TEXT_LENGTH", "2000")),
        )

    def font_path(self, style: str) -> Path:
        return self.font_dir / f"{style}{FONT_SUFFIX}"

    def font_paths(self) -> list[tuple[str, Path]]:
        """Return (style, path) pairs in configured order."""
        return [(style, self.font_path(style)) for style in self.styles]

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "font_dir": str(self.font_dir),
            "styles": list(self.styles),
            "cors_origins": list(self.cors_origins),
            "max_text_length": self.max_text_length,
        }
