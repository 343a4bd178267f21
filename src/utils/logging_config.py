"""Centralized logging configuration for bannerart.

Usage:
    from src.utils.logging_config import setup_logging

    # stderr + logs/<server_name>.log:
    setup_logging(server_name="banner")

    # With debug level:
    setup_logging(server_name="banner", debug=True)

    # Custom log directory:
    setup_logging(server_name="banner", log_dir="/var/log/bannerart")

    # stderr only (CLI tools):
    setup_logging(level=logging.WARNING)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Log rotation defaults
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_LOG_DIR = _PROJECT_ROOT / "logs"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
    *,
    server_name: str | None = None,
    log_dir: str | Path | None = None,
    debug: bool = False,
) -> str | None:
    """Configure the root logger once per entry point.

    When *server_name* is given (and no explicit *log_file*), logs also go to
    ``<log_dir>/<server_name>.log`` through a RotatingFileHandler capped at
    *max_bytes* with *backup_count* backups.

    Returns the resolved log file path, or None for stderr-only logging.
    """
    if debug:
        level = logging.DEBUG

    resolved_log_file = log_file
    if server_name and not log_file:
        target_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
        resolved_log_file = str(target_dir / f"{server_name}.log")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if resolved_log_file:
        Path(resolved_log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                resolved_log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
        )
    logging.basicConfig(level=level, format=fmt, handlers=handlers)

    if resolved_log_file:
        logging.getLogger().info("Logging to %s", resolved_log_file)
    return resolved_log_file
