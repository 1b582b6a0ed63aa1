"""
Logging setup for the CLI and the API server.

Usage:
    from rankboard.log import setup_logging

    setup_logging(level="DEBUG")
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .config import resolve_log_dir, resolve_log_level

_configured = False

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(
    level: str | None = None,
    log_dir: str | None = None,
    *,
    app_name: str = "rankboard",
    force: bool = False,
) -> None:
    """
    Configure loguru sinks once per process.

    Args:
        level: Minimum console level; falls back to RANKBOARD_LOG_LEVEL.
        log_dir: Directory for daily-rotated log files; disabled when unset.
        app_name: Prefix for log file names (e.g. "cli", "api").
        force: Reconfigure even if logging was already set up.
    """
    global _configured

    if _configured and not force:
        return

    logger.remove()
    logger.add(sys.stderr, level=resolve_log_level(level), format=_CONSOLE_FORMAT)

    resolved_dir = resolve_log_dir(log_dir)
    if resolved_dir:
        directory = Path(resolved_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        logger.add(
            directory / f"{app_name}_{{time:YYYY-MM-DD}}.log",
            level="INFO",
            format=_FILE_FORMAT,
            rotation="00:00",
            retention="30 days",
            encoding="utf-8",
        )
        logger.info(f"Logging configured. Log directory: {directory}")

    _configured = True
