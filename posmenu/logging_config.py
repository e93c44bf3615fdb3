"""Logging setup for the Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from posmenu.config import LOG_LEVEL, LOG_PATH

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level_name: str | None) -> int:
    if not level_name:
        return logging.INFO
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(log_path: str = LOG_PATH, level_name: str | None = LOG_LEVEL) -> None:
    """Send root logger records to the debug log file and the Textual devtools console."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level_name))
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    try:
        log_file = Path(log_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never stop the app from starting.
        file_handler = None
    if file_handler is not None:
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    textual_handler = TextualHandler()
    textual_handler.setFormatter(formatter)
    root_logger.addHandler(textual_handler)
