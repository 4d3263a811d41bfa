"""Console logging for the registry and its demo entry points.

Usage:
    from .common.logging_utils import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger("registry")
"""
from __future__ import annotations

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "hospital_registry"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with colors."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__("[%(levelname)s] %(name)s - %(message)s")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_colors:
            return message
        color = self.COLORS.get(record.levelname, "")
        return f"{color}{message}{self.RESET}" if color else message


def configure_logging(level: Union[str, int] = "INFO", *, use_colors: bool = True) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Prevent duplicate handlers if configured more than once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ConsoleFormatter(use_colors=use_colors and sys.stdout.isatty()))
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package root, whatever path the module was imported by."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
