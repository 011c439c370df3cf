"""Logging configuration for UML Explorer.

Console output goes through rich so log lines match the CLI styling.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

LOGGER_ROOT = "uml_explorer"

DEFAULT_FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file path for file logging.
        format_string: Optional format for the file handler.

    Returns:
        The configured package logger.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger(LOGGER_ROOT)
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = RichHandler(show_path=False, markup=False)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FILE_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.propagate = False
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == LOGGER_ROOT or name.startswith(f"{LOGGER_ROOT}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")
