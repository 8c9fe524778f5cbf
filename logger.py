"""Logging configuration for Pocket Expenses.

Sets up logging to both file (with date-based naming) and console.
"""

import logging
from datetime import date
from pathlib import Path

from utils.constants import LOGGER_NAME


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO".
        log_dir: Directory for the dated log file. No file handler when None.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / f"pocket-expenses-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
