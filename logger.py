"""Logging configuration for Ecotree.

The CLI prints its output through the ``ecotree`` logger, so the console
handler shows INFO records as bare lines and prefixes everything else with
its level. A dated log file is kept as well unless ``[logging] file`` is
turned off.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union
from config import Config

LOGGER_NAME = "ecotree"


class ConsoleFormatter(logging.Formatter):
    """Plain lines for INFO output, ``LEVEL - message`` for the rest."""

    def __init__(self):
        super().__init__("%(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)


def log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Path of the log file for ``day`` (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(
    config: Config, level: Optional[Union[int, str]] = None
) -> logging.Logger:
    """Set up the console handler and, when enabled, the dated file handler.

    Args:
        config: Application configuration containing log settings.
        level: Overrides ``config.log_level`` (the CLI's ``--verbose``).

    Returns:
        Configured logger instance.
    """
    level = level if level is not None else config.log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # setup_logging may run more than once in the same process
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    if config.log_to_file:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path(config), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
