"""Logging for Tally.

The CLI prints everything through the `tally` logger, so the console handler
shows plain messages for routine output and prefixes only warnings and
errors. The dated log file keeps the full record.
"""

import logging
from datetime import date
from typing import Optional
from pathlib import Path
from config import Config

LOGGER_NAME = "tally"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Bare messages below WARNING, `LEVEL: message` from WARNING up."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


def log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Path of the log file for a given day (defaults to today)."""
    day = day or date.today()
    return config.log_dir / f"tally-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Attach the file and console handlers to the `tally` logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file_path(config))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ConsoleFormatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
