#!/usr/bin/env python3
"""
Logging configuration for doctranslate.

Console output goes through tqdm.write so that log lines do not tear the
progress bars shown while chunking or translating large documents.
"""

import logging
import os
import sys
from pathlib import Path

from tqdm import tqdm


VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TqdmStreamHandler(logging.StreamHandler):
    """StreamHandler that prints above any active tqdm progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_logging(
    log_level: str | None = None, log_file: Path = None, verbose: bool = False
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to
            DOCTRANSLATE_LOG_LEVEL or INFO. An unknown level falls back to
            INFO with a warning.
        log_file: Optional file to write logs to
        verbose: If True, include timestamps and logger names on the console
    """
    if log_level is None:
        log_level = os.getenv("DOCTRANSLATE_LOG_LEVEL", "INFO")

    unknown_level = log_level.upper() not in LOG_LEVELS
    if unknown_level:
        requested_level, log_level = log_level, "INFO"

    if verbose:
        formatter = logging.Formatter(fmt=VERBOSE_FORMAT, datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter(fmt=SIMPLE_FORMAT)

    # User-facing messages go to stdout
    console_handler = TqdmStreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=VERBOSE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root_logger.addHandler(file_handler)

    if unknown_level:
        get_logger(__name__).warning(
            f"Unknown log level {requested_level!r}, using INFO. Must be one of: {', '.join(LOG_LEVELS)}"
        )

    # HTTP clients used by translation backends log every request
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
