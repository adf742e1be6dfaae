"""Environment and logging helpers."""

import logging
import os
import sys

from ..config import LOG_DATE_FORMAT, LOG_FORMAT

# Environment variable overriding the log file location; empty disables it
LOG_FILE_ENV = "ERD_RECOGNIZER_LOG"

# Libraries that log per-chunk details at DEBUG
_NOISY_LOGGERS = ("PIL",)


def resolve_log_file(log_file: str | None) -> str | None:
    """Pick the log file: environment override first, then the argument."""
    override = os.getenv(LOG_FILE_ENV)
    if override is not None:
        return override or None
    return log_file


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Set up logging to stderr and, optionally, a file.

    Args:
        level: Logging level for the recognizer
        log_file: Path to log file (None for console only); the
            ``ERD_RECOGNIZER_LOG`` environment variable takes precedence
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = resolve_log_file(log_file)
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        except OSError as e:
            print(f"Warning: Could not open log file '{log_file}': {e}", file=sys.stderr)
        else:
            handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    # Image decoding chatter drowns out per-contour decisions
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))
