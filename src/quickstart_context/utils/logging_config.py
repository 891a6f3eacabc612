"""Logging setup for the command-line entry points."""

import logging
import sys

LOG_FORMAT = "%(levelname)-8s | %(name)-30s | %(message)s"


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Route library diagnostics to stderr.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Unknown names fall back to WARNING.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # Suppress noisy loggers
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
