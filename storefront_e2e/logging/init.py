from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line printed by the suite starts with one of the labels
INFO | WARN | ERROR | SUMMARY (DEBUG when --debug is on), so CI logs can be
grepped the same way for the CLI and for pytest runs.

Module loggers (logging.getLogger(__name__)) under ``storefront_e2e``
propagate to the logger configured here.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
    "LabeledFormatter",
    "SUMMARY_LEVEL",
]

LOGGER_NAME = "storefront_e2e"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prints ``LABEL message``."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the suite logger (idempotent).

    Output goes to stdout with LabeledFormatter. A second call returns the
    already configured logger unchanged.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # 二重出力防止
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the suite logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
