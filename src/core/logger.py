"""Logging setup shared by the CLI and the adapters.

Logs go to stderr: `export` writes CSV on stdout and the two streams must
not mix.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "togglcsv"

_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = ROOT_LOGGER_NAME, level: str | None = None) -> logging.Logger:
    """Configure `name` with a single stderr handler.

    Args:
        name: logger name (the application root by default).
        level: DEBUG, INFO, WARNING or ERROR. Defaults to WARNING.

    Returns:
        The configured logger.
    """

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or "WARNING").upper(), logging.WARNING))

    # Re-running the CLI in-process (tests) must not stack handlers.
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child logger under the application root (`togglcsv.<module>`)."""

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
