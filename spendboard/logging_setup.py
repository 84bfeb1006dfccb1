"""
Centralised logging configuration for the ``spendboard`` package.

``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
root logger and is called once by :func:`spendboard.create_app`.
``get_logger(name)`` is what every other module uses; library code never
attaches handlers of its own.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

_PKG_LOGGER_NAME = "spendboard"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    if isinstance(numeric, int):
        return numeric
    raise ValueError(f"Unknown log level {level!r}")


def configure_logging(
    level: int | str = logging.INFO,
    *,
    fmt: str = _DEFAULT_FORMAT,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once per process."""
    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(_parse_level(level))
    if _CONFIGURED:
        return

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_PKG_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
