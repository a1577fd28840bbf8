"""Logging configuration.

Log records go to stderr; stdout carries only the report.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Runtime guard so handlers are attached once per process.
_LOGGING_CONFIGURED = False


def setup_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stderr handler to the root logger and return the package logger."""
    global _LOGGING_CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger()
    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=fmt))
        root_logger.addHandler(handler)
        _LOGGING_CONFIGURED = True

    root_logger.setLevel(level)
    return logging.getLogger("jmx_monitor")
