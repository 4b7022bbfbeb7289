# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging configuration for the probe-console CLI."""

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        return getattr(logging, self.value)


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(
    level: VerbosityLevel,
    error_handler: errorhandler.ErrorHandler | None = None,
) -> None:
    """Configure the root logger for CLI use.

    Args:
        level: Minimum level written to stderr.
        error_handler: Optional handler tracking whether any ERROR was logged;
            it is reset so a previous invocation does not leak into this one.
    """
    logger = logging.getLogger()
    logger.setLevel(level.level)

    for handler in list(logger.handlers):
        if not isinstance(handler, errorhandler.ErrorHandler):
            logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stream_handler.setLevel(level.level)
    logger.addHandler(stream_handler)

    if error_handler is not None:
        error_handler.reset()
