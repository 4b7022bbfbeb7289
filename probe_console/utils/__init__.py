# -*- coding: utf-8 -*-

"""Utility modules for probe-console."""

from probe_console.utils.logging import VerbosityLevel, configure_logging
from probe_console.utils.terminal import terminal

__all__ = [
    "terminal",
    "VerbosityLevel",
    "configure_logging",
]
