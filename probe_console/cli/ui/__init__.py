# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""CLI user interface components for probe-console."""

from probe_console.cli.ui.reporter import (
    NotificationPrinter,
    format_result,
    print_catalog,
    print_results,
)

__all__ = [
    "NotificationPrinter",
    "format_result",
    "print_catalog",
    "print_results",
]
