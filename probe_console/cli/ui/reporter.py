# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Terminal rendering of the console's catalog, results and notifications."""

from datetime import datetime

import typer

from probe_console.core.models import Notification, Severity, TestResult, TestStatus
from probe_console.registry.suites import SuiteRegistry
from probe_console.utils.terminal import TerminalColors


class NotificationPrinter:
    """Bus subscriber printing each notification as a one-line toast.

    Format: ``2025-06-27 18:26:16.834 [SUCCESS] Basic Query Passed - Basic Query completed successfully``
    """

    def __init__(self, show_info: bool = True) -> None:
        self.show_info = show_info
        self.printed = 0

    def __call__(self, notification: Notification) -> None:
        if not self.show_info and notification.severity == Severity.INFO:
            return
        timestamp = datetime.fromtimestamp(notification.created_at or 0).strftime(
            "%Y-%m-%d %H:%M:%S.%f"
        )[:-3]
        label = TerminalColors.severity(
            notification.severity, f"[{notification.severity.value.upper()}]"
        )
        typer.echo(f"{timestamp} {label} {notification.title} - {notification.message}")
        self.printed += 1


def format_result(result: TestResult) -> str:
    """Single result line: status, name, duration and message."""
    parts = [f"{TerminalColors.status(result.status):>8}", result.name]
    if result.duration is not None:
        parts.append(TerminalColors.dim(f"({result.duration}ms)"))
    if result.message and result.status == TestStatus.ERROR:
        parts.append(f"- {result.message}")
    return " ".join(parts)


def print_catalog(registry: SuiteRegistry) -> None:
    """Print every suite with its cases, enablement and priority."""
    for suite in registry.suites:
        mark = "[x]" if suite.enabled else "[ ]"
        title = f"{mark} {suite.id}: {suite.name}"
        count = f"{suite.enabled_count}/{len(suite.cases)} tests"
        typer.echo(f"{TerminalColors.bold(title)}  {TerminalColors.dim(count)}")
        if suite.description:
            typer.echo(f"      {suite.description}")
        for case in suite.cases:
            case_mark = "[x]" if case.enabled and suite.enabled else "[ ]"
            line = f"    {case_mark} {case.id} - {case.name}"
            if not suite.enabled:
                # Masked by the suite switch; own flag is kept for later
                line = TerminalColors.dim(line)
            typer.echo(
                f"{line}  {TerminalColors.priority(case.priority)}  {case.category}"
            )
        typer.echo("")


def print_results(results: list[TestResult]) -> None:
    if not results:
        typer.echo("No test results yet")
        return
    for result in results:
        typer.echo(format_result(result))
