# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for terminal rendering of notifications and results."""

from datetime import datetime

import pytest

from probe_console.cli.ui.reporter import (
    NotificationPrinter,
    format_result,
    print_catalog,
    print_results,
)
from probe_console.core.models import Notification, Severity, TestResult, TestStatus
from probe_console.registry.suites import SuiteRegistry
from probe_console.utils.terminal import TerminalColors


@pytest.fixture(autouse=True)
def no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(TerminalColors, "NO_COLOR", True)


class TestNotificationPrinter:
    def test_prints_severity_and_title(self, capsys: pytest.CaptureFixture[str]) -> None:
        printer = NotificationPrinter()

        printer(Notification(Severity.ERROR, "Basic Query Failed", "timeout", created_at=0.0))

        out = capsys.readouterr().out
        assert "[ERROR] Basic Query Failed - timeout" in out
        assert printer.printed == 1

    def test_hides_info_when_quiet(self, capsys: pytest.CaptureFixture[str]) -> None:
        printer = NotificationPrinter(show_info=False)

        printer(Notification(Severity.INFO, "Test Suite Started", "Running 3 tests"))

        assert capsys.readouterr().out == ""
        assert printer.printed == 0


class TestFormatResult:
    def test_error_includes_message(self) -> None:
        result = TestResult(
            id="database-basic-query-1",
            name="Basic Query",
            status=TestStatus.ERROR,
            timestamp=datetime.now(),
            message="timeout",
            duration=12,
        )

        assert format_result(result) == "   ERROR Basic Query (12ms) - timeout"

    def test_success_omits_message(self) -> None:
        result = TestResult(
            id="auth-signin-1",
            name="Sign In",
            status=TestStatus.SUCCESS,
            timestamp=datetime.now(),
            message="Test completed successfully",
            duration=3,
        )

        assert format_result(result) == " SUCCESS Sign In (3ms)"


class TestPrintHelpers:
    def test_empty_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_results([])

        assert capsys.readouterr().out == "No test results yet\n"

    def test_catalog_marks_masked_cases(
        self, registry: SuiteRegistry, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_catalog(registry)

        out = capsys.readouterr().out
        assert "[x] smoke: Smoke" in out
        assert "[ ] performance: Performance" in out
        assert "[ ] bulk-insert" in out
