"""Tests for terminal formatting utilities."""

import pytest
from colorama import Fore

from probe_console.core.models import Severity, TestStatus
from probe_console.core.types import RunSummary
from probe_console.utils.terminal import TerminalColors


class TestRunSummaryFormatting:
    def test_plain_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", True)

        text = TerminalColors.format_run_summary(RunSummary(total=4, passed=3, failed=1))

        assert text == "4 tests, 3 passed, 1 failed."

    def test_not_run_suffix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", True)

        text = TerminalColors.format_run_summary(
            RunSummary(total=5, passed=2, stopped=True)
        )

        assert text == "5 tests, 2 passed, 0 failed, 3 not run."

    def test_only_nonzero_numbers_colored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", False)

        text = TerminalColors.format_run_summary(RunSummary(total=2, passed=2))

        assert f"{Fore.GREEN}2" in text
        assert Fore.RED not in text
        assert TerminalColors.strip_ansi(text) == "2 tests, 2 passed, 0 failed."


class TestSemanticColors:
    def test_severity_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", False)

        assert TerminalColors.severity(Severity.WARNING, "x").startswith(Fore.YELLOW)

    def test_status_label(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", True)

        assert TerminalColors.status(TestStatus.RUNNING) == "RUNNING"

    def test_header_without_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(TerminalColors, "NO_COLOR", True)

        assert TerminalColors.header("Results", width=3) == "===\nResults\n==="
