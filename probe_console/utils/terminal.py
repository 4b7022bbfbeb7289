"""Centralized terminal formatting utilities for probe-console."""

from colorama import Fore, Style, init
import os
import re

from probe_console.core.models import Priority, Severity, TestStatus
from probe_console.core.types import RunSummary

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output.

    This class provides semantic color mappings and formatting methods
    to ensure consistent terminal output across the probe-console codebase.
    """

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    INFO = Fore.CYAN
    HIGHLIGHT = Fore.MAGENTA
    RESET = Style.RESET_ALL

    # Semantic styles
    BOLD = Style.BRIGHT
    DIM = Style.DIM

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text."""
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def _wrap(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._wrap(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._wrap(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._wrap(cls.SUCCESS, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format info text in cyan."""
        return cls._wrap(cls.INFO, text)

    @classmethod
    def highlight(cls, text: str) -> str:
        return cls._wrap(cls.HIGHLIGHT, text)

    @classmethod
    def bold(cls, text: str) -> str:
        return cls._wrap(cls.BOLD, text)

    @classmethod
    def dim(cls, text: str) -> str:
        return cls._wrap(cls.DIM, text)

    @classmethod
    def header(cls, text: str, width: int = 70, char: str = "=") -> str:
        """Format a header with separators.

        Args:
            text: Header text to display
            width: Width of separator line
            char: Character to use for separator

        Returns:
            Formatted header string with separators
        """
        separator = char * width
        if cls.NO_COLOR:
            return f"{separator}\n{text}\n{separator}"
        return f"{cls.BOLD}{separator}\n{text}\n{separator}{cls.RESET}"

    @classmethod
    def severity(cls, severity: Severity, text: str) -> str:
        """Color text by notification severity."""
        colors = {
            Severity.INFO: cls.INFO,
            Severity.SUCCESS: cls.SUCCESS,
            Severity.WARNING: cls.WARNING,
            Severity.ERROR: cls.ERROR,
        }
        return cls._wrap(colors[severity], text)

    @classmethod
    def status(cls, status: TestStatus) -> str:
        """Upper-case status label colored like the runner's result cards."""
        colors = {
            TestStatus.SUCCESS: cls.SUCCESS,
            TestStatus.ERROR: cls.ERROR,
            TestStatus.RUNNING: cls.INFO,
            TestStatus.PENDING: cls.DIM,
        }
        return cls._wrap(colors[status], status.value.upper())

    @classmethod
    def priority(cls, priority: Priority) -> str:
        colors = {
            Priority.HIGH: cls.ERROR,
            Priority.MEDIUM: cls.WARNING,
            Priority.LOW: cls.SUCCESS,
        }
        return cls._wrap(colors[priority], priority.value)

    @classmethod
    def format_run_summary(cls, summary: RunSummary) -> str:
        """Format a run summary: 'N tests, N passed, N failed[, N not run].'

        Numbers are colored only when greater than zero; labels are never
        colored.
        """
        passed = cls.success(str(summary.passed)) if summary.passed else "0"
        failed = cls.error(str(summary.failed)) if summary.failed else "0"
        text = f"{summary.total} tests, {passed} passed, {failed} failed"
        if summary.not_run:
            text += f", {cls.warning(str(summary.not_run))} not run"
        return text + "."


# Single instance for use across the codebase
terminal = TerminalColors()
