# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core types for probe-console orchestration."""

from dataclasses import dataclass
from enum import Enum

from probe_console.core.constants import EXIT_ERROR, EXIT_FAILURE_CAP, EXIT_INTERRUPTED


class EngineState(str, Enum):
    """Execution engine state.

    Transitions:
        IDLE -> RUNNING -> COMPLETED | STOPPED
        COMPLETED | STOPPED -> RUNNING (next run)
    """

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    STOPPED = "stopped"


@dataclass
class RunSummary:
    """Aggregate outcome of one suite run.

    Attributes:
        total: Number of cases captured for the run
        passed: Number of results in ``success`` state at the end of the run
        failed: Number of results in ``error`` state at the end of the run
        stopped: True if the run was stopped before all cases executed

    Properties:
        executed: Cases that actually produced a final result
        not_run: Cases skipped because of a stop request
    """

    total: int = 0
    passed: int = 0
    failed: int = 0
    stopped: bool = False

    @property
    def executed(self) -> int:
        return self.passed + self.failed

    @property
    def not_run(self) -> int:
        return max(self.total - self.executed, 0)

    @property
    def all_passed(self) -> bool:
        """True when every captured case ran and passed."""
        return self.total > 0 and self.passed == self.total

    @property
    def success_rate(self) -> float:
        """Success rate over executed cases (0.0-100.0)."""
        if self.executed > 0:
            return (self.passed / self.executed) * 100
        return 0.0

    @property
    def exit_code(self) -> int:
        """Calculate exit code per Robot Framework convention.

        Exit codes:
            0: All tests passed
            1-250: Number of failed cases (capped at 250)
            253: Run was stopped before completion
            255: No case produced a result
        """
        if self.failed > 0:
            return min(self.failed, EXIT_FAILURE_CAP)
        if self.stopped:
            return EXIT_INTERRUPTED
        if self.executed == 0:
            return EXIT_ERROR
        return 0

    def __str__(self) -> str:
        """Concise string representation: passed/total."""
        return f"{self.passed}/{self.total}"
