# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core data models shared across probe-console.

This module contains the data structures observed by every component of the
console: the suite/case catalog, per-invocation results and user-facing
notifications.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Priority(str, Enum):
    """Priority tag attached to a test case (display only, never reorders)."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TestStatus(str, Enum):
    """Lifecycle status of a single probe invocation."""

    __test__ = False  # not a pytest test class

    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"

    @property
    def is_final(self) -> bool:
        return self in (TestStatus.SUCCESS, TestStatus.ERROR)


class Severity(str, Enum):
    """Severity of a user notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class TestCase:
    """A single named check belonging to exactly one suite and one category.

    Cases are immutable; toggling ``enabled`` replaces the instance held by
    the registry.

    Attributes:
        id: Identifier, unique within the owning suite
        name: Human readable display name
        category: Functional area tag (auth, database, storage, ...)
        enabled: Whether the case is selected for the next run
        priority: Display priority
    """

    __test__ = False  # not a pytest test class

    id: str
    name: str
    category: str
    enabled: bool = True
    priority: Priority = Priority.MEDIUM


@dataclass(frozen=True)
class TestSuite:
    """A named, toggleable group of ordered test cases.

    The suite's ``enabled`` flag is a master switch: a case only contributes to
    a run when both its own flag and its suite's flag are true.
    """

    __test__ = False

    id: str
    name: str
    description: str = ""
    enabled: bool = True
    cases: tuple[TestCase, ...] = ()

    @property
    def enabled_count(self) -> int:
        """Number of cases whose own flag is set, ignoring the suite flag."""
        return sum(1 for case in self.cases if case.enabled)

    def get_case(self, case_id: str) -> TestCase | None:
        for case in self.cases:
            if case.id == case_id:
                return case
        return None


@dataclass
class TestResult:
    """Recorded outcome of one case invocation.

    The identifier encodes the category positionally
    (``<category>-<case_id>-<epoch_millis>``), category projections rely on it.
    """

    __test__ = False

    id: str
    name: str
    status: TestStatus
    timestamp: datetime
    message: str | None = None
    duration: int | None = None  # milliseconds
    details: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict suitable for JSON export."""
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "duration": self.duration,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }


@dataclass
class Notification:
    """A transient, auto-expiring user-facing alert.

    ``id``, ``created_at`` and ``expires_at`` are filled in by the bus on
    publish when left empty.
    """

    severity: Severity
    title: str
    message: str
    id: str = ""
    created_at: float | None = None  # epoch seconds
    expires_at: float | None = None  # epoch seconds

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at
