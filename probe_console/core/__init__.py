"""Core components shared across probe-console."""

from probe_console.core.errors import (
    CatalogError,
    ProbeConsoleError,
    ProbeFailure,
    ProbeNotFoundError,
)
from probe_console.core.models import (
    Notification,
    Priority,
    Severity,
    TestCase,
    TestResult,
    TestStatus,
    TestSuite,
)
from probe_console.core.types import EngineState, RunSummary

__all__ = [
    # Errors
    "ProbeConsoleError",
    "ProbeFailure",
    "ProbeNotFoundError",
    "CatalogError",
    # Models
    "Priority",
    "TestStatus",
    "Severity",
    "TestCase",
    "TestSuite",
    "TestResult",
    "Notification",
    # Types
    "EngineState",
    "RunSummary",
]
