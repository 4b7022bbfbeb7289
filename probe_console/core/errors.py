# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Error types and error-to-data conversion for probe-console.

Probe failures are never propagated out of the engine; this module converts
raw exceptions into the message and details recorded on an ``error`` result.
"""

from typing import Any

from probe_console.core.constants import UNKNOWN_ERROR_MESSAGE


class ProbeConsoleError(Exception):
    """Base class for probe-console errors."""


class ProbeFailure(ProbeConsoleError):
    """Raised by probes to report a failed check with a readable message."""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class ProbeNotFoundError(ProbeConsoleError, LookupError):
    """No probe is bound to a ``(category, case_id)`` pair."""

    def __init__(self, category: str, case_id: str) -> None:
        super().__init__(f"No probe registered for {category}/{case_id}")
        self.category = category
        self.case_id = case_id


class CatalogError(ProbeConsoleError):
    """The suite catalog definition is malformed."""


def error_message(error: BaseException) -> str:
    """Extract a human readable message from an exception.

    Args:
        error: The exception raised by a probe.

    Returns:
        The exception text, or a generic message if the exception carries none.
    """
    message = str(error).strip()
    if message:
        return message
    return UNKNOWN_ERROR_MESSAGE


def error_details(error: BaseException) -> dict[str, Any]:
    """Build the details payload stored on an ``error`` result.

    The raw exception is kept under ``error`` so the UI can inspect it; the
    type name and message are duplicated as plain strings for export.
    """
    details: dict[str, Any] = {
        "type": type(error).__name__,
        "message": error_message(error),
        "error": error,
    }
    payload = getattr(error, "payload", None)
    if payload is not None:
        details["payload"] = payload
    return details
