# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core constants shared across probe-console."""

# Notifications
DEFAULT_NOTIFICATION_TTL = 5.0  # seconds before a toast expires

# Execution pacing between cases, gives the UI time to render progress
DEFAULT_PACING = 0.0  # seconds
CLI_DEFAULT_PACING = 0.1  # seconds

# Simulated probes
SIMULATED_MIN_LATENCY = 0.05  # seconds
SIMULATED_MAX_LATENCY = 0.25  # seconds
SIMULATED_FAILURE_RATE = 0.2

# Progress bounds
PROGRESS_MIN = 0.0
PROGRESS_MAX = 100.0

# Result identifiers are "<category>-<case_id>-<epoch_millis>"
RESULT_ID_SEPARATOR = "-"

SUCCESS_MESSAGE = "Test completed successfully"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
INTERRUPTED_MESSAGE = "Test execution was interrupted"

# Exit codes (Robot Framework convention, as used by the test runners)
EXIT_OK = 0
EXIT_FAILURE_CAP = 250
EXIT_INVALID_ARGS = 2
EXIT_INTERRUPTED = 253
EXIT_ERROR = 255
