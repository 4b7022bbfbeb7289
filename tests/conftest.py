# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Global pytest fixtures shared across all test modules."""

import os
from collections.abc import Generator

import pytest


@pytest.fixture(scope="session", autouse=True)
def clear_console_environment() -> Generator[None, None, None]:
    """Remove PROBE_CONSOLE_* variables so CLI defaults are predictable.

    Typer reads option defaults from the environment; a developer's shell
    settings must not leak into the tests.
    """
    saved = {k: v for k, v in os.environ.items() if k.startswith("PROBE_CONSOLE_")}
    for key in saved:
        del os.environ[key]
    yield
    os.environ.update(saved)
