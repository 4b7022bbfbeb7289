# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared fixtures and helpers for unit tests."""

from collections.abc import Callable
from typing import Any

import pytest

from probe_console.core.models import Priority, TestCase, TestSuite
from probe_console.execution.engine import ExecutionEngine
from probe_console.notifications.bus import NotificationBus
from probe_console.registry.probes import Probe, ProbeRegistry
from probe_console.registry.suites import SuiteRegistry
from probe_console.results.store import ResultStore


class FakeClock:
    """Manually advanced epoch clock."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_case(
    case_id: str,
    category: str = "database",
    enabled: bool = True,
    priority: Priority = Priority.MEDIUM,
) -> TestCase:
    return TestCase(
        id=case_id,
        name=case_id.replace("-", " ").title(),
        category=category,
        enabled=enabled,
        priority=priority,
    )


def make_suite(suite_id: str, cases: list[TestCase], enabled: bool = True) -> TestSuite:
    return TestSuite(
        id=suite_id,
        name=suite_id.title(),
        description=f"{suite_id} suite",
        enabled=enabled,
        cases=tuple(cases),
    )


def returning(payload: Any = None) -> Probe:
    """Probe that succeeds with ``payload``."""

    async def probe() -> Any:
        return payload

    return probe


def raising(error: Exception) -> Probe:
    """Probe that raises ``error``."""

    async def probe() -> Any:
        raise error

    return probe


def bind_all(
    probes: ProbeRegistry,
    suites: list[TestSuite],
    factory: Callable[[TestCase], Probe] = lambda case: returning({"case": case.id}),
) -> None:
    for suite in suites:
        for case in suite.cases:
            probes.register(case.category, case.id, factory(case))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sample_suites() -> list[TestSuite]:
    """Smoke suite enabled with 4 cases, performance suite disabled with 3."""
    return [
        make_suite(
            "smoke",
            [
                make_case("connection", "database"),
                make_case("auth-signin", "auth"),
                make_case("basic-query", "database"),
                make_case("storage-list", "storage"),
            ],
        ),
        make_suite(
            "performance",
            [
                make_case("bulk-insert", "performance"),
                make_case("concurrent-queries", "performance"),
                make_case("large-payload", "performance"),
            ],
            enabled=False,
        ),
    ]


@pytest.fixture()
def probes(sample_suites: list[TestSuite]) -> ProbeRegistry:
    registry = ProbeRegistry()
    bind_all(registry, sample_suites)
    return registry


@pytest.fixture()
def registry(sample_suites: list[TestSuite], probes: ProbeRegistry) -> SuiteRegistry:
    return SuiteRegistry(sample_suites, probes)


@pytest.fixture()
def store() -> ResultStore:
    return ResultStore()


@pytest.fixture()
def bus(clock: FakeClock) -> NotificationBus:
    return NotificationBus(ttl=5.0, clock=clock)


@pytest.fixture()
def engine(
    registry: SuiteRegistry, store: ResultStore, bus: NotificationBus
) -> ExecutionEngine:
    return ExecutionEngine(registry=registry, store=store, bus=bus)
