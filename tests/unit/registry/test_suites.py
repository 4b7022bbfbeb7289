# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for SuiteRegistry selection state."""

import random

import pytest

from probe_console.core.errors import ProbeNotFoundError
from probe_console.core.models import Priority, TestSuite
from probe_console.registry.probes import ProbeRegistry
from probe_console.registry.suites import SuiteRegistry
from tests.unit.conftest import make_case, make_suite


class TestEnabledCases:
    """enabled_cases() is the suite-major, case-minor execution order."""

    def test_masked_suite_excluded(self, registry: SuiteRegistry) -> None:
        """Smoke (4 enabled) + disabled performance (3 enabled) selects 4, not 7."""
        assert len(registry.enabled_cases()) == 4

    def test_catalog_order(self, registry: SuiteRegistry) -> None:
        registry.toggle_suite("performance")

        ids = [case.id for case in registry.enabled_cases()]

        assert ids == [
            "connection",
            "auth-signin",
            "basic-query",
            "storage-list",
            "bulk-insert",
            "concurrent-queries",
            "large-payload",
        ]

    def test_priority_does_not_reorder(self) -> None:
        suite = make_suite(
            "s",
            [
                make_case("a", priority=Priority.LOW),
                make_case("b", priority=Priority.HIGH),
            ],
        )
        registry = SuiteRegistry([suite])

        assert [c.id for c in registry.enabled_cases()] == ["a", "b"]

    def test_membership_over_random_toggles(
        self, sample_suites: list[TestSuite]
    ) -> None:
        """A case is selected iff its own flag and its suite flag are set."""
        rng = random.Random(1234)
        registry = SuiteRegistry(sample_suites)
        refs = [(s.id, c.id) for s in sample_suites for c in s.cases]

        for _ in range(300):
            if rng.random() < 0.3:
                registry.toggle_suite(rng.choice(sample_suites).id)
            else:
                registry.toggle_case(*rng.choice(refs))

            selected = {c.id for c in registry.enabled_cases()}
            expected = {
                case.id
                for suite in registry.suites
                for case in suite.cases
                if suite.enabled and case.enabled
            }
            assert selected == expected


class TestToggles:
    def test_toggle_case_twice_restores(self, registry: SuiteRegistry) -> None:
        before = registry.get_case("smoke", "basic-query").enabled

        registry.toggle_case("smoke", "basic-query")
        assert registry.get_case("smoke", "basic-query").enabled is not before
        registry.toggle_case("smoke", "basic-query")

        assert registry.get_case("smoke", "basic-query").enabled is before

    def test_toggle_suite_alternates(self, registry: SuiteRegistry) -> None:
        states = []
        for _ in range(4):
            registry.toggle_suite("smoke")
            states.append(registry.get_suite("smoke").enabled)

        assert states == [False, True, False, True]

    def test_case_state_preserved_while_suite_masked(
        self, registry: SuiteRegistry
    ) -> None:
        registry.toggle_suite("smoke")
        registry.toggle_case("smoke", "connection")
        assert registry.enabled_cases() == []

        registry.toggle_suite("smoke")

        ids = [c.id for c in registry.enabled_cases()]
        assert "connection" not in ids
        assert len(ids) == 3

    def test_unknown_ids_are_noops(self, registry: SuiteRegistry) -> None:
        before = registry.suites

        registry.toggle_suite("nope")
        registry.toggle_case("nope", "connection")
        registry.toggle_case("smoke", "nope")

        assert registry.suites == before

    def test_setters_report_unknown(self, registry: SuiteRegistry) -> None:
        assert registry.set_suite_enabled("nope", True) is False
        assert registry.set_case_enabled("smoke", "nope", True) is False
        assert registry.set_case_enabled("smoke", "connection", False) is True

    def test_snapshot_not_altered_by_later_toggle(
        self, registry: SuiteRegistry
    ) -> None:
        snapshot = registry.enabled_cases()

        registry.toggle_case("smoke", "connection")

        assert snapshot[0].id == "connection"
        assert snapshot[0].enabled is True


class TestLookups:
    def test_find_case(self, registry: SuiteRegistry) -> None:
        found = registry.find_case("bulk-insert")

        assert found is not None
        suite, case = found
        assert suite.id == "performance"
        assert case.category == "performance"

    def test_find_case_missing(self, registry: SuiteRegistry) -> None:
        assert registry.find_case("missing") is None

    def test_duplicate_suite_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate suite id"):
            SuiteRegistry([make_suite("a", []), make_suite("a", [])])

    def test_duplicate_case_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate case id"):
            SuiteRegistry([make_suite("a", [make_case("x"), make_case("x")])])

    def test_probe_for_resolves_through_probe_registry(
        self, registry: SuiteRegistry
    ) -> None:
        case = registry.get_case("smoke", "connection")

        assert registry.probe_for(case) is registry.probes.resolve("database", "connection")

    def test_probe_for_unbound(self, sample_suites: list[TestSuite]) -> None:
        registry = SuiteRegistry(sample_suites, ProbeRegistry())

        with pytest.raises(ProbeNotFoundError):
            registry.probe_for(registry.get_case("smoke", "connection"))
