# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite registry: static catalog plus mutable enablement state."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from probe_console.core.models import TestCase, TestSuite
from probe_console.registry.probes import Probe, ProbeRegistry

logger = logging.getLogger(__name__)


class SuiteRegistry:
    """Holds the suite catalog and its enable/disable flags.

    Suites and cases are frozen dataclasses; toggling swaps in a copy with the
    flag flipped, so lists returned by :meth:`enabled_cases` are snapshots that
    later toggles never alter.

    A case's own flag is kept while its suite is disabled, so re-enabling the
    suite restores the previous case selection.
    """

    def __init__(
        self,
        suites: Iterable[TestSuite],
        probes: ProbeRegistry | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            suites: Catalog in display/execution order. Suite ids must be unique
                and case ids unique within their suite.
            probes: Probe bindings used by :meth:`probe_for`.

        Raises:
            ValueError: On duplicate suite or case identifiers.
        """
        self._suites: list[TestSuite] = []
        seen: set[str] = set()
        for suite in suites:
            if suite.id in seen:
                raise ValueError(f"Duplicate suite id: {suite.id}")
            seen.add(suite.id)
            case_ids = [case.id for case in suite.cases]
            if len(case_ids) != len(set(case_ids)):
                raise ValueError(f"Duplicate case id in suite {suite.id}")
            self._suites.append(suite)
        self.probes = probes if probes is not None else ProbeRegistry()

    @property
    def suites(self) -> list[TestSuite]:
        return list(self._suites)

    def get_suite(self, suite_id: str) -> TestSuite | None:
        index = self._suite_index(suite_id)
        return self._suites[index] if index is not None else None

    def get_case(self, suite_id: str, case_id: str) -> TestCase | None:
        suite = self.get_suite(suite_id)
        return suite.get_case(case_id) if suite else None

    def find_case(self, case_id: str) -> tuple[TestSuite, TestCase] | None:
        """First ``(suite, case)`` in catalog order with the given case id."""
        for suite in self._suites:
            case = suite.get_case(case_id)
            if case is not None:
                return suite, case
        return None

    def toggle_suite(self, suite_id: str) -> None:
        """Flip a suite's master switch. Unknown ids are ignored."""
        suite = self.get_suite(suite_id)
        if suite is None:
            logger.debug(f"toggle_suite: unknown suite {suite_id}")
            return
        self.set_suite_enabled(suite_id, not suite.enabled)

    def toggle_case(self, suite_id: str, case_id: str) -> None:
        """Flip a case's own flag, regardless of its suite's state."""
        case = self.get_case(suite_id, case_id)
        if case is None:
            logger.debug(f"toggle_case: unknown case {suite_id}/{case_id}")
            return
        self.set_case_enabled(suite_id, case_id, not case.enabled)

    def set_suite_enabled(self, suite_id: str, enabled: bool) -> bool:
        """Set a suite's flag explicitly.

        Returns:
            False if the suite does not exist.
        """
        index = self._suite_index(suite_id)
        if index is None:
            return False
        self._suites[index] = replace(self._suites[index], enabled=enabled)
        return True

    def set_case_enabled(self, suite_id: str, case_id: str, enabled: bool) -> bool:
        """Set a case's own flag explicitly.

        Returns:
            False if the suite or case does not exist.
        """
        index = self._suite_index(suite_id)
        if index is None:
            return False
        suite = self._suites[index]
        if suite.get_case(case_id) is None:
            return False
        cases = tuple(
            replace(case, enabled=enabled) if case.id == case_id else case
            for case in suite.cases
        )
        self._suites[index] = replace(suite, cases=cases)
        return True

    def enabled_cases(self) -> list[TestCase]:
        """Cases selected for execution, suite-major then case-minor.

        A case is included iff its own flag and its suite's flag are both set.
        This is the execution order; priority never reorders it.
        """
        return [
            case
            for suite in self._suites
            if suite.enabled
            for case in suite.cases
            if case.enabled
        ]

    def probe_for(self, case: TestCase) -> Probe:
        """Resolve the probe bound to a case.

        Raises:
            ProbeNotFoundError: If no probe is registered for the case.
        """
        return self.probes.resolve(case.category, case.id)

    def _suite_index(self, suite_id: str) -> int | None:
        for index, suite in enumerate(self._suites):
            if suite.id == suite_id:
                return index
        return None
