# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Result store for the current session's probe invocations."""

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import Any

from probe_console.core.constants import RESULT_ID_SEPARATOR
from probe_console.core.models import TestResult, TestStatus

logger = logging.getLogger(__name__)

_RESULT_FIELDS = frozenset(f.name for f in fields(TestResult)) - {"id"}


@dataclass
class ResultStats:
    """Counts shown on the runner and dashboard pages."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    running: int = 0

    @property
    def success_rate(self) -> float:
        """Passed results over finished results (0.0-100.0)."""
        finished = self.passed + self.failed
        if finished > 0:
            return (self.passed / finished) * 100
        return 0.0


class ResultIdFactory:
    """Builds ``<category>-<case_id>-<epoch_millis>`` identifiers.

    The millisecond component is strictly increasing across calls so two
    invocations started within the same millisecond never share an id.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last_millis = 0

    def __call__(self, category: str, case_id: str) -> str:
        millis = int(self._clock() * 1000)
        if millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return RESULT_ID_SEPARATOR.join((category, case_id, str(millis)))


class ResultStore:
    """Newest-first log of test results with category projection.

    Category membership is encoded as the identifier prefix, so
    ``by_category`` is a plain prefix match over the log.
    """

    def __init__(self) -> None:
        self._results: list[TestResult] = []

    def add(self, result: TestResult) -> None:
        """Prepend a result to the log."""
        self._results.insert(0, result)

    def update(self, result_id: str, **changes: Any) -> bool:
        """Merge field changes into the result with ``result_id``.

        Args:
            result_id: Identifier of the result to update.
            **changes: TestResult fields to overwrite.

        Returns:
            True if the result was found and updated, False if no result has
            that identifier (e.g. the store was cleared in the meantime).

        Raises:
            AttributeError: If a change names a field TestResult does not have.
        """
        unknown = set(changes) - _RESULT_FIELDS
        if unknown:
            raise AttributeError(f"Unknown result field(s): {', '.join(sorted(unknown))}")

        result = self.get(result_id)
        if result is None:
            logger.debug(f"Ignoring update for unknown result {result_id}")
            return False
        for name, value in changes.items():
            setattr(result, name, value)
        return True

    def get(self, result_id: str) -> TestResult | None:
        for result in self._results:
            if result.id == result_id:
                return result
        return None

    def clear(self) -> None:
        self._results.clear()

    def by_category(self, prefix: str) -> list[TestResult]:
        """Results whose identifier starts with ``prefix``, in store order."""
        return [r for r in self._results if r.id.startswith(prefix)]

    def count(self, status: TestStatus) -> int:
        return sum(1 for r in self._results if r.status == status)

    def stats(self) -> ResultStats:
        return ResultStats(
            total=len(self._results),
            passed=self.count(TestStatus.SUCCESS),
            failed=self.count(TestStatus.ERROR),
            running=self.count(TestStatus.RUNNING),
        )

    @property
    def results(self) -> list[TestResult]:
        """Snapshot of all results, newest first."""
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[TestResult]:
        return iter(list(self._results))
