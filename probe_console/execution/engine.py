# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Sequential execution engine for test suites."""

import asyncio
import logging
import time
from datetime import datetime
from typing import Any

from probe_console.core.constants import (
    DEFAULT_PACING,
    INTERRUPTED_MESSAGE,
    PROGRESS_MAX,
    PROGRESS_MIN,
    SUCCESS_MESSAGE,
)
from probe_console.core.errors import error_details, error_message
from probe_console.core.models import Severity, TestCase, TestResult, TestStatus
from probe_console.core.types import EngineState, RunSummary
from probe_console.notifications.bus import NotificationBus
from probe_console.registry.suites import SuiteRegistry
from probe_console.results.store import ResultIdFactory, ResultStore

logger = logging.getLogger(__name__)


class ExecutionEngine:
    """Runs the registry's enabled cases one at a time.

    State machine: ``IDLE -> RUNNING -> {COMPLETED, STOPPED}``. Only one run may
    be active; a second ``run()`` while running is rejected as a no-op.

    Probe exceptions never escape the engine: each is converted into an
    ``error`` result and an ``error`` notification, and the run continues with
    the next case. Cancellation is cooperative and checked before each case
    starts, so at most the in-flight case completes after ``stop()``.
    """

    def __init__(
        self,
        registry: SuiteRegistry,
        store: ResultStore,
        bus: NotificationBus,
        pacing: float = DEFAULT_PACING,
        id_factory: ResultIdFactory | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            registry: Source of enabled cases and their probes
            store: Receives one result per case invocation
            bus: Receives lifecycle and per-case notifications
            pacing: Seconds to pause after each case so progress is visible
            id_factory: Result identifier factory (injectable for tests)
        """
        self.registry = registry
        self.store = store
        self.bus = bus
        self.pacing = pacing
        self._new_result_id = id_factory or ResultIdFactory()

        self._state = EngineState.IDLE
        self._progress = PROGRESS_MIN
        self._current_case: TestCase | None = None
        self._stop_requested = False
        # True until the run loop exits, which may be after stop() returns
        self._active = False
        # result id -> case, lets a finished result be retried
        self._result_cases: dict[str, TestCase] = {}

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def progress(self) -> float:
        """Run progress in percent (0-100)."""
        return self._progress

    @property
    def current_case_name(self) -> str | None:
        return self._current_case.name if self._current_case else None

    @property
    def is_running(self) -> bool:
        return self._state == EngineState.RUNNING

    @property
    def is_busy(self) -> bool:
        """True while a run loop is executing, including a stopped run draining its in-flight case."""
        return self._active

    async def run(self) -> RunSummary | None:
        """Run every currently enabled case in catalog order.

        An empty selection publishes a warning and returns the engine to
        ``IDLE``; results of a previous run are kept. If the run task is
        cancelled the in-flight result is finalized as ``error``, the state
        moves to ``STOPPED`` and the cancellation propagates.

        Returns:
            The run summary, or None if the run did not start (nothing
            selected, or a run is already active).
        """
        if self._active:
            logger.warning("Run requested while a run is already active, ignoring")
            return None

        # Captured once; toggles during the run apply to the next run only
        cases = self.registry.enabled_cases()
        if not cases:
            self._state = EngineState.IDLE
            self._progress = PROGRESS_MIN
            self.bus.notify(
                Severity.WARNING,
                "No Tests Selected",
                "Please enable at least one test suite and test case",
            )
            return None

        total = len(cases)
        self._active = True
        self._state = EngineState.RUNNING
        self._stop_requested = False
        self._progress = PROGRESS_MIN
        self.store.clear()
        self._result_cases.clear()
        logger.info(f"Starting run of {total} test cases")
        self.bus.notify(Severity.INFO, "Test Suite Started", f"Running {total} tests")

        try:
            for index, case in enumerate(cases):
                if self._stop_requested:
                    logger.info(f"Run stopped before {case.name} ({index}/{total} executed)")
                    break
                self._current_case = case
                await self._execute(case)
                self._progress = (index + 1) / total * PROGRESS_MAX
                if self.pacing > 0 and index < total - 1:
                    await asyncio.sleep(self.pacing)
        finally:
            self._current_case = None
            self._active = False
            if self._state == EngineState.RUNNING:
                # Left by an exception or cancellation, not by a normal exit
                self._stop_requested = True
                self._state = EngineState.STOPPED

        summary = RunSummary(
            total=total,
            passed=self.store.count(TestStatus.SUCCESS),
            failed=self.store.count(TestStatus.ERROR),
            stopped=self._stop_requested,
        )
        if summary.stopped:
            # stop() already moved to STOPPED and announced it
            return summary

        self._state = EngineState.COMPLETED
        self._progress = PROGRESS_MAX
        logger.info(f"Run completed: {summary.passed}/{summary.total} passed")
        self.bus.notify(
            Severity.SUCCESS if summary.passed == summary.total else Severity.WARNING,
            "Test Suite Completed",
            f"{summary.passed}/{summary.total} tests passed",
        )
        return summary

    def stop(self) -> bool:
        """Request cooperative cancellation of the active run.

        The state changes to ``STOPPED`` immediately; a probe already in flight
        is allowed to finish and record its result.

        Returns:
            False if no run was active.
        """
        if not self.is_running:
            logger.debug("Stop requested with no active run")
            return False
        self._stop_requested = True
        self._state = EngineState.STOPPED
        self.bus.notify(
            Severity.INFO, "Test Suite Stopped", "Test execution has been stopped"
        )
        return True

    async def run_case(self, suite_id: str, case_id: str) -> TestResult | None:
        """Invoke a single case on demand, outside of a suite run.

        The case runs even if it or its suite is disabled. The store is not
        cleared; the new result is prepended to it.

        Returns:
            The finalized result, or None if the case is unknown or a suite run
            is active.
        """
        if self._active:
            logger.warning(f"Cannot run {suite_id}/{case_id} while a suite run is active")
            return None
        case = self.registry.get_case(suite_id, case_id)
        if case is None:
            logger.warning(f"Unknown test case {suite_id}/{case_id}")
            return None
        return await self._execute(case)

    async def retry(self, result_id: str) -> TestResult | None:
        """Re-invoke the case that produced ``result_id`` as a new result.

        Returns:
            The new finalized result, or None if the result is unknown or a
            suite run is active.
        """
        if self._active:
            logger.warning(f"Cannot retry {result_id} while a suite run is active")
            return None
        self._prune_result_cases()
        case = self._result_cases.get(result_id)
        if case is None:
            logger.warning(f"No test case recorded for result {result_id}")
            return None
        return await self._execute(case)

    async def _execute(self, case: TestCase) -> TestResult:
        """Invoke one case's probe and record its result and notification."""
        result = TestResult(
            id=self._new_result_id(case.category, case.id),
            name=case.name,
            status=TestStatus.RUNNING,
            timestamp=datetime.now(),
        )
        self._prune_result_cases()
        self.store.add(result)
        self._result_cases[result.id] = case
        logger.debug(f"Executing {result.id}")

        start = time.perf_counter()
        try:
            probe = self.registry.probe_for(case)
            payload = await probe()
        except Exception as e:
            duration = self._elapsed_ms(start)
            message = error_message(e)
            self._finalize(
                result,
                status=TestStatus.ERROR,
                message=message,
                duration=duration,
                details=error_details(e),
            )
            logger.info(f"FAILED {case.name} in {duration}ms: {message}")
            self.bus.notify(
                Severity.ERROR,
                f"{case.name} Failed",
                f"{case.name} failed: {message}",
            )
        except BaseException as e:
            # Cancellation or interpreter exit: finalize, then let it propagate
            self._finalize(
                result,
                status=TestStatus.ERROR,
                message=INTERRUPTED_MESSAGE,
                duration=self._elapsed_ms(start),
                details=error_details(e),
            )
            logger.warning(f"Interrupted {case.name}: {type(e).__name__}")
            raise
        else:
            duration = self._elapsed_ms(start)
            self._finalize(
                result,
                status=TestStatus.SUCCESS,
                message=SUCCESS_MESSAGE,
                duration=duration,
                details=payload,
            )
            logger.info(f"PASSED {case.name} in {duration}ms")
            self.bus.notify(
                Severity.SUCCESS,
                f"{case.name} Passed",
                f"{case.name} completed successfully",
            )
        return result

    def _finalize(self, result: TestResult, **changes: Any) -> None:
        changes["timestamp"] = datetime.now()
        if not self.store.update(result.id, **changes):
            # Store was cleared while the probe ran; keep the returned object accurate
            for name, value in changes.items():
                setattr(result, name, value)

    def _prune_result_cases(self) -> None:
        """Forget cases whose results are no longer in the store."""
        known = {result.id for result in self.store}
        self._result_cases = {
            result_id: case
            for result_id, case in self._result_cases.items()
            if result_id in known
        }

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int(round((time.perf_counter() - start) * 1000))
