# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Simulated probes used when no backend is attached.

Each simulated probe sleeps for a random latency and then either returns a
small payload or raises :class:`ProbeFailure`, reproducing the console's demo
mode. A seeded ``random.Random`` makes runs reproducible.
"""

import asyncio
import logging
import random
from collections.abc import Iterable

from probe_console.core.constants import (
    SIMULATED_FAILURE_RATE,
    SIMULATED_MAX_LATENCY,
    SIMULATED_MIN_LATENCY,
)
from probe_console.core.errors import ProbeFailure
from probe_console.core.models import TestSuite
from probe_console.registry.probes import Probe, ProbeRegistry

logger = logging.getLogger(__name__)

# Failure messages by category, the kind of error a real backend check reports
FAILURE_MESSAGES: dict[str, str] = {
    "auth": "Invalid login credentials",
    "database": "timeout",
    "storage": "Bucket not found",
    "realtime": "Channel subscription timed out",
    "api": "HTTP 503: Service temporarily unavailable",
    "security": "Unexpected access granted to anonymous role",
    "performance": "Latency budget exceeded",
    "backup": "Backup verification checksum mismatch",
}


class SimulatedProbeFactory:
    """Builds simulated probes sharing one random source."""

    def __init__(
        self,
        failure_rate: float = SIMULATED_FAILURE_RATE,
        min_latency: float = SIMULATED_MIN_LATENCY,
        max_latency: float = SIMULATED_MAX_LATENCY,
        seed: int | None = None,
    ) -> None:
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be within [0, 1], got {failure_rate}")
        if min_latency < 0 or max_latency < min_latency:
            raise ValueError("latency bounds must satisfy 0 <= min_latency <= max_latency")
        self.failure_rate = failure_rate
        self.min_latency = min_latency
        self.max_latency = max_latency
        self._random = random.Random(seed)

    def create(self, category: str, case_id: str) -> Probe:
        async def probe() -> dict[str, object]:
            latency = self._random.uniform(self.min_latency, self.max_latency)
            failed = self._random.random() < self.failure_rate
            await asyncio.sleep(latency)
            if failed:
                message = FAILURE_MESSAGES.get(category, "Probe failed")
                raise ProbeFailure(message, payload={"case": case_id, "simulated": True})
            return {
                "case": case_id,
                "category": category,
                "simulated": True,
                "latency_ms": int(latency * 1000),
            }

        probe.__name__ = f"simulated_{category}_{case_id}".replace("-", "_")
        return probe


def register_simulated_probes(
    probes: ProbeRegistry,
    suites: Iterable[TestSuite],
    factory: SimulatedProbeFactory,
) -> int:
    """Bind a simulated probe to every case that has no probe yet.

    Returns:
        Number of probes registered.
    """
    count = 0
    for suite in suites:
        for case in suite.cases:
            key = (case.category, case.id)
            if key in probes:
                continue
            probes.register(case.category, case.id, factory.create(case.category, case.id))
            count += 1
    logger.debug(f"Registered {count} simulated probes")
    return count
