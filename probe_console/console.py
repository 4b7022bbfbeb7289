# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Composition root wiring the registry, stores and engine together."""

import logging
from collections.abc import Iterable

from probe_console.core.constants import DEFAULT_NOTIFICATION_TTL, DEFAULT_PACING
from probe_console.core.models import TestSuite
from probe_console.execution.engine import ExecutionEngine
from probe_console.notifications.bus import NotificationBus
from probe_console.probes.simulated import (
    SimulatedProbeFactory,
    register_simulated_probes,
)
from probe_console.registry.catalog import default_catalog
from probe_console.registry.probes import ProbeRegistry
from probe_console.registry.suites import SuiteRegistry
from probe_console.results.store import ResultStore

logger = logging.getLogger(__name__)


class ProbeConsole:
    """Owns one instance of every console component.

    UI surfaces receive the components from here instead of reaching for
    module-level state.
    """

    def __init__(
        self,
        suites: Iterable[TestSuite] | None = None,
        probes: ProbeRegistry | None = None,
        simulator: SimulatedProbeFactory | None = None,
        pacing: float = DEFAULT_PACING,
        notification_ttl: float = DEFAULT_NOTIFICATION_TTL,
    ) -> None:
        """Initialize the console.

        Args:
            suites: Suite catalog; the built-in catalog when omitted
            probes: Pre-populated probe bindings
            simulator: If given, binds simulated probes to every unbound case
            pacing: Seconds the engine pauses between cases
            notification_ttl: Seconds before a notification expires
        """
        catalog = list(suites) if suites is not None else default_catalog()
        self.probes = probes if probes is not None else ProbeRegistry()
        if simulator is not None:
            register_simulated_probes(self.probes, catalog, simulator)

        self.registry = SuiteRegistry(catalog, self.probes)
        self.results = ResultStore()
        self.notifications = NotificationBus(ttl=notification_ttl)
        self.engine = ExecutionEngine(
            registry=self.registry,
            store=self.results,
            bus=self.notifications,
            pacing=pacing,
        )
        logger.debug(
            f"Console ready: {len(catalog)} suites, {len(self.probes)} probes bound"
        )
