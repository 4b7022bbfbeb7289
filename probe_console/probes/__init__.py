"""Probe implementations bundled with probe-console."""

from probe_console.probes.simulated import (
    FAILURE_MESSAGES,
    SimulatedProbeFactory,
    register_simulated_probes,
)

__all__ = [
    "FAILURE_MESSAGES",
    "SimulatedProbeFactory",
    "register_simulated_probes",
]
