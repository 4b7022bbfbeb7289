"""Suite catalog, enablement state and probe bindings."""

from probe_console.registry.catalog import (
    CATEGORIES,
    default_catalog,
    load_catalog,
    suites_from_data,
)
from probe_console.registry.probes import Probe, ProbeRegistry
from probe_console.registry.suites import SuiteRegistry

__all__ = [
    "CATEGORIES",
    "Probe",
    "ProbeRegistry",
    "SuiteRegistry",
    "default_catalog",
    "load_catalog",
    "suites_from_data",
]
