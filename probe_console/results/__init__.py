"""Result storage and export."""

from probe_console.results.export import build_report, export_results
from probe_console.results.store import ResultIdFactory, ResultStats, ResultStore

__all__ = [
    "ResultStore",
    "ResultStats",
    "ResultIdFactory",
    "build_report",
    "export_results",
]
