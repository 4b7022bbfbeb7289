# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""JSON export of the result store."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from probe_console.results.store import ResultStore

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    # Details are opaque probe payloads; anything json can't encode is stringified
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    return repr(value)


def build_report(store: ResultStore) -> dict[str, Any]:
    """Build the export document: summary counts plus every result."""
    stats = store.stats()
    return {
        "generated_at": datetime.now().isoformat(),
        "summary": {
            "total": stats.total,
            "passed": stats.passed,
            "failed": stats.failed,
            "running": stats.running,
            "success_rate": round(stats.success_rate, 1),
        },
        "results": [result.to_dict() for result in store.results],
    }


def export_results(store: ResultStore, path: Path) -> Path:
    """Write the result store to ``path`` as JSON.

    Args:
        store: Store to export.
        path: Destination file; parent directories are created.

    Returns:
        The path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    report = build_report(store)
    path.write_text(json.dumps(report, indent=2, default=_json_default))
    logger.info(f"Exported {len(store)} results to {path}")
    return path
