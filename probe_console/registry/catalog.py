# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite catalog definitions.

The built-in catalog mirrors the console's runner page. Alternative catalogs
can be loaded from YAML with the same structure::

    suites:
      - id: smoke
        name: Smoke Tests
        description: Basic functionality tests
        enabled: true
        tests:
          - id: connection
            name: Database Connection
            category: database
            priority: high
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from probe_console.core.errors import CatalogError
from probe_console.core.models import Priority, TestCase, TestSuite

logger = logging.getLogger(__name__)

CATEGORIES: tuple[str, ...] = (
    "auth",
    "database",
    "storage",
    "realtime",
    "api",
    "security",
    "performance",
    "backup",
)

DEFAULT_CATALOG: dict[str, Any] = {
    "suites": [
        {
            "id": "smoke",
            "name": "Smoke Tests",
            "description": "Basic functionality tests to verify system is operational",
            "enabled": True,
            "tests": [
                {"id": "connection", "name": "Database Connection", "category": "database", "priority": "high"},
                {"id": "auth-signin", "name": "User Sign In", "category": "auth", "priority": "high"},
                {"id": "basic-query", "name": "Basic Query", "category": "database", "priority": "high"},
                {"id": "storage-list", "name": "List Storage Buckets", "category": "storage", "priority": "medium"},
            ],
        },
        {
            "id": "regression",
            "name": "Regression Tests",
            "description": "Comprehensive tests to ensure no functionality has broken",
            "enabled": True,
            "tests": [
                {"id": "auth-full", "name": "Full Authentication Flow", "category": "auth", "priority": "high"},
                {"id": "database-crud", "name": "Database CRUD Operations", "category": "database", "priority": "high"},
                {"id": "storage-operations", "name": "Storage Operations", "category": "storage", "priority": "medium"},
                {"id": "realtime-basic", "name": "Realtime Subscriptions", "category": "realtime", "priority": "medium"},
                {"id": "api-endpoints", "name": "API Endpoints", "category": "api", "priority": "medium"},
            ],
        },
        {
            "id": "performance",
            "name": "Performance Tests",
            "description": "Tests to verify system performance under load",
            "enabled": False,
            "tests": [
                {"id": "bulk-insert", "name": "Bulk Data Insert", "category": "performance", "priority": "medium"},
                {"id": "concurrent-queries", "name": "Concurrent Queries", "category": "performance", "priority": "medium"},
                {"id": "large-payload", "name": "Large Payload Handling", "category": "performance", "priority": "low"},
            ],
        },
        {
            "id": "security",
            "name": "Security Tests",
            "description": "Security and authorization tests",
            "enabled": False,
            "tests": [
                {"id": "unauthorized-access", "name": "Unauthorized Access", "category": "security", "priority": "high"},
                {"id": "jwt-validation", "name": "JWT Validation", "category": "security", "priority": "high"},
                {"id": "sql-injection", "name": "SQL Injection Protection", "category": "security", "priority": "high"},
            ],
        },
        {
            "id": "backup",
            "name": "Backup & Recovery Tests",
            "description": "Backup creation, verification and restore drills",
            "enabled": False,
            "tests": [
                {"id": "database-backup", "name": "Database Backup", "category": "backup", "priority": "high"},
                {"id": "backup-verification", "name": "Backup Verification", "category": "backup", "priority": "medium"},
                {"id": "restore-from-backup", "name": "Restore from Backup", "category": "backup", "priority": "medium"},
            ],
        },
    ]
}


def _require(entry: dict[str, Any], key: str, where: str) -> Any:
    value = entry.get(key)
    if value is None or value == "":
        raise CatalogError(f"{where}: missing required field '{key}'")
    return value


def _parse_case(entry: Any, suite_id: str) -> TestCase:
    if not isinstance(entry, dict):
        raise CatalogError(f"suite '{suite_id}': test entries must be mappings")
    where = f"suite '{suite_id}'"
    case_id = str(_require(entry, "id", where))
    where = f"{where}, test '{case_id}'"
    priority = str(entry.get("priority", Priority.MEDIUM.value)).lower()
    try:
        parsed_priority = Priority(priority)
    except ValueError:
        raise CatalogError(f"{where}: invalid priority '{priority}'") from None
    return TestCase(
        id=case_id,
        name=str(entry.get("name") or case_id),
        category=str(_require(entry, "category", where)),
        enabled=bool(entry.get("enabled", True)),
        priority=parsed_priority,
    )


def suites_from_data(data: Any) -> list[TestSuite]:
    """Build suites from a parsed catalog document.

    Args:
        data: Mapping with a ``suites`` list, as in :data:`DEFAULT_CATALOG`.

    Raises:
        CatalogError: If the document does not describe a valid catalog.
    """
    if not isinstance(data, dict) or not isinstance(data.get("suites"), list):
        raise CatalogError("catalog must be a mapping with a 'suites' list")

    suites: list[TestSuite] = []
    seen: set[str] = set()
    for entry in data["suites"]:
        if not isinstance(entry, dict):
            raise CatalogError("suite entries must be mappings")
        suite_id = str(_require(entry, "id", "suite"))
        if suite_id in seen:
            raise CatalogError(f"duplicate suite id '{suite_id}'")
        seen.add(suite_id)

        cases = tuple(_parse_case(case, suite_id) for case in entry.get("tests") or [])
        case_ids = [case.id for case in cases]
        if len(case_ids) != len(set(case_ids)):
            raise CatalogError(f"suite '{suite_id}': duplicate test ids")

        suites.append(
            TestSuite(
                id=suite_id,
                name=str(entry.get("name") or suite_id),
                description=str(entry.get("description") or ""),
                enabled=bool(entry.get("enabled", True)),
                cases=cases,
            )
        )
    return suites


def default_catalog() -> list[TestSuite]:
    return suites_from_data(DEFAULT_CATALOG)


def load_catalog(path: Path) -> list[TestSuite]:
    """Load a suite catalog from a YAML file.

    Raises:
        CatalogError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(f"Failed to load catalog {path}: {e}") from e
    suites = suites_from_data(data)
    logger.info(f"Loaded {len(suites)} suites from {path}")
    return suites
