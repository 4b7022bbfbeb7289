# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Explicit ``(category, case_id) -> probe`` mapping populated at startup."""

import logging
from collections.abc import Awaitable, Callable, Iterator
from typing import Any

from probe_console.core.errors import ProbeNotFoundError

logger = logging.getLogger(__name__)

# A probe takes no engine-provided input and returns any payload or raises
Probe = Callable[[], Awaitable[Any]]
ProbeKey = tuple[str, str]


class ProbeRegistry:
    """Holds the probe bound to each test case.

    Usage:
        >>> probes = ProbeRegistry()
        >>> @probes.probe("database", "basic-query")
        ... async def basic_query():
        ...     return {"rows": 1}
    """

    def __init__(self) -> None:
        self._probes: dict[ProbeKey, Probe] = {}

    def register(self, category: str, case_id: str, probe: Probe) -> None:
        """Bind ``probe`` to a case, replacing any previous binding."""
        key = (category, case_id)
        if key in self._probes:
            logger.debug(f"Replacing probe for {category}/{case_id}")
        self._probes[key] = probe

    def probe(self, category: str, case_id: str) -> Callable[[Probe], Probe]:
        """Decorator form of :meth:`register`."""

        def decorator(func: Probe) -> Probe:
            self.register(category, case_id, func)
            return func

        return decorator

    def resolve(self, category: str, case_id: str) -> Probe:
        """Return the probe for a case.

        Raises:
            ProbeNotFoundError: If nothing is bound to ``(category, case_id)``.
        """
        try:
            return self._probes[(category, case_id)]
        except KeyError:
            raise ProbeNotFoundError(category, case_id) from None

    def __contains__(self, key: object) -> bool:
        return key in self._probes

    def __iter__(self) -> Iterator[ProbeKey]:
        return iter(self._probes)

    def __len__(self) -> int:
        return len(self._probes)
