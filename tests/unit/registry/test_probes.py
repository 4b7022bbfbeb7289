# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for ProbeRegistry."""

import asyncio

import pytest

from probe_console.core.errors import ProbeNotFoundError
from probe_console.registry.probes import ProbeRegistry


class TestProbeRegistry:
    def test_decorator_registers(self) -> None:
        probes = ProbeRegistry()

        @probes.probe("database", "basic-query")
        async def basic_query() -> dict[str, int]:
            return {"rows": 1}

        assert ("database", "basic-query") in probes
        assert asyncio.run(probes.resolve("database", "basic-query")()) == {"rows": 1}

    def test_register_replaces(self) -> None:
        probes = ProbeRegistry()

        async def first() -> str:
            return "first"

        async def second() -> str:
            return "second"

        probes.register("auth", "signin", first)
        probes.register("auth", "signin", second)

        assert len(probes) == 1
        assert probes.resolve("auth", "signin") is second

    def test_same_case_id_different_category(self) -> None:
        probes = ProbeRegistry()

        async def a() -> str:
            return "a"

        async def b() -> str:
            return "b"

        probes.register("auth", "x", a)
        probes.register("storage", "x", b)

        assert probes.resolve("storage", "x") is b

    def test_resolve_missing(self) -> None:
        with pytest.raises(ProbeNotFoundError) as exc_info:
            ProbeRegistry().resolve("api", "endpoints")

        assert exc_info.value.category == "api"
        assert exc_info.value.case_id == "endpoints"
        assert isinstance(exc_info.value, LookupError)
