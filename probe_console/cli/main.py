# -*- coding: utf-8 -*-

# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import asyncio
import logging
import signal
from pathlib import Path
from typing import Optional

import errorhandler
import typer
from typing_extensions import Annotated

import probe_console
from probe_console.cli.ui import NotificationPrinter, print_catalog, print_results
from probe_console.console import ProbeConsole
from probe_console.core.constants import (
    CLI_DEFAULT_PACING,
    DEFAULT_NOTIFICATION_TTL,
    EXIT_ERROR,
    EXIT_INVALID_ARGS,
    SIMULATED_FAILURE_RATE,
)
from probe_console.core.errors import CatalogError
from probe_console.core.models import TestResult, TestStatus, TestSuite
from probe_console.core.types import RunSummary
from probe_console.probes.simulated import SimulatedProbeFactory
from probe_console.registry.catalog import default_catalog, load_catalog
from probe_console.registry.suites import SuiteRegistry
from probe_console.results.export import export_results
from probe_console.utils.logging import VerbosityLevel, configure_logging
from probe_console.utils.terminal import terminal


app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"probe-console, version {probe_console.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="PROBE_CONSOLE_VERBOSITY",
        is_eager=True,
    ),
]


Catalog = Annotated[
    Optional[Path],
    typer.Option(
        "-c",
        "--catalog",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Path to a suite catalog YAML file. Defaults to the built-in catalog.",
        envvar="PROBE_CONSOLE_CATALOG",
    ),
]


Seed = Annotated[
    Optional[int],
    typer.Option(
        "--seed",
        help="Seed for the simulated probes, makes runs reproducible.",
        envvar="PROBE_CONSOLE_SEED",
    ),
]


FailureRate = Annotated[
    float,
    typer.Option(
        "--failure-rate",
        help="Probability that a simulated probe fails.",
        envvar="PROBE_CONSOLE_FAILURE_RATE",
        min=0.0,
        max=1.0,
    ),
]


Pacing = Annotated[
    float,
    typer.Option(
        "--pacing",
        help="Seconds to pause between test cases.",
        envvar="PROBE_CONSOLE_PACING",
        min=0.0,
    ),
]


NotificationTTL = Annotated[
    float,
    typer.Option(
        "--notification-ttl",
        help="Seconds before a notification expires.",
        envvar="PROBE_CONSOLE_NOTIFICATION_TTL",
        min=0.0,
    ),
]


EnableSuite = Annotated[
    list[str],
    typer.Option(
        "--enable-suite",
        help="Enable a suite by id (repeatable).",
    ),
]


DisableSuite = Annotated[
    list[str],
    typer.Option(
        "--disable-suite",
        help="Disable a suite by id (repeatable).",
    ),
]


EnableCase = Annotated[
    list[str],
    typer.Option(
        "--enable-case",
        help="Enable a test case given as SUITE/CASE (repeatable).",
    ),
]


DisableCase = Annotated[
    list[str],
    typer.Option(
        "--disable-case",
        help="Disable a test case given as SUITE/CASE (repeatable).",
    ),
]


Export = Annotated[
    Optional[Path],
    typer.Option(
        "-o",
        "--export",
        dir_okay=False,
        file_okay=True,
        help="Write the results to this JSON file.",
        envvar="PROBE_CONSOLE_EXPORT",
    ),
]


Quiet = Annotated[
    bool,
    typer.Option(
        "-q",
        "--quiet",
        help="Only print warning and error notifications.",
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


@app.callback()
def callback(
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """A manual diagnostic console for probing a managed backend."""
    configure_logging(verbosity, error_handler)


def _load_suites(catalog: Path | None) -> list[TestSuite]:
    if catalog is None:
        return default_catalog()
    try:
        return load_catalog(catalog)
    except CatalogError as e:
        typer.echo(terminal.error(f"Invalid catalog: {e}"), err=True)
        raise typer.Exit(EXIT_INVALID_ARGS)


def _split_case_ref(value: str) -> tuple[str, str]:
    suite_id, sep, case_id = value.partition("/")
    if not sep or not suite_id or not case_id:
        raise typer.BadParameter(f"expected SUITE/CASE, got '{value}'")
    return suite_id, case_id


def apply_selection(
    registry: SuiteRegistry,
    enable_suites: list[str],
    disable_suites: list[str],
    enable_cases: list[str],
    disable_cases: list[str],
) -> None:
    """Apply CLI selection flags to the registry.

    Raises:
        typer.BadParameter: If a flag names an unknown suite or case.
    """
    for suite_id, enabled in [(s, True) for s in enable_suites] + [
        (s, False) for s in disable_suites
    ]:
        if not registry.set_suite_enabled(suite_id, enabled):
            raise typer.BadParameter(f"unknown suite '{suite_id}'")
    for ref, enabled in [(c, True) for c in enable_cases] + [
        (c, False) for c in disable_cases
    ]:
        suite_id, case_id = _split_case_ref(ref)
        if not registry.set_case_enabled(suite_id, case_id, enabled):
            raise typer.BadParameter(f"unknown test case '{ref}'")


def _build_console(
    catalog: Path | None,
    seed: int | None,
    failure_rate: float,
    pacing: float,
    notification_ttl: float,
) -> ProbeConsole:
    return ProbeConsole(
        suites=_load_suites(catalog),
        simulator=SimulatedProbeFactory(failure_rate=failure_rate, seed=seed),
        pacing=pacing,
        notification_ttl=notification_ttl,
    )


async def _run_with_interrupt(console: ProbeConsole) -> RunSummary | None:
    """Run the engine, turning Ctrl-C into a cooperative stop."""
    loop = asyncio.get_running_loop()
    installed = False
    try:
        loop.add_signal_handler(signal.SIGINT, console.engine.stop)
        installed = True
    except (NotImplementedError, RuntimeError):
        # Signal handlers are unavailable on Windows event loops
        logger.debug("SIGINT handler not installed")
    try:
        return await console.engine.run()
    finally:
        if installed:
            loop.remove_signal_handler(signal.SIGINT)


@app.command("list")
def list_suites(
    catalog: Catalog = None,
    enable_suite: EnableSuite = [],
    disable_suite: DisableSuite = [],
    enable_case: EnableCase = [],
    disable_case: DisableCase = [],
) -> None:
    """Show the suite catalog and which cases a run would execute."""
    registry = SuiteRegistry(_load_suites(catalog))
    apply_selection(registry, enable_suite, disable_suite, enable_case, disable_case)
    print_catalog(registry)
    typer.echo(f"{len(registry.enabled_cases())} tests selected")


@app.command()
def run(
    catalog: Catalog = None,
    enable_suite: EnableSuite = [],
    disable_suite: DisableSuite = [],
    enable_case: EnableCase = [],
    disable_case: DisableCase = [],
    seed: Seed = None,
    failure_rate: FailureRate = SIMULATED_FAILURE_RATE,
    pacing: Pacing = CLI_DEFAULT_PACING,
    notification_ttl: NotificationTTL = DEFAULT_NOTIFICATION_TTL,
    export: Export = None,
    quiet: Quiet = False,
) -> None:
    """Run every enabled test case sequentially."""
    console = _build_console(catalog, seed, failure_rate, pacing, notification_ttl)
    apply_selection(
        console.registry, enable_suite, disable_suite, enable_case, disable_case
    )
    console.notifications.subscribe(NotificationPrinter(show_info=not quiet))

    summary = asyncio.run(_run_with_interrupt(console))

    typer.echo("")
    print_results(console.results.results)
    if export is not None:
        export_results(console.results, export)
        typer.echo(f"Results written to {export}")

    if summary is None:
        raise typer.Exit(EXIT_INVALID_ARGS)
    typer.echo("\n" + terminal.format_run_summary(summary))
    exit(summary)


@app.command()
def probe(
    case: Annotated[str, typer.Argument(help="Test case given as SUITE/CASE.")],
    catalog: Catalog = None,
    seed: Seed = None,
    failure_rate: FailureRate = SIMULATED_FAILURE_RATE,
    retries: Annotated[
        int,
        typer.Option("--retries", help="Re-invoke a failed case up to N times.", min=0),
    ] = 0,
    export: Export = None,
) -> None:
    """Invoke a single test case, regardless of its enabled flag."""
    suite_id, case_id = _split_case_ref(case)
    console = _build_console(catalog, seed, failure_rate, 0.0, DEFAULT_NOTIFICATION_TTL)
    console.notifications.subscribe(NotificationPrinter())

    async def invoke() -> list[TestResult]:
        result = await console.engine.run_case(suite_id, case_id)
        if result is None:
            return []
        attempts = [result]
        while attempts[-1].status == TestStatus.ERROR and len(attempts) <= retries:
            retried = await console.engine.retry(attempts[-1].id)
            if retried is None:
                break
            attempts.append(retried)
        return attempts

    attempts = asyncio.run(invoke())
    if not attempts:
        typer.echo(terminal.error(f"Unknown test case '{case}'"), err=True)
        raise typer.Exit(EXIT_INVALID_ARGS)

    print_results(console.results.results)
    if export is not None:
        export_results(console.results, export)
    final = attempts[-1]
    exit(
        RunSummary(
            total=1,
            passed=1 if final.status == TestStatus.SUCCESS else 0,
            failed=1 if final.status == TestStatus.ERROR else 0,
        )
    )


def exit(summary: RunSummary) -> None:
    if summary.exit_code == 0 and error_handler.fired:
        raise typer.Exit(EXIT_ERROR)
    raise typer.Exit(summary.exit_code)
