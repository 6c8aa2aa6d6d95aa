"""``compatprobe run`` -- Run compatibility probes and classify the results.

Builds the environment context once (from overrides or by introspecting the
host runtime), assembles the probe registry from the built-in catalog and
any manifests, runs every selected probe in isolation, and reports one
verdict per probe plus an overall status.

Exit Codes:
    0 -- all-compatible or degraded-expected.
    1 -- incompatible (at least one fatal incompatibility).
    2 -- harness failure (duplicate or unknown probe, bad manifest, no probes).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from compatprobe.cli.wiring import RUNTIME_CHOICES, build_registry, resolve_context
from compatprobe.core.report import aggregate, render_machine
from compatprobe.core.runner import ProbeRunner
from compatprobe.exceptions import HarnessError


def _fail(message: str, output_format: str) -> NoReturn:
    """Report a harness failure and exit with code 2."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("run")
@click.option(
    "--probe", "probe_names",
    multiple=True,
    help="Run only the named probe (repeatable).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--vendor",
    envvar="COMPATPROBE_VENDOR",
    default=None,
    help="Override the detected runtime vendor.",
)
@click.option(
    "--runtime-version",
    envvar="COMPATPROBE_RUNTIME_VERSION",
    default=None,
    help="Override the detected runtime version.",
)
@click.option(
    "--java-home",
    envvar="JAVA_HOME",
    type=click.Path(file_okay=False),
    default=None,
    help="JDK to probe (default: $JAVA_HOME, then PATH).",
)
@click.option(
    "--runtime",
    type=click.Choice(RUNTIME_CHOICES),
    default="java",
    help="Runtime to introspect for vendor/version (default: java).",
)
@click.option(
    "--manifest", "manifests",
    type=click.Path(exists=True, dir_okay=False),
    multiple=True,
    help="YAML probe manifest to load (repeatable).",
)
@click.option(
    "--no-builtin",
    is_flag=True,
    default=False,
    help="Do not register the built-in JDK probes.",
)
@click.option(
    "--output", "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the machine-readable report to this file.",
)
def run_command(
    probe_names: tuple[str, ...],
    output_format: str,
    vendor: str | None,
    runtime_version: str | None,
    java_home: str | None,
    runtime: str,
    manifests: tuple[str, ...],
    no_builtin: bool,
    output_path: str | None,
) -> None:
    """Run compatibility probes against the host runtime.

    Exit code 0 if every probe is compatible or an expected absence,
    1 if any probe is a fatal incompatibility, 2 on harness errors.
    """
    try:
        registry = build_registry(
            manifests, java_home, include_builtin=not no_builtin, selected=probe_names,
        )
    except HarnessError as exc:
        _fail(str(exc), output_format)

    if len(registry) == 0:
        _fail("No probes registered.", output_format)

    context = resolve_context(vendor, runtime_version, java_home, runtime)
    results = ProbeRunner().run(registry, context)
    report = aggregate(results, context)
    machine = render_machine(report)

    if output_path:
        try:
            Path(output_path).write_text(json.dumps(machine, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            _fail(f"Cannot write report: {exc}", output_format)

    if output_format == "json":
        click.echo(json.dumps(machine, indent=2))
    else:
        from compatprobe.cli.output import print_report
        print_report(report)
        if output_path:
            click.echo(f"Report written to: {Path(output_path).resolve()}")

    sys.exit(report.exit_code)
