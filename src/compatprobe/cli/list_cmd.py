"""``compatprobe list`` -- Show registered probes and their declared rules."""

from __future__ import annotations

import json
import sys

import click

from compatprobe.cli.output import print_probe_list, probe_to_json
from compatprobe.cli.wiring import build_registry
from compatprobe.exceptions import HarnessError


@click.command("list")
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
    help="Do not list the built-in JDK probes.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--java-home",
    envvar="JAVA_HOME",
    type=click.Path(file_okay=False),
    default=None,
    help="JDK the listed probes are bound to (default: $JAVA_HOME, then PATH).",
)
def list_command(
    manifests: tuple[str, ...],
    no_builtin: bool,
    output_format: str,
    java_home: str | None,
) -> None:
    """List the probes that ``compatprobe run`` would execute."""
    try:
        registry = build_registry(manifests, java_home, include_builtin=not no_builtin)
    except HarnessError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)

    probes = registry.all()
    if output_format == "json":
        click.echo(json.dumps([probe_to_json(p) for p in probes], indent=2))
    else:
        print_probe_list(probes)
