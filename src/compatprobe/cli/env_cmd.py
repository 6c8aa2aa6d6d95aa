"""``compatprobe env`` -- Show the environment context probes would run against."""

from __future__ import annotations

import json

import click

from compatprobe.cli.output import print_context
from compatprobe.cli.wiring import RUNTIME_CHOICES, resolve_context


@click.command("env")
@click.option("--vendor", envvar="COMPATPROBE_VENDOR", default=None,
              help="Override the detected runtime vendor.")
@click.option("--runtime-version", envvar="COMPATPROBE_RUNTIME_VERSION", default=None,
              help="Override the detected runtime version.")
@click.option("--java-home", envvar="JAVA_HOME", type=click.Path(file_okay=False),
              default=None, help="JDK to introspect (default: $JAVA_HOME, then PATH).")
@click.option("--runtime", type=click.Choice(RUNTIME_CHOICES), default="java",
              help="Runtime to introspect (default: java).")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
def env_command(
    vendor: str | None,
    runtime_version: str | None,
    java_home: str | None,
    runtime: str,
    output_format: str,
) -> None:
    """Detect and print the normalized runtime vendor and version."""
    context = resolve_context(vendor, runtime_version, java_home, runtime)
    if output_format == "json":
        click.echo(json.dumps(context.as_dict(), indent=2))
    else:
        print_context(context)
