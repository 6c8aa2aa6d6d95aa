"""compatprobe CLI -- Runtime compatibility probes for vendor-proprietary features.

Entry point for the ``compatprobe`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    run   -- Run probes and classify each outcome (exit 1 if incompatible).
    list  -- Show registered probes and their expected-absence rules.
    env   -- Show the detected runtime vendor and version.

Usage::

    compatprobe run                              # Built-in JDK probes, $JAVA_HOME
    compatprobe run --java-home /opt/jdk-21
    compatprobe run --probe kcms --probe font-engine --format json
    compatprobe run --vendor "Oracle Corporation" --runtime-version 11.0.2
    compatprobe run --manifest probes.yaml --no-builtin
    compatprobe list
    compatprobe env
"""

from __future__ import annotations

import logging

import click

from compatprobe import __version__
from compatprobe.cli.env_cmd import env_command
from compatprobe.cli.list_cmd import list_command
from compatprobe.cli.run import run_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """compatprobe: Capability probes and compatibility verdicts.

    Detects vendor-proprietary runtime features and classifies each probe
    as compatible, an expected absence, or a fatal incompatibility for the
    detected vendor and version.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(run_command)
cli.add_command(list_command)
cli.add_command(env_command)
