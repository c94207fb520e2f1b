"""``mycli version`` — print build identity."""

from __future__ import annotations

import argparse

from mycli.cli import exit_codes
from mycli.cli.commands import CommandContext
from mycli.cli.console import echo


def run_version(_args: argparse.Namespace, context: CommandContext) -> int:
    """Print the name, version and build time of this binary."""
    build = context.build
    echo(f"{build.name} version: {build.version}")
    echo(f"Build time: {build.build_time}")
    return exit_codes.SUCCESS
