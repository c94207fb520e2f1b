"""``mycli config [show|path]`` — inspect the effective configuration.

``show`` prints the configuration the command bodies receive (defaults
included) as YAML; ``path`` prints the file that was consulted.
"""

from __future__ import annotations

import argparse

from mycli.cli import exit_codes
from mycli.cli.commands import CommandContext
from mycli.cli.console import echo
from mycli.core.models import DEFAULT_CONFIG
from mycli.infra.yaml_config import dump_config


def run_config(args: argparse.Namespace, context: CommandContext) -> int:
    """Print the resolved configuration or its path."""
    if args.action == "path":
        echo(str(context.config_path) if context.config_path else "")
        return exit_codes.SUCCESS

    config = context.config if context.config is not None else DEFAULT_CONFIG
    echo(dump_config(config).rstrip("\n"))
    return exit_codes.SUCCESS
