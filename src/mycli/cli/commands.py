"""Command descriptors and the per-invocation command context.

Every subcommand is described by a :class:`Command` and registered with
the root parser in :mod:`mycli.cli.app`.  The ``requires_config`` tag
tells the pre-execution hook whether configuration must be resolved
before the body runs.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from mycli.core.models import Config
from mycli.version import BuildInfo


@dataclass(frozen=True, slots=True)
class GlobalFlag:
    """A flag accepted by the root command and every subcommand."""

    long: str
    help: str
    short: str | None = None
    metavar: str | None = None
    """Set for flags taking a value; ``None`` marks a boolean switch."""


def global_flags(app_name: str) -> tuple[GlobalFlag, ...]:
    return (
        GlobalFlag(
            long="--config",
            metavar="PATH",
            help=f"config file (default is $HOME/.{app_name}.yaml)",
        ),
        GlobalFlag(long="--verbose", short="-v", help="enable verbose output"),
    )


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Everything a command body may depend on, passed explicitly."""

    build: BuildInfo
    config: Config | None = None
    """Resolved configuration; ``None`` for commands that do not require it."""
    config_path: Path | None = None


Handler = Callable[[argparse.Namespace, CommandContext], int]
ArgumentConfigurator = Callable[[argparse.ArgumentParser], None]


@dataclass(frozen=True, slots=True)
class Command:
    """A named, described unit of behaviour under the root command."""

    name: str
    summary: str
    description: str
    handler: Handler
    requires_config: bool = True
    configure: ArgumentConfigurator | None = None
    """Adds command-specific arguments to the command's subparser."""
