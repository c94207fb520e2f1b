"""CLI application entry point and command routing for mycli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~mycli.exceptions.MycliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here. Configuration loading is delegated to
  the core/service and infrastructure layers.
* Every subcommand is a :class:`~mycli.cli.commands.Command`; its
  ``requires_config`` tag decides whether the pre-execution hook
  resolves configuration before the body runs.
* Configuration problems never fail an invocation: they become a single
  warning on stderr and the default configuration is used.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from mycli.cli import exit_codes
from mycli.cli.commands import Command, CommandContext, global_flags
from mycli.cli.console import configure_logging, console, echo, error, warn
from mycli.core.config_service import resolve_config
from mycli.core.protocols import ConfigResolver
from mycli.exceptions import MycliError
from mycli.version import BuildInfo, get_build_info


# ---------------------------------------------------------------------------
# Command bodies (thin adapters, heavy imports deferred)
# ---------------------------------------------------------------------------

def _handle_version(args: argparse.Namespace, context: CommandContext) -> int:
    from mycli.cli.version_cmd import run_version

    return run_version(args, context)


def _handle_config(args: argparse.Namespace, context: CommandContext) -> int:
    from mycli.cli.config_cmd import run_config

    return run_config(args, context)


def _handle_completion(args: argparse.Namespace, context: CommandContext) -> int:
    from mycli.cli.completion import render_completion

    script = render_completion(
        args.shell,
        context.build.name,
        COMMANDS,
        global_flags(context.build.name),
    )
    echo(script.rstrip("\n"))
    return exit_codes.SUCCESS


def _handle_help(args: argparse.Namespace, context: CommandContext) -> int:
    parser, subparsers = _build_parser(context.build)
    if args.topic is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target = subparsers.get(args.topic)
    if target is None:
        console.print(f"Unknown help topic {args.topic!r}", markup=False)
        parser.print_help()
        return exit_codes.SUCCESS

    target.print_help()
    return exit_codes.SUCCESS


def _configure_config(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "action",
        nargs="?",
        choices=("show", "path"),
        default="show",
        help="what to print (default: show)",
    )


def _configure_completion(parser: argparse.ArgumentParser) -> None:
    from mycli.cli.completion import SHELLS

    parser.add_argument("shell", choices=SHELLS, help="target shell")


def _configure_help(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("topic", nargs="?", default=None, metavar="command")


COMMANDS: tuple[Command, ...] = (
    Command(
        name="version",
        summary="Print the version information",
        description="Print detailed version information about this build",
        handler=_handle_version,
        requires_config=False,
    ),
    Command(
        name="config",
        summary="Show the effective configuration",
        description="Print the loaded configuration as YAML, or the path it was read from",
        handler=_handle_config,
        configure=_configure_config,
    ),
    Command(
        name="completion",
        summary="Generate the autocompletion script for the specified shell",
        description="Print a completion script for bash, zsh or fish to stdout",
        handler=_handle_completion,
        requires_config=False,
        configure=_configure_completion,
    ),
    Command(
        name="help",
        summary="Help about any command",
        description="Help provides help for any command in the application",
        handler=_handle_help,
        requires_config=False,
        configure=_configure_help,
    ),
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_global_flags(
    parser: argparse.ArgumentParser,
    app_name: str,
    *,
    suppress: bool,
) -> None:
    """Register ``--config`` and ``--verbose`` on *parser*.

    Subparsers get ``SUPPRESS`` defaults so a flag given before the
    subcommand name is not reset by the subparser.
    """
    for flag in global_flags(app_name):
        names = [flag.short, flag.long] if flag.short else [flag.long]
        if flag.metavar:
            parser.add_argument(
                *names,
                metavar=flag.metavar,
                default=argparse.SUPPRESS if suppress else "",
                help=flag.help,
            )
        else:
            parser.add_argument(
                *names,
                action="store_true",
                default=argparse.SUPPRESS if suppress else False,
                help=flag.help,
            )


def _build_parser(
    build: BuildInfo,
) -> tuple[argparse.ArgumentParser, dict[str, argparse.ArgumentParser]]:
    """Construct the root parser and one subparser per registered command."""
    parser = argparse.ArgumentParser(
        prog=build.name,
        description=(
            f"{build.name} is a CLI tool\n\n"
            f"{build.name} is a powerful CLI tool that helps you manage resources."
        ),
        epilog=f"Use '{build.name} help <command>' for more information about a command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s version {build.version_string}",
    )
    _add_global_flags(parser, build.name, suppress=False)
    parser.set_defaults(command=None)

    subparsers = parser.add_subparsers(title="commands", metavar="<command>")
    by_name: dict[str, argparse.ArgumentParser] = {}
    for command in COMMANDS:
        sub = subparsers.add_parser(
            command.name,
            help=command.summary,
            description=command.description,
        )
        _add_global_flags(sub, build.name, suppress=True)
        if command.configure is not None:
            command.configure(sub)
        sub.set_defaults(command=command)
        by_name[command.name] = sub

    return parser, by_name


# ---------------------------------------------------------------------------
# Pre-execution hook
# ---------------------------------------------------------------------------

def _prepare_context(
    command: Command,
    args: argparse.Namespace,
    build: BuildInfo,
    resolver: ConfigResolver | None,
) -> CommandContext:
    """Resolve configuration for *command* and build its context.

    Commands tagged ``requires_config=False`` get no configuration and
    trigger no configuration I/O.
    """
    if not command.requires_config:
        return CommandContext(build=build)

    if resolver is None:
        from mycli.infra.yaml_config import YamlConfigResolver

        resolver = YamlConfigResolver()

    resolution = resolve_config(resolver, args.config, build.name)
    if resolution.used_default:
        warn(f"Failed to load config: {resolution.error}")

    if args.verbose:
        echo(f"Using config file: {resolution.path or ''}")
    else:
        configure_logging(resolution.config.log_level)

    return CommandContext(
        build=build,
        config=resolution.config,
        config_path=resolution.path,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, resolver: ConfigResolver | None = None) -> int:
    """Run the mycli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    resolver:
        Configuration backend.  Defaults to
        :class:`~mycli.infra.yaml_config.YamlConfigResolver`.

    Returns
    -------
    int
        OS process exit code.
    """
    build = get_build_info()
    parser, _ = _build_parser(build)
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    command: Command | None = args.command
    if command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    context = _prepare_context(command, args, build, resolver)
    return command.handler(args, context)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MycliError as exc:
        error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
