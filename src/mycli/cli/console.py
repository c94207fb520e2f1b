"""CLI console and logging helpers with optional Rich support.

Diagnostics (warnings, errors, log records) go to stderr through Rich;
command results go to stdout as plain text via :func:`echo` so they stay
pipe-friendly.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from mycli.exceptions import MycliError

_LOG_HANDLER_NAME = "mycli-console"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MycliError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MycliError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, **kwargs: Any) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MycliError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, **kwargs)


console = _ConsoleProxy()


def _escape(text: str) -> str:
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def _rich_available() -> bool:
    try:
        _load_rich_console_class()
    except MycliError:
        return False
    return True


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def echo(text: str = "") -> None:
    """Write one line of command output to stdout."""
    print(text, file=sys.stdout)


def warn(message: str) -> None:
    """Write a single ``Warning: <message>`` line to stderr."""
    if _rich_available():
        console.print(f"[yellow]Warning:[/yellow] {_escape(message)}", soft_wrap=True)
    else:
        print(f"Warning: {message}", file=sys.stderr)


def error(message: str, hint: str | None = None) -> None:
    """Write an ``Error:`` line, plus an optional hint, to stderr."""
    if not _rich_available():
        print(f"Error: {message}", file=sys.stderr)
        if hint:
            print(f"Hint: {hint}", file=sys.stderr)
        return
    console.print(f"[bold red]Error:[/bold red] {_escape(message)}", soft_wrap=True)
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {_escape(hint)}", soft_wrap=True)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _build_log_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler
    return RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(level: str) -> None:
    """Route the ``mycli`` logger to stderr at *level*.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, never duplicated.
    """
    logger = logging.getLogger("mycli")
    for handler in list(logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            logger.removeHandler(handler)

    handler = _build_log_handler()
    handler.set_name(_LOG_HANDLER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
