"""Allow ``python -m mycli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mycli`` behaves identically to the ``mycli`` console
script.
"""

from __future__ import annotations

from mycli.cli.app import cli

if __name__ == "__main__":
    cli()
