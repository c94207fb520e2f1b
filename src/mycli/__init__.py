"""mycli — a minimal command-line application scaffold.

Wires a root command, informational subcommands, global ``--config`` and
``--verbose`` flags, and a best-effort YAML configuration loader.
"""

from mycli.version import __version__

__all__: list[str] = ["__version__"]
