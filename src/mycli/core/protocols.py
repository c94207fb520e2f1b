"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends only on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from mycli.core.models import Config


class ConfigResolver(Protocol):
    """Contract for configuration backends.

    Any object that implements :meth:`load` and :attr:`config_path`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    @property
    def config_path(self) -> Path | None:
        """Path used by the most recent :meth:`load` call.

        Set before the file is read, so it is available for reporting
        even when loading fails.
        """
        ...  # pragma: no cover

    def load(self, explicit_path: str, app_name: str) -> Config:
        """Locate and parse the configuration for *app_name*.

        Parameters
        ----------
        explicit_path:
            Path given with ``--config``.  When non-empty, that path and
            no other is tried.  When empty, the backend's standard
            discovery location is used.
        app_name:
            Application name used to derive the standard location.

        Raises
        ------
        ConfigError
            Any subclass, when the source cannot be located, read,
            parsed, or validated.
        """
        ...  # pragma: no cover
