"""Custom exception hierarchy for mycli.

All exceptions that cross layer boundaries must inherit from
:class:`MycliError`.  Raw third-party exceptions (``OSError``,
``yaml.YAMLError``) must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
MycliError
├── ConfigError
│   ├── ConfigNotFoundError
│   ├── ConfigReadError
│   ├── ConfigParseError
│   └── ConfigValidationError
└── CommandError
"""

from __future__ import annotations


class MycliError(Exception):
    """Base exception for all mycli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigError(MycliError):
    """Raised when the configuration source cannot be used.

    Recoverable: the pre-execution hook downgrades it to a warning and
    continues with the default configuration.
    """


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class ConfigReadError(ConfigError):
    """Raised when the configuration file exists but cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not a valid YAML mapping."""


class ConfigValidationError(ConfigError):
    """Raised when a configuration value has the wrong type or range."""


# --- Command bodies --------------------------------------------------------

class CommandError(MycliError):
    """Raised by a command body when it cannot complete."""
