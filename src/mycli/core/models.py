"""Domain models for mycli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and validation.  They carry zero I/O and
must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from mycli.exceptions import ConfigError, ConfigValidationError

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error", "critical")
"""Accepted values for the ``log_level`` configuration key."""

_DEFAULT_VALUES: dict[str, Any] = {
    "log_level": "warning",
}


# ---------------------------------------------------------------------------
# Configuration value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Configuration loaded for a single invocation.

    ``values`` holds every key of the source, laid over the defaults.
    Keys the application does not know about are kept so that command
    bodies can read them with :meth:`get`.
    """

    values: Mapping[str, Any]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a config from parsed source data, merged over the defaults.

        Raises
        ------
        ConfigValidationError
            If a known key holds an invalid value.
        """
        merged = dict(_DEFAULT_VALUES)
        merged.update(data)

        level = merged["log_level"]
        if not isinstance(level, str) or level.lower() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"invalid log_level {level!r}",
                hint=f"Use one of: {', '.join(LOG_LEVELS)}",
            )
        merged["log_level"] = level.lower()

        return cls(values=MappingProxyType(merged))

    @property
    def log_level(self) -> str:
        """Lower-case logging level name (``"warning"`` by default)."""
        return str(self.values["log_level"])

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """Return a mutable copy of the values, e.g. for serialisation."""
        return dict(self.values)


DEFAULT_CONFIG: Config = Config(values=MappingProxyType(dict(_DEFAULT_VALUES)))
"""Fallback used whenever the configuration source cannot be loaded."""


# ---------------------------------------------------------------------------
# Resolution outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConfigResolution:
    """Outcome of resolving the configuration for one invocation."""

    config: Config
    """The configuration command bodies will see."""

    path: Path | None
    """Path the resolver actually tried, or ``None`` if it never got that far."""

    error: ConfigError | None = None
    """The load failure, when :data:`DEFAULT_CONFIG` was substituted."""

    @property
    def used_default(self) -> bool:
        return self.error is not None
