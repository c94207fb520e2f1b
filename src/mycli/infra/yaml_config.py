"""PyYAML backed implementation of :class:`~mycli.core.protocols.ConfigResolver`.

This module is the **only** place in the codebase that imports ``yaml``
or touches the configuration file.  ``OSError`` and ``yaml.YAMLError``
are caught here and re-raised as typed
:class:`~mycli.exceptions.ConfigError` subclasses, so nothing raw escapes
the infrastructure boundary.

Discovery
---------
* ``--config <path>`` given: that path and no other.
* Otherwise: ``$HOME/.<app_name>.yaml``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from mycli.core.models import Config
from mycli.exceptions import ConfigNotFoundError, ConfigParseError, ConfigReadError

logger = logging.getLogger(__name__)


def default_config_path(app_name: str) -> Path:
    """Return the standard discovery path, ``$HOME/.<app_name>.yaml``."""
    return Path.home() / f".{app_name}.yaml"


def dump_config(config: Config) -> str:
    """Serialise *config* as a YAML document with sorted keys."""
    return yaml.safe_dump(config.as_dict(), sort_keys=True, default_flow_style=False)


class YamlConfigResolver:
    """Concrete :class:`ConfigResolver` reading a single YAML file.

    Usage::

        resolver = YamlConfigResolver()
        config = resolver.load("", "mycli")
        resolver.config_path  # -> ~/.mycli.yaml

    The resolver remembers the path of its last :meth:`load` call so the
    CLI can report it with ``--verbose`` whatever the outcome.
    """

    def __init__(self) -> None:
        self._config_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load(self, explicit_path: str, app_name: str) -> Config:
        """Read and parse the configuration file.

        Raises
        ------
        ConfigNotFoundError
            When the file does not exist.
        ConfigReadError
            When the file exists but cannot be read.
        ConfigParseError
            When the file is not valid YAML or its top level is not a mapping.
        ConfigValidationError
            When a known key holds an invalid value.
        """
        if explicit_path:
            path = Path(explicit_path)
            self._config_path = path
            try:
                path = path.expanduser()
            except RuntimeError as exc:
                raise ConfigReadError(f"cannot expand config path {explicit_path}: {exc}") from exc
        else:
            path = default_config_path(app_name)
        self._config_path = path

        logger.debug("Reading configuration from %s", path)
        text = self._read(path, explicit=bool(explicit_path))
        data = self._parse(path, text)
        return Config.from_mapping(data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read(path: Path, *, explicit: bool) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            hint = None if explicit else f"Create {path} or pass --config <path>."
            raise ConfigNotFoundError(f"config file not found: {path}", hint=hint) from exc
        except IsADirectoryError as exc:
            raise ConfigReadError(f"config path is a directory: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(f"cannot read config file {path}: {exc}") from exc

    @staticmethod
    def _parse(path: Path, text: str) -> dict[str, Any]:
        try:
            data: Any = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigParseError(f"invalid YAML in {path}: {exc}") from exc
        except RecursionError as exc:
            raise ConfigParseError(f"invalid YAML in {path}: nesting too deep") from exc

        # An empty document is a valid, empty configuration.
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"config file {path} must contain a mapping, got {type(data).__name__}",
            )

        return {str(key): value for key, value in data.items()}
