"""Core configuration service — the load-or-default policy.

The resolver is injected (dependency inversion), keeping the core free
of any filesystem or YAML imports.

Guarantees
----------
* Pure orchestration: no I/O and no ``print()``.
* A :class:`~mycli.exceptions.ConfigError` never escapes; it is
  returned alongside :data:`~mycli.core.models.DEFAULT_CONFIG`.
* Any other exception propagates unchanged.
"""

from __future__ import annotations

from mycli.core.models import DEFAULT_CONFIG, ConfigResolution
from mycli.core.protocols import ConfigResolver
from mycli.exceptions import ConfigError


def resolve_config(
    resolver: ConfigResolver,
    explicit_path: str,
    app_name: str,
) -> ConfigResolution:
    """Load the configuration, falling back to the default on failure."""
    try:
        config = resolver.load(explicit_path, app_name)
    except ConfigError as exc:
        return ConfigResolution(
            config=DEFAULT_CONFIG,
            path=resolver.config_path,
            error=exc,
        )

    return ConfigResolution(config=config, path=resolver.config_path)
