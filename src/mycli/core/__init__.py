"""Core / service layer — configuration model and fallback policy.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from mycli.core.config_service import resolve_config
from mycli.core.models import DEFAULT_CONFIG, LOG_LEVELS, Config, ConfigResolution
from mycli.core.protocols import ConfigResolver

__all__: list[str] = [
    "Config",
    "ConfigResolution",
    "ConfigResolver",
    "DEFAULT_CONFIG",
    "LOG_LEVELS",
    "resolve_config",
]
