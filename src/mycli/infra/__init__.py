"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and PyYAML.  Every
raw third-party exception must be caught here and re-raised as a
:class:`~mycli.exceptions.MycliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from mycli.infra.yaml_config import YamlConfigResolver, default_config_path

__all__: list[str] = [
    "YamlConfigResolver",
    "default_config_path",
]
