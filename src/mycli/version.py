"""Build identity for mycli.

Release pipelines stamp the build by generating ``mycli/_build_info.py``
with two string constants::

    VERSION = "1.4.0"
    BUILD_TIME = "2026-10-19T08:00:00Z"

When that module is absent (source checkouts, editable installs) the
development defaults below are used.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass

NAME: str = "mycli"
__version__: str = "dev"
__build_time__: str = "unknown"

_GENERATED_MODULE = "mycli._build_info"


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Name, version and build timestamp of the running binary."""

    name: str
    version: str
    build_time: str

    @property
    def version_string(self) -> str:
        """Version as shown by ``mycli --version``."""
        return f"{self.version} (built at {self.build_time})"


def get_build_info() -> BuildInfo:
    """Return the stamped build info, or the development defaults."""
    try:
        generated = importlib.import_module(_GENERATED_MODULE)
    except ModuleNotFoundError as exc:
        if exc.name != _GENERATED_MODULE:
            raise
        return BuildInfo(name=NAME, version=__version__, build_time=__build_time__)

    return BuildInfo(
        name=NAME,
        version=str(getattr(generated, "VERSION", __version__)),
        build_time=str(getattr(generated, "BUILD_TIME", __build_time__)),
    )
