"""Shared pytest fixtures and configuration for the mycli test suite.

Guidelines
----------
* No internet access in any test.
* ``$HOME`` is redirected to a temporary directory so the standard
  discovery path never points at the developer's real config file.
* Configuration backends are faked at the protocol boundary where the
  test is about the CLI, not about YAML parsing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from mycli.core.models import Config


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("COLUMNS", "200")
    return home_dir


@pytest.fixture(autouse=True)
def _reset_mycli_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("mycli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class FakeResolver:
    """In-memory :class:`~mycli.core.protocols.ConfigResolver`."""

    def __init__(
        self,
        config: Config | None = None,
        error: Exception | None = None,
        path: Path = Path("/fake/.mycli.yaml"),
    ) -> None:
        self._config = config
        self._error = error
        self._path = path
        self._used: Path | None = None
        self.calls: list[tuple[str, str]] = []

    @property
    def config_path(self) -> Path | None:
        return self._used

    def load(self, explicit_path: str, app_name: str) -> Config:
        self.calls.append((explicit_path, app_name))
        self._used = Path(explicit_path) if explicit_path else self._path
        if self._error is not None:
            raise self._error
        assert self._config is not None
        return self._config


@pytest.fixture
def fake_resolver_cls() -> type[FakeResolver]:
    return FakeResolver
