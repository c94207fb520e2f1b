"""Tests for the core configuration model and fallback policy.

Pure tests: the resolver is an in-memory fake.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mycli.core.config_service import resolve_config
from mycli.core.models import DEFAULT_CONFIG, Config
from mycli.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError


# ---------------------------------------------------------------------------
# Config model
# ---------------------------------------------------------------------------

class TestConfig:
    def test_default_log_level(self) -> None:
        assert DEFAULT_CONFIG.log_level == "warning"

    def test_from_mapping_merges_over_defaults(self) -> None:
        config = Config.from_mapping({"region": "eu"})
        assert config.as_dict() == {"log_level": "warning", "region": "eu"}

    def test_log_level_is_normalised(self) -> None:
        assert Config.from_mapping({"log_level": "ERROR"}).log_level == "error"

    @pytest.mark.parametrize("value", ["loud", 10, None, ["info"]])
    def test_invalid_log_level_rejected(self, value: object) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            Config.from_mapping({"log_level": value})
        assert exc_info.value.hint is not None

    def test_values_are_read_only(self) -> None:
        config = Config.from_mapping({"region": "eu"})
        with pytest.raises(TypeError):
            config.values["region"] = "us"  # type: ignore[index]

    def test_as_dict_returns_a_copy(self) -> None:
        config = Config.from_mapping({"region": "eu"})
        copy = config.as_dict()
        copy["region"] = "us"
        assert config.get("region") == "eu"

    def test_get_default(self) -> None:
        assert DEFAULT_CONFIG.get("missing", 42) == 42


# ---------------------------------------------------------------------------
# resolve_config
# ---------------------------------------------------------------------------

class TestResolveConfig:
    def test_success(self, fake_resolver_cls: type) -> None:
        loaded = Config.from_mapping({"log_level": "info"})
        resolver = fake_resolver_cls(config=loaded)

        resolution = resolve_config(resolver, "", "mycli")

        assert resolution.config == loaded
        assert resolution.error is None
        assert not resolution.used_default
        assert resolution.path == Path("/fake/.mycli.yaml")
        assert resolver.calls == [("", "mycli")]

    @pytest.mark.parametrize(
        "error",
        [
            ConfigNotFoundError("config file not found: x"),
            ConfigParseError("invalid YAML"),
            ConfigValidationError("invalid log_level"),
        ],
    )
    def test_config_errors_fall_back_to_default(
        self, fake_resolver_cls: type, error: Exception,
    ) -> None:
        resolver = fake_resolver_cls(error=error)

        resolution = resolve_config(resolver, "/etc/custom.yaml", "mycli")

        assert resolution.config is DEFAULT_CONFIG
        assert resolution.error is error
        assert resolution.used_default
        assert resolution.path == Path("/etc/custom.yaml")

    def test_other_errors_propagate(self, fake_resolver_cls: type) -> None:
        resolver = fake_resolver_cls(error=RuntimeError("bug"))

        with pytest.raises(RuntimeError, match="bug"):
            resolve_config(resolver, "", "mycli")
