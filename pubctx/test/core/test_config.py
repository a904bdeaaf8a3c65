"""Tests for pubctx.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pubctx.core.config import (
    DEFAULT_REGISTRY_TIMEOUT_SECONDS,
    Config,
    RegistryClientConfig,
    load_config,
)
from pubctx.core.result import Err, Ok


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.package is None
        assert config.registry is None
        assert config.tag_prefix == "v"
        assert config.registry_client == RegistryClientConfig(
            tool="bun", timeout=DEFAULT_REGISTRY_TIMEOUT_SECONDS
        )

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.tag_prefix = "x"  # type: ignore[misc]


class TestFromDict:
    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "package": "@scope/pkg",
                "registry": "https://registry.npmjs.org",
                "tag_prefix": "release-",
                "registry_client": {"tool": "npm", "timeout": 5},
            }
        )
        assert config.package == "@scope/pkg"
        assert config.registry == "https://registry.npmjs.org"
        assert config.tag_prefix == "release-"
        assert config.registry_client.tool == "npm"
        assert config.registry_client.timeout == 5.0

    def test_registry_url_alias(self) -> None:
        config = Config.from_dict({"registry_url": "https://npm.pkg.github.com"})
        assert config.registry == "https://npm.pkg.github.com"

    def test_empty_tag_prefix_is_kept(self) -> None:
        assert Config.from_dict({"tag_prefix": ""}).tag_prefix == ""

    def test_unknown_tool_rejected(self) -> None:
        with pytest.raises(ValueError, match="registry_client.tool"):
            Config.from_dict({"registry_client": {"tool": "yarn"}})

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            Config.from_dict({"registry_client": {"timeout": 0}})

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({"registry_client": "x"}, "registry_client must be a table"),
            ({"registry_client": {"tool": 5}}, "registry_client.tool must be a string"),
            ({"registry_client": {"timeout": "fast"}}, "registry_client.timeout must be a number"),
            ({"registry_client": {"timeout": True}}, "registry_client.timeout must be a number"),
            ({"tag_prefix": 1}, "tag_prefix must be a string"),
            ({"package": ["a"]}, "package must be a string"),
        ],
    )
    def test_wrong_type_rejected(self, data: dict[str, object], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            Config.from_dict(data)


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "pubctx.toml"
        path.write_text('package = "pkg"\nregistry = "https://r.example"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.package == "pkg"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "pubctx.toml"
        path.write_text("package = \n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "pubctx.toml"
        path.write_text('[registry_client]\ntool = "pip"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_wrong_type_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "pubctx.toml"
        path.write_text('registry_client = "x"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert result.error.message == (
            "Invalid config structure: registry_client must be a table"
        )
