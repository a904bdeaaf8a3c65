"""Typed configuration loading and access.

An optional ``pubctx.toml`` supplies defaults for the CLI flags so a
repository can pin its package identity once:

    package = "@scope/name"
    registry = "https://registry.npmjs.org"
    tag_prefix = "v"

    [registry_client]
    tool = "bun"
    timeout = 60.0
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_raw_str, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_REGISTRY_TIMEOUT_SECONDS",
    "DEFAULT_TAG_PREFIX",
    "Config",
    "ConfigError",
    "RegistryClientConfig",
    "RegistryTool",
    "load_config",
]

CONFIG_FILENAME = "pubctx.toml"
DEFAULT_TAG_PREFIX = "v"
DEFAULT_REGISTRY_TIMEOUT_SECONDS = 60.0

RegistryTool = Literal["bun", "npm"]
_REGISTRY_TOOLS: tuple[RegistryTool, ...] = ("bun", "npm")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RegistryClientConfig:
    """Which CLI answers "latest version" queries, and how long it may take."""

    tool: RegistryTool = "bun"
    timeout: float = DEFAULT_REGISTRY_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    package: str | None = None
    registry: str | None = None
    tag_prefix: str = DEFAULT_TAG_PREFIX
    registry_client: RegistryClientConfig = field(default_factory=RegistryClientConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value is present but not acceptable.
        """
        for key in ("package", "registry", "registry_url", "tag_prefix"):
            _check_str(data, key, key)
        if "registry_client" in data and get_table(data, "registry_client") is None:
            raise ValueError("registry_client must be a table")

        client: StrDict = get_table(data, "registry_client") or {}
        _check_str(client, "tool", "registry_client.tool")
        if "timeout" in client and get_float(client, "timeout") is None:
            raise ValueError("registry_client.timeout must be a number")

        tool = get_str(client, "tool") or "bun"
        if tool not in _REGISTRY_TOOLS:
            raise ValueError(f"registry_client.tool must be one of {', '.join(_REGISTRY_TOOLS)}")

        timeout = get_float(client, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError("registry_client.timeout must be positive")

        tag_prefix = get_raw_str(data, "tag_prefix")

        return cls(
            package=get_str(data, "package"),
            registry=get_str(data, "registry") or get_str(data, "registry_url"),
            tag_prefix=DEFAULT_TAG_PREFIX if tag_prefix is None else tag_prefix,
            registry_client=RegistryClientConfig(
                tool=cast(RegistryTool, tool),
                timeout=timeout or DEFAULT_REGISTRY_TIMEOUT_SECONDS,
            ),
        )


def _check_str(table: Mapping[str, object], key: str, label: str) -> None:
    if key in table and not isinstance(table[key], str):
        raise ValueError(f"{label} must be a string")


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling import and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to pubctx.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
