"""Configuration for bacon-mcp.

Settings are merged from, lowest priority first: built-in defaults, the user
file ``~/.config/bacon-mcp/config.yaml``, ``./bacon-mcp.yaml`` and
``BACON_MCP_*`` environment variables (``__`` separates nested keys, e.g.
``BACON_MCP_CARGO__TIMEOUT_SECONDS=120``). A file given with ``--config``
overrides all of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from bacon_mcp.exceptions import ConfigError
from bacon_mcp.logging import get_logger

__all__ = [
    "BaconConfig",
    "CargoConfig",
    "load_config",
    "get_user_config_path",
    "PROJECT_CONFIG_FILENAME",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "bacon-mcp.yaml"


class CargoConfig(BaseModel):
    """How cargo is invoked.

    Attributes:
        binary: Executable used for every invocation (default: cargo).
        timeout_seconds: Wall-clock limit per invocation. None or a
            non-positive value disables it.
        nightly_toolchain: Toolchain selector for tools that only run on
            nightly (cargo-udeps).
        env: Variables added to the environment of every invocation.
    """

    binary: str = "cargo"
    timeout_seconds: float | None = Field(default=600.0)
    nightly_toolchain: str = "+nightly"
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("binary")
    @classmethod
    def check_binary_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cargo binary must not be empty")
        return v

    @field_validator("nightly_toolchain")
    @classmethod
    def check_toolchain_prefix(cls, v: str) -> str:
        if not v.startswith("+"):
            raise ValueError("toolchain selector must start with '+'")
        return v

    @property
    def effective_timeout(self) -> float | None:
        """Timeout to hand to the runner, None when disabled."""
        if self.timeout_seconds is None or self.timeout_seconds <= 0:
            return None
        return self.timeout_seconds


def _read_yaml_mapping(path: Path | None) -> dict[str, Any]:
    """Top-level mapping of a YAML file; empty when the file is absent."""
    if path is None or not path.exists():
        return {}
    try:
        loaded = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(
            message=f"Invalid YAML in {path}: {e}", field=None, value=None
        ) from e

    if loaded is None:
        logger.warning("Config file %s is empty, using defaults.", path)
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            message=f"Config file {path} must contain a mapping",
            field=None,
            value=loaded,
        )
    return loaded


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source backed by one YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._data = _read_yaml_mapping(yaml_file)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


class BaconConfig(BaseSettings):
    """All bacon-mcp settings."""

    model_config = SettingsConfigDict(
        env_prefix="BACON_MCP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    cargo: CargoConfig = Field(default_factory=CargoConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, Path.cwd() / PROJECT_CONFIG_FILENAME),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Location of the per-user config file."""
    return Path.home() / ".config" / "bacon-mcp" / "config.yaml"


def load_config(config_path: Path | None = None) -> BaconConfig:
    """Build the merged configuration.

    Args:
        config_path: Explicit YAML file whose values beat every other
            source.

    Raises:
        ConfigError: The file is missing or malformed, or a value fails
            validation. ``field`` names the dotted path of the first bad
            value.
    """
    if config_path is not None and not config_path.exists():
        raise ConfigError(
            message=f"Config file not found: {config_path}",
            field=None,
            value=str(config_path),
        )

    try:
        if config_path is None:
            return BaconConfig()
        return BaconConfig(**_read_yaml_mapping(config_path))
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigError(
            message=f"Invalid configuration: {first['msg']}",
            field=".".join(str(part) for part in first["loc"]),
            value=first.get("input"),
        ) from e
