"""Server configuration stored as TOML."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

import tomli_w

from rxserver.core.errors import ConfigError

logger = logging.getLogger(__name__)

_INT_LIMITS = {
    "u16": 0xFFFF,
    "u32": 0xFFFFFFFF,
    "u64": 0xFFFFFFFFFFFFFFFF,
    "usize": 0xFFFFFFFFFFFFFFFF,
}


def _setting(default: Any, kind: str) -> Any:
    if isinstance(default, list):
        return field(default_factory=list, metadata={"kind": kind})
    return field(default=default, metadata={"kind": kind})


def _valid(kind: str, value: Any) -> bool:
    if kind == "bool":
        return isinstance(value, bool)
    if kind in ("str", "opt_str"):
        return isinstance(value, str)
    if kind == "str_list":
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    limit = _INT_LIMITS[kind]
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= limit


def _section_from_dict(cls: type, data: Any, name: str) -> Any:
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse config: section '{name}' must be a table")
    values = {}
    for f in dataclasses.fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _valid(f.metadata["kind"], value):
            raise ConfigError(
                f"Failed to parse config: invalid value for {name}.{f.name}: {value!r}"
            )
        values[f.name] = list(value) if isinstance(value, list) else value
    return cls(**values)


@dataclass
class NetworkConfig:
    """Listening socket settings."""

    listen_address: str = _setting("127.0.0.1", "str")
    port_base: int = _setting(6000, "u16")
    tcp_keepalive: bool = _setting(False, "bool")
    connection_timeout: int = _setting(30, "u64")


@dataclass
class LoggingConfig:
    """Log output settings."""

    level: str = _setting("info", "str")
    file: str | None = _setting(None, "opt_str")
    colored: bool = _setting(True, "bool")
    json: bool = _setting(False, "bool")


@dataclass
class PluginConfig:
    """Plugin loading settings."""

    enabled: bool = _setting(True, "bool")
    search_paths: list[str] = _setting([], "str_list")
    disabled: list[str] = _setting([], "str_list")


@dataclass
class SecurityConfig:
    """Access control settings."""

    access_control: bool = _setting(True, "bool")
    allowed_hosts: list[str] = _setting([], "str_list")
    max_auth_attempts: int = _setting(3, "u32")


@dataclass
class PerformanceConfig:
    """Resource limits and tuning."""

    max_connections: int = _setting(100, "u32")
    buffer_size: int = _setting(8192, "usize")
    request_batching: bool = _setting(True, "bool")


_SECTIONS: dict[str, type] = {
    "network": NetworkConfig,
    "logging": LoggingConfig,
    "plugins": PluginConfig,
    "security": SecurityConfig,
    "performance": PerformanceConfig,
}


@dataclass
class ServerConfig:
    """Complete server configuration."""

    network: NetworkConfig = field(default_factory=NetworkConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    plugins: PluginConfig = field(default_factory=PluginConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerConfig":
        """Build a configuration from parsed TOML; missing keys take defaults."""
        if not isinstance(data, dict):
            raise ConfigError("Failed to parse config: top level must be a table")
        sections = {
            name: _section_from_dict(section_cls, data[name], name)
            for name, section_cls in _SECTIONS.items()
            if name in data
        }
        return cls(**sections)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as nested dicts, leaving out unset values."""
        return {
            name: {k: v for k, v in dataclasses.asdict(getattr(self, name)).items() if v is not None}
            for name in _SECTIONS
        }

    @classmethod
    def load(cls, path: str | PathLike[str]) -> "ServerConfig":
        """Load from a TOML file, writing a default one if the file is missing."""
        path = Path(path)
        logger.info("Loading server configuration from %s", path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Config file %s not found, creating default", path)
            config = cls()
            try:
                config.save(path)
            except ConfigError as err:
                logger.warning("Failed to save default config: %s", err)
            return config
        except (OSError, UnicodeDecodeError) as err:
            raise ConfigError(f"Failed to read config: {err}") from err

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as err:
            raise ConfigError(f"Failed to parse config: {err}") from err
        return cls.from_dict(data)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the configuration as TOML."""
        try:
            content = tomli_w.dumps(self.to_dict())
        except (TypeError, ValueError) as err:
            raise ConfigError(f"Failed to serialize config: {err}") from err
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as err:
            raise ConfigError(f"Failed to write config: {err}") from err