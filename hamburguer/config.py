"""Application configuration loaded from a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, Union

DEFAULT_CONFIG_PATH = Path("config") / "config.json"

_DATABASE_SETTING = ("database", "url")
_OPENAI_SETTING = ("openai", "api_key")


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass(frozen=True)
class Config:
    """Settings the application needs: database location and API key."""

    database_url: str = ""
    openai_api_key: str = str()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a configuration from a decoded JSON document."""
        database_url = _get_string(data, *_DATABASE_SETTING)
        openai_setting = _get_string(data, *_OPENAI_SETTING)
        return cls(database_url, openai_setting)


def _get_string(data: Mapping[str, Any], *keys: str) -> str:
    value: Any = data
    for key in keys:
        if not isinstance(value, Mapping) or key not in value:
            return ""
        value = value[key]
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def load_config(path: Union[str, PathLike, None] = DEFAULT_CONFIG_PATH) -> Config:
    """Read the JSON configuration file at *path*."""
    config_path = Path(DEFAULT_CONFIG_PATH if path is None else path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {config_path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must hold a JSON object")
    return Config.from_mapping(data)