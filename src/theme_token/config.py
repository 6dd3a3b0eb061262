"""
Configuration for theme-token.

Settings can be loaded from YAML files, dictionaries or ``THEME_TOKEN_*``
environment variables, or constructed programmatically.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from theme_token.models import THEME_TOKEN_SCHEMA_URL
from theme_token.parser import DEFAULT_THEME_NAME
from theme_token.transform import REGISTRY_BASE_URL
from theme_token.variables import MAX_REFERENCE_DEPTH

ENV_PREFIX = "THEME_TOKEN_"

CONFIG_SEARCH_PATHS: list[Path] = [
    Path("theme-token.yaml"),
    Path.home() / ".config" / "theme-token" / "config.yaml",
]


@dataclass
class ThemeTokenConfig:
    """
    Settings shared by the CLI and library callers.

    Example YAML:
        default_theme_name: My Theme
        registry_base_url: https://themetoken.dev/r/themes
        max_reference_depth: 32
        json_indent: 2
        log_level: WARNING
    """

    default_theme_name: str = DEFAULT_THEME_NAME  # Name for parsed CSS without --name
    schema_url: str = THEME_TOKEN_SCHEMA_URL
    registry_base_url: str = REGISTRY_BASE_URL
    max_reference_depth: int = MAX_REFERENCE_DEPTH  # var() chain limit
    json_indent: int = 2
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThemeTokenConfig:
        """Create config from a dictionary.

        Raises:
            ValueError: If *data* is not a mapping or an integer field
                cannot be converted.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got: {type(data).__name__}")

        defaults = cls()
        return cls(
            default_theme_name=data.get("default_theme_name", defaults.default_theme_name),
            schema_url=data.get("schema_url", defaults.schema_url),
            registry_base_url=data.get("registry_base_url", defaults.registry_base_url),
            max_reference_depth=_int_field(
                data, "max_reference_depth", defaults.max_reference_depth
            ),
            json_indent=_int_field(data, "json_indent", defaults.json_indent),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> ThemeTokenConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> ThemeTokenConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(
        cls,
        base: ThemeTokenConfig | None = None,
        environ: dict[str, str] | None = None,
    ) -> ThemeTokenConfig:
        """Overlay ``THEME_TOKEN_<FIELD>`` environment variables onto *base*."""
        env = os.environ if environ is None else environ
        data = (base or cls()).to_dict()
        for key in data:
            value = env.get(f"{ENV_PREFIX}{key.upper()}")
            if value is not None:
                data[key] = value
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "default_theme_name": self.default_theme_name,
            "schema_url": self.schema_url,
            "registry_base_url": self.registry_base_url,
            "max_reference_depth": self.max_reference_depth,
            "json_indent": self.json_indent,
            "log_level": self.log_level,
        }


def _int_field(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got: {value!r}") from None


def find_config_file(paths: list[Path] | None = None) -> Path | None:
    """Return the first existing config file in the search paths."""
    for path in paths if paths is not None else CONFIG_SEARCH_PATHS:
        if path.is_file():
            return path
    return None


def load_config(path: Path | None = None) -> ThemeTokenConfig:
    """Load config from *path* (or the search paths), then apply env overrides."""
    config_path = path or find_config_file()
    base = ThemeTokenConfig.from_yaml(config_path) if config_path else ThemeTokenConfig()
    return ThemeTokenConfig.from_env(base)
