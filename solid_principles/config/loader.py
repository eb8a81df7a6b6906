# solid_principles/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (solid_principles/config/defaults/default.yaml) - always loaded
    2. User config ($SOLID_CONFIG, else ./.solid/config.yaml) - overrides defaults

The result is validated by SolidConfig, so callers never need fallback logic.

Usage:
    from solid_principles.config.loader import load_config

    config = load_config()
    config.output.default_variant
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from solid_principles.config.schema import SolidConfig
from solid_principles.logging import tags
from solid_principles.logging.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "SOLID_CONFIG"
DEFAULTS_KEY = "solid"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Paths
# =============================================================================


def get_defaults_path() -> Path:
    return Path(__file__).parent / "defaults" / "default.yaml"


def get_user_config_path() -> Path:
    """User config location: $SOLID_CONFIG if set, else ./.solid/config.yaml."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / ".solid" / "config.yaml"


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{tags.CONFIG} Loaded config from {p}")
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence. Nested dicts are merged
    recursively; lists are replaced entirely.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_defaults() -> Dict[str, Any]:
    """Load package defaults, unwrapped from the top-level `solid:` key."""
    raw = load_yaml(get_defaults_path())
    return raw.get(DEFAULTS_KEY, raw)


def load_user_config(path: Optional[Union[str, Path]] = None) -> Optional[Dict[str, Any]]:
    """
    Load user overrides.

    An explicit path must exist; the implicit location is optional.
    """
    if path is not None:
        return load_yaml(path)

    user_path = get_user_config_path()
    if not user_path.exists():
        logger.debug(f"{tags.CONFIG} No user config at {user_path}")
        return None
    return load_yaml(user_path)


def load_config_dict(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Merged defaults + user overrides, unvalidated."""
    defaults = load_defaults()
    user_config = load_user_config(path)

    if user_config is None:
        logger.debug(f"{tags.CONFIG} Using defaults only")
        return defaults

    # Accept user files that copied the defaults layout verbatim.
    if set(user_config) == {DEFAULTS_KEY}:
        user_config = user_config[DEFAULTS_KEY] or {}
        if not isinstance(user_config, dict):
            source = Path(path) if path is not None else get_user_config_path()
            raise ConfigParseError(
                f"Config {DEFAULTS_KEY!r} section must be a mapping (dict)", path=source
            )

    return deep_merge(defaults, user_config)


def load_config(path: Optional[Union[str, Path]] = None) -> SolidConfig:
    """
    Load the complete, validated configuration.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If a file is not valid YAML or not a mapping
        ConfigValidationError: If the merged config doesn't match SolidConfig
    """
    data = load_config_dict(path)
    source = Path(path) if path is not None else get_user_config_path()

    try:
        return SolidConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=source) from e


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Human-readable description of where config comes from. Used by the CLI."""
    user_path = Path(path) if path is not None else get_user_config_path()

    if user_path.exists():
        return f"{user_path} (overriding defaults)"
    return f"{get_defaults_path()} (package defaults)"


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_config",
    "load_config_dict",
    "load_defaults",
    "load_user_config",
    "load_yaml",
    "deep_merge",
    "get_config_source",
    "get_user_config_path",
]
