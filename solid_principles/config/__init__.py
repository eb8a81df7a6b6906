# solid_principles/config/__init__.py
from .loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    get_config_source,
    load_config,
)
from .schema import LoggingConfig, OutputConfig, SolidConfig

__all__ = [
    "SolidConfig",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
    "get_config_source",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
