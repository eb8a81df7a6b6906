# solid_principles/config/schema.py
"""
Configuration schema for the catalogue.

This is the SINGLE source of truth for configuration.

Schema hierarchy:
- SolidConfig: The main config consumed by the runtime and CLI
- LoggingConfig: Logging settings
- OutputConfig: How examples are run and shown
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from solid_principles.logging.logger import resolve_level


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING", description="Logging level name")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        resolve_level(v)
        return v.upper()


class OutputConfig(BaseModel):
    """
    How examples are run and displayed.

    Example YAML:
        output:
          default_variant: both
          show_source: true
          theme: monokai
    """

    default_variant: Literal["violating", "adhering", "both"] = Field(
        default="both",
        description="Which driver(s) `run` executes when no variant is given",
    )
    show_source: bool = Field(
        default=True, description="Include class source in rendered documents"
    )
    theme: str = Field(default="monokai", description="Pygments theme for `show`")

    model_config = ConfigDict(extra="forbid")


class SolidConfig(BaseModel):
    """
    Top-level configuration.

    Examples:
        >>> config = SolidConfig()
        >>> config.output.default_variant
        'both'
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="forbid")
