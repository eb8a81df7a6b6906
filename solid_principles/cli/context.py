# solid_principles/cli/context.py
"""
Central CLI context - configuration and logging for every command.

Config Loading Strategy:
    1. Package defaults (solid_principles/config/defaults/default.yaml) - always loaded
    2. User config ($SOLID_CONFIG or .solid/config.yaml) - overrides defaults

Usage:
    from solid_principles.cli.context import CLIContext

    ctx = CLIContext.load()
    print(ctx.config.output.default_variant)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import typer

from solid_principles.cli.ui import ui
from solid_principles.config.loader import (
    ConfigError,
    get_config_source,
    get_user_config_path,
    load_config,
)
from solid_principles.config.schema import SolidConfig
from solid_principles.logging import tags
from solid_principles.logging.logger import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Effective configuration plus where it came from."""

    config: SolidConfig = field(repr=False)
    config_path: Optional[Path] = field(default=None)
    config_source: str = field(default="")
    has_user_config: bool = field(default=False)

    @classmethod
    def load(cls) -> "CLIContext":
        """
        Load merged config, exiting with code 1 if the user file is broken.
        """
        user_path = get_user_config_path()
        try:
            config = load_config()
        except ConfigError as e:
            ui.error(str(e))
            raise typer.Exit(code=1) from e

        return cls(
            config=config,
            config_path=user_path,
            config_source=get_config_source(),
            has_user_config=user_path.exists(),
        )


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the CLI run.

    --verbose always wins; otherwise the configured level applies.
    """
    if verbose:
        configure_logging(logging.DEBUG)
        logger.debug(f"{tags.CLI} Verbose logging enabled")
        return

    configure_logging(CLIContext.load().config.logging.level)


__all__ = ["CLIContext", "setup_logging"]
