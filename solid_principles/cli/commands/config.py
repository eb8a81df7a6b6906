# solid_principles/cli/commands/config.py
"""
Configuration command.

Usage:
    solid config           # Show effective config
    solid config --path    # Show where config is loaded from
"""

from __future__ import annotations

import yaml

from solid_principles.cli.context import CLIContext
from solid_principles.cli.ui import console, ui
from solid_principles.logging.logger import get_logger

logger = get_logger(__name__)


def command(show_path: bool = False) -> None:
    ctx = CLIContext.load()

    if show_path:
        ui.plain(str(ctx.config_path))
        if not ctx.has_user_config:
            ui.dim("(not present, package defaults in use)")
        return

    ui.header("Configuration", ctx.config_source)
    text = yaml.safe_dump(ctx.config.model_dump(), sort_keys=False)
    console.print(text, markup=False, highlight=False)
