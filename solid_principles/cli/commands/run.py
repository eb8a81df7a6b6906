# solid_principles/cli/commands/run.py
"""
Run command: execute a principle's usage snippet(s).

Usage:
    solid run srp
    solid run open_closed --variant violating
"""

from __future__ import annotations

from typing import Optional

import typer

from solid_principles.cli.ui import ui
from solid_principles.config.loader import ConfigError
from solid_principles.core import SolidError
from solid_principles.logging import tags
from solid_principles.logging.logger import get_logger
from solid_principles.runtime import get_principle, run

logger = get_logger(__name__)


def command(principle: str, variant: Optional[str] = None) -> None:
    try:
        example = get_principle(principle)
        transcript = run(example.key, variant)
    except (SolidError, ConfigError) as e:
        ui.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"{tags.CLI} {example.key} wrote {len(transcript)} line(s)")

    ui.header(f"{example.letter} - {example.title}")
    for line in transcript:
        ui.plain(line)
