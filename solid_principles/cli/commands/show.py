# solid_principles/cli/commands/show.py
"""
Show command: syntax-highlighted source of an illustration.

Usage:
    solid show srp
    solid show L --variant adhering
"""

from __future__ import annotations

import typer

from solid_principles.cli.context import CLIContext
from solid_principles.cli.ui import ui
from solid_principles.core import SolidError
from solid_principles.docs import source_of
from solid_principles.runtime import get_principle, resolve_variants


def command(principle: str, variant: str = "both") -> None:
    try:
        example = get_principle(principle)
        variants = resolve_variants(variant)
    except SolidError as e:
        ui.error(str(e))
        raise typer.Exit(code=1) from e

    theme = CLIContext.load().config.output.theme

    ui.header(f"{example.letter} - {example.title}", example.summary)
    for v in variants:
        illustration = example.illustration(v)
        ui.section(v.value.capitalize())
        ui.dim(illustration.description)
        for member in illustration.members:
            ui.code(source_of(member), theme=theme)
        ui.print("Usage:", "bold")
        ui.code(source_of(illustration.driver), theme=theme)
