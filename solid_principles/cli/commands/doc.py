# solid_principles/cli/commands/doc.py
"""
Doc command: render the catalogue as Markdown.

Usage:
    solid doc                     # print to stdout
    solid doc -o SOLID.md         # write to a file
    solid doc --no-source         # statements and output only
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from solid_principles.cli.context import CLIContext
from solid_principles.cli.ui import ui
from solid_principles.docs import render_markdown, write_markdown


def command(output: Optional[Path] = None, no_source: bool = False) -> None:
    show_source = False if no_source else CLIContext.load().config.output.show_source

    if output is None:
        typer.echo(render_markdown(show_source=show_source), nl=False)
        return

    path = write_markdown(output, show_source=show_source)
    ui.success(f"Wrote {path}")
