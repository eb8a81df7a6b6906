# solid_principles/cli/cli.py
"""
SOLID CLI - Main application.

Commands:
    solid list       List the five principles
    solid show       Show an illustration's source
    solid run        Run an illustration's usage snippet
    solid doc        Render the whole catalogue as Markdown
    solid config     View effective configuration

NOTE: Commands use lazy loading - each wrapper imports its implementation when invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="solid",
    help="SOLID principles, one violating and one adhering example each. Start with: solid list",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """SOLID principles by example."""
    from solid_principles.cli.context import setup_logging

    setup_logging(verbose=verbose)


@app.command("list")
def list_cmd() -> None:
    """List the five principles."""
    from solid_principles.cli.commands import list_principles as mod

    mod.command()


@app.command("show")
def show(
    principle: str = typer.Argument(..., help="Principle key, letter or alias (e.g. srp, L)."),
    variant: str = typer.Option("both", "--variant", "-V", help="violating, adhering or both."),
) -> None:
    """Show the source of a principle's illustrations."""
    from solid_principles.cli.commands import show as mod

    mod.command(principle=principle, variant=variant)


@app.command("run")
def run(
    principle: str = typer.Argument(..., help="Principle key, letter or alias (e.g. srp, L)."),
    variant: Optional[str] = typer.Option(
        None, "--variant", "-V", help="violating, adhering or both (default from config)."
    ),
) -> None:
    """Run a principle's usage snippet(s) and print their output."""
    from solid_principles.cli.commands import run as mod

    mod.command(principle=principle, variant=variant)


@app.command("doc")
def doc(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file."),
    no_source: bool = typer.Option(False, "--no-source", help="Omit class and snippet source."),
) -> None:
    """Render the catalogue as a Markdown document."""
    from solid_principles.cli.commands import doc as mod

    mod.command(output=output, no_source=no_source)


@app.command("config")
def config(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show config file path."),
) -> None:
    """View effective configuration."""
    from solid_principles.cli.commands import config as mod

    mod.command(show_path=show_path)


if __name__ == "__main__":
    app()
