# solid_principles/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from solid_principles.cli.ui import ui, console

    ui.header("SOLID")
    ui.error("Unknown principle")
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


class UI:
    """Consistent styling for every command."""

    def print(self, msg: str, style: str = "") -> None:
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def plain(self, msg: str) -> None:
        """Print text verbatim: no markup, no highlighting."""
        console.print(msg, markup=False, highlight=False, soft_wrap=True)

    def header(self, title: str, subtitle: str = "") -> None:
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}", soft_wrap=True)

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}", highlight=False, soft_wrap=True)

    def dim(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def code(self, source: str, theme: str = "monokai") -> None:
        console.print(Syntax(source, "python", theme=theme, line_numbers=False))

    def table(self, title: str, columns: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        table = Table(title=title, show_header=True, header_style="bold")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        console.print(table)


ui = UI()

__all__ = ["ui", "console", "UI"]
