# solid_principles/cli/commands/list_principles.py
"""
List command: show the five principles.

Usage:
    solid list
"""

from __future__ import annotations

from solid_principles.cli.ui import ui
from solid_principles.runtime import get_registry


def command() -> None:
    """Print a table of every registered principle in S-O-L-I-D order."""
    examples = get_registry().list()

    rows = [
        (example.letter, example.key, example.title, example.aliases[0] if example.aliases else "")
        for example in examples
    ]
    ui.table("SOLID Principles", ["", "Key", "Title", "Alias"], rows)
    ui.dim("Run one with: solid run <key|letter|alias>")
