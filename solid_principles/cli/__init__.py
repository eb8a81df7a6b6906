# solid_principles/cli/__init__.py
"""
SOLID CLI.

Usage:
    solid list             # The five principles
    solid show srp         # Source of both illustrations
    solid run L            # Run the usage snippets
    solid doc -o SOLID.md  # Whole catalogue as Markdown
    solid config           # Effective configuration
"""

from solid_principles.cli.cli import app

__all__ = ["app"]
