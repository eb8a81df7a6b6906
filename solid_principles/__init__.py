"""
SOLID Principles - the five object-oriented design principles, by example.

Each principle ships a class design that violates it, one that adheres to
it, and a short usage snippet exercising both. The snippets only write lines
of text; nothing is persisted and nothing runs concurrently.

Quick Start:
    >>> from solid_principles import run
    >>> print(run("L", "adhering").text())
    RectangleShape area: 20.00
    SquareShape area: 25.00
    Circle area: 28.27
    Total area: 73.27

Public API:
    Core Types:
        - PrincipleExample: A principle with both illustrations
        - Illustration: Classes + usage snippet
        - Variant: violating | adhering
        - Transcript: What a snippet wrote

    Runtime:
        - run: Run one principle's snippet(s)
        - get_principle: Resolve by key, letter or alias
        - list_principles: Keys in S-O-L-I-D order

    Docs:
        - render_markdown: The whole catalogue as a Markdown document

Architecture:
    solid_principles/
    ├── core/          # Types and exceptions
    ├── principles/    # One module per principle
    ├── runtime/       # Registry and runner
    ├── docs/          # Markdown rendering
    ├── config/        # Layered YAML config (pydantic-validated)
    ├── logging/       # Logger setup
    └── cli/           # `solid` command
"""

__version__ = "0.1.0"

from solid_principles.core import (
    DuplicatePrincipleError,
    Illustration,
    PrincipleExample,
    SolidError,
    Transcript,
    UnknownPrincipleError,
    UnknownVariantError,
    Variant,
)
from solid_principles.docs import render_markdown, write_markdown
from solid_principles.runtime import (
    PrincipleRegistry,
    get_principle,
    get_registry,
    list_principles,
    run,
)

__all__ = [
    # Version
    "__version__",
    # Core Types
    "PrincipleExample",
    "Illustration",
    "Variant",
    "Transcript",
    # Core Exceptions
    "SolidError",
    "UnknownPrincipleError",
    "DuplicatePrincipleError",
    "UnknownVariantError",
    # Runtime
    "run",
    "get_principle",
    "list_principles",
    "get_registry",
    "PrincipleRegistry",
    # Docs
    "render_markdown",
    "write_markdown",
]
