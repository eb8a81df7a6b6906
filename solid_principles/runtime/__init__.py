# solid_principles/runtime/__init__.py
"""
Runtime - discovery and execution of the SOLID illustrations.

Public API:
    - run: Run a principle's violating and/or adhering driver
    - get_principle: Resolve a principle by key, letter or alias
    - list_principles: Keys of every principle, in S-O-L-I-D order
    - PrincipleRegistry: The registry behind all of the above

Examples:
    >>> from solid_principles.runtime import run
    >>> print(run("D", "adhering").text())
    Email to alice@example.com: Your order has shipped
    SMS to +1-555-0100: Your order has shipped
"""

from .registry import PrincipleRegistry, get_registry
from .runner import BOTH, get_principle, list_principles, resolve_variants, run

__all__ = [
    # Registry
    "PrincipleRegistry",
    "get_registry",
    # Runner
    "run",
    "resolve_variants",
    "get_principle",
    "list_principles",
    "BOTH",
]
