# solid_principles/core/__init__.py
"""
Core types shared by every illustration.

Public API:
    - PrincipleExample: A principle with its violating/adhering illustrations
    - Illustration: One half of a pairing (classes + driver)
    - Variant: violating | adhering
    - Transcript: Output stream drivers write to
    - Exceptions: Standard error hierarchy
"""

from .example import Illustration, PrincipleExample, Variant
from .exceptions import (
    DuplicatePrincipleError,
    SolidError,
    UnknownPrincipleError,
    UnknownVariantError,
)
from .transcript import Transcript

__all__ = [
    # Types
    "PrincipleExample",
    "Illustration",
    "Variant",
    "Transcript",
    # Exceptions
    "SolidError",
    "UnknownPrincipleError",
    "DuplicatePrincipleError",
    "UnknownVariantError",
]
