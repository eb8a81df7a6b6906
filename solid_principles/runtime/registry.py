# solid_principles/runtime/registry.py
"""
Principle Registry - central lookup for every SOLID illustration.

Philosophy:
    - Principle modules only declare data (a module-level PrincipleExample)
    - Registry discovers them lazily by scanning packages, on first use
    - Lookup accepts key, letter or alias, case-insensitively
    - Listing always follows the S-O-L-I-D order
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any, Dict, List, Optional, Sequence

from solid_principles.core import DuplicatePrincipleError, PrincipleExample, UnknownPrincipleError
from solid_principles.logging import tags
from solid_principles.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SCAN_PACKAGES = ("solid_principles.principles",)
MNEMONIC = "SOLID"


class PrincipleRegistry:
    """
    Registry of PrincipleExamples.

    Examples:
        >>> registry = PrincipleRegistry.get_global()
        >>> registry.get("srp").title
        'Single Responsibility Principle'
        >>> [e.letter for e in registry.list()]
        ['S', 'O', 'L', 'I', 'D']
    """

    _global_registry: Optional["PrincipleRegistry"] = None

    def __init__(self, scan_packages: Sequence[str] = DEFAULT_SCAN_PACKAGES):
        self.scan_packages = list(scan_packages)
        self._examples: Dict[str, PrincipleExample] = {}
        self._lookup: Dict[str, str] = {}
        self._discovered = False

    @classmethod
    def get_global(cls) -> "PrincipleRegistry":
        """Get the global singleton registry."""
        if cls._global_registry is None:
            cls._global_registry = cls()
        return cls._global_registry

    @classmethod
    def reset_global(cls) -> None:
        """Reset the global registry (useful for testing)."""
        cls._global_registry = None

    def register(self, example: PrincipleExample) -> None:
        """
        Register an example under its key, letter and aliases.

        Re-registering the same object is a no-op.

        Raises:
            DuplicatePrincipleError: If any of its names is already taken by another example
        """
        self._ensure_discovered()

        existing = self._examples.get(example.key)
        if existing is example:
            return

        for name in example.names():
            owner = self._lookup.get(name)
            if owner is not None:
                raise DuplicatePrincipleError(
                    f"Duplicate principle name {name!r}: claimed by "
                    f"{owner!r} and {example.key!r}"
                )

        self._examples[example.key] = example
        for name in example.names():
            self._lookup[name] = example.key
        logger.debug(f"{tags.REGISTRY} Registered principle: {example.key!r}")

    def get(self, name: str) -> PrincipleExample:
        """
        Resolve a principle by key, letter or alias.

        Raises:
            UnknownPrincipleError: If nothing matches; the message lists what is available
        """
        self._ensure_discovered()

        key = self._lookup.get(name.strip().lower())
        if key is None:
            available = ", ".join(self.keys())
            raise UnknownPrincipleError(
                f"Unknown principle: {name!r}. Available: {available}"
            )
        return self._examples[key]

    def list(self) -> List[PrincipleExample]:
        """All examples in mnemonic order."""
        self._ensure_discovered()
        return sorted(self._examples.values(), key=_mnemonic_position)

    def keys(self) -> List[str]:
        return [example.key for example in self.list()]

    def __contains__(self, name: str) -> bool:
        self._ensure_discovered()
        return name.strip().lower() in self._lookup

    def __len__(self) -> int:
        self._ensure_discovered()
        return len(self._examples)

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def _ensure_discovered(self) -> None:
        if self._discovered:
            return

        # Marked first so register() calls made while scanning don't recurse.
        self._discovered = True
        try:
            for package_name in self.scan_packages:
                package = importlib.import_module(package_name)
                self._scan_package(package)
        except Exception:
            # Roll back so the next call rescans.
            self._examples.clear()
            self._lookup.clear()
            self._discovered = False
            raise

        logger.debug(
            f"{tags.REGISTRY} Discovered {len(self._examples)} principle(s): "
            f"{sorted(self._examples)}"
        )

    def _scan_package(self, package: Any) -> None:
        """Scan a package's modules (non-recursive) for PrincipleExamples."""
        package_path = getattr(package, "__path__", None)
        if not package_path:
            self._scan_module(package)
            return

        for _, modname, ispkg in pkgutil.iter_modules(package_path, prefix=f"{package.__name__}."):
            if ispkg:
                continue
            self._scan_module(importlib.import_module(modname))

    def _scan_module(self, module: Any) -> None:
        for name in dir(module):
            if name.startswith("_"):
                continue
            obj = getattr(module, name)
            if isinstance(obj, PrincipleExample):
                self.register(obj)


def _mnemonic_position(example: PrincipleExample) -> tuple:
    return (MNEMONIC.index(example.letter.upper()), example.key)


def get_registry() -> PrincipleRegistry:
    return PrincipleRegistry.get_global()


__all__ = ["PrincipleRegistry", "get_registry"]
