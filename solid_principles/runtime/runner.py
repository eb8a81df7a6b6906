# solid_principles/runtime/runner.py
"""
Runner - execute illustration drivers.

run() is the single entry point used by the package API, the Markdown
renderer and the CLI.
"""

from __future__ import annotations

from typing import List, Optional, TextIO, Tuple, Union

from solid_principles.config import load_config
from solid_principles.core import PrincipleExample, Transcript, UnknownVariantError, Variant
from solid_principles.logging import tags
from solid_principles.logging.logger import get_logger

from .registry import get_registry

logger = get_logger(__name__)

BOTH = "both"


def resolve_variants(variant: Union[str, Variant, None]) -> Tuple[Variant, ...]:
    """
    Expand a variant selector into the drivers to run.

    None falls back to the configured default.

    Raises:
        UnknownVariantError: If the selector is not violating, adhering or both
    """
    if variant is None:
        variant = load_config().output.default_variant

    if isinstance(variant, str) and variant.strip().lower() == BOTH:
        return (Variant.VIOLATING, Variant.ADHERING)

    try:
        return (Variant.parse(variant),)
    except UnknownVariantError:
        available = [v.value for v in Variant] + [BOTH]
        raise UnknownVariantError(
            f"Unknown variant: {variant!r}. Available: {available}"
        ) from None


def get_principle(name: str) -> PrincipleExample:
    """Resolve a principle by key, letter or alias."""
    return get_registry().get(name)


def list_principles() -> List[str]:
    """Keys of all registered principles, in S-O-L-I-D order."""
    return get_registry().keys()


def run(
    principle: str,
    variant: Union[str, Variant, None] = None,
    stream: Optional[TextIO] = None,
) -> Transcript:
    """
    Run one principle's driver(s) and return what they wrote.

    Args:
        principle: Key, letter or alias (e.g. "single_responsibility", "S", "srp")
        variant: "violating", "adhering", "both", or None for the configured default
        stream: Optional text stream to echo lines to as they are written

    Raises:
        UnknownPrincipleError: If the principle doesn't resolve
        UnknownVariantError: If the variant selector is invalid

    Examples:
        >>> transcript = run("lsp", "adhering")
        >>> transcript.lines[-1]
        'Total area: 73.27'
    """
    example = get_principle(principle)
    variants = resolve_variants(variant)
    out = Transcript(stream=stream)

    for v in variants:
        if len(variants) > 1:
            out.section(v.value)
        logger.debug(f"{tags.RUNTIME} Running {example.key} ({v.value})")
        example.illustration(v).run(out)

    return out


__all__ = ["run", "resolve_variants", "get_principle", "list_principles", "BOTH"]
