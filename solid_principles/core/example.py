"""
PrincipleExample - description of one SOLID illustration.

Each principle module exposes one PrincipleExample. The registry discovers
them; the runtime, the Markdown renderer and the CLI only ever talk to this type.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Tuple

from .exceptions import UnknownVariantError
from .transcript import Transcript


class Variant(str, Enum):
    """Which half of an illustration to use."""

    VIOLATING = "violating"
    ADHERING = "adhering"

    @classmethod
    def parse(cls, value: "str | Variant") -> "Variant":
        if isinstance(value, Variant):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            available = [v.value for v in cls]
            raise UnknownVariantError(
                f"Unknown variant: {value!r}. Available: {available}"
            ) from None


@dataclass(frozen=True)
class Illustration:
    """
    One half of a before/after pairing.

    Examples:
        >>> from solid_principles.principles.single_responsibility import (
        ...     UserManager,
        ...     run_violation,
        ... )
        >>> illustration = Illustration(
        ...     description="One class, three reasons to change",
        ...     members=(UserManager,),
        ...     driver=run_violation,
        ... )
        >>> illustration.members
        (<class 'solid_principles.principles.single_responsibility.UserManager'>,)
    """

    description: str
    """Short prose shown above the code."""

    members: Tuple[Any, ...]
    """Classes and functions whose source makes up the illustration, in reading order."""

    driver: Callable[[Transcript], None]
    """Usage snippet. Writes its observable behaviour to the transcript."""

    def run(self, out: Transcript) -> Transcript:
        self.driver(out)
        return out


@dataclass(frozen=True)
class PrincipleExample:
    """
    A SOLID principle with its violating and adhering illustrations.

    The example is pure data: nothing runs until a driver is invoked.
    """

    key: str
    """Unique name, e.g. 'single_responsibility'."""

    letter: str
    """Letter in the SOLID mnemonic."""

    title: str
    """Human-readable title, e.g. 'Single Responsibility Principle'."""

    summary: str
    """One-paragraph statement of the principle."""

    violation: Illustration
    adherence: Illustration

    aliases: Tuple[str, ...] = field(default_factory=tuple)
    """Extra lookup names, e.g. ('srp',)."""

    def __post_init__(self):
        if len(self.letter) != 1 or self.letter.upper() not in "SOLID":
            raise ValueError(f"Invalid SOLID letter for {self.key!r}: {self.letter!r}")

    def illustration(self, variant: "str | Variant") -> Illustration:
        if Variant.parse(variant) is Variant.VIOLATING:
            return self.violation
        return self.adherence

    def names(self) -> Tuple[str, ...]:
        """All names this example answers to, lower-cased."""
        return (self.key.lower(), self.letter.lower()) + tuple(a.lower() for a in self.aliases)
