# solid_principles/principles/liskov_substitution.py
"""
Liskov Substitution Principle.

Objects of a subclass must be usable wherever the base class is expected,
without the caller noticing.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List

from solid_principles.core import Illustration, PrincipleExample, Transcript, UnknownVariantError

# =============================================================================
# Violating
# =============================================================================


class Rectangle:
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(Rectangle):
    """Keeps its sides equal, so it quietly breaks Rectangle's setters."""

    def __init__(self, side: float):
        super().__init__(side, side)

    def set_width(self, width: float) -> None:
        self.width = width
        self.height = width

    def set_height(self, height: float) -> None:
        self.width = height
        self.height = height


def resize(rect: Rectangle, width: float, height: float) -> float:
    """Caller written against Rectangle: expects area == width * height afterwards."""
    rect.set_width(width)
    rect.set_height(height)
    return rect.area()


def run_violation(out: Transcript) -> None:
    for shape in (Rectangle(2, 3), Square(2)):
        area = resize(shape, 5, 4)
        out.write(f"{type(shape).__name__}: expected area 20, got {area:g}")


# =============================================================================
# Adhering
# =============================================================================


class Shape:
    def area(self) -> float:
        raise NotImplementedError(f"{type(self).__name__} must implement area()")


class RectangleShape(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class SquareShape(Shape):
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side**2


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2


SHAPES: Dict[str, Callable[..., Shape]] = {
    "rectangle": RectangleShape,
    "square": SquareShape,
    "circle": Circle,
}


def available_shapes() -> List[str]:
    return sorted(SHAPES)


def create_shape(kind: str, **dimensions: float) -> Shape:
    """
    Factory for shapes.

    Examples:
        >>> create_shape("square", side=5).area()
        25

    Raises:
        UnknownVariantError: If `kind` is not a known shape
    """
    try:
        factory = SHAPES[kind]
    except KeyError:
        raise UnknownVariantError(
            f"Unknown shape: {kind!r}. Available: {available_shapes()}"
        ) from None
    return factory(**dimensions)


def total_area(shapes: List[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


def run_adherence(out: Transcript) -> None:
    shapes = [
        create_shape("rectangle", width=5, height=4),
        create_shape("square", side=5),
        create_shape("circle", radius=3),
    ]
    for shape in shapes:
        out.write(f"{type(shape).__name__} area: {shape.area():.2f}")
    out.write(f"Total area: {total_area(shapes):.2f}")


EXAMPLE = PrincipleExample(
    key="liskov_substitution",
    letter="L",
    title="Liskov Substitution Principle",
    summary=(
        "Subtypes must be substitutable for their base types. Code that works "
        "with a base class must keep working, unchanged, with any subclass."
    ),
    violation=Illustration(
        description="Square inherits Rectangle's setters but cannot honour them, so resize() gives the wrong area.",
        members=(Rectangle, Square, resize),
        driver=run_violation,
    ),
    adherence=Illustration(
        description="Every Shape only promises area(); each subclass keeps that promise.",
        members=(Shape, RectangleShape, SquareShape, Circle, create_shape),
        driver=run_adherence,
    ),
    aliases=("lsp", "liskov"),
)
