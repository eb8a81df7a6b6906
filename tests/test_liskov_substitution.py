# tests/test_liskov_substitution.py
"""
Tests for the Liskov Substitution illustration (shapes + factory).
"""

import math

import pytest

from solid_principles.core import UnknownVariantError
from solid_principles.principles.liskov_substitution import (
    Circle,
    Rectangle,
    RectangleShape,
    Shape,
    Square,
    SquareShape,
    create_shape,
    resize,
    run_adherence,
    run_violation,
    total_area,
)

pytestmark = pytest.mark.tier1


def test_square_of_side_five_has_area_25():
    assert SquareShape(5).area() == 25


def test_circle_of_radius_three_has_area_pi_times_nine():
    assert Circle(3).area() == math.pi * 9


def test_rectangle_area():
    assert RectangleShape(5, 4).area() == 20


def test_resize_rectangle_keeps_its_promise():
    assert resize(Rectangle(2, 3), 5, 4) == 20


def test_resize_square_breaks_the_rectangle_contract():
    square = Square(2)
    assert isinstance(square, Rectangle)
    assert resize(square, 5, 4) == 16


def test_base_shape_area_is_a_placeholder():
    with pytest.raises(NotImplementedError, match="Shape"):
        Shape().area()


def test_factory_builds_shapes():
    assert isinstance(create_shape("circle", radius=1), Circle)
    assert create_shape("square", side=5).area() == 25
    assert create_shape("rectangle", width=2, height=3).area() == 6


def test_factory_rejects_unknown_variant():
    with pytest.raises(UnknownVariantError, match="hexagon"):
        create_shape("hexagon", side=1)


def test_every_shape_substitutes_for_the_base():
    shapes = [RectangleShape(5, 4), SquareShape(5), Circle(3)]
    assert total_area(shapes) == pytest.approx(45 + math.pi * 9)


def test_violation_driver_exposes_wrong_area(out):
    run_violation(out)

    assert out.lines == [
        "Rectangle: expected area 20, got 20",
        "Square: expected area 20, got 16",
    ]


def test_adherence_driver_output(out):
    run_adherence(out)

    assert out.lines == [
        "RectangleShape area: 20.00",
        "SquareShape area: 25.00",
        "Circle area: 28.27",
        "Total area: 73.27",
    ]
