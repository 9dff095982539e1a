"""Visitor pattern: area and perimeter computed by visitors over shapes."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """An element that accepts a shape visitor."""

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> float:
        """Dispatch to the visitor method for this shape and return its result."""


@dataclass
class Circle(Shape):
    radius: float = 1.0

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_circle(self)


@dataclass
class Square(Shape):
    side: float

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_square(self)


@dataclass
class Rectangle(Shape):
    length: float
    width: float

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_rectangle(self)


class ShapeVisitor(ABC):
    """An operation defined separately for each kind of shape."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> float:
        """Handle a circle."""

    @abstractmethod
    def visit_square(self, square: Square) -> float:
        """Handle a square."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> float:
        """Handle a rectangle."""


class AreaVisitor(ShapeVisitor):
    """Computes the area of the last shape visited."""

    def __init__(self) -> None:
        self.area = 0.0

    def visit_circle(self, circle: Circle) -> float:
        self.area = math.pi * circle.radius**2
        return self.area

    def visit_square(self, square: Square) -> float:
        self.area = square.side**2
        return self.area

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        self.area = rectangle.length * rectangle.width
        return self.area


class PerimeterVisitor(ShapeVisitor):
    """Computes the perimeter of the last shape visited."""

    def __init__(self) -> None:
        self.perimeter = 0.0

    def visit_circle(self, circle: Circle) -> float:
        self.perimeter = 2 * math.pi * circle.radius
        return self.perimeter

    def visit_square(self, square: Square) -> float:
        self.perimeter = 4 * square.side
        return self.perimeter

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        self.perimeter = 2 * rectangle.length + 2 * rectangle.width
        return self.perimeter


def main(argv: list[str] | None = None) -> int:
    """Print the area and perimeter of a circle, a square and a rectangle."""
    shapes = (Circle(4), Square(20), Rectangle(5, 3))
    area_visitor = AreaVisitor()
    perimeter_visitor = PerimeterVisitor()
    for shape in shapes:
        sys.stdout.write(f"{shape.accept(area_visitor):g}\n")
        sys.stdout.write(f"{shape.accept(perimeter_visitor):g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())