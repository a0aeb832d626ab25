"""Shapes with a polymorphic area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Shape:
    """A shape described by a width and a height; a plain shape has no area."""

    width: int = 0
    height: int = 0

    def area(self) -> int:
        """Return the area of the shape, 0 for a generic shape."""
        return 0


@dataclass
class Rectangle(Shape):
    """A rectangle whose area is width times height."""

    def area(self) -> int:
        """Return ``width * height``."""
        return self.width * self.height


@dataclass
class Triangle(Shape):
    """A triangle whose area is half of width times height, in whole units."""

    def area(self) -> int:
        """Return ``width * height / 2``, truncated toward zero."""
        return int(self.width * self.height / 2)