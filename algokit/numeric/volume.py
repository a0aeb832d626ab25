"""Volumes of simple solids."""

from __future__ import annotations

import math


def volume_cube(side: float) -> float:
    """Return the volume of a cube with the given side."""
    return side**3


def volume_cuboid(length: float, width: float, height: float) -> float:
    """Return the volume of a rectangular box."""
    return length * width * height


def volume_cone(base_area: float, height: float) -> float:
    """Return the volume of a cone from its base area and height."""
    return base_area * height / 3.0


def volume_cylinder(radius: float, height: float) -> float:
    """Return the volume of a circular cylinder."""
    return math.pi * radius**2 * height


def volume_sphere(radius: float) -> float:
    """Return the volume of a sphere, 4/3 * pi * r**3."""
    return 4.0 / 3.0 * math.pi * radius**3