"""Angle unit conversions and the ReLU activation."""

from __future__ import annotations

import math


def radian_to_degree(radian: float) -> float:
    """Convert an angle from radians to degrees."""
    return radian * (180 / math.pi)


def degree_to_radian(degree: float) -> float:
    """Convert an angle from degrees to radians."""
    return degree * (math.pi / 180)


def radian_to_gradian(radian: float) -> float:
    """Convert an angle from radians to gradians."""
    return radian * (200 / math.pi)


def relu(n: float) -> float:
    """Return ``n`` if it is positive, otherwise 0.0."""
    return n if n > 0.0 else 0.0