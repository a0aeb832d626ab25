"""Root finding: bisection on a fixed equation and the quadratic formula."""

from __future__ import annotations

import math

_TOLERANCE = 0.01


def equation(x: float) -> float:
    """Return ``10 - x * x``, the function whose root bisection looks for."""
    return 10 - x * x


def bisection(a: float, b: float) -> float:
    """Approximate a root of :func:`equation` inside ``[a, b]``.

    The interval is halved until it is narrower than 0.01. Raises ValueError
    if the function does not change sign between ``a`` and ``b``.
    """
    if equation(a) * equation(b) >= 0:
        raise ValueError("equation(a) and equation(b) must have opposite signs")

    c = a
    while b - a >= _TOLERANCE:
        c = (a + b) / 2
        value = equation(c)
        if value == 0.0:
            break
        if value * equation(a) < 0:
            b = c
        else:
            a = c
    return c


def quadratic_formula(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the two distinct real roots of ``a*x**2 + b*x + c``.

    An empty tuple is returned when ``a`` is zero or the discriminant is
    zero. Raises ValueError when the roots are imaginary.
    """
    if a == 0:
        return ()
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        return ()
    raise ValueError("the roots are imaginary")