"""Taylor-series cosine and finite-difference derivatives."""

from __future__ import annotations

import math
from collections.abc import Callable

Function = Callable[[float], float]


def factorial(n: int) -> int:
    """Return ``n!``; raises ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("factorial is only defined for non-negative integers")
    return math.factorial(n)


def cosine(angle: float, iterations: int = 4) -> float:
    """Approximate cos(angle) with the Taylor series up to term ``iterations``."""
    return sum(
        (-1) ** n * angle ** (2 * n) / factorial(2 * n) for n in range(iterations + 1)
    )


def derivative(f: Function, x: float, h: float = 1e-5) -> float:
    """Approximate f'(x) with a forward difference of step ``h``."""
    return (f(x + h) - f(x)) / h


def poly_derivative(x: float, n: int) -> float:
    """Return the derivative of ``x ** n``, that is ``n * x ** (n - 1)``."""
    return n * x ** (n - 1)


def sum_derivative(f: Function, h: Function, x: float) -> float:
    """Approximate the derivative of ``f + h`` at ``x``."""
    return derivative(f, x) + derivative(h, x)


def product_derivative(f: Function, h: Function, x: float) -> float:
    """Approximate the derivative of ``f * h`` at ``x`` by the product rule."""
    return derivative(f, x) * h(x) + f(x) * derivative(h, x)


def chain_derivative(f: Function, g: Function, x: float) -> float:
    """Approximate the derivative of ``g(f(x))`` at ``x`` by the chain rule."""
    return derivative(g, f(x)) * derivative(f, x)