"""Small calculators: speed from distance and time, a running total, products."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Motion:
    """A distance travelled in a given time."""

    distance: int = 0
    time: int = 0


@dataclass
class SpeedCalculation(Motion):
    """Motion that can report its average speed."""

    def speed(self) -> int:
        """Return ``distance / time`` in whole units, truncated toward zero."""
        if self.time == 0:
            raise ZeroDivisionError("time must not be zero")
        quotient = abs(self.distance) // abs(self.time)
        return quotient if (self.distance >= 0) == (self.time > 0) else -quotient


class Accumulator:
    """A running total that numbers can be added to."""

    def __init__(self, initial: int = 0) -> None:
        self._total = initial

    def add(self, number: int) -> None:
        """Add ``number`` to the total."""
        self._total += number

    def total(self) -> int:
        """Return the current total."""
        return self._total


def multiply(*args: int) -> int:
    """Multiply one to three numbers; a single number is squared."""
    if not 1 <= len(args) <= 3:
        raise TypeError("multiply takes one, two or three numbers")
    if len(args) == 1:
        return args[0] * args[0]
    result = 1
    for value in args:
        result *= value
    return result