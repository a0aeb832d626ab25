"""Greedy solution to the fractional knapsack problem."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a size and the profit it brings."""

    size: int
    profit: int

    def profit_per_unit(self) -> float:
        """Return the profit per unit of size."""
        return self.profit / self.size


def fractional_knapsack(
    capacity: float, items: Iterable[Item]
) -> tuple[float, list[tuple[float, float]]]:
    """Fill ``capacity`` greedily by profit per unit, splitting the last item.

    Returns the total profit and the ``(size taken, profit taken)`` pairs in
    the order they were chosen.
    """
    items = list(items)
    if any(item.size <= 0 for item in items):
        raise ValueError("item sizes must be positive")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    ranked = sorted(items, key=Item.profit_per_unit, reverse=True)
    total = 0.0
    taken: list[tuple[float, float]] = []
    for item in ranked:
        if capacity <= 0:
            break
        if capacity >= item.size:
            total += item.profit
            capacity -= item.size
            taken.append((item.size, item.profit))
        else:
            partial = item.profit_per_unit() * capacity
            total += partial
            taken.append((capacity, partial))
            break
    return total, taken