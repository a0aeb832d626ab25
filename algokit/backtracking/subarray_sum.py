"""Count contiguous subarrays whose elements add up to a target."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def subarray_sum(target: int, values: Iterable[int]) -> int:
    """Return the number of contiguous subarrays of ``values`` summing to ``target``."""
    seen: Counter[int] = Counter()
    count = 0
    current = 0
    for value in values:
        current += value
        if current == target:
            count += 1
        count += seen[current - target]
        seen[current] += 1
    return count