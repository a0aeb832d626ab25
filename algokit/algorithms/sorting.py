"""Bead, bubble, bucket and snail (spiral) sorting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bead_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` in ascending order.

    Each number is a row of beads; the beads fall column by column to the
    bottom rows, and the row lengths are then read back.
    """
    numbers = list(values)
    if any(value < 0 for value in numbers):
        raise ValueError("bead sort only handles non-negative integers")
    if not numbers:
        return []

    length = len(numbers)
    widest = max(numbers)
    # How many beads end up in each column after they fall.
    column_heights = [sum(1 for value in numbers if value > col) for col in range(widest)]
    return [
        sum(1 for height in column_heights if height >= length - row)
        for row in range(length)
    ]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return ``values`` sorted ascending by repeated adjacent swaps."""
    numbers = list(values)
    n = len(numbers)
    for done in range(n):
        for x in range(n - done - 1):
            if numbers[x] > numbers[x + 1]:
                numbers[x], numbers[x + 1] = numbers[x + 1], numbers[x]
    return numbers


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return numbers from the interval [0, 1) sorted ascending.

    Each value goes to the bucket ``int(n * value)``; the buckets are sorted
    one by one and concatenated.
    """
    numbers = list(values)
    n = len(numbers)
    if any(not 0 <= value < 1 for value in numbers):
        raise ValueError("bucket sort expects values in the interval [0, 1)")
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in numbers:
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def snail_sort(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a square matrix read in a clockwise spiral."""
    if not matrix or not matrix[0]:
        return []
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("snail sort needs a square matrix")

    visited = {(0, 0)}
    result = [matrix[0][0]]
    row, col = 0, 0
    direction = 0
    while len(result) < n * n:
        dr, dc = _DIRECTIONS[direction]
        nr, nc = row + dr, col + dc
        if 0 <= nr < n and 0 <= nc < n and (nr, nc) not in visited:
            visited.add((nr, nc))
            result.append(matrix[nr][nc])
            row, col = nr, nc
        else:
            direction = (direction + 1) % len(_DIRECTIONS)
    return result