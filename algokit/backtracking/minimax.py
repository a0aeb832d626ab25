"""Minimax over a complete binary game tree stored as a list of leaf scores."""

from __future__ import annotations

from collections.abc import Sequence


def minimax(
    depth: int,
    node_index: int,
    is_max: bool,
    scores: Sequence[int],
    height: int,
) -> int:
    """Return the minimax value of the subtree rooted at ``node_index``."""
    if depth == height:
        return scores[node_index]
    left = minimax(depth + 1, node_index * 2, not is_max, scores, height)
    right = minimax(depth + 1, node_index * 2 + 1, not is_max, scores, height)
    return max(left, right) if is_max else min(left, right)


def optimal_value(scores: Sequence[int]) -> int:
    """Return the value the maximising player can guarantee from the root."""
    count = len(scores)
    if count == 0 or count & (count - 1):
        raise ValueError("the number of scores must be a power of two")
    height = count.bit_length() - 1
    return minimax(0, 0, True, scores, height)