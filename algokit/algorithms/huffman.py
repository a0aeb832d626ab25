"""Huffman coding: build an optimal prefix code from symbol frequencies."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes have no symbol."""

    symbol: str | None
    frequency: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None


def build_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> HuffmanNode:
    """Return the root of the Huffman tree for the given symbols."""
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is required")

    order = count()
    heap = [
        (freq, next(order), HuffmanNode(symbol, freq))
        for symbol, freq in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(None, total, left, right)))
    return heap[0][2]


def huffman_codes(symbols: Sequence[str], frequencies: Sequence[int]) -> dict[str, str]:
    """Return a mapping from each symbol to its Huffman code, in preorder."""
    codes: dict[str, str] = {}

    def walk(node: HuffmanNode | None, prefix: str) -> None:
        if node is None:
            return
        if node.symbol is not None:
            codes[node.symbol] = prefix
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(build_tree(symbols, frequencies), "")
    return codes