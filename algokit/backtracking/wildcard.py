"""Wildcard pattern matching with ``?`` (any one character) and ``*`` (any run)."""

from __future__ import annotations

from functools import lru_cache


def wildcard_match(text: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches the whole of ``text``."""
    n, m = len(text), len(pattern)

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == m:
            return i == n
        if i == n:
            return all(ch == "*" for ch in pattern[j:])
        if text[i] == pattern[j] or pattern[j] == "?":
            return match(i + 1, j + 1)
        if pattern[j] == "*":
            return match(i, j + 1) or match(i + 1, j)
        return False

    return match(0, 0)