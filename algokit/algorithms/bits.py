"""Bit counting, bit flips and Hamming distance."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def count_set_bits(n: int) -> int:
    """Return the number of 1 bits in ``n`` as a 64-bit two's complement value."""
    n &= _MASK64
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def count_bits_flip(a: int, b: int) -> int:
    """Return how many bits must be flipped to turn ``a`` into ``b``."""
    return count_set_bits(a ^ b)


def bit_count(value: int) -> int:
    """Return the number of 1 bits in a non-negative integer."""
    if value < 0:
        raise ValueError("value must not be negative")
    return bin(value).count("1")


def hamming_distance(a: int | str, b: int | str) -> int:
    """Return the Hamming distance between two integers or two equal-length strings."""
    if isinstance(a, str) and isinstance(b, str):
        if len(a) != len(b):
            raise ValueError("strings must have the same length")
        return sum(x != y for x, y in zip(a, b))
    if isinstance(a, int) and isinstance(b, int):
        return bit_count(a ^ b)
    raise TypeError("arguments must both be integers or both be strings")