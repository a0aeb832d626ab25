"""Integer utilities: factorial and prime checks, fast powers, Fibonacci."""

from __future__ import annotations

import random
from collections.abc import Sequence

_DIGITS = frozenset("0123456789")


def is_factorial(n: int) -> bool:
    """Return True if ``n`` equals ``k!`` for some positive integer ``k``."""
    if n <= 0:
        return False
    divisor = 1
    while n % divisor == 0:
        n //= divisor
        divisor += 1
    return n == 1


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division over 6k +/- 1."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def power_recursive(a: int, b: int) -> float:
    """Return ``a ** b`` by recursive squaring."""
    if b < 0:
        return 1.0 / power_recursive(a, -b)
    if b == 0:
        return 1.0
    half = power_recursive(a, b >> 1)
    result = half * half
    if b & 1:
        result *= a
    return result


def power_linear(a: int, b: int) -> float:
    """Return ``a ** b`` by iterative squaring."""
    if b < 0:
        return 1.0 / power_linear(a, -b)
    result = 1.0
    base = a
    while b:
        if b & 1:
            result *= base
        base *= base
        b >>= 1
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def is_even(text: str) -> bool:
    """Return True if the decimal digits in ``text`` form an even number.

    Raises ValueError if ``text`` is empty or holds anything but digits.
    """
    if not text or any(ch not in _DIGITS for ch in text):
        raise ValueError("input must consist of decimal digits")
    return int(text) % 2 == 0


def reverse_binary(n: int) -> list[int]:
    """Return the binary digits of ``n``, least significant first."""
    bits = []
    while n > 0:
        n, bit = divmod(n, 2)
        bits.append(bit)
    return bits


def modular_exponent(base: int, binary_exponent: Sequence[int], modulus: int) -> int:
    """Return ``base`` raised to the exponent given by its bits, modulo ``modulus``.

    ``binary_exponent`` lists the exponent's bits least significant first.
    """
    if modulus == 1:
        return 0
    if not binary_exponent:
        return 1
    result = base if binary_exponent[0] == 1 else 1
    square = base
    for bit in binary_exponent[1:]:
        square = square * square % modulus
        if bit == 1:
            result = square * result % modulus
    return result


def miller_rabin_round(d: int, n: int, rng: random.Random) -> bool:
    """Run one Miller-Rabin round on odd ``n`` where ``n - 1 = d * 2**r``.

    Returns False if a witness of compositeness was found.
    """
    witness = rng.randint(2, n - 2)
    x = modular_exponent(witness, reverse_binary(d), n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, rounds: int = 5, rng: random.Random | None = None) -> bool:
    """Return True if ``n`` passes ``rounds`` Miller-Rabin rounds."""
    if n <= 4:
        return n in (2, 3)
    if n % 2 == 0:
        return False
    if rng is None:
        rng = random.Random()
    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(miller_rabin_round(d, n, rng) for _ in range(rounds))