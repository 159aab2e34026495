"""Integer and floating-point number routines."""

from __future__ import annotations

import math
from itertools import accumulate, islice

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def kth_factor(n: int, k: int) -> int | None:
    """Return the ``k``-th smallest divisor of ``n``, or ``None`` if there is none."""
    if k < 1:
        return None
    divisors = (i for i in range(1, n + 1) if n % i == 0)
    return next(islice(divisors, k - 1, None), None)


def is_ugly(n: int) -> bool:
    """Tell whether ``n`` is positive and has no prime factors besides 2, 3 and 5."""
    if n <= 0:
        return False
    for prime in (2, 3, 5):
        while n % prime == 0:
            n //= prime
    return n == 1


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    base = float(x)
    exponent = abs(n)
    result = 1.0
    while exponent > 0:
        if exponent % 2:
            result *= base
            exponent -= 1
        else:
            base *= base
            exponent //= 2
    if n >= 0:
        return result
    if result == 0:
        return math.copysign(math.inf, result)
    return 1.0 / result


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 when the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first rows of Pascal's triangle; at least the first row."""
    rows = [[1]]
    for _ in range(1, num_rows):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return rows


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(n, 0, -1))