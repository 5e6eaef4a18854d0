"""Counting: inclusion-exclusion, combinations, factorials and permutations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations


def count_not_divisible(n: int, divisors: Sequence[int]) -> int:
    """Count integers in ``1..n`` divisible by none of ``divisors``."""
    if any(d == 0 for d in divisors):
        raise ValueError("divisors must be non-zero")
    if any(d == 1 for d in divisors):
        return 0
    divisible = 0
    for size in range(1, len(divisors) + 1):
        sign = 1 if size % 2 else -1
        for subset in combinations(divisors, size):
            divisible += sign * (n // math.lcm(*subset))
    return n - divisible


def n_choose_r(n: int, r: int) -> int:
    """Number of ways to choose ``r`` items from ``n``."""
    if r < 0 or r > n:
        raise ValueError("r must satisfy 0 <= r <= n")
    return math.comb(n, r)


def factorial(n: int) -> int:
    """``n!``, with values of ``n`` up to 1 giving 1."""
    return math.prod(range(2, n + 1))


def n_permute_r(n: int, r: int) -> int:
    """Number of ordered arrangements of ``r`` items from ``n``."""
    return factorial(n) // factorial(n - r)