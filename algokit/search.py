"""Binary-search helpers: bounds, integer square root and n-th root."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence


def lower_bound(values: Sequence[int], target: int) -> int:
    """Index of the first element not less than ``target``.

    The search is confined to valid indexes, so a target larger than every
    element yields the last index.
    """
    return bisect.bisect_left(values, target, 0, max(len(values) - 1, 0))


def upper_bound(values: Sequence[int], target: int) -> int:
    """Index of the first element greater than ``target``.

    The search is confined to valid indexes, so a target at or above the
    last element yields the last index.
    """
    return bisect.bisect_right(values, target, 0, max(len(values) - 1, 0))


def int_sqrt(n: int) -> int:
    """Smallest positive integer whose square is at least ``n``."""
    low, high = 1, max(n, 1)
    while low < high:
        mid = low + (high - low) // 2
        if mid * mid < n:
            low = mid + 1
        else:
            high = mid
    return low


def nth_root(x: float, n: int, eps: float = 1e-7) -> float:
    """Approximate the ``n``-th root of ``x`` by bisection over ``[1, x]``.

    Values of ``x`` below 1 give 1. Square roots of perfect squares are
    rounded to the exact integer.
    """
    low, high = 1.0, float(x)
    while high - low > eps:
        mid = low + (high - low) / 2
        if mid**n < x:
            low = mid
        else:
            high = mid
    if n == 2 and x >= 0 and math.sqrt(x) * math.sqrt(x) == x:
        return float(round(low))
    return low