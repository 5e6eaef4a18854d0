"""Array algorithms: maximum subarray and power set."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def max_subarray(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return the largest contiguous sum and the subarray that achieves it."""
    if not values:
        raise ValueError("values must not be empty")
    best: int | None = None
    running = 0
    start = best_start = best_end = 0
    for index, value in enumerate(values):
        if running == 0:
            start = index
        running += value
        if best is None or running > best:
            best = running
            best_start, best_end = start, index
        if running < 0:
            running = 0
    return best, list(values[best_start : best_end + 1])


def power_set(values: Sequence[T]) -> list[list[T]]:
    """Return every subset, ordered by the bitmask that selects it."""
    return [
        [value for bit, value in enumerate(values) if mask >> bit & 1]
        for mask in range(1 << len(values))
    ]