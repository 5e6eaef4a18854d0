"""Subsequence enumeration by pick / not-pick recursion."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def _generate(values: Sequence[T], index: int, chosen: list[T]) -> Iterator[list[T]]:
    if index == len(values):
        yield list(chosen)
        return
    chosen.append(values[index])
    yield from _generate(values, index + 1, chosen)
    chosen.pop()
    yield from _generate(values, index + 1, chosen)


def subsequences(values: Sequence[T]) -> list[list[T]]:
    """Every subsequence, each element taken before it is skipped.

    The full sequence comes first and the empty one last.
    """
    return list(_generate(values, 0, []))


def subsequences_with_sum(values: Sequence[int], k: int) -> list[list[int]]:
    """Every subsequence whose elements add up to ``k``, in enumeration order."""
    return [seq for seq in _generate(values, 0, []) if sum(seq) == k]


def first_subsequence_with_sum(values: Sequence[int], k: int) -> list[int] | None:
    """The first subsequence in enumeration order summing to ``k``, or ``None``."""
    return next((seq for seq in _generate(values, 0, []) if sum(seq) == k), None)


def count_subsequences_with_sum(values: Sequence[int], k: int) -> int:
    """Number of subsequences summing to ``k``; the empty one counts for ``k == 0``."""

    def count(index: int, total: int) -> int:
        if index == len(values):
            return 1 if total == k else 0
        return count(index + 1, total + values[index]) + count(index + 1, total)

    return count(0, 0)