"""Small recursive routines: counting, sums, factorials, palindromes and patterns."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any


def count_up(limit: int) -> list[int]:
    """Return the counter values ``0, 1, ..., limit - 1``."""

    def step(current: int) -> list[int]:
        if current >= limit:
            return []
        return [current, *step(current + 1)]

    return step(0)


def name_countdown(name: str, n: int) -> list[str]:
    """Return the lines ``"<name> n"`` down to ``"<name> 1"``."""
    if n <= 0:
        return []
    return [f"{name} {n}", *name_countdown(name, n - 1)]


def one_to_n(n: int) -> list[int]:
    """Return ``1..n`` in increasing order, built by head recursion."""
    if n <= 0:
        return []
    return [*one_to_n(n - 1), n]


def n_to_one(n: int) -> list[int]:
    """Return ``n..1`` in decreasing order, built by tail recursion."""
    if n <= 0:
        return []
    return [n, *n_to_one(n - 1)]


def recursive_factorial(n: int) -> int:
    """``n!`` for ``n >= 1``, computed recursively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return n * recursive_factorial(n - 1)


def sum_to_n(n: int) -> int:
    """Sum of ``1..n``; ``0`` for ``n == 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return sum_to_n(n - 1) + n


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``; negative numbers give a negative sum."""
    if n < 0:
        return -digit_sum(-n)
    if n == 0:
        return 0
    return digit_sum(n // 10) + n % 10


def is_palindrome(text: Sequence[Any]) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""

    def check(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[len(text) - i - 1]:
            return False
        return check(i + 1)

    return check(0)


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse ``values`` in place by swapping mirrored pairs."""
    n = len(values)

    def swap(i: int) -> None:
        if i >= n // 2:
            return
        values[i], values[n - i - 1] = values[n - i - 1], values[i]
        swap(i + 1)

    swap(0)


def _row(n: int) -> list[int]:
    return list(range(1, n + 1))


def pattern_ascending(n: int) -> list[list[int]]:
    """Rows ``[1]``, ``[1, 2]``, ... up to ``[1..n]``."""
    if n <= 0:
        return []
    return [*pattern_ascending(n - 1), _row(n)]


def pattern_descending(n: int) -> list[list[int]]:
    """Rows ``[1..n]``, ``[1..n-1]``, ... down to ``[1]``."""
    if n <= 0:
        return []
    return [_row(n), *pattern_descending(n - 1)]


def pattern_mirror(n: int) -> list[list[int]]:
    """Rows from ``[1..n]`` down to ``[1]`` and back up to ``[1..n]``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return [[1]]
    return [_row(n), *pattern_mirror(n - 1), _row(n)]


def fibo_one_based(n: int) -> int:
    """The ``n``-th Fibonacci number counting from 1: 0, 1, 1, 2, ..."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 0
    if n == 2:
        return 1
    return fibo_one_based(n - 1) + fibo_one_based(n - 2)