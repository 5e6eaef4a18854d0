"""Fibonacci numbers computed four ways."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def fib_memo(n: int) -> int:
    """Fibonacci number by memoised recursion; ``n <= 1`` gives ``n``."""
    if n <= 1:
        return n
    return fib_memo(n - 1) + fib_memo(n - 2)


def fib_table(n: int) -> int:
    """Fibonacci number by filling a table bottom-up."""
    if n <= 1:
        return n
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def fib_iterative(n: int) -> int:
    """Fibonacci number keeping only the last two values."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fib_naive(n: int) -> int:
    """Fibonacci number by plain double recursion."""
    if n <= 1:
        return n
    return fib_naive(n - 1) + fib_naive(n - 2)