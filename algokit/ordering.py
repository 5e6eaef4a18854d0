"""Ordering helpers: remainder ordering, score ranking and parity splitting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def remainder_order(values: Sequence[int], k: int) -> list[int]:
    """Return 1-based positions ordered by remainder modulo ``k``.

    Positions whose value is divisible by ``k`` come first, in input order.
    The rest follow by remainder, largest first, with ties broken by the
    smaller position.
    """
    if k == 0:
        raise ValueError("k must be non-zero")
    divisible: list[int] = []
    rest: list[tuple[int, int]] = []
    for position, value in enumerate(values, start=1):
        remainder = value % k
        if remainder == 0:
            divisible.append(position)
        else:
            rest.append((remainder, position))
    rest.sort(key=lambda item: (-item[0], item[1]))
    return divisible + [position for _, position in rest]


def rank_scores(entries: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Sort ``(score, name)`` pairs from highest to lowest.

    Equal scores are ordered by name, also descending.
    """
    return sorted(entries, reverse=True)


def split_even_odd(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split values into even and odd lists, keeping their input order."""
    evens: list[int] = []
    odds: list[int] = []
    for value in values:
        (evens if value % 2 == 0 else odds).append(value)
    return evens, odds