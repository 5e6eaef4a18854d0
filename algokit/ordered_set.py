"""A sorted set with rank and order-statistic queries."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Any


class OrderedSet:
    """Distinct values kept in ascending order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = sorted(set(items))

    def add(self, value: Any) -> bool:
        """Insert ``value``; return whether it was not already present."""
        position = bisect.bisect_left(self._items, value)
        if position < len(self._items) and self._items[position] == value:
            return False
        self._items.insert(position, value)
        return True

    def find_by_order(self, k: int) -> Any:
        """The ``k``-th smallest value, counting from 0."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"order {k} is outside 0..{len(self._items) - 1}")
        return self._items[k]

    def order_of_key(self, key: Any) -> int:
        """Number of values strictly smaller than ``key``."""
        return bisect.bisect_left(self._items, key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        position = bisect.bisect_left(self._items, value)
        return position < len(self._items) and self._items[position] == value


def run_queries(queries: Iterable[tuple[int, Any]]) -> list[Any]:
    """Process ``(operation, argument)`` queries against an empty set.

    Operation 1 inserts the argument, 2 reports the element of that order,
    and any other reports how many elements are smaller than the argument.
    """
    ordered = OrderedSet()
    answers: list[Any] = []
    for operation, argument in queries:
        if operation == 1:
            ordered.add(argument)
        elif operation == 2:
            answers.append(ordered.find_by_order(argument))
        else:
            answers.append(ordered.order_of_key(argument))
    return answers