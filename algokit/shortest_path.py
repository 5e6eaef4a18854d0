"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Union

WeightedAdjacency = Union[
    Mapping[int, Iterable[Sequence[float]]], Sequence[Iterable[Sequence[float]]]
]


def _edges(adjacency: WeightedAdjacency, node: int) -> Iterable[Sequence[float]]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    return adjacency[node] if node < len(adjacency) else ()


def dijkstra(n: int, adjacency: WeightedAdjacency, source: int) -> list[float]:
    """Shortest distance from ``source`` to every node ``0..n-1``.

    ``adjacency[node]`` lists ``(neighbour, weight)`` pairs. Unreachable
    nodes get ``math.inf``.
    """
    if not 0 <= source < n:
        raise ValueError(f"source {source} is outside 0..{n - 1}")
    distance: list[float] = [math.inf] * n
    distance[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in _edges(adjacency, node):
            if not 0 <= neighbour < n:
                raise ValueError(f"edge to {neighbour} is outside 0..{n - 1}")
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance