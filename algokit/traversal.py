"""Graph traversals: breadth-first, depth-first and 0-1 BFS for edge reversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[int]]]


def _neighbours(adjacency: Adjacency, node: Hashable) -> Iterable[Hashable]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    if isinstance(node, int) and 0 <= node < len(adjacency):
        return adjacency[node]
    return ()


def bfs_order(adjacency: Adjacency, source: Hashable) -> list[Hashable]:
    """Return nodes reachable from ``source`` in breadth-first order.

    ``adjacency`` maps each node to its neighbours, either as a mapping or as
    a sequence indexed by node number.
    """
    seen = {source}
    queue = deque([source])
    order: list[Hashable] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in _neighbours(adjacency, node):
            if child not in seen:
                seen.add(child)
                queue.append(child)
    return order


def dfs_order(adjacency: Adjacency, source: Hashable) -> list[Hashable]:
    """Return nodes reachable from ``source`` in depth-first preorder."""
    seen = {source}
    order: list[Hashable] = [source]
    stack = [iter(_neighbours(adjacency, source))]
    while stack:
        for child in stack[-1]:
            if child not in seen:
                seen.add(child)
                order.append(child)
                stack.append(iter(_neighbours(adjacency, child)))
                break
        else:
            stack.pop()
    return order


def min_edge_reversals(n: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Fewest directed edges to reverse so that node ``n`` is reachable from node 1.

    Nodes are numbered ``1..n``. Self-loops are ignored. Returns ``None`` when
    no sequence of reversals connects the two nodes.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        if u == v:
            continue
        graph[u].append((v, 0))
        graph[v].append((u, 1))

    cost: list[int | None] = [None] * (n + 1)
    cost[1] = 0
    queue = deque([1])
    while queue:
        node = queue.popleft()
        base = cost[node]
        for child, weight in graph[node]:
            candidate = base + weight
            current = cost[child]
            if current is None or candidate < current:
                cost[child] = candidate
                if weight == 0:
                    queue.appendleft(child)
                else:
                    queue.append(child)
    return cost[n]