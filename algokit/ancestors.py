"""Binary lifting on rooted trees: k-th ancestor and lowest common ancestor."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _lifting_table(first: list[int], levels: int) -> list[list[int]]:
    table = [first]
    for _ in range(1, levels):
        previous = table[-1]
        table.append([previous[previous[node]] for node in range(len(first))])
    return table


class TreeAncestor:
    """Answers k-th ancestor queries on a tree rooted at node 0."""

    def __init__(self, n: int, parent: Sequence[int]) -> None:
        if n < 1 or len(parent) != n:
            raise ValueError("parent must hold one entry for each of n >= 1 nodes")
        children: list[list[int]] = [[] for _ in range(n)]
        for node in range(1, n):
            up = parent[node]
            if not 0 <= up < n:
                raise ValueError(f"parent of {node} is outside 0..{n - 1}")
            children[up].append(node)

        depth: list[int | None] = [None] * n
        depth[0] = 0
        order = [0]
        for node in order:
            for child in children[node]:
                depth[child] = depth[node] + 1
                order.append(child)
        if any(d is None for d in depth):
            raise ValueError("parent does not describe a tree rooted at 0")

        self._n = n
        self._depth: list[int] = depth  # type: ignore[assignment]
        first = [0] + [parent[node] for node in range(1, n)]
        self._up = _lifting_table(first, max(1, n.bit_length()))

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """The ancestor ``k`` steps above ``node``, or ``None`` if there is none."""
        if not 0 <= node < self._n:
            raise ValueError(f"node {node} is outside 0..{self._n - 1}")
        if k < 0:
            raise ValueError("k must not be negative")
        if self._depth[node] < k:
            return None
        for level, row in enumerate(self._up):
            if k >> level & 1:
                node = row[node]
        return node


class LCATree:
    """Lowest common ancestor queries on an undirected tree rooted at node 0.

    ``children[i]`` lists the nodes joined to node ``i``.
    """

    def __init__(self, n: int, children: Sequence[Iterable[int]]) -> None:
        if n < 1 or len(children) != n:
            raise ValueError("children must hold one entry for each of n >= 1 nodes")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for node, linked in enumerate(children):
            for other in linked:
                if not 0 <= other < n:
                    raise ValueError(f"node {other} is outside 0..{n - 1}")
                adjacency[node].append(other)
                adjacency[other].append(node)

        parent = [-1] * n
        depth = [-1] * n
        parent[0] = 0
        depth[0] = 0
        stack = [0]
        while stack:
            node = stack.pop()
            for child in adjacency[node]:
                if depth[child] == -1:
                    depth[child] = depth[node] + 1
                    parent[child] = node
                    stack.append(child)
        if -1 in depth:
            raise ValueError("children must describe a connected tree")

        self._n = n
        self._depth = depth
        self._up = _lifting_table(parent, max(1, n.bit_length()))

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if not 0 <= node < self._n:
                raise ValueError(f"node {node} is outside 0..{self._n - 1}")

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor in O(log n) by binary lifting."""
        self._check(a, b)
        depth = self._depth
        if depth[a] < depth[b]:
            a, b = b, a
        for row in reversed(self._up):
            if depth[row[a]] >= depth[b]:
                a = row[a]
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a, b = row[a], row[b]
        return self._up[0][a]

    def lca_naive(self, a: int, b: int) -> int:
        """Lowest common ancestor by walking parent links one step at a time."""
        self._check(a, b)
        depth = self._depth
        parent = self._up[0]
        if depth[a] < depth[b]:
            a, b = b, a
        while depth[a] > depth[b]:
            a = parent[a]
        while a != b:
            a, b = parent[a], parent[b]
        return a