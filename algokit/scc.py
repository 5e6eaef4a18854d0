"""Strongly connected components by Kosaraju's algorithm."""

from __future__ import annotations

from collections.abc import Iterable


def _dfs(
    graph: list[list[int]], start: int, visited: list[bool]
) -> tuple[list[int], list[int]]:
    """Return preorder and postorder of a depth-first walk from ``start``."""
    visited[start] = True
    preorder = [start]
    postorder: list[int] = []
    stack = [(start, iter(graph[start]))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if not visited[child]:
                visited[child] = True
                preorder.append(child)
                stack.append((child, iter(graph[child])))
                break
        else:
            stack.pop()
            postorder.append(node)
    return preorder, postorder


def strongly_connected_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph on nodes ``1..n``.

    Components come in topological order of the condensed graph.
    """
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    reverse: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        graph[u].append(v)
        reverse[v].append(u)

    visited = [False] * (n + 1)
    finished: list[int] = []
    for node in range(1, n + 1):
        if not visited[node]:
            finished.extend(_dfs(graph, node, visited)[1])

    visited = [False] * (n + 1)
    components: list[list[int]] = []
    for node in reversed(finished):
        if not visited[node]:
            components.append(_dfs(reverse, node, visited)[0])
    return components