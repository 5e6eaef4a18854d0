import random

import pytest

from algokit.scc import strongly_connected_components


def _as_sets(components):
    return {frozenset(component) for component in components}


def test_cycle_and_lone_node():
    components = strongly_connected_components(4, [(1, 2), (2, 3), (3, 1), (3, 4)])
    assert _as_sets(components) == {frozenset({1, 2, 3}), frozenset({4})}


def test_dag_has_singleton_components():
    edges = [(1, 2), (2, 3), (1, 3), (3, 4)]
    components = strongly_connected_components(4, edges)
    assert len(components) == 4
    assert all(len(component) == 1 for component in components)


def test_no_edges():
    components = strongly_connected_components(3, [])
    assert sorted(c[0] for c in components) == [1, 2, 3]


def test_empty_graph():
    assert strongly_connected_components(0, []) == []


def test_two_cycles_joined_one_way():
    edges = [(1, 2), (2, 1), (3, 4), (4, 3), (2, 3)]
    components = strongly_connected_components(4, edges)
    assert _as_sets(components) == {frozenset({1, 2}), frozenset({3, 4})}


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_partition_and_topological_order(seed):
    rng = random.Random(seed)
    n = 30
    edges = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(45)]
    components = strongly_connected_components(n, edges)

    flat = [node for component in components for node in component]
    assert sorted(flat) == list(range(1, n + 1))

    index = {node: i for i, component in enumerate(components) for node in component}
    for u, v in edges:
        assert index[u] <= index[v]


def test_reversing_edges_keeps_components():
    rng = random.Random(9)
    n = 20
    edges = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(35)]
    forward = strongly_connected_components(n, edges)
    backward = strongly_connected_components(n, [(v, u) for u, v in edges])
    assert _as_sets(forward) == _as_sets(backward)


def test_node_out_of_range_rejected():
    with pytest.raises(ValueError):
        strongly_connected_components(3, [(1, 4)])