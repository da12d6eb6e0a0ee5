"""
Unit tests for StatelessPathFinder over HashGraph and its views.
"""

from decimal import Decimal

import numpy as np
import pytest

from dijkstra_engine import StatelessPathFinder
from directed import Directed, Undirected, new_hashed_undirected
from hash_graph import HashGraph


def hop_graph() -> Undirected:
    """Unweighted undirected graph with two routes from 0 to 4."""
    g = Undirected(HashGraph())
    g.add_nodes(range(10))
    for u, v in [(0, 1), (0, 2), (2, 3), (1, 4), (3, 4)]:
        g.add_edge(u, v)
    return g


def test_unweighted_shortest_path_by_hops():
    finder = StatelessPathFinder(hop_graph())

    path, weight = finder.find_path(0, 4)

    assert weight == 2
    assert path == [0, 1, 4]


def test_unweighted_path_in_reverse_direction():
    finder = StatelessPathFinder(hop_graph())

    path, weight = finder.find_path(4, 0)

    assert path == [4, 1, 0]
    assert weight == 2


def test_unreachable_target_is_none():
    finder = StatelessPathFinder(hop_graph())

    # 9 is an isolated node
    assert finder.find_path(0, 9) is None


def test_same_source_and_target():
    finder = StatelessPathFinder(hop_graph())

    assert finder.find_path(3, 3) == ([3], 0)


def test_dijkstra_basic_weighted_paths():
    g = HashGraph()
    g.add_nodes("ABC")

    # A -> B (1), A -> C (4), B -> C (2)
    g.add_edge_with("A", "B", 1.0)
    g.add_edge_with("A", "C", 4.0)
    g.add_edge_with("B", "C", 2.0)

    finder = StatelessPathFinder(g)

    # Shortest A->C is A->B->C with cost 3.0
    assert finder.find_path("A", "C") == (["A", "B", "C"], 3.0)
    # edges are directed
    assert finder.find_path("C", "A") is None


def test_cheaper_long_route_beats_short_expensive_one():
    g = Directed(HashGraph())
    for node_id in range(5):
        g.add_node_with(node_id, None)
    g.add_edge_with(0, 4, 10)
    g.add_edge_with(0, 1, 1)
    g.add_edge_with(1, 2, 1)
    g.add_edge_with(2, 3, 1)
    g.add_edge_with(3, 4, 1)

    finder = StatelessPathFinder(g)

    assert finder.find_path(0, 4) == ([0, 1, 2, 3, 4], 4)


def test_later_improvement_replaces_predecessor():
    # 1 is first reached directly at cost 5, then improved via 2.
    g = HashGraph.from_parts(
        [(i, None) for i in range(4)],
        [(0, 1, 5), (0, 2, 1), (2, 1, 1), (1, 3, 1)],
    )
    finder = StatelessPathFinder(g)

    assert finder.find_path(0, 3) == ([0, 2, 1, 3], 3)
    # node 1 was relaxed twice; its stale entry never had to be popped
    assert finder.last_relaxed == 4
    assert finder.last_heap_pushes == 5
    assert finder.last_heap_pops == 4


def test_shortest_paths_full_run():
    g = HashGraph.from_parts(
        [(i, None) for i in range(5)],
        [(0, 1, 2), (1, 2, 2), (0, 2, 5), (2, 3, 1)],
    )
    finder = StatelessPathFinder(g)

    dist, prev = finder.shortest_paths(0)

    assert dist == {0: 0, 1: 2, 2: 4, 3: 5}
    assert prev == {1: 0, 2: 1, 3: 2}
    # unreachable node absent
    assert 4 not in dist
    assert finder.shortest_path_costs(0) == dist


def test_early_exit_stops_before_settling_everything():
    g = HashGraph.from_parts(
        [(i, None) for i in range(4)],
        [(0, 1, 1), (1, 2, 1), (2, 3, 1)],
    )
    finder = StatelessPathFinder(g)

    finder.find_path(0, 1)
    early_pops = finder.last_heap_pops
    finder.shortest_paths(0)

    assert early_pops < finder.last_heap_pops


def test_numpy_and_decimal_weights():
    g = HashGraph.from_parts(
        [(i, None) for i in range(3)],
        [(0, 1, np.float64(0.25)), (1, 2, np.float64(0.5)), (0, 2, np.float64(1.0))],
    )
    path, weight = StatelessPathFinder(g).find_path(0, 2)
    assert path == [0, 1, 2]
    assert weight == pytest.approx(0.75)

    g = HashGraph.from_parts(
        [(i, None) for i in range(3)],
        [(0, 1, Decimal("0.1")), (1, 2, Decimal("0.2"))],
    )
    assert StatelessPathFinder(g).find_path(0, 2) == ([0, 1, 2], Decimal("0.3"))


def test_negative_weight_rejected():
    g = HashGraph.from_parts([(0, None), (1, None)], [(0, 1, -1)])

    with pytest.raises(ValueError):
        StatelessPathFinder(g).find_path(0, 1)


def test_path_finding_does_not_mutate_graph():
    g = hop_graph()
    edges_before = g.edges()
    finder = StatelessPathFinder(g)

    finder.find_path(0, 4)
    finder.shortest_paths(2)

    assert finder.graph is g
    assert g.edges() == edges_before
    assert g.num_nodes() == 10


def test_finders_over_clones_are_independent():
    backend = HashGraph.from_parts(
        [(i, None) for i in range(3)],
        [(0, 1, 1), (1, 2, 1), (0, 2, 5)],
    )
    original = StatelessPathFinder(backend.clone())
    backend.add_node_with(3, None)
    backend.add_edge_with(0, 3, 1)
    backend.add_edge_with(3, 2, 0)
    changed = StatelessPathFinder(backend)

    assert original.find_path(0, 2) == ([0, 1, 2], 2)
    assert changed.find_path(0, 2) == ([0, 3, 2], 1)


def test_reversed_graph_paths():
    g = HashGraph.from_parts(
        [(i, None) for i in range(3)],
        [(0, 1, 15), (1, 2, 5)],
    )
    finder = StatelessPathFinder(g.into_reverse())

    assert finder.find_path(2, 0) == ([2, 1, 0], 20)
    assert finder.find_path(0, 2) is None


def test_undirected_hashed_constructor_search():
    g = new_hashed_undirected()
    g.add_nodes(range(3))
    g.add_edge_with(0, 1, 2)
    g.add_edge_with(1, 2, 3)

    assert StatelessPathFinder(g).find_path(2, 0) == ([2, 1, 0], 5)
