import itertools

import numpy as np
import pytest

from crawlpath import (
    DisjointSet,
    Graph,
    Point,
    build_complete_graph,
    minimum_spanning_tree,
    mst_edges,
)


def _random_points(n, seed):
    rng = np.random.default_rng(seed)
    coords = rng.uniform(0.0, 100.0, size=(n, 2))
    return [Point(i, x, y) for i, (x, y) in enumerate(coords, start=1)]


def _brute_force_min_weight(graph):
    n = len(graph.points)
    best = None
    for subset in itertools.combinations(graph.edges, n - 1):
        ds = DisjointSet(graph.points)
        if all(ds.union(edge.u, edge.v) for edge in subset):
            weight = sum(edge.weight for edge in subset)
            best = weight if best is None else min(best, weight)
    return best


def test_triangle_drops_longest_edge():
    points = [Point(1, 0, 0), Point(2, 3, 0), Point(3, 3, 4)]
    tree = minimum_spanning_tree(build_complete_graph(points))
    assert [edge.key for edge in tree.edges] == [(1, 2), (2, 3)]
    assert tree.total_weight() == pytest.approx(7.0)
    assert not tree.has_edge(1, 3)


def test_two_points_share_one_edge():
    tree = minimum_spanning_tree(build_complete_graph([Point(1, 0, 0), Point(2, 5, 0)]))
    assert len(tree.edges) == 1
    assert tree.edges[0].weight == pytest.approx(5.0)


@pytest.mark.parametrize("points", [[], [Point(9, 4, 4)]])
def test_degenerate_inputs(points):
    tree = minimum_spanning_tree(build_complete_graph(points))
    assert tree.edges == []
    assert tree.point_ids == [p.id for p in points]


def test_equal_weights_break_ties_by_identifier():
    square = [Point(3, 1, 1), Point(1, 0, 0), Point(4, 0, 1), Point(2, 1, 0)]
    tree = minimum_spanning_tree(build_complete_graph(square))
    assert [edge.key for edge in tree.edges] == [(1, 2), (1, 4), (2, 3)]


def test_result_does_not_depend_on_input_order():
    points = _random_points(12, seed=3)
    reference = minimum_spanning_tree(build_complete_graph(points))
    for seed in range(3):
        shuffled = list(points)
        np.random.default_rng(seed).shuffle(shuffled)
        tree = minimum_spanning_tree(build_complete_graph(shuffled))
        assert [edge.key for edge in tree.edges] == [edge.key for edge in reference.edges]
        assert tree.total_weight() == pytest.approx(reference.total_weight())


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_weight_is_minimal_among_spanning_trees(seed):
    graph = build_complete_graph(_random_points(6, seed))
    tree = minimum_spanning_tree(graph)
    assert tree.total_weight() == pytest.approx(_brute_force_min_weight(graph))


def test_fifty_random_points_form_single_tree():
    graph = build_complete_graph(_random_points(50, seed=2024))
    tree = minimum_spanning_tree(graph)
    assert len(tree.edges) == 49
    ds = DisjointSet(tree.points)
    for edge in tree.edges:
        ds.union(edge.u, edge.v)
    assert ds.count == 1
    assert tree.is_spanning_tree()


def test_repeated_runs_are_identical():
    graph = build_complete_graph(_random_points(20, seed=5))
    first = minimum_spanning_tree(graph)
    second = minimum_spanning_tree(graph)
    assert first.edges == second.edges
    assert first.total_weight() == second.total_weight()


@pytest.mark.parametrize("stop_early", [True, False])
def test_disconnected_graph_yields_forest(stop_early, caplog):
    points = [Point(1, 0, 0), Point(2, 1, 0), Point(3, 50, 0), Point(4, 52, 0), Point(5, 51, 3)]
    graph = Graph(points={p.id: p for p in points})
    for a, b in [(1, 2), (3, 4), (3, 5), (4, 5)]:
        graph.add_edge(a, b)
    with caplog.at_level("WARNING", logger="crawlpath.mst"):
        forest = minimum_spanning_tree(graph, stop_early=stop_early)
    assert len(forest.edges) == 3
    assert forest.components() == [[1, 2], [3, 4, 5]]
    assert not forest.has_edge(4, 5)
    assert "disconnected" in caplog.text


def test_input_graph_is_left_untouched():
    graph = build_complete_graph(_random_points(8, seed=9))
    edges_before = list(graph.edges)
    minimum_spanning_tree(graph)
    assert graph.edges == edges_before


def test_mst_edges_wraps_complete_graph():
    edges = mst_edges([Point(1, 0, 0), Point(2, 3, 0), Point(3, 3, 4)])
    assert [(edge.key, edge.weight) for edge in edges] == [((1, 2), 3.0), ((2, 3), 4.0)]
