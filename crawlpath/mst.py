"""Minimum spanning trees via Kruskal's algorithm."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .geometry import Point
from .graph import Edge, Graph, build_complete_graph
from .logging_utils import debug_log_call
from .union_find import DisjointSet

logger = logging.getLogger(__name__)


@debug_log_call(logger)
def minimum_spanning_tree(graph: Graph, *, stop_early: bool = True) -> Graph:
    """Return a minimum spanning tree (or forest) of ``graph``.

    Edges are taken in ascending ``(weight, u, v)`` order, so equal-weight
    edges are resolved by their endpoint identifiers and repeated calls give
    the same tree. A disconnected input yields one tree per component; callers
    needing a single tree should compare the edge count with ``points - 1``.
    """

    tree = Graph(metric=graph.metric)
    for pid in graph.point_ids:
        tree.add_point(graph.points[pid])

    target = max(len(graph.points) - 1, 0)
    forest = DisjointSet(graph.points)
    for edge in sorted(graph.edges, key=Edge.sort_key):
        if stop_early and len(tree.edges) == target:
            break
        if forest.union(edge.u, edge.v):
            tree.insert_edge(edge)

    if len(tree.edges) < target:
        logger.warning(
            "Input graph is disconnected: spanning forest has %d component(s)", forest.count
        )
    logger.info(
        "Extracted spanning tree with %d edge(s), total weight %.6g",
        len(tree.edges),
        tree.total_weight(),
    )
    return tree


def mst_edges(points: Iterable[Point], metric: str = "euclidean") -> List[Edge]:
    """Return the edges of the minimum spanning tree over ``points``."""

    return minimum_spanning_tree(build_complete_graph(points, metric)).edges


__all__ = ["minimum_spanning_tree", "mst_edges"]
