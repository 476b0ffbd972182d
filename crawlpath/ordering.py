"""Visiting orders derived from a minimum spanning tree."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from .config import NEIGHBOR_ORDERS, OrderingOptions, get_default_options
from .geometry import Point
from .graph import Graph, build_complete_graph
from .logging_utils import debug_log_call
from .mst import minimum_spanning_tree
from .types import InvalidInput, PointId

logger = logging.getLogger(__name__)


def _children(graph: Graph, point_id: PointId, neighbor_order: str) -> List[PointId]:
    neighbours = graph.neighbors(point_id)
    if neighbor_order == "nearest":
        return sorted(neighbours, key=lambda pid: (neighbours[pid], pid))
    return sorted(neighbours)


def _walk(graph: Graph, root: PointId, neighbor_order: str, seen: Set[PointId], out: List[PointId]) -> None:
    stack = [root]
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        out.append(current)
        # reversed so the first child is popped next
        for child in reversed(_children(graph, current, neighbor_order)):
            if child not in seen:
                stack.append(child)


def traverse_tree(
    graph: Graph,
    root: Optional[PointId] = None,
    *,
    neighbor_order: str = "nearest",
) -> List[PointId]:
    """Return the pre-order depth-first visiting order of ``graph``.

    The walk starts at ``root`` (lowest identifier by default). Children are
    visited nearest first, ties broken by identifier, or purely by identifier
    when ``neighbor_order="id"``. Every point appears exactly once; for a
    forest, each remaining tree is walked from its lowest unvisited point.
    """

    if neighbor_order not in NEIGHBOR_ORDERS:
        raise InvalidInput(f"unknown neighbour order {neighbor_order!r}")
    if root is not None and root not in graph.points:
        raise InvalidInput(f"root {root} is not a point of the graph")

    order: List[PointId] = []
    seen: Set[PointId] = set()
    if root is not None:
        _walk(graph, root, neighbor_order, seen, order)
    for pid in graph.point_ids:
        if pid not in seen:
            _walk(graph, pid, neighbor_order, seen, order)
    return order


@debug_log_call(logger)
def order_path(points: Iterable[Point], options: Optional[OrderingOptions] = None) -> List[PointId]:
    """Propose a visiting order for ``points``.

    Builds the complete graph, extracts its minimum spanning tree and walks
    the tree depth first. This is an approximation, not a shortest tour.
    """

    if options is None:
        options = get_default_options()
    options.validate()

    tree = minimum_spanning_tree(build_complete_graph(points, options.metric))
    order = traverse_tree(tree, options.root, neighbor_order=options.neighbor_order)
    logger.info("Ordered %d point(s) starting from %s", len(order), order[0] if order else None)
    return order


__all__ = ["traverse_tree", "order_path"]
