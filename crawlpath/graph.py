"""Undirected weighted graphs over clue points."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .geometry import Point, check_metric, distance, pairwise_distances
from .logging_utils import debug_log_call
from .types import EdgeKey, InvalidInput, PointId, normalize_edge_key
from .union_find import DisjointSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge; ``u`` is always the smaller identifier."""

    u: PointId
    v: PointId
    weight: float

    def __post_init__(self) -> None:
        u, v = normalize_edge_key(self.u, self.v)
        object.__setattr__(self, "u", u)
        object.__setattr__(self, "v", v)
        weight = float(self.weight)
        if not math.isfinite(weight) or weight < 0:
            raise InvalidInput(f"edge {u}-{v} weight must be finite and non-negative, got {weight!r}")
        object.__setattr__(self, "weight", weight)

    @property
    def key(self) -> EdgeKey:
        return self.u, self.v

    def sort_key(self) -> Tuple[float, PointId, PointId]:
        return self.weight, self.u, self.v

    def other(self, point_id: PointId) -> PointId:
        if point_id == self.u:
            return self.v
        if point_id == self.v:
            return self.u
        raise KeyError(f"Point {point_id} is not an endpoint of edge {self.u}-{self.v}")


@dataclass
class Graph:
    """Points keyed by identifier plus the undirected edges between them."""

    metric: str = "euclidean"
    points: Dict[PointId, Point] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)
    _adjacency: Dict[PointId, Dict[PointId, float]] = field(
        init=False, default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        check_metric(self.metric)
        initial_points = list(self.points.values())
        initial_edges = list(self.edges)
        self.points = {}
        self.edges = []
        for point in initial_points:
            self.add_point(point)
        for edge in initial_edges:
            self.insert_edge(edge)

    def add_point(self, point: Point) -> None:
        if point.id in self.points:
            raise InvalidInput(f"duplicate point identifier {point.id}")
        self.points[point.id] = point
        self._adjacency[point.id] = {}

    def add_edge(self, a: PointId, b: PointId) -> Edge:
        """Connect ``a`` and ``b`` with an edge weighted by the graph metric."""

        self._check_endpoints(a, b)
        edge = Edge(a, b, distance(self.points[a], self.points[b], self.metric))
        self._store(edge)
        return edge

    def insert_edge(self, edge: Edge) -> None:
        """Add an edge taken from another graph over the same points.

        The weight must agree with the graph metric for the edge endpoints.
        """

        self._check_endpoints(edge.u, edge.v)
        expected = distance(self.points[edge.u], self.points[edge.v], self.metric)
        if not math.isclose(edge.weight, expected, rel_tol=1e-9, abs_tol=1e-12):
            raise InvalidInput(
                f"edge {edge.u}-{edge.v} weight {edge.weight!r} does not match "
                f"{self.metric} distance {expected!r} between its endpoints"
            )
        self._store(edge)

    def _check_endpoints(self, a: PointId, b: PointId) -> None:
        missing = [pid for pid in (a, b) if pid not in self.points]
        if missing:
            raise InvalidInput(
                f"edge {a}-{b} references point(s) not in the graph: {', '.join(map(str, missing))}"
            )
        if a == b:
            raise InvalidInput(f"edge {a}-{b} must join two distinct points")
        if b in self._adjacency[a]:
            raise InvalidInput(f"edge {a}-{b} already present")

    def _store(self, edge: Edge) -> None:
        self.edges.append(edge)
        self._adjacency[edge.u][edge.v] = edge.weight
        self._adjacency[edge.v][edge.u] = edge.weight

    @property
    def point_ids(self) -> List[PointId]:
        return sorted(self.points)

    def has_edge(self, a: PointId, b: PointId) -> bool:
        return b in self._adjacency.get(a, {})

    def neighbors(self, point_id: PointId) -> Dict[PointId, float]:
        """Return ``{neighbour: weight}`` for ``point_id``."""

        try:
            return dict(self._adjacency[point_id])
        except KeyError as exc:
            raise KeyError(f"Unknown point {point_id} in graph") from exc

    def total_weight(self) -> float:
        return float(sum(edge.weight for edge in self.edges))

    def components(self) -> List[List[PointId]]:
        forest = DisjointSet(self.points)
        for edge in self.edges:
            forest.union(edge.u, edge.v)
        return forest.groups()

    def is_connected(self) -> bool:
        """Return ``True`` when the graph has at most one component."""

        return len(self.components()) <= 1

    def is_spanning_tree(self) -> bool:
        return self.is_connected() and len(self.edges) == max(len(self.points) - 1, 0)

    def format_adjacency(self) -> str:
        """Render ``id->neighbour, neighbour`` lines in ascending identifier order."""

        lines = []
        for pid in self.point_ids:
            lines.append(f"{pid}->" + ", ".join(str(n) for n in sorted(self._adjacency[pid])))
        return "\n".join(lines)

    def summary(self) -> str:
        return (
            f"Graph(metric={self.metric}, points={len(self.points)}, "
            f"edges={len(self.edges)}, weight={self.total_weight():.6g})"
        )


def check_points(points: Sequence[Point]) -> None:
    """Raise ``InvalidInput`` for duplicate identifiers or non-finite coordinates."""

    seen = set()
    duplicates = set()
    for point in points:
        if point.id in seen:
            duplicates.add(point.id)
        seen.add(point.id)
        if not point.is_finite():
            raise InvalidInput(f"point {point.id} has non-finite coordinates {point.coords}")
    if duplicates:
        raise InvalidInput(
            "duplicate point identifier(s): " + ", ".join(str(pid) for pid in sorted(duplicates))
        )


@debug_log_call(logger)
def build_complete_graph(points: Iterable[Point], metric: str = "euclidean") -> Graph:
    """Connect every pair of distinct points with one edge.

    Produces ``n * (n - 1) / 2`` edges. An empty input yields an empty graph.
    """

    points = list(points)
    check_points(points)
    check_metric(metric)

    graph = Graph(metric=metric)
    for point in points:
        graph.add_point(point)

    if len(points) > 1:
        weights = pairwise_distances(points, metric)
        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                graph.insert_edge(Edge(points[i].id, points[j].id, weights[i, j]))

    logger.info(
        "Built complete graph with %d point(s) and %d edge(s)", len(graph.points), len(graph.edges)
    )
    return graph


__all__ = [
    "Edge",
    "Graph",
    "check_points",
    "build_complete_graph",
]
