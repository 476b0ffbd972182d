from .types import InvalidInput, PointId
from .geometry import Point, distance, pairwise_distances, METRICS
from .union_find import DisjointSet
from .graph import Edge, Graph, build_complete_graph
from .mst import minimum_spanning_tree, mst_edges
from .config import OrderingOptions, get_default_options, set_default_options
from .ordering import order_path, traverse_tree

__all__ = [
    'InvalidInput',
    'PointId',
    'Point',
    'distance',
    'pairwise_distances',
    'METRICS',
    'DisjointSet',
    'Edge',
    'Graph',
    'build_complete_graph',
    'minimum_spanning_tree',
    'mst_edges',
    'OrderingOptions',
    'get_default_options',
    'set_default_options',
    'order_path',
    'traverse_tree',
]
