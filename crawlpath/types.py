from __future__ import annotations

import numbers
from typing import Tuple

PointId = int
EdgeKey = Tuple[PointId, PointId]


class InvalidInput(ValueError):
    """Raised when points or graph updates violate the graph invariants."""


def is_point_id(value: object) -> bool:
    """Return ``True`` when *value* is usable as a point identifier."""

    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def normalize_edge_key(a: PointId, b: PointId) -> EdgeKey:
    return (a, b) if a <= b else (b, a)


__all__ = [
    "PointId",
    "EdgeKey",
    "InvalidInput",
    "is_point_id",
    "normalize_edge_key",
]
