"""Located clue points and the distance metrics used to weight graph edges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .types import InvalidInput, PointId, is_point_id

EARTH_RADIUS_KM = 6371.0088

METRICS = ("euclidean", "haversine")


@dataclass(frozen=True)
class Point:
    """Clue location: stable integer identifier plus a 2D coordinate."""

    id: PointId
    x: float
    y: float

    def __post_init__(self) -> None:
        if not is_point_id(self.id):
            raise InvalidInput(f"point identifier must be an integer, got {self.id!r}")
        object.__setattr__(self, "id", int(self.id))
        try:
            x, y = float(self.x), float(self.y)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"point {self.id} coordinates must be numbers, got ({self.x!r}, {self.y!r})") from exc
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def coords(self) -> Tuple[float, float]:
        return self.x, self.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def _euclidean(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _haversine(a: Point, b: Point) -> float:
    # x is latitude, y is longitude, both in degrees
    lat1, lon1, lat2, lon2 = map(math.radians, (a.x, a.y, b.x, b.y))
    h = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


_SCALAR_METRICS = {"euclidean": _euclidean, "haversine": _haversine}


def check_metric(metric: str) -> str:
    if metric not in _SCALAR_METRICS:
        raise InvalidInput(f"unknown distance metric {metric!r} (expected one of {', '.join(METRICS)})")
    return metric


def distance(a: Point, b: Point, metric: str = "euclidean") -> float:
    """Return the distance between ``a`` and ``b``.

    Both metrics are symmetric and non-negative. Euclidean distance is zero
    exactly when the coordinates coincide. Haversine distance is also zero for
    distinct coordinates naming the same place on the sphere, such as two
    longitudes at a pole or longitudes 180 and -180.
    """

    return _SCALAR_METRICS[check_metric(metric)](a, b)


def pairwise_distances(points: Sequence[Point], metric: str = "euclidean") -> np.ndarray:
    """Return the ``n x n`` distance matrix for ``points`` in input order."""

    check_metric(metric)
    coords = np.array([p.coords for p in points], dtype=float).reshape(-1, 2)
    if metric == "euclidean":
        diff = coords[:, None, :] - coords[None, :, :]
        return np.hypot(diff[..., 0], diff[..., 1])

    lat = np.radians(coords[:, 0])
    lon = np.radians(coords[:, 1])
    dlat = lat[None, :] - lat[:, None]
    dlon = lon[None, :] - lon[:, None]
    h = np.sin(dlat / 2) ** 2 + np.cos(lat)[:, None] * np.cos(lat)[None, :] * np.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.minimum(1.0, np.sqrt(h)))


__all__ = [
    "PointId",
    "Point",
    "METRICS",
    "EARTH_RADIUS_KM",
    "check_metric",
    "distance",
    "pairwise_distances",
]
