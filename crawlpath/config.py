"""Default options for path ordering."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

from .geometry import check_metric
from .types import InvalidInput, PointId

NEIGHBOR_ORDERS = ("nearest", "id")


@dataclass
class OrderingOptions:
    """Options for :func:`crawlpath.ordering.order_path`."""

    metric: str = "euclidean"
    root: Optional[PointId] = None
    neighbor_order: str = "nearest"

    def validate(self) -> None:
        check_metric(self.metric)
        if self.neighbor_order not in NEIGHBOR_ORDERS:
            raise InvalidInput(
                f"unknown neighbour order {self.neighbor_order!r} "
                f"(expected one of {', '.join(NEIGHBOR_ORDERS)})"
            )


_DEFAULT_OPTIONS = OrderingOptions()


def get_default_options() -> OrderingOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: OrderingOptions) -> None:
    global _DEFAULT_OPTIONS
    options.validate()
    _DEFAULT_OPTIONS = copy.deepcopy(options)
