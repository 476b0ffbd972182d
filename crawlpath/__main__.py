import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from crawlpath import (
    InvalidInput,
    METRICS,
    OrderingOptions,
    Point,
    build_complete_graph,
    minimum_spanning_tree,
    traverse_tree,
)
from crawlpath.config import NEIGHBOR_ORDERS

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[,\s]+")


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def read_points(text: str) -> List[Point]:
    """Parse ``id x y`` lines; blank lines and ``#`` comments are skipped."""

    points: List[Point] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = _SEPARATOR_RE.split(line)
        if len(fields) != 3:
            raise InvalidInput(f"[line {lineno}] expected 'id x y', got {raw.strip()!r}")
        try:
            points.append(Point(int(fields[0]), float(fields[1]), float(fields[2])))
        except ValueError as exc:
            raise InvalidInput(f"[line {lineno}] {exc}") from exc
    return points


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Order clue locations along a spanning-tree walk")
    parser.add_argument("path", help="File with one 'id x y' clue location per line")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--metric",
        choices=METRICS,
        default="euclidean",
        help="Distance metric for edge weights (default: euclidean)",
    )
    parser.add_argument(
        "--root",
        type=int,
        help="Clue identifier to start from (default: lowest identifier)",
    )
    parser.add_argument(
        "--neighbor-order",
        choices=NEIGHBOR_ORDERS,
        default="nearest",
        help="Order in which tree branches are visited (default: nearest)",
    )
    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the spanning tree adjacency and its total weight",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    text = Path(args.path).read_text(encoding="utf-8")
    options = OrderingOptions(
        metric=args.metric,
        root=args.root,
        neighbor_order=args.neighbor_order,
    )

    try:
        points = read_points(text)
        logger.info("Read %d clue location(s) from %s", len(points), args.path)
        options.validate()
        tree = minimum_spanning_tree(build_complete_graph(points, options.metric))
        order = traverse_tree(tree, options.root, neighbor_order=options.neighbor_order)
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(1)

    print("Order:", ", ".join(str(pid) for pid in order))
    if args.show_tree:
        print("Spanning tree:")
        print(tree.format_adjacency())
        print(f"Total weight: {tree.total_weight():.6f}")


if __name__ == "__main__":
    main(sys.argv[1:])
