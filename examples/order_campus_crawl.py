"""Example: order a handful of campus clues and show the spanning tree behind it."""

from crawlpath import OrderingOptions, Point, build_complete_graph, minimum_spanning_tree, order_path

CLUES = [
    Point(10, 42.3601, -71.0942),
    Point(11, 42.3591, -71.0935),
    Point(12, 42.3584, -71.0979),
    Point(13, 42.3611, -71.0903),
    Point(14, 42.3555, -71.1011),
]


def main() -> None:
    options = OrderingOptions(metric="haversine")
    tree = minimum_spanning_tree(build_complete_graph(CLUES, options.metric))
    print("Spanning tree:")
    print(tree.format_adjacency())
    print(f"Total length: {tree.total_weight():.3f} km")
    print("Order:", ", ".join(str(pid) for pid in order_path(CLUES, options)))


if __name__ == "__main__":
    main()
