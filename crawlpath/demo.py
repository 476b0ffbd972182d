from . import Point, build_complete_graph, minimum_spanning_tree, order_path

SAMPLE_POINTS = [
    Point(1, 1, 2),
    Point(2, 12, -3),
    Point(3, 4, 54),
    Point(4, 23, 86),
    Point(5, 32, 43),
]


def run():
    graph = build_complete_graph(SAMPLE_POINTS)
    print(f"Complete graph:\n{graph.format_adjacency()}\n")

    tree = minimum_spanning_tree(graph)
    print(f"Spanning tree:\n{tree.format_adjacency()}\n")
    print(f"Total weight: {tree.total_weight():.3f}")

    order = order_path(SAMPLE_POINTS)
    print("Order:", ", ".join(str(pid) for pid in order))


if __name__ == "__main__":
    run()
