from crawlpath import build_complete_graph, minimum_spanning_tree
from crawlpath import demo


def test_sample_points_form_spanning_tree():
    tree = minimum_spanning_tree(build_complete_graph(demo.SAMPLE_POINTS))
    assert len(tree.edges) == len(demo.SAMPLE_POINTS) - 1
    assert tree.is_connected()


def test_demo_run_prints_order(capsys):
    demo.run()
    out = capsys.readouterr().out
    assert "Spanning tree:" in out
    order_line = [line for line in out.splitlines() if line.startswith("Order:")][0]
    ids = [int(part) for part in order_line.split(":", 1)[1].split(",")]
    assert sorted(ids) == [1, 2, 3, 4, 5]
    assert ids[0] == 1
