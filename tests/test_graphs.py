import math

import pytest

from numlab.graphs import (
    ARROW_LENGTH,
    Connection,
    Node,
    build_graph,
    circular_layout,
    edge_segments,
)


def test_layout_names_and_count():
    nodes = circular_layout(7)
    assert [n.name for n in nodes] == list("ABCDEFG")


def test_first_node_position():
    nodes = circular_layout(4, center=(640, 360), radius=256, node_size=48)
    assert (nodes[0].x, nodes[0].y) == (872, 336)


def test_layout_on_circle():
    nodes = circular_layout(9, center=(500, 400), radius=200, node_size=40)
    for n in nodes:
        cx, cy = n.center
        assert abs(math.hypot(cx - 500, cy - 400) - 200) <= 2


def test_layout_rejects_empty():
    with pytest.raises(ValueError):
        circular_layout(0)


def test_build_graph_connections():
    nodes, conns, matrix = build_graph(5)
    assert len(nodes) == 5
    assert len(conns) == 25
    assert matrix.shape == (5, 5)
    assert conns[0].source is nodes[0] and conns[0].target is nodes[0]
    assert conns[0].value == 1
    for c in conns:
        i = nodes.index(c.source)
        j = nodes.index(c.target)
        assert c.value == matrix[i, j] == matrix[j, i]


def test_self_edge_has_no_segments():
    n = Node("A", 10, 10)
    assert edge_segments(n, n) == []


@pytest.mark.parametrize(
    "a,b",
    [
        ((0, 0), (300, 100)),
        ((300, 100), (0, 0)),
        ((100, 0), (100, 300)),
        ((0, 200), (400, 200)),
    ],
)
def test_segments_geometry(a, b):
    n1 = Node("A", *a)
    n2 = Node("B", *b)
    segs = edge_segments(n1, n2)
    assert len(segs) == 3
    tip = segs[0][1]
    assert segs[1][0] == tip and segs[2][0] == tip
    for _, end in segs[1:]:
        assert abs(math.dist(tip, end) - ARROW_LENGTH) <= 2
    tcx, tcy = n2.center
    assert abs(math.dist(tip, (tcx, tcy)) - n2.w // 2) <= 2


def test_connection_holds_nodes():
    a, b = Node("A"), Node("B")
    c = Connection(a, b, 2.5)
    assert (c.source.name, c.target.name, c.value) == ("A", "B", 2.5)