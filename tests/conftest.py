import pytest

from graph import Graph


def build_graph(edges, nodes=(), directed=False):
    """Build a Graph from (u, v, w) triples plus optional isolated nodes."""
    g = Graph(directed=directed)
    for n in nodes:
        g.add_node(n)
    for u, v, w in edges:
        g.add_node(u)
        g.add_node(v)
        g.add_weighted_edge(u, v, w)
    return g


@pytest.fixture
def square_graph():
    """A-B (1), B-C (2), A-C (3), C-D (4): MST weight 7."""
    return build_graph([("A", "B", 1), ("B", "C", 2), ("A", "C", 3), ("C", "D", 4)])


@pytest.fixture
def two_triangles():
    return build_graph([
        (1, 2, 1.0), (2, 3, 2.0), (1, 3, 3.0),
        (4, 5, 1.5), (5, 6, 2.5), (4, 6, 0.5),
    ])


@pytest.fixture
def make_graph():
    return build_graph
