import pytest

from constgraphs.core.graph import Graph
from constgraphs.core.weighted_graph import WeightedGraph


@pytest.fixture
def triangle():
    """Complete undirected graph on three vertices."""
    G = Graph(3)
    G.add_edge_undirected(0, 1)
    G.add_edge_undirected(0, 2)
    G.add_edge_undirected(1, 2)
    return G


@pytest.fixture
def weighted_path():
    """0 -> 1 -> 2 -> 3 with a zero-weight last hop, plus a self-loop on 3."""
    G = WeightedGraph(5)
    G.add_edge(0, 1, 2.5)
    G.add_edge(1, 2, 0.75)
    G.add_edge(2, 3, 0.0)
    G.add_edge(3, 3, 1.0)
    return G
