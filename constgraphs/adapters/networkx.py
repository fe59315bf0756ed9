try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install constgraphs[networkx]"
    ) from e

import logging
import operator

from ..core.graph import Graph
from ..core.weighted_graph import WeightedGraph
from ..utils.validation import check_index

logger = logging.getLogger(__name__)


def _vertex_label(node) -> int:
    try:
        return operator.index(node)
    except TypeError as e:
        raise ValueError(f"node labels must be integers, got {node!r}") from e


def to_nx(graph, *, weight: str = "weight"):
    """
    Export a matrix graph to a NetworkX DiGraph.

    Parameters
    ----------
    graph : Graph | WeightedGraph
        Source graph instance.
    weight : str
        Edge attribute that receives the weight of a ``WeightedGraph`` cell.

    Returns
    -------
    networkx.DiGraph
        Nodes ``0 .. N-1`` (isolated vertices included), one edge per present
        cell, self-loops preserved.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.vertices())
    if isinstance(graph, WeightedGraph):
        G.add_weighted_edges_from(graph.edges(), weight=weight)
    else:
        G.add_edges_from(graph.edges())
    logger.debug("exported %r to networkx", graph)
    return G


def from_nx(G, *, weighted=None, size=None, weight: str = "weight"):
    """
    Import a NetworkX graph with integer node labels.

    Parameters
    ----------
    G : networkx.Graph
        Source graph. Directed graphs map edge ``u -> v`` to cell ``(u, v)``;
        undirected graphs write both directions. Parallel edges of multigraphs
        collapse to one cell, the last one read wins.
    weighted : bool, optional
        Build a ``WeightedGraph``. Inferred from the presence of ``weight`` on
        any edge when omitted.
    size : int, optional
        Number of vertices. Defaults to the largest node label plus one.
    weight : str
        Edge attribute holding the weight. Edges without it get ``1.0``.

    Returns
    -------
    Graph | WeightedGraph

    Raises
    ------
    ValueError
        If a node label is not an integer, or ``size`` cannot be inferred from
        an empty graph.
    IndexOutOfRangeError
        If a node label is outside ``[0, size)``.
    """
    labels = [_vertex_label(n) for n in G.nodes]
    if size is None:
        if not labels:
            raise ValueError("cannot infer the size of an empty graph; pass size=")
        size = max(labels) + 1
    if weighted is None:
        weighted = any(weight in d for _, _, d in G.edges(data=True))

    out = WeightedGraph(size) if weighted else Graph(size)
    for label in labels:
        check_index(label, out.size)

    add = out.add_edge if G.is_directed() else out.add_edge_undirected
    for u, v, d in G.edges(data=True):
        if weighted:
            add(_vertex_label(u), _vertex_label(v), d.get(weight, 1.0))
        else:
            add(_vertex_label(u), _vertex_label(v))
    logger.debug("imported %r from networkx", out)
    return out
