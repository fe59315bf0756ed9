import numpy as np

from ._matrix import MatrixGraph


class Graph(MatrixGraph):
    """Unweighted graph over a fixed ``N x N`` boolean adjacency matrix.

    Vertices are the integers ``0 .. N-1`` and always exist. Cell ``(i, j)`` is
    ``True`` when there is an edge ``i -> j``. Undirected edges are written as
    both directions; symmetry is not tracked.

    Parameters
    ----------
    size : int
        Number of vertices. Must be at least 1.

    Examples
    --------
    >>> G = Graph(3)
    >>> G.add_edge(0, 2)
    >>> G.get_edges(0).tolist()
    [False, False, True]
    >>> G.get_inverse_edges(2).tolist()
    [True, False, False]

    See Also
    --------
    WeightedGraph

    """

    _dtype = np.bool_
    _empty = False

    def add_edge(self, i, j):
        """Add the directed edge ``i -> j``. Adding an existing edge is a no-op.

        See Also
        --------
        add_edge_undirected

        """
        self._data[self._check(i), self._check(j)] = True

    def add_edge_undirected(self, i, j):
        """Add both ``i -> j`` and ``j -> i``."""
        i, j = self._check(i), self._check(j)
        self._data[i, j] = True
        self._data[j, i] = True

    def has_edge(self, i, j) -> bool:
        return bool(self._data[self._check(i), self._check(j)])

    def edges(self):
        """Iterate ``(i, j)`` pairs of present edges in row-major order."""
        for i, j in zip(*np.nonzero(self._data)):
            yield int(i), int(j)

    def to_numpy(self):
        """Dense boolean copy of the adjacency matrix."""
        return self._data.copy()

    def _present_mask(self, cells):
        return cells

    def _sparse_values(self, rows, cols):
        return np.ones(len(rows), dtype=np.bool_)


UnweightedGraph = Graph
