import numpy as np

from ..utils.validation import check_weight
from ._matrix import MatrixGraph


class WeightedGraph(MatrixGraph):
    """Weighted graph over a fixed ``N x N`` matrix of optional weights.

    A cell holds ``None`` when there is no edge and a ``float`` weight otherwise,
    so ``0.0`` is a valid weight distinct from "no edge".

    Parameters
    ----------
    size : int
        Number of vertices. Must be at least 1.

    Notes
    -----
    Weights are kept as Python floats in an ``object`` array. ``get_edge``
    returns exactly the value passed to ``add_edge``.

    Examples
    --------
    >>> G = WeightedGraph(10)
    >>> G.add_edge(0, 1, 16.0)
    >>> G.get_edge(0, 1)
    16.0
    >>> G.has_edge(1, 0)
    False

    """

    _dtype = object
    _empty = None

    def add_edge(self, i, j, weight):
        """Add or overwrite the directed edge ``i -> j`` with ``weight``.

        See Also
        --------
        add_edge_undirected

        """
        self._data[self._check(i), self._check(j)] = check_weight(weight)

    def add_edge_undirected(self, i, j, weight):
        """Set both ``i -> j`` and ``j -> i`` to ``weight``."""
        i, j = self._check(i), self._check(j)
        weight = check_weight(weight)
        self._data[i, j] = weight
        self._data[j, i] = weight

    def get_edge(self, i, j):
        """Weight of ``i -> j``, or ``None`` when there is no edge."""
        return self._data[self._check(i), self._check(j)]

    def has_edge(self, i, j) -> bool:
        return self.get_edge(i, j) is not None

    def edges(self):
        """Iterate ``(i, j, weight)`` triples of present edges in row-major order."""
        for i, j in zip(*np.nonzero(self._present_mask(self._data))):
            yield int(i), int(j), self._data[i, j]

    def total_weight(self) -> float:
        return float(sum(w for _, _, w in self.edges()))

    def to_numpy(self):
        """Dense ``float64`` copy with ``nan`` where there is no edge."""
        out = np.full((self._size, self._size), np.nan, dtype=np.float64)
        mask = self._present_mask(self._data)
        out[mask] = self._data[mask].astype(np.float64)
        return out

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self._size != other._size:
            return False
        # to_numpy fills absent cells with nan, so presence is compared first
        mask = self._present_mask(self._data)
        same_cells = np.array_equal(mask, other._present_mask(other._data))
        return same_cells and np.array_equal(self.to_numpy(), other.to_numpy(), equal_nan=True)

    __hash__ = None

    def _present_mask(self, cells):
        return np.asarray(np.not_equal(cells, None), dtype=np.bool_)

    def _sparse_values(self, rows, cols):
        return self._data[rows, cols].astype(np.float64)
