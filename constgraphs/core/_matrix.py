import logging

import numpy as np
import scipy.sparse as sp

from ..utils.validation import check_index, check_size, obj_canonicalized_hash

logger = logging.getLogger(__name__)


class MatrixGraph:
    """Fixed-side square adjacency matrix shared by both graph variants.

    Subclasses set the cell ``_dtype`` and ``_empty`` value and implement
    ``_present_mask``. Row-major layout: row ``i`` holds the edges leaving
    vertex ``i``.

    Parameters
    ----------
    size : int
        Number of vertices ``N``. Fixed for the life of the instance.

    Notes
    -----
    - No internal locking. Share an instance across threads only behind a
      caller-held lock.
    - ``density`` scans all ``N * N`` cells, self-loops included, but divides by
      ``N * (N - 1)``, which excludes the ``N`` self-loop slots. A graph made of
      self-loops can therefore report a density above ``1.0``. This is kept
      on purpose.
    - The one exception is ``N == 1``: there are no possible edges, so
      ``density`` returns ``0.0`` even when the self-loop is set instead of
      dividing by zero.

    """

    _dtype = None
    _empty = None

    def __init__(self, size):
        self._size = check_size(size)
        self._data = np.full((self._size, self._size), self._empty, dtype=self._dtype)
        logger.debug("created %s of size %d", type(self).__name__, self._size)

    # Shape

    @property
    def size(self) -> int:
        """Side length ``N`` of the adjacency matrix."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def number_of_vertices(self) -> int:
        return self._size

    def vertices(self):
        return range(self._size)

    def _check(self, index) -> int:
        return check_index(index, self._size)

    # Removal

    def remove_edge(self, i, j):
        """Remove the directed edge ``i -> j``. Removing a missing edge is a no-op."""
        self._data[self._check(i), self._check(j)] = self._empty

    def remove_edge_undirected(self, i, j):
        """Remove both ``i -> j`` and ``j -> i``."""
        i, j = self._check(i), self._check(j)
        self._data[i, j] = self._empty
        self._data[j, i] = self._empty

    # Queries

    def get_edges(self, vertex):
        """Return the outgoing row of ``vertex``.

        Element ``k`` describes the edge ``vertex -> k``.

        Returns
        -------
        numpy.ndarray
            Read-only view into the graph storage. It is not a copy: later
            mutations of the graph show through it.

        See Also
        --------
        get_inverse_edges

        """
        row = self._data[self._check(vertex)]
        row.flags.writeable = False
        return row

    def get_inverse_edges(self, vertex):
        """Return the incoming column of ``vertex``.

        Element ``k`` describes the edge ``k -> vertex``. Useful for algorithms
        that need to know which vertices point at the current one.

        Returns
        -------
        numpy.ndarray
            Fresh copy; the column is not contiguous in row-major storage.

        See Also
        --------
        get_edges

        """
        return self._data[:, self._check(vertex)].copy()

    def neighbors(self, vertex) -> list[int]:
        """Vertices ``k`` with an edge ``vertex -> k``."""
        mask = self._present_mask(self._data[self._check(vertex)])
        return np.flatnonzero(mask).tolist()

    def predecessors(self, vertex) -> list[int]:
        """Vertices ``k`` with an edge ``k -> vertex``."""
        mask = self._present_mask(self._data[:, self._check(vertex)])
        return np.flatnonzero(mask).tolist()

    # Counting

    def max_number_of_edges(self) -> int:
        """Number of ordered pairs ``(i, j)`` with ``i != j``, i.e. ``N * (N - 1)``.

        Self-loops are storable but not counted here.
        """
        return self._size * (self._size - 1)

    def number_of_edges(self) -> int:
        """Number of present cells, self-loops included."""
        return int(np.count_nonzero(self._present_mask(self._data)))

    def density(self) -> float:
        """Ratio between present edges and ``max_number_of_edges()``.

        The numerator counts self-loops while the denominator does not (see the
        class notes). A single-vertex graph has no possible edges and reports
        ``0.0``.
        """
        possible = self.max_number_of_edges()
        if possible == 0:
            return 0.0
        return self.number_of_edges() / possible

    def clear(self):
        """Remove every edge. The size is unchanged."""
        self._data.fill(self._empty)
        logger.debug("cleared %s of size %d", type(self).__name__, self._size)

    # Conversion

    def adjacency(self):
        """Sparse CSR (Compressed Sparse Row) copy of the adjacency matrix."""
        rows, cols = np.nonzero(self._present_mask(self._data))
        values = self._sparse_values(rows, cols)
        return sp.csr_matrix((values, (rows, cols)), shape=(self._size, self._size))

    def copy(self):
        clone = type(self).__new__(type(self))
        clone._size = self._size
        clone._data = self._data.copy()
        return clone

    def fingerprint(self) -> str:
        """SHA-256 digest of the graph type, size and cells."""
        return obj_canonicalized_hash(
            {"type": type(self).__name__, "size": self._size, "cells": self._data}
        )

    @classmethod
    def from_edges(cls, size, edges):
        """Build a graph of ``size`` vertices and add each directed edge tuple."""
        graph = cls(size)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(size={self._size}, edges={self.number_of_edges()})"

    # Subclass hooks

    def _present_mask(self, cells):
        raise NotImplementedError

    def _sparse_values(self, rows, cols):
        raise NotImplementedError
