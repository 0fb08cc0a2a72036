from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..exceptions import GraphValidationError, NotAnEdgeError
from ..utils.bitvec import as_bitvec
from .base import BitGraph
from .remap import IndexRemap, check_permutation

logger = logging.getLogger(__name__)


def _square_matrix(rows) -> np.ndarray:
    """Materialize row data as an ``(n, n)`` bool array or raise GraphValidationError."""
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2 or rows.shape[0] != rows.shape[1]:
            raise GraphValidationError(f"adjacency must be square, got shape {rows.shape}")
        return rows.astype(bool)
    rows = [list(r) for r in rows]
    n = len(rows)
    for i, r in enumerate(rows):
        if len(r) != n:
            raise GraphValidationError(f"row {i} has {len(r)} entries, expected {n}")
    return np.array(rows, dtype=bool).reshape(n, n)


class Graph(BitGraph):
    """Undirected graph stored as a symmetric ``n x n`` bit-matrix.

    Row ``i`` is the neighbourhood of vertex ``i``; ``_rows[i, j]`` is set iff
    the edge ``{i, j}`` exists. Every mutation writes both ``[i, j]`` and
    ``[j, i]`` so the matrix stays symmetric.

    Parameters
    ----------
    n : int
        Number of vertices.

    Examples
    --------
    >>> g = Graph(3)
    >>> g.add_edge(0, 2)
    >>> g.has_edge(2, 0)
    True

    """

    directed = False

    __slots__ = ("_rows",)

    def __init__(self, n: int = 0):
        n = int(n)
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._rows = np.zeros((n, n), dtype=bool)

    @classmethod
    def _wrap(cls, rows: np.ndarray) -> Graph:
        g = cls.__new__(cls)
        g._rows = rows
        return g

    @classmethod
    def from_rows(cls, rows) -> Graph:
        """Build a graph from fully materialized row data.

        Parameters
        ----------
        rows : sequence of sequences or 2-D array
            ``rows[i][j]`` truthy iff ``{i, j}`` is an edge.

        Raises
        ------
        GraphValidationError
            If the rows are ragged, the matrix is not square, or it is not
            symmetric. No graph is built in that case.

        """
        g = cls._wrap(_square_matrix(rows))
        if not g.verify():
            raise GraphValidationError("adjacency matrix is not symmetric")
        return g

    @classmethod
    def complete(cls, n: int) -> Graph:
        """K_n: every pair of distinct vertices adjacent, no self-loops."""
        g = cls(n)
        g._rows[:] = True
        np.fill_diagonal(g._rows, False)
        return g

    # Contract

    def verify(self) -> bool:
        rows = self._rows
        n = len(rows)
        if n == 0:
            return True
        return rows.shape == (n, n) and bool(np.array_equal(rows, rows.T))

    def __len__(self) -> int:
        return self._rows.shape[0]

    def _set_edge(self, fr: int, to: int, value: bool) -> None:
        self._rows[fr, to] = value
        self._rows[to, fr] = value

    def in_neighbors(self, v: int) -> np.ndarray:
        self.check_vertex(v)
        return self._rows[v].copy()

    def out_neighbors(self, v: int) -> np.ndarray:
        self.check_vertex(v)
        return self._rows[v].copy()

    def neighbors(self, v: int) -> np.ndarray:
        self.check_vertex(v)
        return self._rows[v].copy()

    def induce(self, vertices) -> None:
        keep = as_bitvec(vertices, len(self))
        self._rows &= keep
        self._rows[~keep] = False
        logger.debug("induced %d of %d vertices", int(keep.sum()), len(self))

    def contract(self, u: int, v: int) -> None:
        self.check_vertex(u)
        self.check_vertex(v)
        if not self._rows[u, v]:
            raise NotAnEdgeError(u, v)
        rows = self._rows
        if u == v:
            # contracting a self loop isolates the vertex
            rows[v, :] = False
            rows[:, v] = False
            logger.debug("contracted self loop on %d", v)
            return
        merged = rows[u] | rows[v]
        merged[u] = merged[v] = False
        rows[v, :] = False
        rows[:, v] = False
        rows[u, :] = merged
        rows[:, u] = merged
        logger.debug("contracted %d into %d", v, u)

    def compressed(self) -> tuple[Graph, IndexRemap]:
        kept = self._rows.any(axis=1)
        remap = IndexRemap.from_kept(kept)
        idx = np.asarray(remap.new_to_old, dtype=np.intp)
        logger.debug("compressed %d -> %d vertices", len(self), remap.n_new)
        return self._wrap(self._rows[np.ix_(idx, idx)].copy()), remap

    def reordered(self, order: Sequence[int]) -> Graph:
        idx = np.asarray(check_permutation(order, len(self)), dtype=np.intp)
        return self._wrap(self._rows[np.ix_(idx, idx)].copy())

    def complement(self) -> Graph:
        rows = ~self._rows
        np.fill_diagonal(rows, False)
        return self._wrap(rows)

    def copy(self) -> Graph:
        return self._wrap(self._rows.copy())

    # Extras

    def adjacency(self) -> np.ndarray:
        """Copy of the full ``n x n`` bit-matrix."""
        return self._rows.copy()

    def number_of_edges(self) -> int:
        n_loops = int(np.count_nonzero(np.diagonal(self._rows)))
        return (int(np.count_nonzero(self._rows)) - n_loops) // 2 + n_loops
