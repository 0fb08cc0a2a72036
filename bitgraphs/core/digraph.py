from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..exceptions import GraphValidationError, NotAnEdgeError
from ..utils.bitvec import as_bitvec
from .base import BitGraph
from .graph import Graph, _square_matrix
from .remap import IndexRemap, check_permutation

logger = logging.getLogger(__name__)


class DiGraph(BitGraph):
    """Directed graph stored as two mirrored ``n x n`` bit-matrices.

    - ``_incoming[v, u]`` is set iff the edge ``u -> v`` exists
    - ``_outgoing[u, v]`` is set iff the edge ``u -> v`` exists

    The two families are always transposes of each other. Every mutation goes
    through ``_set_edge`` (single edges) or rebuilds one family from the other,
    so no caller can observe them out of step.

    Parameters
    ----------
    n : int
        Number of vertices.

    """

    directed = True

    __slots__ = ("_incoming", "_outgoing")

    def __init__(self, n: int = 0):
        n = int(n)
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._incoming = np.zeros((n, n), dtype=bool)
        self._outgoing = np.zeros((n, n), dtype=bool)

    @classmethod
    def _wrap(cls, incoming: np.ndarray, outgoing: np.ndarray) -> DiGraph:
        g = cls.__new__(cls)
        g._incoming = incoming
        g._outgoing = outgoing
        return g

    @classmethod
    def _from_outgoing(cls, outgoing: np.ndarray) -> DiGraph:
        return cls._wrap(np.ascontiguousarray(outgoing.T), outgoing)

    @classmethod
    def from_rows(cls, rows) -> DiGraph:
        """Build a digraph whose row ``u`` is the out-neighbourhood of ``u``.

        Raises
        ------
        GraphValidationError
            If the rows are ragged or the matrix is not square.

        """
        g = cls._from_outgoing(_square_matrix(rows))
        if not g.verify():
            raise GraphValidationError("incoming and outgoing families differ in size")
        return g

    @classmethod
    def complete(cls, n: int) -> DiGraph:
        """Complete digraph: ``u -> v`` for every ordered pair ``u != v``."""
        outgoing = np.ones((n, n), dtype=bool)
        np.fill_diagonal(outgoing, False)
        return cls._from_outgoing(outgoing)

    # Contract

    def verify(self) -> bool:
        n = len(self._incoming)
        return len(self._outgoing) == n and self._incoming.shape == self._outgoing.shape == (n, n)

    def __len__(self) -> int:
        return self._outgoing.shape[0]

    def _set_edge(self, fr: int, to: int, value: bool) -> None:
        self._outgoing[fr, to] = value
        self._incoming[to, fr] = value

    def in_neighbors(self, v: int) -> np.ndarray:
        self.check_vertex(v)
        return self._incoming[v].copy()

    def out_neighbors(self, v: int) -> np.ndarray:
        self.check_vertex(v)
        return self._outgoing[v].copy()

    def induce(self, vertices) -> None:
        keep = as_bitvec(vertices, len(self))
        for family in (self._incoming, self._outgoing):
            family &= keep
            family[~keep] = False
        logger.debug("induced %d of %d vertices", int(keep.sum()), len(self))

    def contract(self, u: int, v: int) -> None:
        self.check_vertex(u)
        self.check_vertex(v)
        if not self._outgoing[u, v]:
            raise NotAnEdgeError(u, v)
        out, inc = self._outgoing, self._incoming
        if u == v:
            # contracting a self loop isolates the vertex
            for family in (out, inc):
                family[v, :] = False
                family[:, v] = False
            logger.debug("contracted self loop on %d", v)
            return
        succ = out[u] | out[v]
        pred = inc[u] | inc[v]
        succ[u] = succ[v] = False
        pred[u] = pred[v] = False

        # isolate v, then rewrite u's row and column in both families
        out[v, :] = False
        out[:, v] = False
        inc[v, :] = False
        inc[:, v] = False
        out[u, :] = succ
        inc[:, u] = succ
        inc[u, :] = pred
        out[:, u] = pred
        logger.debug("contracted %d into %d", v, u)

    def compressed(self) -> tuple[DiGraph, IndexRemap]:
        kept = self._incoming.any(axis=1) | self._outgoing.any(axis=1)
        remap = IndexRemap.from_kept(kept)
        idx = np.asarray(remap.new_to_old, dtype=np.intp)
        sel = np.ix_(idx, idx)
        logger.debug("compressed %d -> %d vertices", len(self), remap.n_new)
        return self._wrap(self._incoming[sel].copy(), self._outgoing[sel].copy()), remap

    def reordered(self, order: Sequence[int]) -> DiGraph:
        idx = np.asarray(check_permutation(order, len(self)), dtype=np.intp)
        sel = np.ix_(idx, idx)
        return self._wrap(self._incoming[sel].copy(), self._outgoing[sel].copy())

    def complement(self) -> DiGraph:
        outgoing = ~self._outgoing
        np.fill_diagonal(outgoing, False)
        return self._from_outgoing(outgoing)

    def copy(self) -> DiGraph:
        return self._wrap(self._incoming.copy(), self._outgoing.copy())

    # Extras

    def transpose(self) -> DiGraph:
        """Copy with every edge reversed; the two families trade places."""
        return self._wrap(self._outgoing.copy(), self._incoming.copy())

    def to_undirected(self) -> Graph:
        """Undirected graph with ``{u, v}`` for every edge ``u -> v``."""
        return Graph._wrap(self._outgoing | self._incoming)

    def adjacency(self) -> np.ndarray:
        """Copy of the out-adjacency matrix (row ``u`` = successors of ``u``)."""
        return self._outgoing.copy()

    def number_of_edges(self) -> int:
        return int(np.count_nonzero(self._outgoing))
