from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

import numpy as np

from ..utils.bitvec import as_bitvec, ones, popcount
from .remap import IndexRemap, invert_permutation

if TYPE_CHECKING:
    from ..config import BitGraphsConfig


class BitGraph(ABC):
    """Capability contract shared by the dense bit-matrix graph types.

    Vertices are the dense indices ``0 .. n-1``; ``n`` is fixed for the life of
    an instance. Neighbourhoods are returned as boolean numpy arrays of length
    ``n`` and are always copies, so callers may mutate them freely.

    Mutators (``add_edge``, ``remove_edge``, ``induce``, ``contract``) work in
    place. ``compressed``, ``reordered``, ``rearranged``, ``complement`` and
    ``serialize`` leave the receiver untouched and return new objects.

    Notes
    -----
    Instances are not safe for concurrent mutation. The pure operations may
    be called from several threads on a graph nobody is mutating.

    """

    __slots__ = ()

    directed: bool = False

    # Required capabilities

    @abstractmethod
    def verify(self) -> bool:
        """Check the representation invariants; never raises."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def _set_edge(self, fr: int, to: int, value: bool) -> None:
        """Single write path for every edge mutation."""

    @abstractmethod
    def in_neighbors(self, v: int) -> np.ndarray:
        """Bit-vector of predecessors of ``v``."""

    @abstractmethod
    def out_neighbors(self, v: int) -> np.ndarray:
        """Bit-vector of successors of ``v``."""

    @abstractmethod
    def induce(self, vertices) -> None:
        """Restrict to ``vertices`` in place without changing ``len(self)``.

        Excluded vertices end up with empty neighbourhoods; included vertices
        keep only the edges to other included vertices.
        """

    @abstractmethod
    def contract(self, u: int, v: int) -> None:
        """Merge ``v`` into ``u`` along the edge ``(u, v)`` and isolate ``v``.

        Raises
        ------
        NotAnEdgeError
            If ``(u, v)`` is not an edge.

        """

    @abstractmethod
    def compressed(self) -> tuple[BitGraph, IndexRemap]:
        """Copy without isolated vertices, plus the index remap (order preserved)."""

    @abstractmethod
    def reordered(self, order: Sequence[int]) -> BitGraph:
        """Relabeled copy where vertex ``order[i]`` moves to position ``i``.

        Raises
        ------
        InvalidPermutationError
            If ``order`` is not a bijection on ``[0, n)``.

        """

    @abstractmethod
    def complement(self) -> BitGraph:
        """Copy with every non-loop edge flipped and all self-loops cleared."""

    @abstractmethod
    def copy(self) -> BitGraph: ...

    # Shared operations

    def add_edge(self, fr: int, to: int) -> None:
        self.check_vertex(fr)
        self.check_vertex(to)
        self._set_edge(fr, to, True)

    def remove_edge(self, fr: int, to: int) -> None:
        self.check_vertex(fr)
        self.check_vertex(to)
        self._set_edge(fr, to, False)

    def add_edges(self, fr: int, targets) -> None:
        """Add ``fr -> t`` for every ``t`` in ``targets`` (mask or indices)."""
        for to in ones(as_bitvec(targets, len(self))):
            self.add_edge(fr, to)

    def remove_edges(self, fr: int, targets) -> None:
        """Remove ``fr -> t`` for every ``t`` in ``targets`` (mask or indices)."""
        for to in ones(as_bitvec(targets, len(self))):
            self.remove_edge(fr, to)

    def neighbors(self, v: int) -> np.ndarray:
        """Union of the in- and out-neighbourhoods of ``v``."""
        return self.in_neighbors(v) | self.out_neighbors(v)

    def has_edge(self, fr: int, to: int) -> bool:
        self.check_vertex(to)
        return bool(self.out_neighbors(fr)[to])

    def degree(self, v: int) -> int:
        return popcount(self.neighbors(v))

    def in_degree(self, v: int) -> int:
        return popcount(self.in_neighbors(v))

    def out_degree(self, v: int) -> int:
        return popcount(self.out_neighbors(v))

    def max_degree(self) -> int:
        return max((self.degree(v) for v in range(len(self))), default=0)

    def is_isolated(self, v: int) -> bool:
        return not self.neighbors(v).any()

    def edges(self) -> Iterator[tuple[int, int]]:
        """Edges in ascending order; undirected edges once, as ``(i, j)`` with ``i <= j``."""
        for i in range(len(self)):
            for j in ones(self.out_neighbors(i)):
                if self.directed or i <= j:
                    yield i, j

    def number_of_edges(self) -> int:
        return sum(1 for _ in self.edges())

    def rearranged(self, perm: Sequence[int]) -> BitGraph:
        """Relabeled copy where vertex ``v`` moves to position ``perm[v]``."""
        return self.reordered(invert_permutation(perm))

    def serialize(
        self,
        node_attrs=None,
        edge_attrs=None,
        config: BitGraphsConfig | None = None,
    ) -> str:
        """Graphviz DOT text for this graph; see :func:`bitgraphs.io.dot_io.to_dot`."""
        from ..io.dot_io import to_dot  # local import avoids cycles

        return to_dot(self, node_attrs=node_attrs, edge_attrs=edge_attrs, config=config)

    def check_vertex(self, v: int) -> None:
        """Raise ``IndexError`` unless ``0 <= v < len(self)``."""
        n = len(self)
        if not 0 <= v < n:
            raise IndexError(f"vertex {v} out of range [0, {n})")

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        n = len(self)
        return n == len(other) and all(
            np.array_equal(self.out_neighbors(i), other.out_neighbors(i)) for i in range(n)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)}, edges={self.number_of_edges()})"
