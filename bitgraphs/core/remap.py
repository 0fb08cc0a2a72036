"""Index remapping produced by compaction and relabeling.

Old and new indices are kept in two separately named arrays so the direction
of a lookup is always explicit:

- ``new_to_old[i_new] == i_old`` (length ``n_new``)
- ``old_to_new[i_old] == i_new``, or ``-1`` if the old vertex was dropped
  (length ``n_old``)
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

import numpy as np

from ..exceptions import InvalidPermutationError


def check_permutation(seq: Sequence[int], n: int) -> list[int]:
    """Return ``seq`` as a list of ints, or raise if it is not a bijection on ``[0, n)``."""
    perm = []
    for x in seq:
        if isinstance(x, (bool, np.bool_)):
            raise InvalidPermutationError(f"entry {x!r} is not an integer index")
        try:
            perm.append(operator.index(x))
        except TypeError:
            raise InvalidPermutationError(f"entry {x!r} is not an integer index") from None
    if len(perm) != n:
        raise InvalidPermutationError(f"expected {n} entries, got {len(perm)}")
    seen = np.zeros(n, dtype=bool)
    for x in perm:
        if x < 0 or x >= n:
            raise InvalidPermutationError(f"index {x} outside [0, {n})")
        if seen[x]:
            raise InvalidPermutationError(f"index {x} appears more than once")
        seen[x] = True
    return perm


def invert_permutation(perm: Sequence[int]) -> list[int]:
    """Inverse of a bijection: ``inv[perm[v]] == v``."""
    perm = check_permutation(perm, len(perm))
    inv = [0] * len(perm)
    for v, p in enumerate(perm):
        inv[p] = v
    return inv


class IndexRemap:
    """Mapping between the vertex indices of a graph and a compacted copy of it."""

    __slots__ = ("new_to_old", "old_to_new")

    def __init__(self, new_to_old: Sequence[int], n_old: int):
        self.new_to_old: list[int] = [int(i) for i in new_to_old]
        self.old_to_new: list[int] = [-1] * int(n_old)
        for new, old in enumerate(self.new_to_old):
            if not 0 <= old < n_old:
                raise ValueError(f"old index {old} outside [0, {n_old})")
            if self.old_to_new[old] != -1:
                raise ValueError(f"old index {old} mapped twice")
            self.old_to_new[old] = new

    @classmethod
    def from_kept(cls, kept: np.ndarray) -> IndexRemap:
        """Remap for keeping the vertices set in the boolean mask ``kept``, in order."""
        return cls(np.flatnonzero(kept).tolist(), len(kept))

    @classmethod
    def identity(cls, n: int) -> IndexRemap:
        return cls(range(n), n)

    @property
    def n_old(self) -> int:
        return len(self.old_to_new)

    @property
    def n_new(self) -> int:
        return len(self.new_to_old)

    def map_old(self, i_old: int) -> int:
        """New index of old vertex ``i_old``; ``-1`` if it was dropped."""
        return self.old_to_new[i_old]

    def map_new(self, i_new: int) -> int:
        """Old index of new vertex ``i_new``."""
        return self.new_to_old[i_new]

    def compose(self, other: IndexRemap) -> IndexRemap:
        """Remap equivalent to applying ``self`` and then ``other``.

        ``other`` must describe a graph of ``self.n_new`` vertices.
        """
        if other.n_old != self.n_new:
            raise ValueError(f"cannot compose: {other.n_old} != {self.n_new}")
        return IndexRemap([self.new_to_old[i] for i in other.new_to_old], self.n_old)

    def __len__(self) -> int:
        return self.n_new

    def __eq__(self, other) -> bool:
        if not isinstance(other, IndexRemap):
            return NotImplemented
        return self.new_to_old == other.new_to_old and self.n_old == other.n_old

    def __repr__(self) -> str:
        return f"IndexRemap(new_to_old={self.new_to_old}, n_old={self.n_old})"
