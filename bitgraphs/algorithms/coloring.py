from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from ..core.base import BitGraph
from ..core.remap import check_permutation
from ..utils.bitvec import as_bitvec, dot, ones, popcount


def is_independent(g: BitGraph, s) -> bool:
    """True if no two members of ``s`` (mask or indices) are adjacent."""
    mask = as_bitvec(s, len(g))
    return not any(dot(mask, g.out_neighbors(u)) for u in ones(mask))


def is_clique(g: BitGraph, s) -> bool:
    """True if every member of ``s`` is adjacent to all the other members.

    Each member must have exactly ``|s| - 1`` out-neighbours inside ``s``.
    The empty set and singletons are cliques.
    """
    mask = as_bitvec(s, len(g))
    k = popcount(mask) - 1
    return all(dot(mask, g.out_neighbors(i)) == k for i in ones(mask))


def greedy_color(g: BitGraph, order: Sequence[int] | None = None) -> list[set[int]]:
    """First-fit greedy coloring.

    Visits the vertices in ``order`` and puts each one into the lowest-indexed
    colour class that contains none of its neighbours, opening a new class
    when every existing one conflicts. Uses at most ``g.max_degree() + 1``
    classes for any order.

    Parameters
    ----------
    g : BitGraph
        For a directed graph, adjacency in either direction conflicts.
    order : sequence of int, optional
        Permutation of all vertices; defaults to ``0 .. n-1``.

    Returns
    -------
    list[set[int]]
        Colour classes. Pairwise disjoint, covering every vertex, each an
        independent set. An empty graph yields one empty class.

    Raises
    ------
    InvalidPermutationError
        If ``order`` is not a permutation of the vertices.
    ValueError
        If ``g`` has a self-loop; such a vertex conflicts with itself.

    """
    n = len(g)
    order = list(range(n)) if order is None else check_permutation(order, n)
    loops = [v for v in range(n) if g.has_edge(v, v)]
    if loops:
        raise ValueError(f"no proper coloring: self-loops on {loops}")
    classes = [np.zeros(n, dtype=bool)]
    for v in order:
        nbrs = g.neighbors(v)
        for members in classes:
            if not (members & nbrs).any():
                members[v] = True
                break
        else:
            fresh = np.zeros(n, dtype=bool)
            fresh[v] = True
            classes.append(fresh)
    assert all(is_independent(g, c) for c in classes)
    return [set(ones(c)) for c in classes]


def color_map(classes: Iterable[Iterable[int]], n: int) -> list[int]:
    """Invert colour classes into ``colors[v] == class index`` (``-1`` if uncoloured)."""
    colors = [-1] * n
    for c, members in enumerate(classes):
        for v in members:
            colors[v] = c
    return colors
