# Traversal (breadth-first / depth-first)
from __future__ import annotations

from collections import deque
from collections.abc import Callable

import numpy as np

from ..core.base import BitGraph
from ..utils.bitvec import ones


def bfs(g: BitGraph, start: int, visitor: Callable[[int], None] | None = None) -> list[int]:
    """Breadth-first search from ``start`` along out-edges.

    Parameters
    --
    g : BitGraph
    start : int
        Source vertex.
    visitor : callable, optional
        ``visitor(v)`` is called once per reached vertex, in dequeue order,
        before its neighbours are expanded.

    Returns
    ---
    list[int]
        ``dists[v]`` is the hop distance from ``start``; ``-1`` if unreached.

    """
    if visitor is None:
        dists, _ = bfs_tree(g, start)
    else:
        dists, _ = bfs_tree(g, start, lambda v, _depth, _parent: visitor(v))
    return dists


def bfs_tree(
    g: BitGraph,
    start: int,
    visitor: Callable[[int, int, int], None] | None = None,
) -> tuple[list[int], list[int]]:
    """Breadth-first search returning distances and the BFS parent of each vertex.

    Neighbours are enqueued in ascending index order, so among vertices at
    the same depth the one discovered from an earlier parent (then the lower
    index) is visited first.

    Parameters
    --
    visitor : callable, optional
        ``visitor(v, depth, parent)`` per reached vertex; ``parent`` is ``-1``
        for ``start``.

    Returns
    ---
    tuple[list[int], list[int]]
        ``(dists, parents)``; both use ``-1`` for unreached vertices and
        ``parents[start] == -1``.

    """
    n = len(g)
    g.check_vertex(start)
    dists = [-1] * n
    parents = [-1] * n
    visited = np.zeros(n, dtype=bool)
    queue = deque([start])
    visited[start] = True
    dists[start] = 0
    while queue:
        v = queue.popleft()
        if visitor is not None:
            visitor(v, dists[v], parents[v])
        fresh = g.out_neighbors(v) & ~visited
        visited |= fresh
        for w in ones(fresh):
            dists[w] = dists[v] + 1
            parents[w] = v
            queue.append(w)
    return dists, parents


def dfs(g: BitGraph, start: int, visitor: Callable[[int], None] | None = None) -> list[int]:
    """Depth-first search from ``start`` along out-edges, without recursion.

    A vertex is marked when it is popped. Its unmarked successors are pushed
    highest index first, so the lowest-indexed successor is explored first:
    the visit order is the same preorder a recursive DFS iterating neighbours
    in ascending order would produce.

    Parameters
    --
    visitor : callable, optional
        ``visitor(v)`` once per reached vertex, in visit order, before its
        successors are pushed.

    Returns
    ---
    list[int]
        ``order[v]`` is the 0-based rank at which ``v`` was visited; ``-1``
        if unreached.

    """
    n = len(g)
    g.check_vertex(start)
    order = [-1] * n
    visited = np.zeros(n, dtype=bool)
    stack = [start]
    rank = 0
    while stack:
        v = stack.pop()
        if visited[v]:
            continue
        visited[v] = True
        order[v] = rank
        rank += 1
        if visitor is not None:
            visitor(v)
        stack.extend(reversed(ones(g.out_neighbors(v) & ~visited)))
    return order
