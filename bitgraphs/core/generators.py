"""Graph constructors: empty, complete and Erdos-Renyi random graphs."""

from __future__ import annotations

import logging

import numpy as np

from .base import BitGraph
from .digraph import DiGraph
from .graph import Graph

logger = logging.getLogger(__name__)


def empty(n: int, directed: bool = False) -> BitGraph:
    """Graph on ``n`` vertices with no edges."""
    return DiGraph(n) if directed else Graph(n)


def complete(n: int, directed: bool = False) -> BitGraph:
    """K_n, or the complete digraph on ``n`` vertices when ``directed``."""
    return DiGraph.complete(n) if directed else Graph.complete(n)


def erdos_renyi(n: int, p: float, directed: bool = False, seed=None) -> BitGraph:
    """G(n, p) random graph.

    Parameters
    ----------
    n : int
        Number of vertices.
    p : float
        Edge probability in ``[0, 1]``. Undirected graphs draw once per pair
        ``i < j``; directed graphs draw once per ordered pair ``u != v``.
    directed : bool
        Build a :class:`DiGraph` instead of a :class:`Graph`.
    seed : int | numpy.random.Generator | None
        Passed to :func:`numpy.random.default_rng`.

    Returns
    -------
    Graph | DiGraph

    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"edge probability must be in [0, 1], got {p}")
    rng = np.random.default_rng(seed)
    draws = rng.random((n, n)) < p
    np.fill_diagonal(draws, False)
    if directed:
        g = DiGraph.from_rows(draws)
    else:
        upper = np.triu(draws, k=1)
        g = Graph.from_rows(upper | upper.T)
    logger.debug("erdos_renyi(n=%d, p=%s) drew %d edges", n, p, g.number_of_edges())
    return g
