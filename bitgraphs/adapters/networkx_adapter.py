from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install bitgraphs[networkx]"
    ) from e

import warnings
from typing import TYPE_CHECKING, Any

from ..core.digraph import DiGraph
from ..core.graph import Graph

if TYPE_CHECKING:
    from ..core.base import BitGraph


def to_nx(graph: BitGraph):
    """Export to ``networkx.Graph`` / ``networkx.DiGraph`` with nodes ``0 .. n-1``.

    Parameters
    ----------
    graph : BitGraph

    Returns
    -------
    networkx.Graph | networkx.DiGraph

    """
    G = nx.DiGraph() if graph.directed else nx.Graph()
    G.add_nodes_from(range(len(graph)))
    G.add_edges_from(graph.edges())
    return G


def from_nx(G, directed: bool | None = None) -> tuple[BitGraph, list[Any]]:
    """Import a NetworkX graph.

    Node labels are mapped to dense indices in ``G.nodes`` iteration order.

    Parameters
    ----------
    G : networkx.Graph
        Any NetworkX graph; multigraph parallel edges collapse into one.
    directed : bool, optional
        Override ``G.is_directed()``. Importing a directed graph as
        undirected drops orientation.

    Returns
    -------
    tuple[BitGraph, list]
        The graph and ``labels`` with ``labels[i]`` the node that became ``i``.

    """
    if directed is None:
        directed = G.is_directed()
    lossy = []
    if G.is_multigraph():
        lossy.append("parallel edges collapsed")
    if G.is_directed() and not directed:
        lossy.append("edge orientation dropped")
    if lossy:
        warnings.warn("NetworkX -> bitgraphs conversion is lossy: " + "; ".join(lossy))

    labels = list(G.nodes)
    index = {node: i for i, node in enumerate(labels)}
    out = DiGraph(len(labels)) if directed else Graph(len(labels))
    for u, v in G.edges():
        out.add_edge(index[u], index[v])
    return out, labels
