"""Graphviz DOT emission.

Layout of the emitted text::

    strict graph {                      (``digraph {`` for directed graphs)
    node [fontname="sans-serif",fontsize="12"]
    0 [id=0,color="red"]
    0 -- 1 [id="0,1",weight="3"]        (``0 -> 1`` for directed graphs)
    1 [id=1]
    ...
    }

Each vertex line is followed by the edges it emits: every out-neighbour for
directed graphs, the neighbours ``j >= i`` for undirected ones, so each
undirected edge appears exactly once.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..config import DEFAULT_CONFIG, BitGraphsConfig
from ..core.base import BitGraph
from ..exceptions import MissingAttributeError
from ..utils.bitvec import ones

NodeAttrs = Mapping[int, Mapping[str, object]]
EdgeAttrs = Mapping[tuple[int, int], Mapping[str, object]]


def _quote(value) -> str:
    s = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{s}"'


def _props(head: str, attrs: Mapping[str, object] | None) -> str:
    parts = [head]
    if attrs:
        parts.extend(f"{k}={_quote(v)}" for k, v in attrs.items())
    return ",".join(parts)


def _lookup(table, key, kind: str):
    if table is None:
        return None
    try:
        return table[key]
    except KeyError:
        raise MissingAttributeError(kind, key) from None


def to_dot(
    graph: BitGraph,
    node_attrs: NodeAttrs | None = None,
    edge_attrs: EdgeAttrs | None = None,
    config: BitGraphsConfig | None = None,
) -> str:
    """Render ``graph`` as DOT text.

    Parameters
    ----------
    graph : BitGraph
    node_attrs : mapping, optional
        ``vertex -> {key: value}``. When given, every vertex must have an
        entry (possibly empty).
    edge_attrs : mapping, optional
        ``(i, j) -> {key: value}`` keyed the way the edge is emitted
        (``i <= j`` for undirected graphs). When given, every emitted edge
        must have an entry.
    config : BitGraphsConfig, optional
        Source of the node font defaults.

    Raises
    ------
    MissingAttributeError
        If an attribute map lacks an entry for a vertex or edge.

    """
    cfg = config or DEFAULT_CONFIG
    arrow = "->" if graph.directed else "--"
    header = "digraph" if graph.directed else "strict graph"
    lines = [f'node [fontname={_quote(cfg.dot_fontname)},fontsize={_quote(cfg.dot_fontsize)}]']
    for i in range(len(graph)):
        lines.append(f"{i} [{_props(f'id={i}', _lookup(node_attrs, i, 'vertex'))}]")
        for j in ones(graph.out_neighbors(i)):
            if not graph.directed and j < i:
                continue
            props = _props(f'id="{i},{j}"', _lookup(edge_attrs, (i, j), "edge"))
            lines.append(f"{i} {arrow} {j} [{props}]")
    body = "\n".join(lines)
    return f"{header} {{\n{body}\n}}"


def write_dot(graph: BitGraph, path, **kwargs) -> None:
    """Write :func:`to_dot` output to ``path``; keyword arguments are passed through."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_dot(graph, **kwargs))
        f.write("\n")
