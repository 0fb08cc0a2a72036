"""Dense 0/1 adjacency matrices as CSV text or Polars DataFrames.

The text format has no header: one line per vertex, one comma-separated
token per column. A token equal to the configured edge token (``1``) is an
edge; any other integer, and any token that does not parse as an integer,
means "no edge". Row ``i`` of an undirected matrix must equal column ``i``;
for a directed matrix row ``u`` lists the successors of ``u``.

Public entry points:
- read_csv(source, directed=False) -> Graph | DiGraph | None
- parse_rows(lines) -> list[list[bool]]
- from_dataframe(df, directed=False) -> Graph | DiGraph
- to_dataframe(graph) -> pl.DataFrame
- write_csv(graph, path)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import numpy as np
import polars as pl

from ..config import DEFAULT_CONFIG, BitGraphsConfig
from ..core.base import BitGraph
from ..core.digraph import DiGraph
from ..core.graph import Graph
from ..exceptions import GraphValidationError

logger = logging.getLogger(__name__)


def _parse_token(token: str) -> int:
    try:
        return int(token.strip())
    except ValueError:
        return 0


def parse_rows(lines: Iterable[str], config: BitGraphsConfig | None = None) -> list[list[bool]]:
    """Tokenize matrix lines into boolean rows; trailing blank lines are dropped."""
    cfg = config or DEFAULT_CONFIG
    raw = [line.rstrip("\r\n") for line in lines]
    while raw and not raw[-1].strip():
        raw.pop()
    return [
        [_parse_token(tok) == cfg.edge_token for tok in line.split(cfg.csv_separator)]
        for line in raw
    ]


def _graph_class(directed: bool):
    return DiGraph if directed else Graph


def read_csv(
    source,
    directed: bool = False,
    config: BitGraphsConfig | None = None,
) -> BitGraph | None:
    """Read a 0/1 adjacency matrix.

    Parameters
    ----------
    source : str | os.PathLike | iterable of str
        A file path, or an open text stream / any iterable of lines.
    directed : bool
        Build a :class:`DiGraph` (rows are out-neighbourhoods) instead of a
        :class:`Graph`.

    Returns
    -------
    Graph | DiGraph | None
        ``None`` if the file is not valid UTF-8, or if the matrix is ragged,
        not square, or (undirected) not symmetric. A warning is logged with the
        reason.

    """
    if isinstance(source, (str, os.PathLike)):
        name = os.fspath(source)
        try:
            with open(source, encoding="utf-8") as f:
                rows = parse_rows(f, config)
        except UnicodeDecodeError as exc:
            logger.warning("rejected adjacency matrix from %s: %s", name, exc)
            return None
    else:
        rows = parse_rows(source, config)
        name = getattr(source, "name", "<stream>")
    try:
        g = _graph_class(directed).from_rows(rows)
    except GraphValidationError as exc:
        logger.warning("rejected adjacency matrix from %s: %s", name, exc)
        return None
    logger.debug("read %d-vertex %s from %s", len(g), type(g).__name__, name)
    return g


def from_dataframe(
    df: pl.DataFrame,
    directed: bool = False,
    config: BitGraphsConfig | None = None,
) -> BitGraph:
    """Build a graph from a square Polars adjacency frame (one column per vertex).

    Cells that are null or not castable to an integer count as "no edge".

    Raises
    ------
    GraphValidationError
        If the frame is not square or (undirected) not symmetric.

    """
    cfg = config or DEFAULT_CONFIG
    if df.height != df.width:
        raise GraphValidationError(f"adjacency frame must be square, got {df.shape}")
    if df.width == 0:
        return _graph_class(directed)(0)
    ints = df.select(pl.all().cast(pl.Int64, strict=False).fill_null(0))
    matrix = ints.to_numpy() == cfg.edge_token
    return _graph_class(directed).from_rows(matrix)


def to_dataframe(graph: BitGraph) -> pl.DataFrame:
    """Out-adjacency as a UInt8 frame; column ``"j"`` holds the edges into ``j``."""
    n = len(graph)
    rows = np.array([graph.out_neighbors(i) for i in range(n)], dtype=np.uint8).reshape(n, n)
    return pl.DataFrame({str(j): pl.Series(str(j), rows[:, j], dtype=pl.UInt8) for j in range(n)})


def write_csv(graph: BitGraph, path, config: BitGraphsConfig | None = None) -> None:
    """Write the headerless 0/1 matrix that :func:`read_csv` reads back."""
    cfg = config or DEFAULT_CONFIG
    to_dataframe(graph).write_csv(path, include_header=False, separator=cfg.csv_separator)
