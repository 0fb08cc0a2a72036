"""scipy.sparse export/import of the out-adjacency matrix."""

from __future__ import annotations

import numpy as np
import scipy.sparse as sp

from ..core.base import BitGraph
from ..core.digraph import DiGraph
from ..core.graph import Graph
from ..exceptions import GraphValidationError


def to_sparse(graph: BitGraph) -> sp.csr_array:
    """CSR array with ``m[u, v] == 1`` iff ``u -> v`` (both orientations for undirected)."""
    n = len(graph)
    rows, cols = [], []
    for u in range(n):
        succ = np.flatnonzero(graph.out_neighbors(u))
        rows.append(np.full(succ.size, u, dtype=np.int64))
        cols.append(succ)
    if n:
        row_idx = np.concatenate(rows)
        col_idx = np.concatenate(cols)
    else:
        row_idx = col_idx = np.zeros(0, dtype=np.int64)
    data = np.ones(row_idx.size, dtype=np.uint8)
    return sp.csr_array((data, (row_idx, col_idx)), shape=(n, n))


def from_sparse(matrix, directed: bool = False) -> BitGraph:
    """Build a graph from any square scipy sparse matrix; nonzero entries are edges.

    Raises
    ------
    GraphValidationError
        If the matrix is not square or (undirected) not symmetric.

    """
    m = sp.csr_array(matrix)
    if m.shape[0] != m.shape[1]:
        raise GraphValidationError(f"adjacency must be square, got shape {m.shape}")
    dense = m.toarray() != 0
    return (DiGraph if directed else Graph).from_rows(dense)
