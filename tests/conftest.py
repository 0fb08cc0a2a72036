"""Shared fixtures and helpers for the bitgraphs tests."""

import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from bitgraphs.core.digraph import DiGraph  # noqa: E402
from bitgraphs.core.graph import Graph  # noqa: E402

DATA = ROOT / "tests" / "data"

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def petersen_path():
    return DATA / "petersen.csv"


@pytest.fixture
def path_graph():
    """Undirected path 0 - 1 - 2 - 3 - 4."""
    g = Graph(5)
    for i in range(4):
        g.add_edge(i, i + 1)
    return g


@pytest.fixture
def two_components():
    """Triangle {0, 1, 2} plus the edge {3, 4} and the isolated vertex 5."""
    g = Graph(6)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    g.add_edge(3, 4)
    return g


@pytest.fixture
def cycle_digraph():
    """Directed 4-cycle 0 -> 1 -> 2 -> 3 -> 0 with a chord 0 -> 2."""
    g = DiGraph(4)
    for u in range(4):
        g.add_edge(u, (u + 1) % 4)
    g.add_edge(0, 2)
    return g


# ======================================================================
# HELPERS
# ======================================================================


def edge_set(g):
    """Set of emitted edges, handy for comparing graphs of different types."""
    return set(g.edges())


def assert_mirrored(g):
    """Assert the incoming family of a DiGraph is the transpose of the outgoing one."""
    n = len(g)
    inc = np.array([g.in_neighbors(v) for v in range(n)]).reshape(n, n)
    out = np.array([g.out_neighbors(u) for u in range(n)]).reshape(n, n)
    assert np.array_equal(inc, out.T), "incoming/outgoing families out of step"


def assert_symmetric(g):
    n = len(g)
    rows = np.array([g.neighbors(v) for v in range(n)]).reshape(n, n)
    assert np.array_equal(rows, rows.T), "undirected matrix not symmetric"
