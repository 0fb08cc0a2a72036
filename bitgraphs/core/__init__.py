"""bitgraphs.core: the graph contract and its two dense representations."""

from .base import BitGraph
from .digraph import DiGraph
from .generators import complete, empty, erdos_renyi
from .graph import Graph
from .remap import IndexRemap, check_permutation, invert_permutation

__all__ = [
    "BitGraph",
    "DiGraph",
    "Graph",
    "IndexRemap",
    "check_permutation",
    "complete",
    "empty",
    "erdos_renyi",
    "invert_permutation",
]
