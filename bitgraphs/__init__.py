# bitgraphs/__init__.py
"""bitgraphs: dense bit-matrix graphs, single import, full API."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "bitgraphs.core",
    "algorithms": "bitgraphs.algorithms",
    "io": "bitgraphs.io",
    "adapters": "bitgraphs.adapters",
    "utils": "bitgraphs.utils",
    "config": "bitgraphs.config",
    "exceptions": "bitgraphs.exceptions",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "BitGraph": ("bitgraphs.core.base", "BitGraph"),
    "Graph": ("bitgraphs.core.graph", "Graph"),
    "DiGraph": ("bitgraphs.core.digraph", "DiGraph"),
    "IndexRemap": ("bitgraphs.core.remap", "IndexRemap"),
    "invert_permutation": ("bitgraphs.core.remap", "invert_permutation"),
    "empty": ("bitgraphs.core.generators", "empty"),
    "complete": ("bitgraphs.core.generators", "complete"),
    "erdos_renyi": ("bitgraphs.core.generators", "erdos_renyi"),
    # Algorithms
    "bfs": ("bitgraphs.algorithms.traversal", "bfs"),
    "bfs_tree": ("bitgraphs.algorithms.traversal", "bfs_tree"),
    "dfs": ("bitgraphs.algorithms.traversal", "dfs"),
    "greedy_color": ("bitgraphs.algorithms.coloring", "greedy_color"),
    "color_map": ("bitgraphs.algorithms.coloring", "color_map"),
    "is_independent": ("bitgraphs.algorithms.coloring", "is_independent"),
    "is_clique": ("bitgraphs.algorithms.coloring", "is_clique"),
    "popcount": ("bitgraphs.utils.bitvec", "popcount"),
    "dot": ("bitgraphs.utils.bitvec", "dot"),
    # I/O
    "read_csv": ("bitgraphs.io.csv_io", "read_csv"),
    "write_csv": ("bitgraphs.io.csv_io", "write_csv"),
    "to_dot": ("bitgraphs.io.dot_io", "to_dot"),
    "write_dot": ("bitgraphs.io.dot_io", "write_dot"),
    # Adapters (networkx is an optional dependency)
    "to_nx": ("bitgraphs.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("bitgraphs.adapters.networkx_adapter", "from_nx"),
    "to_sparse": ("bitgraphs.adapters.scipy_adapter", "to_sparse"),
    "from_sparse": ("bitgraphs.adapters.scipy_adapter", "from_sparse"),
    # Configuration / errors
    "BitGraphsConfig": ("bitgraphs.config", "BitGraphsConfig"),
    "DEFAULT_CONFIG": ("bitgraphs.config", "DEFAULT_CONFIG"),
    "BitGraphError": ("bitgraphs.exceptions", "BitGraphError"),
    "GraphValidationError": ("bitgraphs.exceptions", "GraphValidationError"),
    "PreconditionError": ("bitgraphs.exceptions", "PreconditionError"),
    "NotAnEdgeError": ("bitgraphs.exceptions", "NotAnEdgeError"),
    "InvalidPermutationError": ("bitgraphs.exceptions", "InvalidPermutationError"),
    "MissingAttributeError": ("bitgraphs.exceptions", "MissingAttributeError"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("bitgraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
