"""bitgraphs.io: matrix CSV and DOT adapters with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # 0/1 matrix CSV
    "read_csv": ("bitgraphs.io.csv_io", "read_csv"),
    "parse_rows": ("bitgraphs.io.csv_io", "parse_rows"),
    "write_csv": ("bitgraphs.io.csv_io", "write_csv"),
    "from_dataframe": ("bitgraphs.io.csv_io", "from_dataframe"),
    "to_dataframe": ("bitgraphs.io.csv_io", "to_dataframe"),
    # Graphviz
    "to_dot": ("bitgraphs.io.dot_io", "to_dot"),
    "write_dot": ("bitgraphs.io.dot_io", "write_dot"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
