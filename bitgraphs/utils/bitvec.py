"""Bit-vector helpers.

A bit-vector is a one-dimensional ``numpy`` array of dtype ``bool``. Union,
intersection and negation are the numpy operators ``|``, ``&`` and ``~``;
this module only adds the handful of operations numpy does not spell out.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def zeros(n: int) -> np.ndarray:
    """All-false bit-vector of length ``n``."""
    return np.zeros(int(n), dtype=bool)


def from_indices(n: int, indices: Iterable[int]) -> np.ndarray:
    """Bit-vector of length ``n`` with exactly ``indices`` set.

    Raises
    ------
    IndexError
        If an index is outside ``[0, n)``.

    """
    vec = zeros(n)
    idx = np.fromiter((int(i) for i in indices), dtype=np.int64)
    if idx.size:
        if idx.min() < 0 or idx.max() >= n:
            raise IndexError(f"bit index out of range for length {n}")
        vec[idx] = True
    return vec


def as_bitvec(obj, n: int) -> np.ndarray:
    """Coerce ``obj`` into a fresh length-``n`` bit-vector.

    Accepted inputs:
      - a boolean ndarray of length ``n`` (a mask)
      - a non-empty sequence of ``bool`` values of length ``n`` (a mask)
      - any other iterable of vertex indices (a set, a range, a list of ints)
    """
    if isinstance(obj, np.ndarray):
        if obj.dtype == bool:
            if obj.shape != (n,):
                raise ValueError(f"bit-vector has shape {obj.shape}, expected ({n},)")
            return obj.copy()
        return from_indices(n, obj.ravel().tolist())
    items = list(obj)
    if items and all(isinstance(x, (bool, np.bool_)) for x in items):
        if len(items) != n:
            raise ValueError(f"mask has length {len(items)}, expected {n}")
        return np.array(items, dtype=bool)
    return from_indices(n, items)


def ones(vec: np.ndarray) -> list[int]:
    """Ascending list of set positions."""
    return np.flatnonzero(vec).tolist()


def popcount(vec: np.ndarray) -> int:
    """Number of set bits."""
    return int(np.count_nonzero(vec))


def dot(a: np.ndarray, b: np.ndarray) -> int:
    """Popcount of ``a & b``; for adjacency rows, the number of common neighbours."""
    return int(np.count_nonzero(a & b))
