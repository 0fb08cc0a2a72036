"""Error types raised by bitgraphs.

Validation errors describe bad input data and are recoverable by the caller.
Precondition errors describe a programming mistake (contracting a non-edge,
passing a non-bijective ordering, rendering without a required attribute) and
abort the operation before any state is touched.
"""

from __future__ import annotations


class BitGraphError(Exception):
    """Base class for all bitgraphs errors."""


class GraphValidationError(BitGraphError, ValueError):
    """Row data does not describe a valid graph (ragged, non-square, asymmetric)."""


class PreconditionError(BitGraphError):
    """An operation was called with arguments that violate its contract."""


class NotAnEdgeError(PreconditionError, ValueError):
    """``contract`` was asked to merge along an edge that does not exist."""

    def __init__(self, fr: int, to: int):
        super().__init__(f"({fr}, {to}) is not an edge")
        self.edge = (fr, to)


class InvalidPermutationError(PreconditionError, ValueError):
    """An ordering is not a bijection over ``[0, n)``."""


class MissingAttributeError(PreconditionError, KeyError):
    """An attribute map lacks an entry for a vertex or edge being rendered."""

    def __init__(self, kind: str, key):
        super().__init__(f"no {kind} attributes for {key!r}")
        self.kind = kind
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return str(self.args[0])
