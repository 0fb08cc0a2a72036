from .bitvec import as_bitvec, dot, from_indices, ones, popcount, zeros

__all__ = ["as_bitvec", "dot", "from_indices", "ones", "popcount", "zeros"]
