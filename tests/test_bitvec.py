import numpy as np
import pytest

import bitgraphs
from bitgraphs.utils.bitvec import as_bitvec, dot, from_indices, ones, popcount, zeros


def test_popcount_and_dot():
    a = from_indices(6, [0, 2, 3])
    b = from_indices(6, [2, 3, 5])
    assert popcount(a) == 3
    assert dot(a, b) == 2
    assert popcount(zeros(4)) == 0


def test_ones_is_ascending():
    assert ones(from_indices(5, {4, 0, 2})) == [0, 2, 4]


def test_from_indices_range_check():
    with pytest.raises(IndexError):
        from_indices(3, [3])
    with pytest.raises(IndexError):
        from_indices(3, [-1])


@pytest.mark.parametrize(
    "obj, expected",
    [
        (np.array([True, False, True]), [0, 2]),
        ([True, False, True], [0, 2]),
        ([0, 2], [0, 2]),
        ({1}, [1]),
        (range(3), [0, 1, 2]),
        ([], []),
        (np.array([1, 2]), [1, 2]),
    ],
)
def test_as_bitvec_forms(obj, expected):
    assert ones(as_bitvec(obj, 3)) == expected


def test_as_bitvec_copies_and_checks_length():
    src = np.zeros(3, dtype=bool)
    out = as_bitvec(src, 3)
    out[0] = True
    assert not src[0]
    with pytest.raises(ValueError):
        as_bitvec(np.zeros(2, dtype=bool), 3)
    with pytest.raises(ValueError):
        as_bitvec([True, False], 3)


def test_top_level_lazy_api():
    g = bitgraphs.Graph.complete(3)
    assert bitgraphs.is_clique(g, range(3))
    assert bitgraphs.bfs(g, 0) == [0, 1, 1]
    assert isinstance(bitgraphs.DEFAULT_CONFIG, bitgraphs.BitGraphsConfig)
    with pytest.raises(AttributeError):
        bitgraphs.no_such_symbol
