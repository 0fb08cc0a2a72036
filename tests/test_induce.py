# test_induce.py
import os
import sys
import unittest

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bitgraphs.core.digraph import DiGraph
from bitgraphs.core.graph import Graph
from bitgraphs.core.remap import IndexRemap


class TestInduce(unittest.TestCase):
    def test_induce_complete_then_compress(self):
        g = Graph.complete(3)
        g.induce(np.array([True, False, True]))
        self.assertEqual(len(g), 3)
        self.assertTrue(g.has_edge(0, 2))
        self.assertFalse(g.has_edge(1, 0))
        self.assertFalse(g.has_edge(0, 1))
        self.assertFalse(g.has_edge(1, 2))
        self.assertTrue(g.verify())

        gp, remap = g.compressed()
        self.assertEqual(len(gp), 2)
        self.assertEqual(remap.new_to_old, [0, 2])
        self.assertEqual(remap.old_to_new, [0, -1, 1])
        self.assertTrue(gp.has_edge(0, 1))

    def test_induce_accepts_index_set(self):
        g = Graph.complete(5)
        g.induce({1, 3, 4})
        self.assertEqual(set(g.edges()), {(1, 3), (1, 4), (3, 4)})
        for v in (0, 2):
            self.assertTrue(g.is_isolated(v))

    def test_induce_keeps_self_loops_inside_subset(self):
        g = Graph(3)
        g.add_edge(0, 0)
        g.add_edge(1, 1)
        g.induce({0})
        self.assertTrue(g.has_edge(0, 0))
        self.assertFalse(g.has_edge(1, 1))

    def test_induce_directed_both_directions(self):
        from conftest import assert_mirrored

        g = DiGraph(4)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        g.add_edge(2, 0)
        g.add_edge(3, 0)
        g.induce({0, 1, 3})
        self.assertEqual(set(g.edges()), {(0, 1), (3, 0)})
        self.assertFalse(g.in_neighbors(2).any())
        self.assertFalse(g.out_neighbors(2).any())
        self.assertFalse(g.in_neighbors(0)[2])
        assert_mirrored(g)

    def test_induce_rejects_wrong_length_mask(self):
        g = Graph(3)
        with self.assertRaises(ValueError):
            g.induce(np.array([True, False]))


class TestCompressed(unittest.TestCase):
    def test_order_preserved(self):
        g = Graph(6)
        g.add_edge(5, 1)
        g.add_edge(3, 5)
        gp, remap = g.compressed()
        self.assertEqual(remap.new_to_old, [1, 3, 5])
        self.assertEqual(remap.map_old(5), 2)
        self.assertEqual(remap.map_old(0), -1)
        self.assertEqual(remap.map_new(1), 3)
        self.assertEqual(set(gp.edges()), {(0, 2), (1, 2)})
        # receiver untouched
        self.assertEqual(len(g), 6)

    def test_directed_keeps_sources_and_sinks(self):
        g = DiGraph(5)
        g.add_edge(4, 2)
        gp, remap = g.compressed()
        self.assertEqual(remap.new_to_old, [2, 4])
        self.assertTrue(gp.has_edge(1, 0))
        self.assertFalse(gp.has_edge(0, 1))

    def test_remap_consistent_with_edges(self):
        g = Graph(8)
        for u, v in [(0, 7), (2, 7), (2, 4)]:
            g.add_edge(u, v)
        gp, remap = g.compressed()
        for u, v in g.edges():
            self.assertTrue(gp.has_edge(remap.map_old(u), remap.map_old(v)))
        for i, j in gp.edges():
            self.assertTrue(g.has_edge(remap.map_new(i), remap.map_new(j)))

    def test_nothing_to_remove(self):
        g = Graph.complete(3)
        gp, remap = g.compressed()
        self.assertEqual(gp, g)
        self.assertEqual(remap, IndexRemap.identity(3))

    def test_everything_removed(self):
        gp, remap = DiGraph(3).compressed()
        self.assertEqual(len(gp), 0)
        self.assertEqual(remap.old_to_new, [-1, -1, -1])


class TestIndexRemap(unittest.TestCase):
    def test_compose(self):
        first = IndexRemap([0, 2, 3], 4)   # drops 1
        second = IndexRemap([1, 2], 3)     # drops new 0 (old 0)
        both = first.compose(second)
        self.assertEqual(both.new_to_old, [2, 3])
        self.assertEqual(both.old_to_new, [-1, -1, 0, 1])

    def test_compose_size_mismatch(self):
        with self.assertRaises(ValueError):
            IndexRemap([0], 2).compose(IndexRemap([0], 3))

    def test_duplicate_old_index(self):
        with self.assertRaises(ValueError):
            IndexRemap([1, 1], 3)


if __name__ == "__main__":
    unittest.main()
