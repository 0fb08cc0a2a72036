# test_dot.py
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bitgraphs.config import BitGraphsConfig
from bitgraphs.core.digraph import DiGraph
from bitgraphs.core.graph import Graph
from bitgraphs.exceptions import MissingAttributeError, PreconditionError
from bitgraphs.io.dot_io import to_dot, write_dot


class TestDotUndirected(unittest.TestCase):
    def setUp(self):
        self.g = Graph(3)
        self.g.add_edge(0, 1)
        self.g.add_edge(2, 1)

    def test_plain(self):
        expected = "\n".join(
            [
                "strict graph {",
                'node [fontname="sans-serif",fontsize="12"]',
                "0 [id=0]",
                '0 -- 1 [id="0,1"]',
                "1 [id=1]",
                '1 -- 2 [id="1,2"]',
                "2 [id=2]",
                "}",
            ]
        )
        self.assertEqual(self.g.serialize(), expected)
        self.assertEqual(to_dot(self.g), expected)

    def test_attributes(self):
        node_attrs = {0: {"color": "red"}, 1: {}, 2: {"label": 'say "hi"'}}
        edge_attrs = {(0, 1): {"weight": 3}, (1, 2): {}}
        text = self.g.serialize(node_attrs, edge_attrs)
        self.assertIn('0 [id=0,color="red"]', text)
        self.assertIn('2 [id=2,label="say \\"hi\\""]', text)
        self.assertIn('0 -- 1 [id="0,1",weight="3"]', text)
        self.assertIn('1 -- 2 [id="1,2"]', text)

    def test_self_loop_emitted_once(self):
        self.g.add_edge(2, 2)
        text = to_dot(self.g)
        self.assertEqual(text.count("2 -- 2"), 1)

    def test_missing_node_attrs(self):
        with self.assertRaises(MissingAttributeError) as ctx:
            self.g.serialize(node_attrs={0: {}, 1: {}})
        self.assertEqual(ctx.exception.key, 2)
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertIsInstance(ctx.exception, PreconditionError)

    def test_missing_edge_attrs_uses_emitted_key(self):
        # (1, 0) is not how the edge is emitted
        with self.assertRaises(MissingAttributeError) as ctx:
            self.g.serialize(edge_attrs={(1, 0): {}, (1, 2): {}})
        self.assertEqual(ctx.exception.key, (0, 1))
        self.assertIn("(0, 1)", str(ctx.exception))

    def test_config_fonts(self):
        cfg = BitGraphsConfig(dot_fontname="Helvetica", dot_fontsize=9)
        text = to_dot(self.g, config=cfg)
        self.assertIn('node [fontname="Helvetica",fontsize="9"]', text.splitlines()[1])


class TestDotDirected(unittest.TestCase):
    def test_every_ordered_edge(self):
        g = DiGraph(3)
        g.add_edge(0, 1)
        g.add_edge(2, 0)
        g.add_edge(1, 0)
        lines = to_dot(g).splitlines()
        self.assertEqual(lines[0], "digraph {")
        self.assertEqual(
            lines[2:],
            [
                "0 [id=0]",
                '0 -> 1 [id="0,1"]',
                "1 [id=1]",
                '1 -> 0 [id="1,0"]',
                "2 [id=2]",
                '2 -> 0 [id="2,0"]',
                "}",
            ],
        )

    def test_empty_graph(self):
        self.assertEqual(
            to_dot(DiGraph(0)), 'digraph {\nnode [fontname="sans-serif",fontsize="12"]\n}'
        )


def test_write_dot(tmp_path):
    g = Graph.complete(2)
    path = tmp_path / "k2.dot"
    write_dot(g, path, node_attrs={0: {"shape": "box"}, 1: {}})
    text = path.read_text(encoding="utf-8")
    assert text.startswith("strict graph {")
    assert '0 [id=0,shape="box"]' in text
    assert text.endswith("}\n")


if __name__ == "__main__":
    unittest.main()
