from .coloring import color_map, greedy_color, is_clique, is_independent
from .traversal import bfs, bfs_tree, dfs

__all__ = [
    "bfs",
    "bfs_tree",
    "color_map",
    "dfs",
    "greedy_color",
    "is_clique",
    "is_independent",
]
