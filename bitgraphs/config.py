"""
bitgraphs/config.py — tunable defaults for parsing and rendering.

Nothing in the I/O modules hardcodes a font, a separator or an edge token;
they read them from a config object so a caller can override a single value
without touching the rendering code.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BitGraphsConfig:
    """
    Immutable configuration for the bitgraphs I/O adapters.

    Override by constructing a new BitGraphsConfig with the desired values,
    e.g. ``BitGraphsConfig(dot_fontsize=10)``.
    """

    # ── DOT rendering ─────────────────────────────────────────────────────────
    dot_fontname: str = "sans-serif"
    dot_fontsize: int = 12
    # Emitted once as the node defaults line directly after the header.

    # ── Matrix CSV ────────────────────────────────────────────────────────────
    csv_separator: str = ","
    edge_token: int = 1
    # A cell whose integer value equals edge_token is an edge. Every other
    # integer, and every token that does not parse, is "no edge".


DEFAULT_CONFIG = BitGraphsConfig()
