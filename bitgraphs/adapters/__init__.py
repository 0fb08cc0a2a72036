"""bitgraphs.adapters: conversions to and from other graph libraries.

Submodules are imported on demand; ``networkx_adapter`` needs the optional
``networkx`` dependency.
"""
