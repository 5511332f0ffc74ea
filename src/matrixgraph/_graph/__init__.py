"""Graph module providing the adjacency-matrix graph container.

This module contains:
- SimpleGraph[N, E]: A mutable directed graph with opaque node and edge handles
"""

from ._simple_graph import SimpleGraph

__all__ = ["SimpleGraph"]
