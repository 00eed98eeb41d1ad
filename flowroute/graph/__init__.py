"""Graph utilities for flow-aware routing.

This subpackage builds an in-memory graph from plain mappings, derives
per-period edge weights and runs the shortest-path search on top of it.
"""

from .dijkstra import dijkstra, shortest_path_tree
from .load_graph import build_graph
from .weights import DEFAULT_FLOW, flow_coefficient, init_edge_weights

__all__ = [
    "build_graph",
    "init_edge_weights",
    "flow_coefficient",
    "DEFAULT_FLOW",
    "dijkstra",
    "shortest_path_tree",
]
