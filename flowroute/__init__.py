"""Flow-aware shortest paths.

Edges combine physical distance with a time-dependent pedestrian flow
coefficient. ``init_edge_weights`` derives the weighted graph for a
time period and ``dijkstra`` finds the least-cost route on it:

    graph = build_graph({"nodes": [...], "edges": [...]})
    weighted = init_edge_weights(graph, "morning")
    result = dijkstra(1, 3, weighted)
"""

from .adapters.graph import DijkstraRouteSolver
from .config import AppConfig, configure_logging, get_config, reset_config
from .domain import (
    ConfigurationError,
    Edge,
    FlowRouteError,
    Graph,
    GraphError,
    Node,
    NodeNotFoundError,
    NoRouteFoundError,
    PathResult,
    TimePeriod,
)
from .graph import build_graph, dijkstra, init_edge_weights
from .services import RoutePlannerService

__all__ = [
    "init_edge_weights",
    "dijkstra",
    "build_graph",
    "Node",
    "Edge",
    "Graph",
    "PathResult",
    "TimePeriod",
    "FlowRouteError",
    "GraphError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
    "DijkstraRouteSolver",
    "RoutePlannerService",
    "AppConfig",
    "get_config",
    "reset_config",
    "configure_logging",
]
