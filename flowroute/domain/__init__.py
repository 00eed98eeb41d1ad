"""Domain layer - Core routing models and errors.

This module contains immutable domain models and typed errors used
throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    FlowRouteError,
    GraphError,
    NodeNotFoundError,
    NoRouteFoundError,
)
from .models import Edge, Graph, Node, NodeId, PathResult, TimePeriod

__all__ = [
    # Models
    "Node",
    "NodeId",
    "Edge",
    "Graph",
    "PathResult",
    "TimePeriod",
    # Errors
    "FlowRouteError",
    "GraphError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
