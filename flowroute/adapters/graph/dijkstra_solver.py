"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Typed errors for missing nodes, unweighted graphs and unreachable targets
- A non-raising variant returning the canonical unreachable result
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import DuplicateEdgePolicy
from ...domain.errors import GraphError, NodeNotFoundError, NoRouteFoundError
from ...domain.models import Graph, NodeId, PathResult
from ...graph.dijkstra import dijkstra


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort.

    Attributes:
        duplicate_edges: Which parallel edge supplies segment distances
    """

    duplicate_edges: DuplicateEdgePolicy = "min_distance"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start: NodeId, end: NodeId) -> PathResult:
        """Find the minimum-weight path between two nodes.

        Args:
            graph: Weighted graph.
            start: Departure node id.
            end: Arrival node id.

        Returns:
            PathResult with path, totals and node records.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            GraphError: If some edge carries no weight.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        nodes = graph.node_map()
        if start not in nodes:
            raise NodeNotFoundError(f"Start node not in graph: {start!r}", node_id=start)
        if end not in nodes:
            raise NodeNotFoundError(f"End node not in graph: {end!r}", node_id=end)
        if not graph.is_weighted:
            raise GraphError("Graph edges carry no weight; run init_edge_weights first")

        result = dijkstra(start, end, graph, self.duplicate_edges)

        if result.is_empty:
            self._logger.warning("No route found", extra={"start": start, "end": end})
            raise NoRouteFoundError(
                f"No path from {start!r} to {end!r}", start=start, end=end
            )

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "stops": result.num_stops,
                "total_weight": result.total_weight,
                "total_distance": result.total_distance,
            },
        )
        return result

    def solve_safe(self, graph: Graph, start: NodeId, end: NodeId) -> PathResult:
        """Find the minimum-weight path, returning an empty result on failure.

        Like solve(), but a missing node or an unreachable target yields
        ``PathResult.unreachable()`` instead of an exception.
        """
        result = dijkstra(start, end, graph, self.duplicate_edges)
        if result.is_empty:
            self._logger.debug("No route found", extra={"start": start, "end": end})
        return result
