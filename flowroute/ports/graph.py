"""Graph ports - Abstractions for route computation.

Implementation: adapters/graph/dijkstra_solver.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Graph, NodeId, PathResult


class RouteSolverPort(Protocol):
    """Port for route computation over a weighted graph.

    ``solve`` raises typed errors when no route exists, ``solve_safe``
    returns the canonical unreachable result instead.
    """

    def solve(self, graph: Graph, start: NodeId, end: NodeId) -> PathResult:
        """Find the minimum-weight path between two nodes.

        Args:
            graph: Weighted graph.
            start: Departure node id.
            end: Arrival node id.

        Returns:
            PathResult with path, totals and node records.
        """
        ...

    def solve_safe(self, graph: Graph, start: NodeId, end: NodeId) -> PathResult:
        """Find the minimum-weight path, never raising."""
        ...
