"""Route planner service - Main orchestrator.

Wires a raw graph, the per-period weight derivation, a weighted graph
cache and a route solver into ``(start, end, period)`` queries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union

from ..config import AppConfig, get_config
from ..domain.errors import FlowRouteError, NodeNotFoundError, NoRouteFoundError
from ..domain.models import Graph, NodeId, PathResult, TimePeriod
from ..graph.weights import DEFAULT_FLOW, init_edge_weights
from ..ports.cache import CachePort
from ..ports.graph import RouteSolverPort

Period = Union[TimePeriod, str]


def _period_key(time_period: Period) -> str:
    return time_period.value if isinstance(time_period, TimePeriod) else time_period


@dataclass
class RoutePlannerService:
    """Main service for planning flow-aware routes.

    For each query the service:
    1. Derives (or reuses) the weighted graph for the time period
    2. Runs the route solver on it

    Attributes:
        graph: Raw graph supplied by the caller, never mutated
        route_solver: Computes minimum-weight paths
        cache: Holds weighted graphs keyed by period
        default_flow: Coefficient for edges with no value for a period
        periods: Periods compared when none are given explicitly
    """

    graph: Graph
    route_solver: RouteSolverPort
    cache: CachePort[Graph]
    default_flow: float = DEFAULT_FLOW
    periods: Tuple[str, ...] = tuple(p.value for p in TimePeriod)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def weighted_graph(self, time_period: Period) -> Graph:
        """Return the graph weighted for ``time_period``."""
        key = _period_key(time_period)
        return self.cache.get_or_compute(
            key, lambda: init_edge_weights(self.graph, key, self.default_flow)
        )

    def plan(self, start: NodeId, end: NodeId, time_period: Period) -> PathResult:
        """Plan the least-cost route for a time period.

        Args:
            start: Departure node id.
            end: Arrival node id.
            time_period: Period the flow coefficients are taken from.

        Returns:
            PathResult with the computed route.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        period = _period_key(time_period)
        self._logger.info(
            "Planning route",
            extra={"start": start, "end": end, "time_period": period},
        )
        try:
            return self.route_solver.solve(self.weighted_graph(period), start, end)
        except NoRouteFoundError as e:
            e.time_period = period
            raise

    def plan_safe(
        self, start: NodeId, end: NodeId, time_period: Period
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.plan(start, end, time_period), None
        except NodeNotFoundError as e:
            return None, f"Unknown node: {e.node_id!r}"
        except NoRouteFoundError as e:
            return None, f"No path found between {e.start!r} and {e.end!r}"
        except FlowRouteError as e:
            return None, f"Error: {e.message}"

    def compare_periods(
        self,
        start: NodeId,
        end: NodeId,
        time_periods: Optional[Iterable[Period]] = None,
    ) -> Dict[str, PathResult]:
        """Solve the same query for several periods.

        Defaults to ``self.periods``. Unreachable periods map to
        ``PathResult.unreachable()``.
        """
        if time_periods is None:
            time_periods = self.periods
        results = {
            _period_key(period): self.route_solver.solve_safe(
                self.weighted_graph(period), start, end
            )
            for period in time_periods
        }
        self._logger.debug(
            "Periods compared",
            extra={
                "start": start,
                "end": end,
                "weights": {p: r.total_weight for p, r in results.items()},
            },
        )
        return results

    def best_period(
        self,
        start: NodeId,
        end: NodeId,
        time_periods: Optional[Iterable[Period]] = None,
    ) -> Optional[str]:
        """Return the period with the lowest total weight, None if unreachable in all."""
        results = self.compare_periods(start, end, time_periods)
        reachable = {p: r for p, r in results.items() if not r.is_empty}
        if not reachable:
            return None
        return min(reachable, key=lambda p: reachable[p].total_weight)

    def invalidate(self, time_period: Optional[Period] = None) -> None:
        """Drop the cached weighted graph for one period, or all of them."""
        if time_period is None:
            self.cache.clear()
        else:
            self.cache.invalidate(_period_key(time_period))

    @classmethod
    def create_default(
        cls, graph: Graph, config: Optional[AppConfig] = None
    ) -> RoutePlannerService:
        """Create a planner with the production adapters.

        Args:
            graph: The raw graph to plan on.
            config: Optional configuration override.

        Returns:
            A configured RoutePlannerService.
        """
        from ..adapters.cache import InMemoryCache, NullCache
        from ..adapters.graph import DijkstraRouteSolver

        config = config or get_config()
        cache: CachePort[Graph]
        if config.cache.enabled:
            cache = InMemoryCache(name="weighted-graphs", max_size=config.cache.max_size)
        else:
            cache = NullCache()

        return cls(
            graph=graph,
            route_solver=DijkstraRouteSolver(duplicate_edges=config.solver.duplicate_edges),
            cache=cache,
            default_flow=config.weighting.default_flow,
            periods=tuple(config.weighting.periods),
        )
