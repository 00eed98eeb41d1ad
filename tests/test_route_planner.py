"""Tests for the route planner service."""

from unittest.mock import MagicMock

import pytest

from flowroute.adapters.cache import InMemoryCache, NullCache
from flowroute.adapters.graph import DijkstraRouteSolver
from flowroute.config import AppConfig, CacheConfig, SolverConfig, WeightingConfig
from flowroute.domain.errors import NodeNotFoundError, NoRouteFoundError
from flowroute.domain.models import TimePeriod
from flowroute.services import RoutePlannerService


@pytest.fixture
def planner(campus):
    return RoutePlannerService(
        graph=campus,
        route_solver=DijkstraRouteSolver(),
        cache=InMemoryCache(name="test"),
    )


def test_plan_uses_period_weights(planner):
    assert planner.plan(1, 3, "morning").path == (1, 4, 3)
    assert planner.plan(1, 3, TimePeriod.EVENING).path == (1, 2, 3)


def test_weighted_graph_is_cached_per_period(planner):
    first = planner.weighted_graph("morning")

    assert planner.weighted_graph(TimePeriod.MORNING) is first
    assert planner.weighted_graph("evening") is not first
    assert planner.cache.size() == 2


def test_raw_graph_is_left_unweighted(planner):
    planner.plan(1, 3, "morning")

    assert not planner.graph.is_weighted


def test_invalidate_single_period_and_all(planner):
    planner.weighted_graph("morning")
    planner.weighted_graph("noon")

    planner.invalidate("morning")
    assert planner.cache.size() == 1

    planner.invalidate()
    assert planner.cache.size() == 0


def test_plan_unreachable_raises_with_period(planner):
    with pytest.raises(NoRouteFoundError) as excinfo:
        planner.plan(1, 5, "weekend")

    assert excinfo.value.time_period == "weekend"


def test_plan_unknown_node_raises(planner):
    with pytest.raises(NodeNotFoundError):
        planner.plan(1, 99, "noon")


@pytest.mark.parametrize(
    "start, end, expected_error",
    [
        (1, 3, None),
        (1, 5, "No path found between 1 and 5"),
        (1, 99, "Unknown node: 99"),
    ],
)
def test_plan_safe(planner, start, end, expected_error):
    result, error = planner.plan_safe(start, end, "morning")

    assert error == expected_error
    assert (result is None) == (expected_error is not None)


def test_compare_periods_defaults_to_known_periods(planner):
    results = planner.compare_periods(1, 3)

    assert list(results) == ["morning", "noon", "evening", "weekend"]
    assert results["morning"].total_weight == pytest.approx(18.8)
    assert results["noon"].total_weight == pytest.approx(18)


def test_compare_periods_unreachable_is_not_an_error(planner):
    results = planner.compare_periods(1, 5, ["noon"])

    assert results["noon"].is_empty


def test_best_period(planner):
    assert planner.best_period(1, 3, ["morning", "evening"]) == "morning"
    assert planner.best_period(1, 5) is None


def test_planner_accepts_any_solver(campus):
    solver = MagicMock()
    planner = RoutePlannerService(graph=campus, route_solver=solver, cache=NullCache())

    planner.plan(1, 2, "noon")

    weighted, start, end = solver.solve.call_args.args
    assert weighted.is_weighted
    assert (start, end) == (1, 2)


def test_create_default_follows_config(campus):
    config = AppConfig(
        weighting=WeightingConfig(default_flow=0.0, periods=("noon",)),
        solver=SolverConfig(duplicate_edges="first"),
        cache=CacheConfig(enabled=False),
    )

    planner = RoutePlannerService.create_default(campus, config)

    assert isinstance(planner.cache, NullCache)
    assert planner.route_solver.duplicate_edges == "first"
    assert planner.periods == ("noon",)
    assert planner.plan(1, 3, "noon").total_weight == 15


def test_create_default_uses_global_config(campus, monkeypatch):
    monkeypatch.setenv("FLOWROUTE_CACHE_MAX_SIZE", "1")

    planner = RoutePlannerService.create_default(campus)
    planner.weighted_graph("morning")
    planner.weighted_graph("noon")

    assert isinstance(planner.cache, InMemoryCache)
    assert planner.cache.keys() == ["noon"]


def test_disabled_cache_derives_fresh_weighted_graphs(campus):
    planner = RoutePlannerService(
        graph=campus, route_solver=DijkstraRouteSolver(), cache=NullCache()
    )

    first = planner.weighted_graph("noon")

    assert planner.weighted_graph("noon") is not first
    assert planner.weighted_graph("noon") == first
    planner.invalidate()
    assert planner.cache.size() == 0
