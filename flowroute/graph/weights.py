"""Per-period edge weighting.

An edge's routing weight inflates its physical distance by the
pedestrian flow expected during a time period:
``weight = distance * (1 + flow_coefficient)``.
"""

from __future__ import annotations

from typing import Mapping, Union

from ..domain.models import Graph, TimePeriod

DEFAULT_FLOW = 0.2


def flow_coefficient(
    flow: Mapping[str, float],
    time_period: Union[TimePeriod, str],
    default_flow: float = DEFAULT_FLOW,
) -> float:
    """Return the coefficient for ``time_period``, or ``default_flow`` if absent."""
    period = time_period.value if isinstance(time_period, TimePeriod) else time_period
    coefficient = flow.get(period)
    return default_flow if coefficient is None else coefficient


def init_edge_weights(
    graph: Graph,
    time_period: Union[TimePeriod, str],
    default_flow: float = DEFAULT_FLOW,
) -> Graph:
    """Derive a weighted copy of ``graph`` for a time period.

    Parameters
    ----------
    graph:
        The raw graph. It is left untouched.
    time_period:
        Period label, e.g. ``"morning"``. Any string is accepted.
    default_flow:
        Coefficient used for edges with no value for ``time_period``.

    Returns
    -------
    Graph
        A new graph whose nodes and edges are structural copies of the
        input, every edge carrying ``weight``.
    """
    nodes = tuple(node.clone() for node in graph.nodes)
    edges = tuple(
        edge.clone(
            weight=edge.distance
            * (1 + flow_coefficient(edge.flow, time_period, default_flow))
        )
        for edge in graph.edges
    )
    return Graph(nodes=nodes, edges=edges)
