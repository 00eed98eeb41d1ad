"""Graph construction from plain mappings.

Callers hand over the network as ``{"nodes": [...], "edges": [...]}``,
the shape produced by a JSON decoder or a front-end. This module turns
that shape into the immutable domain Graph.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from ..domain.errors import GraphError
from ..domain.models import Edge, Graph, Node

logger = logging.getLogger(__name__)


def _as_non_negative(value: Any, label: str, record: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise GraphError(f"{label} is not a number: {value!r}", cause=e, record=record)
    if math.isnan(number) or number < 0:
        raise GraphError(f"{label} must be non-negative, got {value!r}", record=record)
    return number


def _build_node(record: Mapping[str, Any]) -> Node:
    if not isinstance(record, Mapping) or "id" not in record:
        raise GraphError("Node record without an id", record=record)
    attributes = {key: value for key, value in record.items() if key != "id"}
    return Node(id=record["id"], attributes=attributes)


def _build_edge(record: Mapping[str, Any]) -> Edge:
    if not isinstance(record, Mapping) or "from" not in record or "to" not in record:
        raise GraphError("Edge record needs 'from' and 'to'", record=record)

    distance = _as_non_negative(record.get("distance", 0), "distance", record)

    raw_flow = record.get("flow") or {}
    if not isinstance(raw_flow, Mapping):
        raise GraphError("Edge 'flow' must be a mapping", record=record)
    # A null coefficient means "unknown" and leaves the default to apply.
    flow: Dict[str, float] = {
        str(period): _as_non_negative(coefficient, f"flow[{period}]", record)
        for period, coefficient in raw_flow.items()
        if coefficient is not None
    }

    weight: Optional[float] = None
    if record.get("weight") is not None:
        weight = _as_non_negative(record["weight"], "weight", record)

    return Edge(
        from_id=record["from"],
        to_id=record["to"],
        distance=distance,
        flow=flow,
        weight=weight,
    )


def build_graph(data: Mapping[str, Any]) -> Graph:
    """Build a Graph from its mapping representation.

    Parameters
    ----------
    data:
        Mapping with a ``nodes`` list (records with an ``id`` and any
        other descriptive keys) and an ``edges`` list (records with
        ``from``, ``to``, ``distance`` and a ``flow`` mapping).

    Returns
    -------
    Graph
        The immutable graph. Edges referencing unknown nodes are kept;
        the solver treats them as dead.

    Raises
    ------
    GraphError
        If a record is malformed or a node id appears twice.
    """
    logger.debug("Building graph")

    nodes: List[Node] = []
    seen = set()
    for record in data.get("nodes") or []:
        node = _build_node(record)
        if node.id in seen:
            raise GraphError(f"Duplicate node id: {node.id!r}", record=record)
        seen.add(node.id)
        nodes.append(node)

    edges = [_build_edge(record) for record in data.get("edges") or []]

    dangling = sum(1 for e in edges if e.from_id not in seen or e.to_id not in seen)
    if dangling:
        logger.warning(
            "Edges reference unknown nodes",
            extra={"dangling_edges": dangling},
        )

    logger.info("Graph built", extra={"nodes": len(nodes), "edges": len(edges)})
    return Graph(nodes=tuple(nodes), edges=tuple(edges))
