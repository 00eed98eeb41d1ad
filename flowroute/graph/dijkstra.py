"""Shortest-path computation using Dijkstra's algorithm.

The search is single-source with early exit: it stops as soon as the
destination is finalized. Ties between equally distant candidates are
broken by lowest node id so results are reproducible.
"""

import heapq
import logging
from numbers import Real
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import Edge, Graph, NodeId, PathResult

logger = logging.getLogger(__name__)

DUPLICATE_EDGE_POLICIES = ("first", "min_distance")


def _tie_key(node_id: NodeId) -> Tuple[int, object]:
    """Order numeric ids before other ids, each in natural order."""
    if isinstance(node_id, Real):
        return (0, node_id)
    return (1, str(node_id))


def _segment_distances(
    graph: Graph, duplicate_edges: str
) -> Dict[Tuple[NodeId, NodeId], float]:
    """Map each ``(from, to)`` pair to the distance used for totals.

    With parallel edges, ``"first"`` keeps the first edge in input order
    and ``"min_distance"`` keeps the shortest weighted one, the same edge
    ``shortest_path_tree`` relaxes under that policy.
    """
    distances: Dict[Tuple[NodeId, NodeId], float] = {}
    for edge in graph.edges:
        if duplicate_edges == "min_distance" and edge.weight is None:
            continue
        key = (edge.from_id, edge.to_id)
        if key not in distances:
            distances[key] = edge.distance
        elif duplicate_edges == "min_distance":
            distances[key] = min(distances[key], edge.distance)
    return distances


def shortest_path_tree(
    graph: Graph,
    start: NodeId,
    end: Optional[NodeId] = None,
    duplicate_edges: str = "min_distance",
) -> Tuple[Dict[NodeId, float], Dict[NodeId, Optional[NodeId]]]:
    """Run the label-setting search from ``start``.

    Parameters
    ----------
    graph:
        Weighted graph. Edges without a weight, or whose endpoints are
        not in the node set, are never traversed.
    start:
        Identifier of the source node.
    end:
        Optional destination. The search stops once it is finalized.
    duplicate_edges:
        ``"first"`` relaxes every parallel ``(from, to)`` edge.
        ``"min_distance"`` relaxes only the shortest one of each group.

    Returns
    -------
    dict, dict
        The best known weight to each node (``inf`` when unreached) and
        the predecessor of each node on its best path.
    """
    node_ids = graph.node_ids
    distances: Dict[NodeId, float] = {node_id: float("inf") for node_id in node_ids}
    previous: Dict[NodeId, Optional[NodeId]] = {node_id: None for node_id in node_ids}
    if start not in distances:
        return distances, previous

    adjacency: Dict[NodeId, List[Edge]] = {}
    shortest: Dict[Tuple[NodeId, NodeId], Edge] = {}
    unweighted = 0
    for edge in graph.edges:
        if edge.weight is None:
            unweighted += 1
            continue
        if edge.from_id not in distances or edge.to_id not in distances:
            continue
        if duplicate_edges == "min_distance":
            key = (edge.from_id, edge.to_id)
            kept = shortest.get(key)
            if kept is None or edge.distance < kept.distance:
                shortest[key] = edge
        else:
            adjacency.setdefault(edge.from_id, []).append(edge)
    for edge in shortest.values():
        adjacency.setdefault(edge.from_id, []).append(edge)
    if unweighted:
        logger.debug("Skipping unweighted edges", extra={"edges": unweighted})

    distances[start] = 0.0
    heap: List[Tuple[float, Tuple[int, object], int, NodeId]] = [
        (0.0, _tie_key(start), 0, start)
    ]
    pushed = 1
    visited: Set[NodeId] = set()

    while heap:
        current_distance, _, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for edge in adjacency.get(u, []):
            v = edge.to_id
            if v in visited:
                continue
            new_distance = current_distance + edge.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, _tie_key(v), pushed, v))
                pushed += 1

    return distances, previous


def dijkstra(
    start: NodeId,
    end: NodeId,
    graph: Graph,
    duplicate_edges: str = "min_distance",
) -> PathResult:
    """Compute the minimum-weight path from ``start`` to ``end``.

    Parameters
    ----------
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node.
    graph:
        Graph whose edges carry ``weight`` (see ``init_edge_weights``).
    duplicate_edges:
        How parallel ``(from, to)`` edges are handled. ``"first"`` relaxes
        all of them and takes segment distances from the first in input
        order. ``"min_distance"`` keeps only the shortest one, so weight
        and distance come from the same edge.

    Returns
    -------
    PathResult
        The path, its node records, its total weight and its total raw
        distance. If ``end`` cannot be reached, or either id is not in
        the graph, returns ``PathResult.unreachable()``.
    """
    if duplicate_edges not in DUPLICATE_EDGE_POLICIES:
        logger.debug(
            "Unknown duplicate edge policy, using min_distance",
            extra={"duplicate_edges": duplicate_edges},
        )
        duplicate_edges = "min_distance"

    nodes = graph.node_map()
    if start not in nodes or end not in nodes:
        return PathResult.unreachable()

    distances, previous = shortest_path_tree(graph, start, end, duplicate_edges)

    path: List[NodeId] = []
    current: Optional[NodeId] = end
    while current is not None:
        path.append(current)
        if current == start:
            break
        current = previous[current]
    path.reverse()

    if path[0] != start:
        return PathResult.unreachable()

    segments = _segment_distances(graph, duplicate_edges)
    total_distance = sum(
        (segments.get((a, b), 0.0) for a, b in zip(path, path[1:])), 0.0
    )

    return PathResult(
        path=tuple(path),
        path_nodes=tuple(nodes[node_id] for node_id in path),
        total_weight=distances[end],
        total_distance=total_distance,
    )
