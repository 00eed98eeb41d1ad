"""Immutable domain models for flow-aware routing.

All models are frozen dataclasses with slots. Mappings carried by the
models (node attributes, per-period flow coefficients) are copied into
fresh dicts whenever a model is cloned, so two graphs never share
mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Mapping, Optional

NodeId = Hashable


class TimePeriod(str, Enum):
    """Well-known time period labels.

    Any plain string is accepted wherever a period is expected; these
    are the labels the flow data is usually keyed by.
    """

    MORNING = "morning"
    NOON = "noon"
    EVENING = "evening"
    WEEKEND = "weekend"


@dataclass(frozen=True, slots=True)
class Node:
    """A graph vertex.

    Attributes:
        id: Unique, stable identifier of the node
        attributes: Descriptive data opaque to the routing algorithm
    """

    id: NodeId
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def clone(self) -> Node:
        """Return a structural copy with its own attributes dict."""
        return Node(id=self.id, attributes=dict(self.attributes))


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed edge between two nodes.

    Attributes:
        from_id: Identifier of the source node
        to_id: Identifier of the target node
        distance: Physical length of the edge
        flow: Pedestrian flow coefficient per time period label
        weight: Routing cost, None until the edge has been weighted
    """

    from_id: NodeId
    to_id: NodeId
    distance: float = 0.0
    flow: Mapping[str, float] = field(default_factory=dict)
    weight: Optional[float] = None

    def clone(self, weight: Optional[float] = None) -> Edge:
        """Return a structural copy, optionally carrying a new weight."""
        return Edge(
            from_id=self.from_id,
            to_id=self.to_id,
            distance=self.distance,
            flow=dict(self.flow),
            weight=self.weight if weight is None else weight,
        )


@dataclass(frozen=True, slots=True)
class Graph:
    """A set of nodes and a list of directed edges.

    The graph is not required to be symmetric: an edge from A to B
    does not imply one from B to A.

    Attributes:
        nodes: Nodes with unique identifiers
        edges: Directed edges, in input order
    """

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def node_ids(self) -> tuple[NodeId, ...]:
        """Return node identifiers in input order."""
        return tuple(node.id for node in self.nodes)

    @property
    def is_weighted(self) -> bool:
        """Check if every edge carries a weight."""
        return all(edge.weight is not None for edge in self.edges)

    def node_map(self) -> Dict[NodeId, Node]:
        """Return a mapping of node id to node record."""
        return {node.id: node for node in self.nodes}

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        """Get a node by id, or None if it is not in the graph."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def outgoing(self, node_id: NodeId) -> tuple[Edge, ...]:
        """Return the edges leaving ``node_id``, in input order."""
        return tuple(edge for edge in self.edges if edge.from_id == node_id)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered node ids from start to end, empty if unreachable
        path_nodes: Node records matching ``path``
        total_weight: Accumulated routing weight, inf if unreachable
        total_distance: Accumulated raw distance along ``path``
    """

    path: tuple[NodeId, ...] = field(default_factory=tuple)
    path_nodes: tuple[Node, ...] = field(default_factory=tuple)
    total_weight: float = float("inf")
    total_distance: float = 0.0

    @classmethod
    def unreachable(cls) -> PathResult:
        """Return the canonical "no path" result."""
        return cls(path=(), path_nodes=(), total_weight=float("inf"), total_distance=0.0)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the route."""
        return len(self.path)
