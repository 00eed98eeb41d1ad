"""Typed domain errors for flowroute.

The core routing functions never raise; these errors are used by the
graph builder, the strict solver entry points and the configuration
layer. All errors inherit from FlowRouteError and can optionally wrap
a root cause exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FlowRouteError(Exception):
    """Base error for the routing domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(FlowRouteError):
    """Malformed graph input or a graph unfit for the requested operation.

    Attributes:
        record: The offending node or edge record, if any
    """

    record: Optional[Any] = None


@dataclass
class NodeNotFoundError(FlowRouteError):
    """Node id not present in the graph.

    Attributes:
        node_id: The id that was not found
    """

    node_id: Optional[Any] = None


@dataclass
class NoRouteFoundError(FlowRouteError):
    """No path exists between the requested nodes.

    Attributes:
        start: Start node id
        end: End node id
        time_period: Period the weights were derived for, if known
    """

    start: Optional[Any] = None
    end: Optional[Any] = None
    time_period: Optional[str] = None


@dataclass
class ConfigurationError(FlowRouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
