"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Flow-aware route planning per time period
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
