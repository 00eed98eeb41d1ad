"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing service and the
adapters it drives, so implementations can be swapped in tests.
"""

from .cache import CachePort
from .graph import RouteSolverPort

__all__ = [
    "CachePort",
    "RouteSolverPort",
]
