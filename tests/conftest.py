"""Shared fixtures for flowroute tests."""

from __future__ import annotations

import pytest

from flowroute.config import reset_config
from flowroute.domain.models import Graph
from flowroute.graph.load_graph import build_graph


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure environment overrides from one test never leak into another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def campus_data() -> dict:
    """Small campus walkway network, one-way between library and canteen."""
    return {
        "nodes": [
            {"id": 1, "name": "Main gate"},
            {"id": 2, "name": "Library"},
            {"id": 3, "name": "Canteen"},
            {"id": 4, "name": "Stadium"},
            {"id": 5, "name": "Dormitory"},
        ],
        "edges": [
            {"from": 1, "to": 2, "distance": 10, "flow": {"morning": 0.5, "evening": 0.1}},
            {"from": 2, "to": 3, "distance": 5, "flow": {"morning": 0.1, "evening": 0.9}},
            {"from": 1, "to": 4, "distance": 8, "flow": {"morning": 0.0, "evening": 1.5}},
            {"from": 4, "to": 3, "distance": 9, "flow": {"morning": 0.2, "evening": 0.0}},
            {"from": 3, "to": 1, "distance": 14, "flow": {}},
        ],
    }


@pytest.fixture
def campus(campus_data) -> Graph:
    return build_graph(campus_data)
