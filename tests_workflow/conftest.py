"""Shared pytest fixtures for checkpoint_planner workflow tests.

Minimal fixtures: the built-in configuration and a small uploaded one.
"""

from typing import Any

import pytest

from checkpoint_planner.defaults import default_catalog
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.state_machine import SelectionStateMachine


@pytest.fixture
def catalog() -> RouteCatalog:
    """Built-in Route Alpha / Route Bravo."""
    return default_catalog()


@pytest.fixture
def sm(catalog: RouteCatalog) -> SelectionStateMachine:
    """Fresh machine in browsing on Route Alpha, checkpoint P."""
    machine = SelectionStateMachine(catalog=catalog)
    machine.select_route(route_id=catalog.first.id)
    return machine


@pytest.fixture
def uploaded_config() -> dict[str, Any]:
    """One route A -> B -> C with a DEPOT origin and no positions, as loaded from a JSON file."""
    return {
        "routes": [
            {
                "id": "ridge",
                "name": "Ridge Route",
                "color": "#16a34a",
                "points": [
                    {"id": "A", "title": "Trailhead", "objective": "Sign in.", "bullets": ["Radio check"]},
                    {"id": "B", "title": "Saddle", "objective": "Rest stop.", "bullets": []},
                    {"id": "C", "title": "Summit", "objective": "Report.", "bullets": ["Photo"]},
                ],
            }
        ],
        "leg_times": {"DEPOT": {"A": 30}, "A": {"B": 45}, "B": {"C": 20}},
    }
