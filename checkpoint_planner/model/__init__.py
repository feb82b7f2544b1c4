"""Data model classes for the checkpoint route planner.

- Checkpoint: Waypoint with briefing content
- Route: Ordered, named checkpoint sequence
- RouteCatalog: Immutable set of routes
- PanelContent / HighlightState / NavigationState / SelectionView:
  render instructions handed to the presentation layer
- Message: User-facing messages (info, warning, error)
"""

from checkpoint_planner.model.checkpoint import Checkpoint
from checkpoint_planner.model.render import (
    HighlightState,
    NavigationState,
    PanelContent,
    SelectionView,
)
from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog

__all__ = [
    "Checkpoint",
    "Route",
    "RouteCatalog",
    "PanelContent",
    "HighlightState",
    "NavigationState",
    "SelectionView",
]
