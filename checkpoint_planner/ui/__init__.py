"""User interface components for the checkpoint route planner.

File Structure (layout-based naming):
- left_panel.py: Sidebar with route picker, visibility, reset, config load/save
- center_map.py: Plotly hotspot map over the briefing image
- right_panel.py: Briefing panel with navigation, ETA planner

Core Components:
- context.py: SelectionState (route, point index, highlight)
- state_machine.py: SelectionStateMachine (browsing / detached)
- selection_controller.py: SelectionController, emits SelectionViews
- presenter.py: Presenter seam and the session-backed implementation
- actions.py: ETA requests, map clicks, map reloads, config install
"""

from checkpoint_planner.ui.actions import (
    build_configuration,
    bump_map_version,
    external_origins,
    handle_hotspot_click,
    install_configuration,
    origin_options,
    reload_map,
    request_eta,
    schedule_messages,
)
from checkpoint_planner.ui.center_map import HotspotMapRenderer, layout_hotspots
from checkpoint_planner.ui.context import SelectionState
from checkpoint_planner.ui.left_panel import SidebarRenderer
from checkpoint_planner.ui.presenter import Presenter, SessionPresenter
from checkpoint_planner.ui.right_panel import BriefingPanel, EtaPanel, render_right_panel
from checkpoint_planner.ui.selection_controller import SelectionController
from checkpoint_planner.ui.state_machine import SelectionStateMachine, TransitionLogListener

__all__ = [
    "SelectionStateMachine",
    "SelectionState",
    "TransitionLogListener",
    "SelectionController",
    "Presenter",
    "SessionPresenter",
    "HotspotMapRenderer",
    "layout_hotspots",
    "SidebarRenderer",
    "BriefingPanel",
    "EtaPanel",
    "render_right_panel",
    "build_configuration",
    "bump_map_version",
    "external_origins",
    "handle_hotspot_click",
    "install_configuration",
    "origin_options",
    "reload_map",
    "request_eta",
    "schedule_messages",
]
