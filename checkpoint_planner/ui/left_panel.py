"""Sidebar for the checkpoint route planner.

Renders:
- Route picker (catalog order)
- Point visibility toggle and Reset
- Route context message
- Configuration load/save as JSON

Widget keys carry the map_version, so after a reload the widgets are
rebuilt from the controller's state instead of their previous value.
"""

import json
import logging
from datetime import datetime
from typing import Optional

import streamlit as st

from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.defaults import dump_configuration, load_configuration, load_positions
from checkpoint_planner.model.message import (
    ConfigLoadedMessage,
    ConfigLoadErrorMessage,
    RouteContextMessage,
)
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.actions import install_configuration, reload_map
from checkpoint_planner.ui.selection_controller import SelectionController

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the sidebar and forwards operator input to the controller."""

    def __init__(
        self,
        controller: SelectionController,
        catalog: RouteCatalog,
        leg_graph: LegGraph,
        positions: Optional[dict[str, tuple[float, float]]] = None,
    ) -> None:
        self.controller = controller
        self.catalog = catalog
        self.leg_graph = leg_graph
        self.positions = positions

    def render(self) -> None:
        version = st.session_state.get("map_version", 0)
        with st.sidebar:
            self._render_route_picker(version=version)
            self._render_visibility_toggle(version=version)
            self._render_reset_button()
            st.divider()
            self._render_context()
            st.divider()
            self._render_save_load()

    def _render_route_picker(self, version: int) -> None:
        route_ids = self.catalog.route_ids
        current = self.controller.current_route.id
        names = {route.id: route.name for route in self.catalog}
        choice = st.selectbox(
            "🧭 Route",
            options=route_ids,
            index=route_ids.index(current),
            format_func=lambda route_id: names[route_id],
            key=f"route_select_{version}",
        )
        if choice != current:
            logger.info(f"Route picked in sidebar: {current} -> {choice}")
            reload_map(before=lambda: self.controller.select_route(route_id=choice))

    def _render_visibility_toggle(self, version: int) -> None:
        visible = self.controller.state.points_visible
        toggled = st.toggle(
            "👁️ Show all points",
            value=visible,
            help="Fade every hotspot except the active checkpoint",
            key=f"points_visible_{version}",
        )
        if toggled != visible:
            reload_map(before=lambda: self.controller.toggle_visibility(visible=toggled))

    def _render_reset_button(self) -> None:
        if st.button(
            "🎯 Reset",
            width="stretch",
            help="Clear the highlight, show all points and go back to the first checkpoint",
            key="reset_selection",
        ):
            reload_map(before=self.controller.reset)

    def _render_context(self) -> None:
        route = self.controller.current_route
        RouteContextMessage(
            route_name=route.name,
            point_count=len(route.points),
            detached_point_id=self.controller.state.detached_point_id if self.controller.is_detached else None,
        ).display()

    def _render_save_load(self) -> None:
        """Render configuration upload and download."""
        with st.expander("💾 Route Configuration", expanded=False):
            uploaded_file = st.file_uploader(
                "📂 Load from File",
                type=["json"],
                help="Routes, leg times and optional hotspot positions as JSON",
                label_visibility="collapsed",
                key=f"config_uploader_{st.session_state.get('_upload_counter', 0)}",
            )

            if uploaded_file is not None:
                try:
                    data = json.load(uploaded_file)
                    catalog, leg_graph = load_configuration(data=data)
                    positions = load_positions(data=data)
                except ValueError as e:
                    # json.JSONDecodeError is a ValueError too
                    ConfigLoadErrorMessage(error=str(e)).display()
                    logger.error(f"Failed to load configuration file: {e}")
                else:
                    logger.info(f"Loaded configuration from file: {uploaded_file.name}")
                    install_configuration(catalog=catalog, leg_graph=leg_graph, positions=positions)
                    ConfigLoadedMessage(route_count=len(catalog), leg_count=len(leg_graph)).display()
                    st.session_state._upload_counter = st.session_state.get("_upload_counter", 0) + 1
                    reload_map()

            config = dump_configuration(catalog=self.catalog, leg_graph=self.leg_graph, positions=self.positions)
            config_json = json.dumps(config, indent=2)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            st.download_button(
                "💾 Save to File",
                data=config_json,
                file_name=f"checkpoint_routes_{timestamp}.json",
                mime="application/json",
                width="stretch",
                help="Download the active routes, leg times and hotspot positions as JSON",
            )
