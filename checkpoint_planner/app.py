"""Checkpoint Route Planner - Interactive briefing map and ETA planner.

Pick a route, step through its checkpoints on the map, and compute
arrival times for a start time and start point.

Run: streamlit run checkpoint_planner/app.py
"""

import logging
import traceback

import streamlit as st

from checkpoint_planner.constants import AppConfig
from checkpoint_planner.core.eta_calculator import ETACalculator
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.defaults import default_catalog, default_leg_graph
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui import (
    HotspotMapRenderer,
    SelectionController,
    SessionPresenter,
    SidebarRenderer,
    handle_hotspot_click,
    install_configuration,
    reload_map,
    render_right_panel,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with the built-in configuration and map version."""
    if "controller" not in st.session_state:
        install_configuration(catalog=default_catalog(), leg_graph=default_leg_graph())

    if "_upload_counter" not in st.session_state:
        st.session_state._upload_counter = 0

    if "map_version" not in st.session_state:
        st.session_state.map_version = 0


def reset_ui_state() -> None:
    """Reset selection to initial while preserving the loaded configuration.

    Called when an error occurs to recover gracefully. Rebuilds the
    controller (first route, first checkpoint) and bumps the map version
    to clear stale map selections. Routes and leg times are kept.
    """
    logger.info("Resetting UI state due to error recovery")
    install_configuration(
        catalog=st.session_state.catalog,
        leg_graph=st.session_state.leg_graph,
        positions=st.session_state.get("hotspot_positions"),
    )
    st.session_state.map_version = st.session_state.get("map_version", 0) + 1
    logger.info("UI state reset complete - configuration preserved")


# =============================================================================
# MAP RENDERING
# =============================================================================


def _render_map() -> None:
    """Render hotspot map and dispatch a clicked hotspot to the controller."""
    controller: SelectionController = st.session_state.controller
    presenter: SessionPresenter = st.session_state.presenter
    renderer: HotspotMapRenderer = st.session_state.map_renderer

    map_version = st.session_state.get("map_version", 0)
    view = presenter.selection if presenter.selection is not None else controller.view()
    logger.info(f"[RENDER] Map: route={view.route_id}, active={view.highlight.active_id}, map_version={map_version}")

    fig = renderer.render(view=view)
    event = st.plotly_chart(
        fig,
        width="stretch",
        on_select="rerun",
        selection_mode="points",
        key=f"hotspot_map_{map_version}",
        config={"displayModeBar": False},
    )

    selection_points = event.selection.points if event is not None and event.selection else []
    if selection_points:
        clicked = handle_hotspot_click(controller=controller, selection_points=selection_points)
        if clicked is not None:
            reload_map()  # Fresh chart key so the same click is not handled twice


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(AppConfig.TITLE)

    try:
        _run_app_ui()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        # Reset selection while keeping routes and leg times
        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    controller: SelectionController = st.session_state.controller
    calculator: ETACalculator = st.session_state.calculator
    presenter: SessionPresenter = st.session_state.presenter
    catalog: RouteCatalog = st.session_state.catalog
    leg_graph: LegGraph = st.session_state.leg_graph
    renderer: HotspotMapRenderer = st.session_state.map_renderer

    logger.info(
        f"[MAIN] Render cycle starting: state={controller.machine.get_state_name()}, "
        f"map_version={st.session_state.get('map_version', 0)}"
    )

    SidebarRenderer(controller=controller, catalog=catalog, leg_graph=leg_graph, positions=renderer.positions).render()

    col_map, col_panel = st.columns([3, 2])
    with col_map:
        _render_map()
    with col_panel:
        render_right_panel(controller=controller, calculator=calculator, presenter=presenter)


if __name__ == "__main__":
    main()
