"""UI Actions - Glue between operator events and the core.

This module handles:
- ETA requests (request_eta, schedule_messages)
- Start-point options for the ETA selector (external_origins, origin_options)
- Map click handling (handle_hotspot_click)
- Map reloads that discard stale click state (bump_map_version, reload_map)
- Swapping the active configuration (build_configuration, install_configuration)

The Streamlit-specific helpers touch st.session_state only; everything
else is plain Python and is exercised directly by the tests.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, Optional

import streamlit as st

from checkpoint_planner.constants import EtaConfig
from checkpoint_planner.core.eta_calculator import (
    ETACalculator,
    EtaSchedule,
    UnknownLegPolicy,
    UnknownLegTimeError,
    parse_clock,
)
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.model.message import (
    InvalidStartTimeMessage,
    LegTimeRejectedMessage,
    Message,
    MissingStartTimeMessage,
    NoLegsMessage,
    OriginNotConnectedMessage,
    UnknownLegTimesMessage,
)
from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.center_map import HotspotMapRenderer, layout_hotspots
from checkpoint_planner.ui.presenter import Presenter, SessionPresenter
from checkpoint_planner.ui.selection_controller import SelectionController

logger = logging.getLogger(__name__)


# =============================================================================
# MAP RELOAD
# =============================================================================


def reload_map(before: "Callable[[], None] | None" = None) -> None:
    """Run optional callback, bump map version, then st.rerun().

    st.rerun() raises StopExecution, so this never returns inside a
    Streamlit script run.
    """
    if before is not None:
        before()
    bump_map_version()
    st.rerun()


def bump_map_version() -> None:
    """Increment map_version to create a fresh chart component.

    A new component key forgets the previous point selection, so the same
    click is not processed again on the next rerun.
    """
    old_version = st.session_state.get("map_version", 0)
    new_version = old_version + 1
    st.session_state.map_version = new_version
    logger.info(f"[MAP] Bumped map_version: {old_version} -> {new_version}")


# =============================================================================
# MAP CLICKS
# =============================================================================


def extract_clicked_hotspot(selection_points: list[dict]) -> Optional[str]:
    """Hotspot id from a plotly selection event, or None for no click.

    Each hotspot trace carries its id as customdata. Plotly reports it as
    a scalar or as a one-element list depending on how it was set.
    """
    for point in selection_points:
        custom = point.get("customdata")
        if isinstance(custom, (list, tuple)):
            custom = custom[0] if custom else None
        if custom:
            return str(custom)
    return None


def handle_hotspot_click(controller: SelectionController, selection_points: list[dict]) -> Optional[str]:
    """Dispatch a map click to the controller. Returns the clicked id."""
    point_id = extract_clicked_hotspot(selection_points=selection_points)
    if point_id is None:
        return None
    logger.info(f"[CLICK] Hotspot {point_id}")
    controller.select_point_by_click(point_id=point_id)
    return point_id


# =============================================================================
# ETA
# =============================================================================


def external_origins(catalog: RouteCatalog, leg_graph: LegGraph) -> list[str]:
    """Leg-time ids that belong to no route (depots, control centres).

    Sorted, with EtaConfig.DEFAULT_ORIGIN first when the graph knows it.
    """
    origins = sorted(leg_graph.nodes - set(catalog.all_point_ids))
    if EtaConfig.DEFAULT_ORIGIN in origins:
        origins.remove(EtaConfig.DEFAULT_ORIGIN)
        origins.insert(0, EtaConfig.DEFAULT_ORIGIN)
    return origins


def origin_options(route: Route, origins: Iterable[str]) -> list[tuple[str, str]]:
    """(value, label) pairs: external origins first, then the route's points."""
    options = [(token, f"{token} (origin)") for token in origins]
    options.extend((p.id, f"{p.id} — {p.title}") for p in route.points)
    return options


def schedule_messages(schedule: EtaSchedule, route: Route) -> list[Message]:
    """Warnings the operator should see next to a schedule."""
    start_time = (schedule.start_time or "").strip()
    if not start_time:
        return [MissingStartTimeMessage()]
    if parse_clock(value=start_time) is None:
        return [InvalidStartTimeMessage(value=start_time)]

    messages: list[Message] = []
    if schedule.is_empty:
        messages.append(NoLegsMessage())
    if schedule.origin_ignored:
        messages.append(OriginNotConnectedMessage(origin=schedule.origin, route_name=route.name))
    if schedule.unknown_legs:
        labels = tuple(f"{row.from_id} → {row.to_id}" for row in schedule.unknown_legs)
        messages.append(UnknownLegTimesMessage(legs=labels))
    return messages


def request_eta(
    calculator: ETACalculator,
    presenter: Presenter,
    route: Route,
    start_time: Optional[str],
    origin: Optional[str],
) -> Optional[EtaSchedule]:
    """Compute the schedule for the current route and hand it to the presenter.

    Returns:
        The schedule, or None if the calculator's strict policy rejected it.
    """
    origin = origin or EtaConfig.DEFAULT_ORIGIN
    try:
        schedule = calculator.compute(start_time=start_time, origin=origin, route=route)
    except UnknownLegTimeError as e:
        logger.warning(f"[ETA] Rejected: {e}")
        presenter.show_schedule(schedule=None, messages=[LegTimeRejectedMessage(from_id=e.from_id, to_id=e.to_id)])
        return None

    presenter.show_schedule(schedule=schedule, messages=schedule_messages(schedule=schedule, route=route))
    return schedule


# =============================================================================
# CONFIGURATION
# =============================================================================


def build_configuration(
    catalog: RouteCatalog,
    leg_graph: LegGraph,
    presenter: Optional[Presenter] = None,
    positions: Optional[dict[str, tuple[float, float]]] = None,
    unknown_policy: Optional[UnknownLegPolicy] = None,
) -> dict[str, Any]:
    """Session objects for a configuration, keyed by their session_state name.

    The map shows every checkpoint of the catalog plus the leg-time origins
    that belong to no route. Hotspots without a position are laid out by
    layout_hotspots().

    Args:
        catalog: Routes to browse
        leg_graph: Leg times for the ETA calculator
        presenter: Receives the controller's views
        positions: Configured hotspot positions (x_pct, y_pct)
        unknown_policy: Defaults to EtaConfig.UNKNOWN_LEG_POLICY
    """
    origins = external_origins(catalog=catalog, leg_graph=leg_graph)
    controller = SelectionController(catalog=catalog, presenter=presenter, hotspot_ids=origins)
    layout = layout_hotspots(hotspot_ids=controller.hotspot_ids, positions=positions)
    policy = unknown_policy or UnknownLegPolicy(EtaConfig.UNKNOWN_LEG_POLICY)
    return {
        "catalog": catalog,
        "leg_graph": leg_graph,
        "hotspot_positions": positions,
        "controller": controller,
        "calculator": ETACalculator(leg_graph=leg_graph, unknown_policy=policy),
        "map_renderer": HotspotMapRenderer(positions=layout),
    }


def install_configuration(
    catalog: RouteCatalog,
    leg_graph: LegGraph,
    positions: Optional[dict[str, tuple[float, float]]] = None,
) -> None:
    """Make catalog and leg graph the active configuration.

    Rebuilds controller, calculator and map renderer around them. The
    presenter is kept but its schedule is dropped, since it was computed
    on the old leg times.
    """
    presenter = st.session_state.get("presenter")
    if presenter is None:
        presenter = SessionPresenter()
        st.session_state.presenter = presenter
    presenter.clear_schedule()

    session = build_configuration(catalog=catalog, leg_graph=leg_graph, presenter=presenter, positions=positions)
    for key, value in session.items():
        st.session_state[key] = value
    logger.info(
        f"Installed configuration: {len(catalog)} route(s), {len(leg_graph)} leg time(s), "
        f"{len(session['map_renderer'].positions)} hotspot(s), policy={session['calculator'].unknown_policy.value}"
    )
