"""Shared pytest fixtures for checkpoint_planner tests.

Provides small hand-built routes and leg graphs with explicit minutes, so
every expected ETA in the tests can be checked by hand.

ROUTE LAYOUT:
    line route:  P -> Q -> R -> S -> T -> U -> S/P
    leg minutes: 14    12   11   9    15   8      (total 69)
    depot:       DEPOT -> P = 12, no other DEPOT legs
"""

from typing import Optional

import pytest

from checkpoint_planner.core.eta_calculator import ETACalculator, EtaSchedule
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.defaults import default_catalog, default_leg_graph
from checkpoint_planner.model.checkpoint import Checkpoint
from checkpoint_planner.model.message import Message
from checkpoint_planner.model.render import SelectionView
from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.presenter import Presenter
from checkpoint_planner.ui.selection_controller import SelectionController

LINE_IDS = ["P", "Q", "R", "S", "T", "U", "S/P"]
LINE_MINUTES = [14, 12, 11, 9, 15, 8]


# =============================================================================
# RECORDING PRESENTER
# =============================================================================


class RecordingPresenter(Presenter):
    """Presenter that keeps every instruction it receives."""

    def __init__(self) -> None:
        self.views: list[SelectionView] = []
        self.schedules: list[tuple[Optional[EtaSchedule], list[Message]]] = []

    def show_selection(self, view: SelectionView) -> None:
        self.views.append(view)

    def show_schedule(self, schedule: Optional[EtaSchedule], messages: list[Message]) -> None:
        self.schedules.append((schedule, list(messages)))

    @property
    def last_view(self) -> SelectionView:
        return self.views[-1]


def make_route(route_id: str, point_ids: list[str], color: str = "#06b6d4") -> Route:
    """Route whose checkpoints are titled after their ids."""
    return Route(
        id=route_id,
        name=f"Route {route_id}",
        color=color,
        points=tuple(
            Checkpoint(id=pid, title=f"Checkpoint {pid}", objective=f"Objective {pid}", bullets=(f"Go {pid}",))
            for pid in point_ids
        ),
    )


# =============================================================================
# ROUTES AND GRAPHS
# =============================================================================


@pytest.fixture
def line_route() -> Route:
    """Seven checkpoints P..S/P in a line."""
    return make_route(route_id="line", point_ids=LINE_IDS)


@pytest.fixture
def empty_route() -> Route:
    return make_route(route_id="empty", point_ids=[])


@pytest.fixture
def line_graph() -> LegGraph:
    """Forward legs along the line route plus DEPOT -> P."""
    legs: dict[str, dict[str, int]] = {a: {b: m} for a, b, m in zip(LINE_IDS[:-1], LINE_IDS[1:], LINE_MINUTES)}
    legs["DEPOT"] = {"P": 12}
    return LegGraph(legs=legs)


@pytest.fixture
def line_calculator(line_graph: LegGraph) -> ETACalculator:
    return ETACalculator(leg_graph=line_graph)


@pytest.fixture
def two_route_catalog() -> RouteCatalog:
    """Alpha P,Q,R and Bravo R,X,Y: R is shared, X and Y only on Bravo."""
    return RouteCatalog(
        routes=[
            make_route(route_id="alpha", point_ids=["P", "Q", "R"], color="#06b6d4"),
            make_route(route_id="bravo", point_ids=["R", "X", "Y"], color="#7c3aed"),
        ]
    )


@pytest.fixture
def default_routes() -> RouteCatalog:
    return default_catalog()


@pytest.fixture
def default_graph() -> LegGraph:
    return default_leg_graph()


# =============================================================================
# CONTROLLER
# =============================================================================


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def controller(two_route_catalog: RouteCatalog, presenter: RecordingPresenter) -> SelectionController:
    """Controller on alpha with one extra hotspot (VOCC) outside every route."""
    return SelectionController(catalog=two_route_catalog, presenter=presenter, hotspot_ids=["VOCC"])
