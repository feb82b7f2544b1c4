"""Tests for checkpoint_planner model classes and the built-in configuration.

Tests: Checkpoint, Route, RouteCatalog, render instructions, defaults
Focus: Lookups, validation, JSON configuration load/save
"""

import json

import pytest

from checkpoint_planner.constants import EtaConfig, MapConfig
from checkpoint_planner.defaults import (
    DEFAULT_LEG_TIMES,
    DEFAULT_ROUTES,
    dump_configuration,
    load_configuration,
    load_positions,
)
from checkpoint_planner.model.checkpoint import Checkpoint
from checkpoint_planner.model.render import NavigationState
from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog


class TestCheckpoint:
    """Checkpoint - waypoint with briefing content."""

    def test_title_defaults_to_id(self) -> None:
        cp = Checkpoint.from_dict(data={"id": "P"})
        assert cp.title == "P"
        assert cp.objective == ""
        assert cp.bullets == ()

    def test_dict_roundtrip(self) -> None:
        cp = Checkpoint(id="Q", title="Checkpoint Q", objective="Observe.", bullets=("a", "b"))
        assert Checkpoint.from_dict(data=cp.to_dict()) == cp


class TestRoute:
    """Route - ordered checkpoint sequence."""

    def test_lookups(self, line_route: Route) -> None:
        assert line_route.point_ids == ["P", "Q", "R", "S", "T", "U", "S/P"]
        assert line_route.index_of(point_id="S/P") == 6
        assert line_route.index_of(point_id="VOCC") is None
        assert line_route.contains(point_id="R") is True
        assert line_route.point_at(index=0).id == "P"
        assert line_route.point_at(index=7) is None
        assert line_route.point_at(index=-1) is None

    def test_empty(self, empty_route: Route) -> None:
        assert empty_route.is_empty is True
        assert empty_route.point_ids == []

    def test_duplicate_checkpoint_rejected(self) -> None:
        data = {"id": "r", "name": "R", "color": "#fff", "points": [{"id": "P"}, {"id": "P"}]}
        with pytest.raises(ValueError, match="more than once"):
            Route.from_dict(data=data)

    def test_name_defaults_to_id(self) -> None:
        route = Route.from_dict(data={"id": "r9", "color": "#fff", "points": []})
        assert route.name == "r9"


class TestRouteCatalog:
    """RouteCatalog - immutable set of routes."""

    def test_first_and_ids(self, two_route_catalog: RouteCatalog) -> None:
        assert two_route_catalog.first.id == "alpha"
        assert two_route_catalog.route_ids == ["alpha", "bravo"]
        assert len(two_route_catalog) == 2
        assert "bravo" in two_route_catalog

    def test_resolve_unknown_falls_back_to_first(self, two_route_catalog: RouteCatalog) -> None:
        assert two_route_catalog.resolve(route_id="nope").id == "alpha"
        assert two_route_catalog.resolve(route_id=None).id == "alpha"
        assert two_route_catalog.resolve(route_id="bravo").id == "bravo"

    def test_routes_containing(self, two_route_catalog: RouteCatalog) -> None:
        assert [r.id for r in two_route_catalog.routes_containing(point_id="R")] == ["alpha", "bravo"]
        assert [r.id for r in two_route_catalog.routes_containing(point_id="X")] == ["bravo"]
        assert two_route_catalog.routes_containing(point_id="VOCC") == []

    def test_catalog_points(self, two_route_catalog: RouteCatalog) -> None:
        assert two_route_catalog.all_point_ids == ["P", "Q", "R", "X", "Y"]
        assert two_route_catalog.is_catalog_point(point_id="Y") is True
        assert two_route_catalog.is_catalog_point(point_id="VOCC") is False

    def test_empty_catalog_rejected(self) -> None:
        with pytest.raises(ValueError):
            RouteCatalog(routes=[])

    def test_duplicate_route_ids_rejected(self, line_route: Route) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            RouteCatalog(routes=[line_route, line_route])


class TestNavigationState:
    @pytest.mark.parametrize(
        "position,count,expected",
        [(0, 7, "1 / 7"), (6, 7, "7 / 7"), (0, 0, "0 / 0")],
    )
    def test_label(self, position: int, count: int, expected: str) -> None:
        nav = NavigationState(can_prev=False, can_next=False, position=position, count=count)
        assert nav.label == expected


# =============================================================================
# BUILT-IN CONFIGURATION
# =============================================================================


class TestDefaults:
    """Built-in routes, leg times and the JSON configuration format."""

    def test_default_routes(self, default_routes: RouteCatalog) -> None:
        assert default_routes.route_ids == ["routeA", "routeB"]
        assert default_routes.get(route_id="routeA").point_ids == ["P", "Q", "R", "S", "T", "U", "S/P"]
        assert default_routes.get(route_id="routeB").point_ids == ["S/P", "P", "R", "U", "T", "S", "Q"]

    def test_default_origin_has_legs(self, default_graph) -> None:
        assert EtaConfig.DEFAULT_ORIGIN in default_graph.nodes
        assert default_graph.leg_time(from_id="VOCC", to_id="P") == 12

    def test_every_checkpoint_has_a_map_position(self, default_routes: RouteCatalog) -> None:
        missing = [pid for pid in default_routes.all_point_ids if pid not in MapConfig.HOTSPOT_POSITIONS]
        assert missing == []

    def test_dump_then_load(self, default_routes: RouteCatalog, default_graph) -> None:
        data = json.loads(json.dumps(dump_configuration(catalog=default_routes, leg_graph=default_graph)))
        catalog, leg_graph = load_configuration(data=data)

        assert catalog.to_dict() == DEFAULT_ROUTES
        assert leg_graph.to_dict() == DEFAULT_LEG_TIMES

    @pytest.mark.parametrize(
        "data",
        [
            pytest.param({"routes": DEFAULT_ROUTES}, id="no_leg_times"),
            pytest.param({"leg_times": DEFAULT_LEG_TIMES}, id="no_routes"),
            pytest.param([], id="not_an_object"),
            pytest.param({"routes": [], "leg_times": {}}, id="no_route"),
            pytest.param({"routes": [{"name": "x"}], "leg_times": {}}, id="route_without_id"),
            pytest.param({"routes": DEFAULT_ROUTES, "leg_times": {"P": {"Q": -3}}}, id="negative_minutes"),
            pytest.param({"routes": DEFAULT_ROUTES, "leg_times": {"P": 5}}, id="leg_row_not_object"),
        ],
    )
    def test_invalid_configuration(self, data) -> None:
        with pytest.raises(ValueError):
            load_configuration(data=data)

    def test_positions_round_trip(self, default_routes: RouteCatalog, default_graph) -> None:
        positions = MapConfig.HOTSPOT_POSITIONS
        dumped = dump_configuration(catalog=default_routes, leg_graph=default_graph, positions=positions)
        data = json.loads(json.dumps(dumped))
        assert data["positions"]["VOCC"] == [12.0, 82.0]
        assert load_positions(data=data) == positions

    def test_positions_are_optional(self, default_routes: RouteCatalog, default_graph) -> None:
        data = dump_configuration(catalog=default_routes, leg_graph=default_graph)
        assert "positions" not in data
        assert load_positions(data=data) is None

    @pytest.mark.parametrize(
        "positions",
        [
            pytest.param([["P", 1, 2]], id="not_an_object"),
            pytest.param({"P": [1]}, id="one_coordinate"),
            pytest.param({"P": ["1", 2]}, id="string_coordinate"),
            pytest.param({"P": [True, 2]}, id="bool_coordinate"),
            pytest.param({"P": [120, 2]}, id="outside_map"),
            pytest.param({"P": [-1, 2]}, id="negative"),
        ],
    )
    def test_invalid_positions(self, positions) -> None:
        with pytest.raises(ValueError):
            load_positions(data={"routes": DEFAULT_ROUTES, "leg_times": DEFAULT_LEG_TIMES, "positions": positions})
