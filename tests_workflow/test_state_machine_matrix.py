"""State Machine Transition Matrix - Parameterized validation of event/state combinations.

Uses pytest.mark.parametrize to create a data-driven truth table for state transitions.
This serves as executable documentation of the selection state machine contract.

Positions:
    first:    browsing, Route Alpha checkpoint P (index 0)
    last:     browsing, Route Alpha checkpoint S/P (index 6)
    detached: detached on VOCC, Route Alpha index 0 kept

Test Categories:
    1. Valid transitions: event fires and lands in the expected state
    2. Invalid transitions: guard fails, event raises TransitionNotAllowed
"""

from typing import Any

import pytest
from statemachine.exceptions import TransitionNotAllowed

from checkpoint_planner.ui.state_machine import SelectionStateMachine


def _move_to(sm: SelectionStateMachine, position: str) -> None:
    if position == "last":
        sm.context.current_point_index = len(sm.current_route.points) - 1
    elif position == "detached":
        sm.click_point(point_id="VOCC")


# =============================================================================
# TRUTH TABLE: Valid Transitions
# =============================================================================
# Format: (position, event, kwargs, target_state)

VALID_TRANSITIONS: list[tuple[str, str, dict[str, Any], str]] = [
    ("first", "select_route", {"route_id": "routeB"}, "browsing"),
    ("first", "select_route", {"route_id": "unknown"}, "browsing"),
    ("first", "click_point", {"point_id": "R"}, "browsing"),
    ("first", "click_point", {"point_id": "VOCC"}, "detached"),
    ("first", "next_point", {}, "browsing"),
    ("first", "reset_selection", {}, "browsing"),
    ("last", "prev_point", {}, "browsing"),
    ("last", "click_point", {"point_id": "P"}, "browsing"),
    ("detached", "select_route", {"route_id": "routeA"}, "browsing"),
    ("detached", "click_point", {"point_id": "Q"}, "browsing"),
    ("detached", "click_point", {"point_id": "UNMAPPED"}, "detached"),  # self-loop
    ("detached", "next_point", {}, "browsing"),
    ("detached", "reset_selection", {}, "browsing"),
]


# =============================================================================
# TRUTH TABLE: Invalid Transitions (guards failing at a boundary)
# =============================================================================
# Format: (position, event)

INVALID_TRANSITIONS: list[tuple[str, str]] = [
    ("first", "prev_point"),
    ("last", "next_point"),
    ("detached", "prev_point"),
]


class TestTransitionMatrix:
    """Parameterized tests validating the selection state machine transition matrix."""

    @pytest.mark.parametrize("position,event,kwargs,target", VALID_TRANSITIONS)
    def test_valid_transitions(
        self, sm: SelectionStateMachine, position: str, event: str, kwargs: dict[str, Any], target: str
    ) -> None:
        _move_to(sm=sm, position=position)
        sm.send(event, **kwargs)
        assert sm.current_state.id == target
        assert sm.context.state == target

    @pytest.mark.parametrize("position,event", INVALID_TRANSITIONS)
    def test_invalid_transitions_raise_error(self, sm: SelectionStateMachine, position: str, event: str) -> None:
        _move_to(sm=sm, position=position)
        before = sm.context.snapshot()
        with pytest.raises(TransitionNotAllowed):
            sm.send(event)
        assert sm.context.snapshot() == before

    @pytest.mark.parametrize("position,event", INVALID_TRANSITIONS)
    def test_try_transition_is_noop(self, sm: SelectionStateMachine, position: str, event: str) -> None:
        _move_to(sm=sm, position=position)
        before = sm.context.snapshot()
        assert sm.try_transition(event) is False
        assert sm.context.snapshot() == before


class TestTransitionEffects:
    """What each transition leaves behind in the SelectionState."""

    def test_detached_keeps_route_and_index(self, sm: SelectionStateMachine) -> None:
        sm.next_point()
        sm.click_point(point_id="VOCC")
        assert sm.context.current_route_id == "routeA"
        assert sm.context.current_point_index == 1
        assert sm.context.active_point_id == "VOCC"

    def test_click_on_other_route_switches_to_first_containing_route(self, catalog) -> None:
        """Every default checkpoint is on both routes, so the current route wins."""
        sm = SelectionStateMachine(catalog=catalog)
        sm.select_route(route_id="routeB")
        sm.click_point(point_id="T")
        assert sm.context.current_route_id == "routeB"
        assert sm.context.current_point_index == catalog.get(route_id="routeB").index_of(point_id="T")

    def test_leaving_detached_clears_detached_point(self, sm: SelectionStateMachine) -> None:
        sm.click_point(point_id="VOCC")
        sm.select_route(route_id="routeB")
        assert sm.context.detached_point_id is None
        assert sm.context.active_point_id == "S/P"

    def test_reset_returns_to_first_checkpoint(self, sm: SelectionStateMachine) -> None:
        sm.select_route(route_id="routeB")
        sm.next_point()
        sm.context.points_visible = False
        sm.reset_selection()
        assert sm.context.current_route_id == "routeB"
        assert sm.context.current_point_index == 0
        assert sm.context.points_visible is True
        assert sm.context.active_point_id == "S/P"
