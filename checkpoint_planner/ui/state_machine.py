"""State machine for checkpoint selection.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Guarded transitions (conditions)
- before_* hooks that mutate the SelectionState model
- A listener that logs every transition

States (2 states):
    BROWSING: Panel shows the route checkpoint at current_point_index
    DETACHED: Operator clicked a hotspot that belongs to no catalog route;
              the panel shows placeholder content for that point

Visibility (SelectionState.points_visible) is orthogonal to state and is
not a transition.

Transitions (all total, none can fail from the operator's point of view):
    BROWSING/DETACHED -> BROWSING: select_route (unknown id -> first route)
    BROWSING/DETACHED -> BROWSING: click_point (point in some route)
    BROWSING/DETACHED -> DETACHED: click_point (point in no route)
    BROWSING/DETACHED -> BROWSING: next_point, prev_point (guarded by bounds)
    BROWSING/DETACHED -> BROWSING: reset_selection

A guarded navigation event at a route boundary raises TransitionNotAllowed
inside python-statemachine; try_transition() turns that into a no-op.

Highlight exclusivity: every hook activates through
SelectionState.activate(), which clears the previous active id first.
"""

from __future__ import annotations

import logging
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.context import SelectionState

logger = logging.getLogger(__name__)


class TransitionLogListener:
    """Listener that logs every state transition.

    Usage:
        sm = SelectionStateMachine(catalog=catalog)
        sm.add_listener(TransitionLogListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")


class SelectionStateMachine(StateMachine):
    """State machine over route, checkpoint index and highlight.

    States:
        browsing: Showing a route checkpoint
        detached: Showing a point outside every route
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    browsing = State("Browsing", initial=True)
    detached = State("Detached")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    select_route = browsing.to(browsing) | detached.to(browsing)

    click_point = (
        browsing.to(browsing, cond="is_catalog_point")
        | browsing.to(detached, unless="is_catalog_point")
        | detached.to(browsing, cond="is_catalog_point")
        | detached.to(detached, unless="is_catalog_point")
    )

    next_point = browsing.to(browsing, cond="has_next") | detached.to(browsing, cond="has_next")
    prev_point = browsing.to(browsing, cond="has_prev") | detached.to(browsing, cond="has_prev")

    reset_selection = browsing.to(browsing) | detached.to(browsing)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def is_catalog_point(self, point_id: str) -> bool:
        """Guard: Clicked point belongs to at least one route."""
        return self.catalog.is_catalog_point(point_id=point_id)

    def has_next(self) -> bool:
        """Guard: Current index is not the last point of the route."""
        return self.context.current_point_index < len(self.current_route.points) - 1

    def has_prev(self) -> bool:
        """Guard: Current index is not the first point of a non-empty route."""
        return not self.current_route.is_empty and self.context.current_point_index > 0

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_browsing(self) -> bool:
        return self.browsing.is_active

    @property
    def is_detached(self) -> bool:
        return self.detached.is_active

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_select_route(self, route_id: str | None) -> None:
        self._apply_route(route_id=route_id)

    def before_click_point(self, point_id: str) -> None:
        if not self.catalog.is_catalog_point(point_id=point_id):
            # Route and index stay as they are
            self.context.detached_point_id = point_id
            self.context.activate(point_id=point_id)
            return

        idx = self.current_route.index_of(point_id=point_id)
        if idx is None:
            other = self.catalog.routes_containing(point_id=point_id)[0]
            logger.info(f"[CLICK] {point_id} is on {other.id}, switching from {self.context.current_route_id}")
            self._apply_route(route_id=other.id)
            idx = other.index_of(point_id=point_id)
        self.context.current_point_index = idx
        self._show_current_point()

    def before_next_point(self) -> None:
        self.context.current_point_index += 1
        self._show_current_point()

    def before_prev_point(self) -> None:
        self.context.current_point_index -= 1
        self._show_current_point()

    def before_reset_selection(self) -> None:
        self.context.clear_highlight()
        self.context.points_visible = True
        self.context.current_point_index = 0
        self._apply_route(route_id=self.context.current_route_id)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _apply_route(self, route_id: str | None) -> None:
        """Switch route, keep index when in bounds, highlight its checkpoint."""
        route = self.catalog.resolve(route_id=route_id)
        self.context.current_route_id = route.id
        if self.context.current_point_index >= len(route.points):
            self.context.current_point_index = 0
        self._show_current_point()

    def _show_current_point(self) -> None:
        """Leave detached display and highlight the current route checkpoint."""
        self.context.clear_detached()
        point = self.current_route.point_at(index=self.context.current_point_index)
        if point is None:
            self.context.clear_highlight()
        else:
            self.context.activate(point_id=point.id)

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(
        self,
        catalog: RouteCatalog,
        context: SelectionState | None = None,
        start_value: str | None = None,
    ) -> None:
        """Initialize state machine with model pattern.

        Args:
            catalog: Routes the selection refers to
            context: Shared model (creates one on the first route if None)
            start_value: Optional initial state value (for restoring state)
        """
        self.catalog = catalog
        model = context or SelectionState(current_route_id=catalog.first.id)
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> SelectionState:
        """Alias for model."""
        return self.model

    @property
    def current_route(self) -> Route:
        return self.catalog.resolve(route_id=self.context.current_route_id)

    def get_state_name(self) -> str:
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        A failed guard (e.g., next_point on the last checkpoint) is a no-op.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.debug(f"Transition '{event}' ignored in {self.get_state_name()} at {self.context!r}")
            return False

    def __repr__(self) -> str:
        return f"SelectionStateMachine(state={self.get_state_name()}, model={self.context!r})"
