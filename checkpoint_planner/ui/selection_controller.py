"""SelectionController - Keeps route, checkpoint and highlight consistent.

Owns the SelectionState and the SelectionStateMachine that mutates it.
Every public operation performs one transition (or the visibility toggle)
and then pushes a SelectionView to the presenter.

The controller depends on the RouteCatalog only. It never deals with
leg times; ETA requests go through ui.actions.request_eta().
"""

import logging
from typing import Iterable, Optional

from checkpoint_planner.constants import PanelConfig, StyleConfig
from checkpoint_planner.model.render import (
    HighlightState,
    NavigationState,
    PanelContent,
    SelectionView,
)
from checkpoint_planner.model.route import Route
from checkpoint_planner.model.route_catalog import RouteCatalog
from checkpoint_planner.ui.context import SelectionState
from checkpoint_planner.ui.presenter import Presenter
from checkpoint_planner.ui.state_machine import SelectionStateMachine, TransitionLogListener

logger = logging.getLogger(__name__)


class SelectionController:
    """Operator-facing selection operations.

    Example:
        controller = SelectionController(catalog=catalog, presenter=presenter)
        controller.select_point_by_click(point_id="T")
        controller.next()
        view = controller.view()
    """

    def __init__(
        self,
        catalog: RouteCatalog,
        presenter: Optional[Presenter] = None,
        hotspot_ids: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize on the first catalog route, index 0.

        Args:
            catalog: Routes to browse
            presenter: Receives a SelectionView after every operation
            hotspot_ids: Every marker on the map. Catalog checkpoints are
                always included; extra ids (e.g., depots) are points that
                belong to no route.
        """
        self.catalog = catalog
        self.presenter = presenter
        ids = dict.fromkeys(catalog.all_point_ids)
        if hotspot_ids is not None:
            ids.update(dict.fromkeys(hotspot_ids))
        self.hotspot_ids: list[str] = list(ids)

        self.state = SelectionState(current_route_id=catalog.first.id)
        self.machine = SelectionStateMachine(catalog=catalog, context=self.state)
        self.machine.add_listener(TransitionLogListener())
        self.select_route(route_id=catalog.first.id)

    # =========================================================================
    # Operations
    # =========================================================================

    def select_route(self, route_id: Optional[str]) -> SelectionView:
        """Switch route; unknown ids fall back to the first route."""
        self.machine.select_route(route_id=route_id)
        return self._emit()

    def select_point_by_click(self, point_id: str) -> SelectionView:
        """Show a clicked hotspot, switching route if it belongs to another one."""
        self.machine.click_point(point_id=point_id)
        return self._emit()

    def next(self) -> SelectionView:
        """Advance one checkpoint; no-op on the last one."""
        self.machine.try_transition("next_point")
        return self._emit()

    def prev(self) -> SelectionView:
        """Go back one checkpoint; no-op on the first one."""
        self.machine.try_transition("prev_point")
        return self._emit()

    def toggle_visibility(self, visible: bool) -> SelectionView:
        """Show or fade non-active hotspots. The active hotspot is unaffected."""
        self.state.points_visible = bool(visible)
        logger.info(f"Points visible: {self.state.points_visible}")
        return self._emit()

    def reset(self) -> SelectionView:
        """Clear highlight, show all points, back to the first checkpoint."""
        self.machine.reset_selection()
        return self._emit()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_route(self) -> Route:
        return self.machine.current_route

    @property
    def is_detached(self) -> bool:
        return self.machine.is_detached

    def view(self) -> SelectionView:
        """Render instructions for the current state."""
        route = self.current_route
        return SelectionView(
            route_id=route.id,
            route_name=route.name,
            route_color=route.color,
            route_point_ids=tuple(route.point_ids),
            panel=self._panel(route=route),
            highlight=self._highlight(route=route),
            navigation=self._navigation(route=route),
            detached=self.is_detached,
        )

    # =========================================================================
    # View Builders
    # =========================================================================

    def _panel(self, route: Route) -> PanelContent:
        if self.is_detached:
            point_id = self.state.detached_point_id
            return PanelContent(
                title=PanelConfig.DETACHED_TITLE_TEMPLATE.format(point_id=point_id),
                subtitle=PanelConfig.DETACHED_SUBTITLE,
                objective=PanelConfig.DETACHED_OBJECTIVE,
            )

        point = route.point_at(index=self.state.current_point_index)
        if point is None:
            return PanelContent(
                title=PanelConfig.EMPTY_ROUTE_TITLE,
                subtitle=route.name,
                objective=PanelConfig.EMPTY_ROUTE_OBJECTIVE,
            )

        return PanelContent(
            title=point.title,
            subtitle=PanelConfig.SUBTITLE_TEMPLATE.format(route_name=route.name, point_id=point.id),
            objective=point.objective,
            bullets=point.bullets,
        )

    def _highlight(self, route: Route) -> HighlightState:
        active = self.state.active_point_id
        ids = list(self.hotspot_ids)
        if active is not None and active not in ids:
            ids.append(active)

        idle_opacity = StyleConfig.VISIBLE_OPACITY if self.state.points_visible else StyleConfig.HIDDEN_OPACITY
        tint: dict[str, str] = {}
        opacity: dict[str, float] = {}
        for hotspot_id in ids:
            if hotspot_id == active:
                tint[hotspot_id] = StyleConfig.SELECTED_COLOR
                opacity[hotspot_id] = StyleConfig.VISIBLE_OPACITY
            else:
                tint[hotspot_id] = route.color if route.contains(point_id=hotspot_id) else StyleConfig.NEUTRAL_COLOR
                opacity[hotspot_id] = idle_opacity

        dimmed = frozenset(h for h in ids if h != active) if active is not None else frozenset()
        return HighlightState(
            active_id=active,
            dimmed=dimmed,
            tint=tint,
            opacity=opacity,
            points_visible=self.state.points_visible,
        )

    def _navigation(self, route: Route) -> NavigationState:
        return NavigationState(
            can_prev=self.machine.has_prev(),
            can_next=self.machine.has_next(),
            position=self.state.current_point_index,
            count=len(route.points),
        )

    def _emit(self) -> SelectionView:
        view = self.view()
        if self.presenter is not None:
            self.presenter.show_selection(view=view)
        return view
