"""Selection state for the checkpoint route planner.

SelectionState is the only mutable entity of the application. It is the
model object of SelectionStateMachine: python-statemachine keeps the
current state value in its `state` field. The machine's hooks write the
other fields, except points_visible, which the controller toggles directly.

Invariants:
- current_point_index is a valid index into the current route's points
  whenever that route has points (0 otherwise)
- active_point_id names at most one highlighted hotspot system-wide
- detached_point_id is set only while the machine is in the detached state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SelectionState:
    """Which route, which checkpoint, which highlight.

    Created at startup with the first catalog route and index 0. Never
    persisted.
    """

    current_route_id: str
    current_point_index: int = 0
    active_point_id: Optional[str] = None
    points_visible: bool = True
    detached_point_id: Optional[str] = None

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    def activate(self, point_id: str) -> None:
        """Highlight one hotspot, clearing the previous one first."""
        if self.active_point_id == point_id:
            return
        self.clear_highlight()
        self.active_point_id = point_id

    def clear_highlight(self) -> None:
        self.active_point_id = None

    def clear_detached(self) -> None:
        self.detached_point_id = None

    def snapshot(self) -> SelectionState:
        """Independent copy for comparisons and tests."""
        return SelectionState(
            current_route_id=self.current_route_id,
            current_point_index=self.current_point_index,
            active_point_id=self.active_point_id,
            points_visible=self.points_visible,
            detached_point_id=self.detached_point_id,
            state=self.state,
        )

    def __repr__(self) -> str:
        return (
            f"SelectionState(state={self.state}, route={self.current_route_id}, "
            f"index={self.current_point_index}, active={self.active_point_id}, "
            f"visible={self.points_visible})"
        )
