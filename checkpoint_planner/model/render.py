"""Render instructions emitted by the selection controller.

These are plain value objects. The presentation layer reads them and
never reaches back into controller state.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PanelContent:
    """Briefing panel text.

    Attributes:
        title: Heading (checkpoint title or placeholder)
        subtitle: Route and point line
        objective: One-line objective
        bullets: Ordered briefing bullets
    """

    title: str
    subtitle: str
    objective: str
    bullets: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HighlightState:
    """Hotspot styling for one render.

    Attributes:
        active_id: The single highlighted hotspot, if any
        dimmed: Every hotspot except the active one (empty when nothing is active)
        tint: Hotspot id -> marker color
        opacity: Hotspot id -> marker opacity
        points_visible: Visibility toggle for non-active hotspots
    """

    active_id: Optional[str]
    dimmed: frozenset[str]
    tint: dict[str, str]
    opacity: dict[str, float]
    points_visible: bool = True

    def is_active(self, hotspot_id: str) -> bool:
        return self.active_id == hotspot_id

    def is_dimmed(self, hotspot_id: str) -> bool:
        return hotspot_id in self.dimmed


@dataclass(frozen=True)
class NavigationState:
    """Previous/Next button availability."""

    can_prev: bool
    can_next: bool
    position: int  # 0-based index in the current route
    count: int  # Points in the current route

    @property
    def label(self) -> str:
        """Position label such as "3 / 7" (empty route: "0 / 0")."""
        if self.count == 0:
            return "0 / 0"
        return f"{self.position + 1} / {self.count}"


@dataclass(frozen=True)
class SelectionView:
    """Everything the presentation layer needs after a selection change."""

    route_id: str
    route_name: str
    route_color: str
    route_point_ids: tuple[str, ...]
    panel: PanelContent
    highlight: HighlightState
    navigation: NavigationState
    detached: bool = False
