"""Checkpoint - A named waypoint with briefing content.

A Checkpoint carries the text the operator reads when the point is
selected: a title, one objective line and an ordered list of bullets.

The same checkpoint id may appear in several routes with different
briefing content, so identity is the id only within one route.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Checkpoint:
    """A waypoint on a route.

    Attributes:
        id: Identifier shared with the leg-time matrix (e.g., "P", "S/P")
        title: Panel heading
        objective: One-line task description
        bullets: Ordered briefing steps

    Example:
        cp = Checkpoint(id="P", title="Checkpoint P", objective="Initial departure.")
    """

    id: str
    title: str
    objective: str = ""
    bullets: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "objective": self.objective,
            "bullets": list(self.bullets),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Checkpoint":
        """Create Checkpoint from dictionary. Title defaults to the id."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or str(data["id"]),
            objective=data.get("objective", ""),
            bullets=tuple(data.get("bullets", ())),
        )

    def __repr__(self) -> str:
        return f"Checkpoint({self.id}, {len(self.bullets)} bullets)"
