"""Route - An ordered, named sequence of checkpoints.

The order of points is the mandated physical traversal order. Routes are
configuration: they are loaded once and never mutated at runtime.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from checkpoint_planner.model.checkpoint import Checkpoint


@dataclass(frozen=True)
class Route:
    """A fixed procedural route.

    Attributes:
        id: Unique route identifier (e.g., "routeA")
        name: Display name
        color: Tint applied to this route's hotspots
        points: Checkpoints in traversal order
    """

    id: str
    name: str
    color: str
    points: tuple[Checkpoint, ...] = field(default_factory=tuple)

    @property
    def point_ids(self) -> list[str]:
        """Checkpoint ids in traversal order."""
        return [p.id for p in self.points]

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    def index_of(self, point_id: str) -> Optional[int]:
        """Position of the first checkpoint with this id, or None."""
        for idx, point in enumerate(self.points):
            if point.id == point_id:
                return idx
        return None

    def contains(self, point_id: str) -> bool:
        return self.index_of(point_id=point_id) is not None

    def point_at(self, index: int) -> Optional[Checkpoint]:
        if 0 <= index < len(self.points):
            return self.points[index]
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Route":
        """Create Route from dictionary.

        Raises:
            ValueError: If a checkpoint id repeats within the route.
        """
        points = tuple(Checkpoint.from_dict(data=p) for p in data.get("points", ()))
        ids = [p.id for p in points]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Route '{data['id']}' lists a checkpoint more than once: {ids}")
        return cls(
            id=str(data["id"]),
            name=data.get("name") or str(data["id"]),
            color=data["color"],
            points=points,
        )

    def __repr__(self) -> str:
        return f"Route({self.id}, {' -> '.join(self.point_ids)})"
