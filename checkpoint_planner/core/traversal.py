"""TraversalResolver - Which checkpoints to visit from a given origin.

A route is a mandated physical corridor, so traversal never searches for an
optimal path. It resumes the standard route from the first point the origin
can reach:

1. Origin is a route checkpoint: the suffix of the route starting there.
   Traversal never wraps around or revisits earlier checkpoints.
2. Origin is external (e.g., a depot token): the suffix starting at the
   first checkpoint with a positive leg time from the origin.
3. No such checkpoint: the whole route in route order (origin ignored).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.model.route import Route

logger = logging.getLogger(__name__)


class TraversalEntry(Enum):
    """How the traversal sequence was entered."""

    MEMBER = "member"  # Origin is a checkpoint of the route
    REACHABLE = "reachable"  # External origin with a leg to a route checkpoint
    FALLBACK = "fallback"  # External origin reaches nothing, full route used
    EMPTY = "empty"  # Route has no checkpoints


@dataclass(frozen=True)
class Traversal:
    """Resolved traversal sequence.

    Attributes:
        origin: Requested origin id or token
        sequence: Checkpoint ids to visit, in order, no repeats
        entry: How the sequence was entered
    """

    origin: str
    sequence: tuple[str, ...]
    entry: TraversalEntry

    @property
    def origin_is_member(self) -> bool:
        return self.entry == TraversalEntry.MEMBER

    @property
    def origin_ignored(self) -> bool:
        """True when the origin could not be connected to the route."""
        return self.entry == TraversalEntry.FALLBACK


class TraversalResolver:
    """Resolves (route, origin) to an ordered checkpoint sequence.

    Stateless apart from the read-only leg graph.
    """

    def __init__(self, leg_graph: LegGraph) -> None:
        self.leg_graph = leg_graph

    def resolve(self, route: Route, origin: str) -> list[str]:
        """Ordered checkpoint ids to traverse from origin."""
        return list(self.resolve_entry(route=route, origin=origin).sequence)

    def resolve_entry(self, route: Route, origin: str) -> Traversal:
        """Resolve traversal and report how it was entered."""
        point_ids = route.point_ids
        if not point_ids:
            return Traversal(origin=origin, sequence=(), entry=TraversalEntry.EMPTY)

        start_idx = route.index_of(point_id=origin)
        if start_idx is not None:
            return Traversal(origin=origin, sequence=tuple(point_ids[start_idx:]), entry=TraversalEntry.MEMBER)

        for idx, point_id in enumerate(point_ids):
            if self.leg_graph.leg_time(from_id=origin, to_id=point_id) > 0:
                return Traversal(origin=origin, sequence=tuple(point_ids[idx:]), entry=TraversalEntry.REACHABLE)

        logger.warning(f"[TRAVERSAL] Origin {origin!r} has no leg into {route.id}, using full route")
        return Traversal(origin=origin, sequence=tuple(point_ids), entry=TraversalEntry.FALLBACK)
