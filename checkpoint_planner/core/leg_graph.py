"""LegGraph - Sparse directed graph of inter-checkpoint travel minutes.

Keys are checkpoint ids or external origin tokens (e.g., "VOCC"). An entry
A -> B does not imply B -> A, but lookups fall back to the reverse entry
when the forward one is missing. When both directions exist they need not
agree and the forward value always wins.

Two lookups are offered:
- lookup(): minutes or None when neither direction is configured
- leg_time(): minutes, with 0 standing in for "no known leg time"

leg_time() conflates "unknown" with "instantaneous". Callers that must
tell them apart use lookup() or has_leg().
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional


class LegGraph:
    """Static leg-time matrix.

    Example:
        graph = LegGraph(legs={"P": {"Q": 14}})
        graph.leg_time(from_id="Q", to_id="P")  # 14 (reverse fallback)
        graph.lookup(from_id="P", to_id="R")  # None
    """

    def __init__(self, legs: Mapping[str, Mapping[str, int]]) -> None:
        """Initialize graph from nested mapping.

        Raises:
            ValueError: If a leg time is not a non-negative integer.
        """
        frozen: dict[str, Mapping[str, int]] = {}
        for from_id, targets in legs.items():
            row: dict[str, int] = {}
            for to_id, minutes in targets.items():
                # bool is an int subclass but never a valid duration
                if isinstance(minutes, bool) or not isinstance(minutes, int):
                    raise ValueError(f"Leg {from_id} -> {to_id} must be whole minutes, got {minutes!r}")
                if minutes < 0:
                    raise ValueError(f"Leg {from_id} -> {to_id} cannot be negative, got {minutes}")
                row[to_id] = minutes
            frozen[from_id] = MappingProxyType(row)
        self._legs: Mapping[str, Mapping[str, int]] = MappingProxyType(frozen)

    def lookup(self, from_id: str, to_id: str) -> Optional[int]:
        """Forward entry, else reverse entry, else None."""
        if not from_id or not to_id:
            return None
        forward = self._legs.get(from_id, {}).get(to_id)
        if forward is not None:
            return forward
        return self._legs.get(to_id, {}).get(from_id)

    def leg_time(self, from_id: str, to_id: str) -> int:
        """Travel minutes between two points, 0 when no leg is configured."""
        minutes = self.lookup(from_id=from_id, to_id=to_id)
        return 0 if minutes is None else minutes

    def has_leg(self, from_id: str, to_id: str) -> bool:
        """True if either direction is configured (a 0-minute leg counts)."""
        return self.lookup(from_id=from_id, to_id=to_id) is not None

    @property
    def nodes(self) -> set[str]:
        """Every id that appears on either end of a configured leg."""
        ids = set(self._legs)
        for targets in self._legs.values():
            ids.update(targets)
        return ids

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {from_id: dict(targets) for from_id, targets in self._legs.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LegGraph":
        return cls(legs=data)

    def __len__(self) -> int:
        """Number of configured directed entries."""
        return sum(len(targets) for targets in self._legs.values())

    def __repr__(self) -> str:
        return f"LegGraph({len(self.nodes)} points, {len(self)} legs)"
