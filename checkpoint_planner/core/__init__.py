"""Core traversal and timing engine.

This module provides the arithmetic behind the ETA table:
- LegGraph: Sparse directed leg-time matrix with reverse-lookup fallback
- TraversalResolver: Which checkpoints to visit from a given origin
- ETACalculator: Leg-by-leg schedule with cumulative clock times
"""

from checkpoint_planner.core.eta_calculator import (
    ETACalculator,
    EtaSchedule,
    LegRow,
    UnknownLegPolicy,
    UnknownLegTimeError,
    minutes_to_clock,
    parse_clock,
)
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.core.traversal import Traversal, TraversalEntry, TraversalResolver

__all__ = [
    # Leg graph
    "LegGraph",
    # Traversal
    "TraversalResolver",
    "Traversal",
    "TraversalEntry",
    # ETA
    "ETACalculator",
    "EtaSchedule",
    "LegRow",
    "UnknownLegPolicy",
    "UnknownLegTimeError",
    "minutes_to_clock",
    "parse_clock",
]
