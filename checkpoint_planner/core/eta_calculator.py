"""ETACalculator - Leg-by-leg arrival schedule for a route.

Turns (start time, origin, route) into an ordered list of legs with
cumulative wall-clock ETAs:

1. Missing or unparseable start time: empty schedule, not an error.
2. Start time "HH:MM" becomes minutes since midnight.
3. The traversal sequence comes from TraversalResolver.
4. External origin: a synthetic first leg origin -> first checkpoint.
5. One leg per adjacent pair of the traversal sequence.
6. Totals: sum of leg minutes and the ETA of the last leg.

Clock arithmetic is linear: there is no calendar-day handling, so a
cumulative time of 1440 minutes or more reads as an out-of-range clock
string such as "24:05".

Legs missing from the leg graph count as 0 minutes by default. Rows carry
a minutes_known flag and the schedule lists those legs, so the operator
can be told. UnknownLegPolicy.REJECT raises instead.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from checkpoint_planner.constants import EtaConfig
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.core.traversal import Traversal, TraversalEntry, TraversalResolver
from checkpoint_planner.model.route import Route

logger = logging.getLogger(__name__)

_CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_clock(value: Optional[str]) -> Optional[int]:
    """Parse "HH:MM" (24-hour) to minutes since midnight.

    Returns:
        Minutes, or None if the value is missing or not a valid clock time.
    """
    if not value:
        return None
    match = _CLOCK_PATTERN.match(value)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > EtaConfig.MAX_CLOCK_HOUR or minutes >= EtaConfig.MINUTES_PER_HOUR:
        return None
    return hours * EtaConfig.MINUTES_PER_HOUR + minutes


def minutes_to_clock(total_minutes: int) -> str:
    """Format minutes as zero-padded "HH:MM" without wrapping past midnight."""
    hours, minutes = divmod(total_minutes, EtaConfig.MINUTES_PER_HOUR)
    return f"{hours:02d}:{minutes:02d}"


def minutes_to_hours(minutes: int) -> float:
    """Decimal hours rounded to two places (14 -> 0.23)."""
    return round(minutes / EtaConfig.MINUTES_PER_HOUR, EtaConfig.HOURS_DECIMALS)


class UnknownLegPolicy(Enum):
    """What to do with a leg that has no entry in either direction."""

    ZERO = "zero"  # Count as 0 minutes and flag the row
    REJECT = "reject"  # Raise UnknownLegTimeError


class UnknownLegTimeError(ValueError):
    """Raised under UnknownLegPolicy.REJECT for a leg with no configured time."""

    def __init__(self, from_id: str, to_id: str) -> None:
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"No leg time configured between {from_id} and {to_id}")


@dataclass(frozen=True)
class LegRow:
    """One leg of the schedule.

    Attributes:
        leg_index: 1-based position in the schedule
        from_id: Departure point
        to_id: Arrival point
        minutes: Leg duration (0 when unknown under the ZERO policy)
        hours: Leg duration in decimal hours, 2 decimals
        eta: Arrival clock time at to_id
        minutes_known: False when the leg graph had no entry for this pair
    """

    leg_index: int
    from_id: str
    to_id: str
    minutes: int
    hours: float
    eta: str
    minutes_known: bool = True

    @property
    def hours_label(self) -> str:
        return f"{self.hours:.{EtaConfig.HOURS_DECIMALS}f} h"

    def to_dict(self) -> dict[str, object]:
        return {
            "Leg": self.leg_index,
            "From": self.from_id,
            "To": self.to_id,
            "Leg time": self.hours_label,
            "ETA": self.eta,
        }


@dataclass(frozen=True)
class EtaSchedule:
    """Ordered leg rows plus aggregates.

    Iterating a schedule yields its rows. An empty schedule has no rows,
    total_minutes 0 and final_eta equal to the raw start time.
    """

    start_time: Optional[str]
    origin: str
    rows: tuple[LegRow, ...] = field(default_factory=tuple)
    traversal: Optional[Traversal] = None

    @property
    def total_minutes(self) -> int:
        return sum(row.minutes for row in self.rows)

    @property
    def total_hours(self) -> float:
        return minutes_to_hours(minutes=self.total_minutes)

    @property
    def total_hours_label(self) -> str:
        return f"{self.total_hours:.{EtaConfig.HOURS_DECIMALS}f}"

    @property
    def final_eta(self) -> Optional[str]:
        if self.rows:
            return self.rows[-1].eta
        return self.start_time

    @property
    def unknown_legs(self) -> list[LegRow]:
        return [row for row in self.rows if not row.minutes_known]

    @property
    def origin_ignored(self) -> bool:
        return self.traversal is not None and self.traversal.origin_ignored

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def __iter__(self) -> Iterator[LegRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> LegRow:
        return self.rows[index]


class ETACalculator:
    """Computes ETA schedules. Pure: identical inputs give identical outputs.

    Example:
        calc = ETACalculator(leg_graph=graph)
        schedule = calc.compute(start_time="06:00", origin="P", route=alpha)
        schedule.final_eta  # "07:09"
    """

    def __init__(
        self,
        leg_graph: LegGraph,
        resolver: Optional[TraversalResolver] = None,
        unknown_policy: UnknownLegPolicy = UnknownLegPolicy.ZERO,
    ) -> None:
        self.leg_graph = leg_graph
        self.resolver = resolver or TraversalResolver(leg_graph=leg_graph)
        self.unknown_policy = unknown_policy

    def compute(self, start_time: Optional[str], origin: str, route: Route) -> EtaSchedule:
        """Build the leg schedule for route from origin at start_time.

        Raises:
            UnknownLegTimeError: Only under UnknownLegPolicy.REJECT.
        """
        start_minutes = parse_clock(value=start_time)
        if start_minutes is None:
            logger.info(f"[ETA] No usable start time ({start_time!r}), empty schedule")
            return EtaSchedule(start_time=start_time, origin=origin)

        traversal = self.resolver.resolve_entry(route=route, origin=origin)
        sequence = traversal.sequence
        if traversal.entry == TraversalEntry.EMPTY:
            return EtaSchedule(start_time=start_time, origin=origin, traversal=traversal)

        legs: list[tuple[str, str]] = []
        if origin != sequence[0]:
            legs.append((origin, sequence[0]))
        legs.extend(zip(sequence[:-1], sequence[1:]))

        rows: list[LegRow] = []
        current_minutes = start_minutes
        for leg_index, (from_id, to_id) in enumerate(legs, start=1):
            minutes = self.leg_graph.lookup(from_id=from_id, to_id=to_id)
            if minutes is None and self.unknown_policy == UnknownLegPolicy.REJECT:
                raise UnknownLegTimeError(from_id=from_id, to_id=to_id)
            known = minutes is not None
            minutes = minutes if known else 0
            current_minutes += minutes
            rows.append(
                LegRow(
                    leg_index=leg_index,
                    from_id=from_id,
                    to_id=to_id,
                    minutes=minutes,
                    hours=minutes_to_hours(minutes=minutes),
                    eta=minutes_to_clock(total_minutes=current_minutes),
                    minutes_known=known,
                )
            )

        schedule = EtaSchedule(start_time=start_time, origin=origin, rows=tuple(rows), traversal=traversal)
        logger.info(
            f"[ETA] {route.id} from {origin} at {start_time}: {len(schedule)} legs, "
            f"{schedule.total_minutes} min, final ETA {schedule.final_eta}"
        )
        return schedule
