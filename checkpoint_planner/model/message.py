"""Message - User-facing messages for the checkpoint route planner UI.

Architecture:
- LEFT (sidebar): ONE blue info message describing the selected route
- RIGHT (ETA panel): warnings about the computed schedule (yellow) or
  missing input (yellow), one per problem
- Toasts: transient feedback for configuration loading

Design Principles:
- Messages know their own display level
- Callers decide when to display them
- Nothing here raises; problems are reported, not thrown
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from checkpoint_planner.constants import EtaConfig


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - operator should act or double-check
    ERROR = "error"  # Red - configuration problems


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for messages displayed inline (sidebars/panels).

    These messages are rendered as st.info/st.warning/st.error blocks that persist
    in the UI until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: load/save confirmations, validation failures
    Bad for: context messages, instruction panels
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class ConfigLoadErrorMessage(ToastMessage):
    """Operator uploaded an invalid route configuration."""

    error: str

    @property
    def icon(self) -> str:
        return "📁"

    @property
    def message(self) -> str:
        return f"Load Failed — {self.error}"


@dataclass(frozen=True)
class ConfigLoadedMessage(ToastMessage):
    """Route configuration replaced from an uploaded file."""

    route_count: int
    leg_count: int

    @property
    def icon(self) -> str:
        return "✅"

    @property
    def message(self) -> str:
        return f"Configuration Loaded — {self.route_count} route(s), {self.leg_count} leg time(s)"


# =============================================================================
# RIGHT PANEL - ETA feedback
# =============================================================================


@dataclass(frozen=True)
class MissingStartTimeMessage(Message):
    """Calculate pressed without a start time."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"Enter a starting time first ({EtaConfig.CLOCK_FORMAT_HINT})."


@dataclass(frozen=True)
class InvalidStartTimeMessage(Message):
    """Start time present but not a valid 24-hour clock time."""

    value: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return f"'{self.value}' is not a valid start time. Use {EtaConfig.CLOCK_FORMAT_HINT} (24-hour)."


@dataclass(frozen=True)
class NoLegsMessage(Message):
    """Schedule came out empty for a valid start time."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "No legs available or missing time-matrix entries."


@dataclass(frozen=True)
class UnknownLegTimesMessage(Message):
    """Some legs had no configured time and were counted as 0 minutes."""

    legs: tuple[str, ...]  # "P → Q" labels

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return (
            f"⏱️ **Missing leg times** — counted as 0 min: {', '.join(self.legs)}. "
            "The total and final ETA are too early by the missing durations."
        )


@dataclass(frozen=True)
class OriginNotConnectedMessage(Message):
    """External origin has no leg into the route, so it was ignored."""

    origin: str
    route_name: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return (
            f"🧭 **{self.origin} is not connected to {self.route_name}** — "
            "no leg time from this origin to any checkpoint. The schedule starts at the first checkpoint."
        )


# =============================================================================
# LEFT PANEL (SIDEBAR) - Context
# =============================================================================


@dataclass(frozen=True)
class RouteContextMessage(Message):
    """LEFT panel: what the operator is looking at and what clicking does."""

    route_name: str
    point_count: int
    detached_point_id: str | None = None

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        if self.detached_point_id is not None:
            return (
                f"📍 **Point {self.detached_point_id}** is not part of any route.\n\n"
                f"Use **Next/Previous** or click a checkpoint to return to **{self.route_name}**."
            )
        return (
            f"🧭 **{self.route_name}** — {self.point_count} checkpoint(s)\n\n"
            "🗺️ Click a **checkpoint** → briefing\n"
            "🔀 Checkpoint of another route → switches route\n"
            "⏱️ Enter a **start time** → ETA table"
        )


@dataclass(frozen=True)
class LegTimeRejectedMessage(Message):
    """Strict policy refused a schedule with an unconfigured leg."""

    from_id: str
    to_id: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"⛔ **No leg time for {self.from_id} → {self.to_id}** — add it to the time matrix to compute ETAs."
