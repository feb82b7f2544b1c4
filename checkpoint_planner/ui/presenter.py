"""Presenter - The seam between the core and the presentation layer.

The selection controller and the ETA actions push render instructions
through a Presenter. They never touch Streamlit widgets directly.

SessionPresenter keeps the latest instructions. Streamlit renders top
to bottom on every rerun, so the layout code reads them back from the
presenter stored in st.session_state.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from checkpoint_planner.core.eta_calculator import EtaSchedule
from checkpoint_planner.model.message import Message
from checkpoint_planner.model.render import SelectionView

logger = logging.getLogger(__name__)


class Presenter(ABC):
    """Receives render instructions from the core."""

    @abstractmethod
    def show_selection(self, view: SelectionView) -> None:
        """Panel text, hotspot highlight and navigation after a selection change."""

    @abstractmethod
    def show_schedule(self, schedule: Optional[EtaSchedule], messages: list[Message]) -> None:
        """ETA table and summary, plus any warnings about the schedule."""


class SessionPresenter(Presenter):
    """Presenter that stores the latest instructions for the next render."""

    def __init__(self) -> None:
        self.selection: Optional[SelectionView] = None
        self.schedule: Optional[EtaSchedule] = None
        self.messages: list[Message] = []

    def show_selection(self, view: SelectionView) -> None:
        logger.debug(f"[PRESENT] panel={view.panel.title!r} active={view.highlight.active_id}")
        # A schedule belongs to the route it was computed for
        if self.selection is not None and self.selection.route_id != view.route_id:
            self.clear_schedule()
        self.selection = view

    def show_schedule(self, schedule: Optional[EtaSchedule], messages: list[Message]) -> None:
        self.schedule = schedule
        self.messages = list(messages)

    def clear_schedule(self) -> None:
        self.schedule = None
        self.messages = []
