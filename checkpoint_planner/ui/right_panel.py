"""Right panel components for the checkpoint route planner.

- BriefingPanel: title, subtitle, objective and bullets of the selected
  point, with Previous/Next navigation
- EtaPanel: start time and start point inputs, ETA table and summary

Both panels read what they show from the SessionPresenter; operator
input goes back through the controller or ui.actions.
"""

import logging

import streamlit as st

from checkpoint_planner.constants import EtaConfig
from checkpoint_planner.core.eta_calculator import ETACalculator, EtaSchedule
from checkpoint_planner.model.render import SelectionView
from checkpoint_planner.ui.actions import external_origins, origin_options, reload_map, request_eta
from checkpoint_planner.ui.presenter import SessionPresenter
from checkpoint_planner.ui.selection_controller import SelectionController

logger = logging.getLogger(__name__)


class BriefingPanel:
    """Briefing text and Previous/Next buttons for the current selection."""

    def __init__(self, controller: SelectionController, view: SelectionView) -> None:
        self.controller = controller
        self.view = view

    def render(self) -> None:
        panel = self.view.panel
        st.subheader(panel.title)
        st.caption(panel.subtitle)
        st.markdown(f"**Objective:** {panel.objective}")
        if panel.bullets:
            st.markdown("\n".join(f"- {bullet}" for bullet in panel.bullets))
        self._render_navigation()

    def _render_navigation(self) -> None:
        nav = self.view.navigation
        col_prev, col_pos, col_next = st.columns([2, 1, 2])
        with col_prev:
            if st.button("⬅️ Previous", width="stretch", disabled=not nav.can_prev, key="nav_prev"):
                reload_map(before=self.controller.prev)
        with col_pos:
            st.markdown(f"**{nav.label}**")
        with col_next:
            if st.button("Next ➡️", width="stretch", disabled=not nav.can_next, key="nav_next"):
                reload_map(before=self.controller.next)


class EtaPanel:
    """ETA inputs, table and summary for the current route."""

    def __init__(
        self,
        controller: SelectionController,
        calculator: ETACalculator,
        presenter: SessionPresenter,
    ) -> None:
        self.controller = controller
        self.calculator = calculator
        self.presenter = presenter

    def render(self) -> None:
        route = self.controller.current_route
        st.markdown("#### ⏱️ ETA Planner")

        start_time = st.text_input(
            f"Starting time ({EtaConfig.CLOCK_FORMAT_HINT})",
            placeholder="06:00",
            key="eta_start_time",
        )
        origins = external_origins(catalog=self.controller.catalog, leg_graph=self.calculator.leg_graph)
        options = origin_options(route=route, origins=origins)
        labels = dict(options)
        origin = st.selectbox(
            "Start point",
            options=[value for value, _ in options],
            format_func=lambda value: labels[value],
            key=f"eta_origin_{route.id}",
        )

        if st.button("Calculate ETAs", type="primary", width="stretch", key="eta_calculate"):
            logger.info(f"[ETA] Requested: route={route.id} start={start_time!r} origin={origin}")
            request_eta(
                calculator=self.calculator,
                presenter=self.presenter,
                route=route,
                start_time=start_time,
                origin=origin,
            )

        for message in self.presenter.messages:
            message.display()
        if self.presenter.schedule is not None and not self.presenter.schedule.is_empty:
            self._render_schedule(schedule=self.presenter.schedule)

    @staticmethod
    def _render_schedule(schedule: EtaSchedule) -> None:
        st.dataframe([row.to_dict() for row in schedule], hide_index=True, width="stretch")
        st.markdown(f"**Total time:** {schedule.total_hours_label} h ({schedule.total_minutes} min)")
        st.markdown(f"**Final ETA:** {schedule.final_eta}")


def render_right_panel(
    controller: SelectionController,
    calculator: ETACalculator,
    presenter: SessionPresenter,
) -> None:
    """Render briefing and ETA panels from the presenter's latest view."""
    view = presenter.selection if presenter.selection is not None else controller.view()
    BriefingPanel(controller=controller, view=view).render()
    st.divider()
    EtaPanel(controller=controller, calculator=calculator, presenter=presenter).render()
