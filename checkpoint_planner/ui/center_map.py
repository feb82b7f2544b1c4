"""HotspotMapRenderer - Plotly map of checkpoint hotspots.

Renders the briefing map as a plotly figure:
- Map image stretched over a 0-100% extent (plain grid when no image)
- Current route drawn as a polyline in the route color
- One marker per hotspot, styled from the HighlightState
  (tint, opacity, larger marker for the active checkpoint)

Hotspot positions are percentages from the image's top-left corner; they are
flipped to plot coordinates (origin bottom-left) by _plot_xy().
layout_hotspots() fills in a position for ids the configuration leaves out.

Each hotspot trace carries its id as customdata; the Streamlit layer reads
it back from the selection event of st.plotly_chart(on_select="rerun").
"""

import base64
import logging
from pathlib import Path
from typing import Iterable, Optional

import plotly.graph_objects as go

from checkpoint_planner.constants import MapConfig, StyleConfig
from checkpoint_planner.model.render import SelectionView

logger = logging.getLogger(__name__)


def layout_hotspots(
    hotspot_ids: Iterable[str],
    positions: Optional[dict[str, tuple[float, float]]] = None,
) -> dict[str, tuple[float, float]]:
    """Map position for every hotspot.

    Configured positions win, then the built-in MapConfig ones. Whatever is
    left is spread evenly along a row near the bottom edge, in input order.

    Example:
        layout_hotspots(["A", "B"])  # {"A": (29.0, 92.0), "B": (71.0, 92.0)}
    """
    known = dict(MapConfig.HOTSPOT_POSITIONS)
    known.update(positions or {})

    ids = list(dict.fromkeys(hotspot_ids))
    layout = {h: known[h] for h in ids if h in known}
    unplaced = [h for h in ids if h not in known]
    if unplaced:
        margin = MapConfig.UNPLACED_MARGIN_PCT
        width = MapConfig.EXTENT_PCT - 2 * margin
        for i, hotspot_id in enumerate(unplaced):
            x_pct = margin + width * (i + 0.5) / len(unplaced)
            layout[hotspot_id] = (x_pct, MapConfig.UNPLACED_ROW_Y_PCT)
        logger.info(f"[MAP] Laid out {len(unplaced)} hotspot(s) without a position: {unplaced}")
    return layout


class HotspotMapRenderer:
    """Builds the hotspot figure for a SelectionView.

    Example:
        renderer = HotspotMapRenderer()
        fig = renderer.render(view=presenter.selection)
        st.plotly_chart(fig, on_select="rerun", selection_mode="points")
    """

    def __init__(
        self,
        positions: Optional[dict[str, tuple[float, float]]] = None,
        image_path: Optional[Path] = MapConfig.IMAGE_PATH,
        height: int = MapConfig.CHART_HEIGHT_PX,
    ) -> None:
        """Initialize renderer.

        Args:
            positions: Hotspot id -> (x_pct, y_pct); defaults to MapConfig
            image_path: Background image, skipped when the file is missing
            height: Figure height in pixels
        """
        self.positions = dict(positions) if positions is not None else dict(MapConfig.HOTSPOT_POSITIONS)
        self.image_source = self._load_image(path=image_path)
        self.height = height

    @staticmethod
    def _load_image(path: Optional[Path]) -> Optional[str]:
        """Read image as a data URI for plotly layout images."""
        if path is None or not path.exists():
            logger.info(f"[MAP] No map image at {path}, drawing plain grid")
            return None
        mime = "image/png" if path.suffix.lower() == ".png" else "image/jpeg"
        encoded = base64.b64encode(path.read_bytes()).decode("ascii")
        return f"data:{mime};base64,{encoded}"

    def placed_ids(self, view: SelectionView) -> list[str]:
        """Hotspots of the view that have a map position, in view order."""
        missing = [h for h in view.highlight.tint if h not in self.positions]
        if missing:
            logger.debug(f"[MAP] No position for hotspots {missing}")
        return [h for h in view.highlight.tint if h in self.positions]

    def _plot_xy(self, hotspot_id: str) -> tuple[float, float]:
        """Image percentages (top-left origin) to plot coordinates (bottom-left origin)."""
        x_pct, y_pct = self.positions[hotspot_id]
        return x_pct, MapConfig.EXTENT_PCT - y_pct

    def render(self, view: SelectionView) -> go.Figure:
        """Build figure: background, route line, hotspot markers."""
        fig = go.Figure()
        self._add_route_line(fig=fig, view=view)
        for hotspot_id in self.placed_ids(view=view):
            self._add_hotspot(fig=fig, view=view, hotspot_id=hotspot_id)
        self._configure_layout(fig=fig)
        return fig

    def _add_route_line(self, fig: go.Figure, view: SelectionView) -> None:
        placed = [pid for pid in view.route_point_ids if pid in self.positions]
        if len(placed) < 2:
            return
        line_opacity = StyleConfig.VISIBLE_OPACITY if view.highlight.points_visible else StyleConfig.HIDDEN_OPACITY
        fig.add_trace(
            go.Scatter(
                x=[self._plot_xy(hotspot_id=pid)[0] for pid in placed],
                y=[self._plot_xy(hotspot_id=pid)[1] for pid in placed],
                mode="lines",
                line=dict(color=view.route_color, width=StyleConfig.ROUTE_LINE_WIDTH, dash="dot"),
                opacity=line_opacity,
                hoverinfo="skip",
                name=view.route_name,
            )
        )

    def _add_hotspot(self, fig: go.Figure, view: SelectionView, hotspot_id: str) -> None:
        highlight = view.highlight
        x, y = self._plot_xy(hotspot_id=hotspot_id)
        is_active = highlight.is_active(hotspot_id=hotspot_id)
        opacity = highlight.opacity[hotspot_id]
        if highlight.is_dimmed(hotspot_id=hotspot_id):
            opacity *= StyleConfig.DIM_OPACITY_FACTOR

        fig.add_trace(
            go.Scatter(
                x=[x],
                y=[y],
                mode="markers+text",
                marker=dict(
                    size=StyleConfig.ACTIVE_MARKER_SIZE if is_active else StyleConfig.MARKER_SIZE,
                    color=highlight.tint[hotspot_id],
                    line=dict(color="white", width=2),
                ),
                opacity=opacity,
                text=[hotspot_id],
                textposition="top center",
                customdata=[hotspot_id],
                hovertemplate=f"{hotspot_id}<extra></extra>",
                name=hotspot_id,
            )
        )

    def _configure_layout(self, fig: go.Figure) -> None:
        extent = MapConfig.EXTENT_PCT
        if self.image_source is not None:
            fig.add_layout_image(
                dict(
                    source=self.image_source,
                    xref="x",
                    yref="y",
                    x=0,
                    y=extent,
                    sizex=extent,
                    sizey=extent,
                    sizing="stretch",
                    layer="below",
                )
            )
        show_grid = self.image_source is None
        fig.update_layout(
            xaxis=dict(range=[0, extent], visible=show_grid, showgrid=show_grid, zeroline=False),
            yaxis=dict(range=[0, extent], visible=show_grid, showgrid=show_grid, zeroline=False, scaleanchor="x"),
            showlegend=False,
            height=self.height,
            margin=dict(l=10, r=10, t=10, b=10),
            plot_bgcolor="#0f172a" if show_grid else "white",
            clickmode="event+select",
            dragmode=False,
        )
