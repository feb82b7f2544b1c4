"""Configuration constants for Checkpoint Route Planner.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    MapConfig: Map image and hotspot positions
    StyleConfig: Hotspot colors, opacity and marker sizes
    EtaConfig: Default origin, unknown-leg policy, clock limits, rounding
    PanelConfig: Placeholder texts for the briefing panel
"""

from pathlib import Path

# Package root directory (where checkpoint_planner/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of checkpoint_planner/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Data directory outside package (operator-supplied map image, configs)
DATA_DIR = PROJECT_ROOT / "data"


class AppConfig:
    """UI application settings."""

    TITLE = "MR Procedure - Checkpoint Route Planner"
    ICON = "🧭"
    LAYOUT = "wide"


class MapConfig:
    """Map image and hotspot placement.

    Hotspot positions are percentages of the image size, measured from the
    top-left corner, the same way the briefing sheet places its markers.
    """

    # Background image (optional; a plain grid is drawn when missing)
    IMAGE_PATH = DATA_DIR / "map.jpg"

    # Plot extent in percent units
    EXTENT_PCT = 100.0

    # (x_pct, y_pct) from the top-left corner of the image
    HOTSPOT_POSITIONS = {
        "VOCC": (12.0, 82.0),
        "P": (24.0, 64.0),
        "Q": (38.0, 44.0),
        "R": (52.0, 58.0),
        "S": (63.0, 36.0),
        "T": (78.0, 22.0),
        "U": (86.0, 48.0),
        "S/P": (70.0, 72.0),
    }

    # Checkpoints without a configured position are spread along this row
    UNPLACED_ROW_Y_PCT = 92.0
    UNPLACED_MARGIN_PCT = 8.0

    CHART_HEIGHT_PX = 620


class StyleConfig:
    """Hotspot colors and styling."""

    NEUTRAL_COLOR = "#94a3b8"  # slate-400, points outside the current route
    SELECTED_COLOR = "#ef4444"  # red-500, the single active checkpoint
    ROUTE_LINE_WIDTH = 3

    # Opacity of non-active hotspots
    VISIBLE_OPACITY = 1.0
    HIDDEN_OPACITY = 0.06

    # Marker sizes (px)
    MARKER_SIZE = 18
    ACTIVE_MARKER_SIZE = 26

    # Dimmed hotspots keep their tint but render lighter
    DIM_OPACITY_FACTOR = 0.55


assert 0.0 <= StyleConfig.HIDDEN_OPACITY < StyleConfig.VISIBLE_OPACITY <= 1.0


class EtaConfig:
    """ETA computation parameters."""

    # Listed first among the leg-time origins that belong to no route
    DEFAULT_ORIGIN = "VOCC"

    # "zero": unknown legs count as 0 min and are flagged; "reject": no schedule
    UNKNOWN_LEG_POLICY = "zero"
    assert UNKNOWN_LEG_POLICY in ("zero", "reject")

    MINUTES_PER_HOUR = 60
    MAX_CLOCK_HOUR = 23
    HOURS_DECIMALS = 2

    # Start time format shown in prompts
    CLOCK_FORMAT_HINT = "HH:MM"


class PanelConfig:
    """Briefing panel texts for placeholder states."""

    SUBTITLE_TEMPLATE = "{route_name} • Point: {point_id}"

    DETACHED_TITLE_TEMPLATE = "Point {point_id}"
    DETACHED_SUBTITLE = "No route data"
    DETACHED_OBJECTIVE = "No objective available for this specific point."

    EMPTY_ROUTE_TITLE = "No points"
    EMPTY_ROUTE_OBJECTIVE = "No points configured for this route."
