"""Built-in route configuration: Route Alpha, Route Bravo and their leg times.

Loaded when no configuration file is supplied. The structure matches
RouteCatalog.to_dict() / LegGraph.to_dict(), so the sidebar download of
the active configuration round-trips through the same loaders. An
optional "positions" section places hotspots on the map.
"""

from typing import Any, Optional

from checkpoint_planner.constants import MapConfig
from checkpoint_planner.core.leg_graph import LegGraph
from checkpoint_planner.model.route_catalog import RouteCatalog

DEFAULT_ROUTES: list[dict[str, Any]] = [
    {
        "id": "routeA",
        "name": "Route Alpha",
        "color": "#06b6d4",
        "points": [
            {
                "id": "P",
                "title": "Checkpoint P",
                "objective": "Initial departure and perimeter securing.",
                "bullets": ["Conduct radar and visual sweep.", "Verify course alignment.", "Next point → Q"],
            },
            {
                "id": "Q",
                "title": "Checkpoint Q",
                "objective": "Observation and tower verification.",
                "bullets": ["Take tower bearing and distance.", "Report position fix.", "Next point → R"],
            },
            {
                "id": "R",
                "title": "Checkpoint R",
                "objective": "Resupply and comms verification.",
                "bullets": ["Reconfirm comms window.", "Verify resupply readiness.", "Next point → S"],
            },
            {
                "id": "S",
                "title": "Checkpoint S",
                "objective": "Traffic corridor clearance.",
                "bullets": ["Coordinate safe passage.", "Log traffic movement.", "Next point → T"],
            },
            {
                "id": "T",
                "title": "Checkpoint T",
                "objective": "High-point timing and mast observation.",
                "bullets": ["Take timing references.", "Confirm mast signals.", "Next point → U"],
            },
            {
                "id": "U",
                "title": "Checkpoint U",
                "objective": "Outer perimeter scan.",
                "bullets": ["Record sector sweep.", "Validate safe-distance limits.", "Next point → S/P"],
            },
            {
                "id": "S/P",
                "title": "Checkpoint S/P",
                "objective": "Final holding & route termination.",
                "bullets": ["Confirm return readiness.", "Record sortie completion.", "Next point → END"],
            },
        ],
    },
    {
        "id": "routeB",
        "name": "Route Bravo",
        "color": "#7c3aed",
        "points": [
            {
                "id": "S/P",
                "title": "Checkpoint S/P",
                "objective": "Start point for Bravo route.",
                "bullets": ["Verify initial briefing.", "Log starting timestamp.", "Next point → P"],
            },
            {
                "id": "P",
                "title": "Checkpoint P",
                "objective": "Rendezvous alignment.",
                "bullets": [
                    "Confirm joining instructions.",
                    "Match timing with Alpha unit if applicable.",
                    "Next point → R",
                ],
            },
            {
                "id": "R",
                "title": "Checkpoint R",
                "objective": "Communications and logistics check.",
                "bullets": ["Validate resupply corridor.", "Check generator/aux systems.", "Next point → U"],
            },
            {
                "id": "U",
                "title": "Checkpoint U",
                "objective": "Outer ring observation.",
                "bullets": ["Perform perimeter sweep.", "Log environmental conditions.", "Next point → T"],
            },
            {
                "id": "T",
                "title": "Checkpoint T",
                "objective": "High tower monitor checkpoint.",
                "bullets": ["Record timing references.", "Monitor mast signatures.", "Next point → S"],
            },
            {
                "id": "S",
                "title": "Checkpoint S",
                "objective": "Traffic corridor coordination.",
                "bullets": ["Clear corridor for movement.", "Coordinate with control tower.", "Next point → Q"],
            },
            {
                "id": "Q",
                "title": "Checkpoint Q",
                "objective": "Final verification before termination.",
                "bullets": ["Fix final position.", "Log sortie closure.", "Next point → END"],
            },
        ],
    },
]

# Minutes, keyed from -> to. Reverse lookups fill missing directions.
DEFAULT_LEG_TIMES: dict[str, dict[str, int]] = {
    "VOCC": {"Q": 14, "P": 12, "S/P": 20},
    "P": {"Q": 14, "R": 9},
    "Q": {"R": 12, "S/P": 10},
    "R": {"S": 11, "U": 13},
    "S": {"T": 9},
    "T": {"U": 15},
    "U": {"S/P": 8},
    "S/P": {},
}


def default_catalog() -> RouteCatalog:
    return RouteCatalog.from_dict(data=DEFAULT_ROUTES)


def default_leg_graph() -> LegGraph:
    return LegGraph.from_dict(data=DEFAULT_LEG_TIMES)


def load_configuration(data: dict[str, Any]) -> tuple[RouteCatalog, LegGraph]:
    """Build catalog and leg graph from {"routes": [...], "leg_times": {...}}.

    Raises:
        ValueError: If a section is missing or the content is invalid.
    """
    if not isinstance(data, dict) or "routes" not in data or "leg_times" not in data:
        raise ValueError("Configuration needs 'routes' and 'leg_times' sections")
    try:
        catalog = RouteCatalog.from_dict(data=data["routes"])
        leg_graph = LegGraph.from_dict(data=data["leg_times"])
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed configuration: {type(e).__name__}: {e}") from e
    return catalog, leg_graph


def load_positions(data: dict[str, Any]) -> Optional[dict[str, tuple[float, float]]]:
    """Hotspot positions from the optional "positions" section.

    Positions are {id: [x_pct, y_pct]} measured from the map's top-left
    corner. Returns None when the section is absent.

    Raises:
        ValueError: If a position is not two numbers inside the map.
    """
    raw = data.get("positions") if isinstance(data, dict) else None
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("'positions' must map hotspot ids to [x_pct, y_pct]")

    extent = MapConfig.EXTENT_PCT
    positions: dict[str, tuple[float, float]] = {}
    for hotspot_id, xy in raw.items():
        if (
            not isinstance(xy, (list, tuple))
            or len(xy) != 2
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in xy)
        ):
            raise ValueError(f"Position of {hotspot_id!r} must be [x_pct, y_pct], got {xy!r}")
        x_pct, y_pct = float(xy[0]), float(xy[1])
        if not (0 <= x_pct <= extent and 0 <= y_pct <= extent):
            raise ValueError(f"Position of {hotspot_id!r} is outside the map: {xy!r}")
        positions[str(hotspot_id)] = (x_pct, y_pct)
    return positions


def dump_configuration(
    catalog: RouteCatalog,
    leg_graph: LegGraph,
    positions: Optional[dict[str, tuple[float, float]]] = None,
) -> dict[str, Any]:
    data: dict[str, Any] = {"routes": catalog.to_dict(), "leg_times": leg_graph.to_dict()}
    if positions is not None:
        data["positions"] = {hotspot_id: [x, y] for hotspot_id, (x, y) in positions.items()}
    return data
