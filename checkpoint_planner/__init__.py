"""Checkpoint Route Planner - Briefing map and ETA planner for patrol routes.

An operator picks a route, steps through its checkpoints on a map and
computes an ETA table for a given start time and start point.

Modules:
    core: Leg-time graph, traversal resolution, ETA arithmetic
    model: Checkpoints, routes, render instructions, UI messages
    ui: Streamlit interface (selection state machine, controller, panels, map)
    defaults: Built-in routes and leg times, configuration load/save

Example:
    from checkpoint_planner.core import ETACalculator
    from checkpoint_planner.defaults import default_catalog, default_leg_graph

    schedule = ETACalculator(leg_graph=default_leg_graph()).compute(
        start_time="06:00", origin="VOCC", route=default_catalog().first
    )
"""
