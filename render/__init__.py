"""
Rendering module for the Forecast pygame frontend.

Provides the weather HUD, the history graph image, and overlays.
"""
from render.primitives import Color, draw_text, draw_section_header
from render.graph import (
    WEATHER_LEVELS,
    encode_history,
    render_graph_pixels,
    history_graph_surface,
    save_history_graph,
    load_graph_image,
)
from render.hud import render_weather_hud, render_guess_buttons, render_graph_panel, format_score
from render.overlays import render_help_overlay, render_event_log, visible_log_count

__all__ = [
    # Primitives
    "Color",
    "draw_text",
    "draw_section_header",
    # Graph
    "WEATHER_LEVELS",
    "encode_history",
    "render_graph_pixels",
    "history_graph_surface",
    "save_history_graph",
    "load_graph_image",
    # HUD
    "render_weather_hud",
    "render_guess_buttons",
    "render_graph_panel",
    "format_score",
    # Overlays
    "render_help_overlay",
    "render_event_log",
    "visible_log_count",
]
