"""
keybindings.py - Centralized key mappings for Forecast (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

try:
    import pygame
except ImportError:
    # Allow import without pygame for type checking
    pygame = None


def _key(name: str) -> int:
    """Get pygame key constant by name, or placeholder if pygame not loaded."""
    if pygame is None:
        return 0
    return getattr(pygame, f"K_{name}", 0)


# Number keys for guessing (1-3), in weather enumeration order
GUESS_KEYS = {
    _key("1"): "Sunny",
    _key("2"): "Cloudy",
    _key("3"): "Rainy",
}

NEXT_DAY_KEY = _key("SPACE")   # Generate tomorrow's weather
PREDICT_KEY = _key("p")        # Re-roll the forecast
GRAPH_KEY = _key("g")          # Save and show the history graph
STATUS_KEY = _key("s")         # Print status and transition matrix to the log

# System keys
QUIT_KEY = _key("ESCAPE")
HELP_KEY = _key("h")

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "Space: next day",
    "1: guess Sunny",
    "2: guess Cloudy",
    "3: guess Rainy",
    "P: new forecast",
    "G: save graph",
    "S: status",
    "H: help",
    "Esc: quit",
    "LClick: guess button",
    "Scroll: event log",
]
