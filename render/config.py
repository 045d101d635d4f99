"""
Configuration constants for the rendering domain.
Includes UI dimensions, colors, font sizes, and the history graph image.
"""
from __future__ import annotations

from typing import Dict, Tuple

# =============================================================================
# UI LAYOUT & DIMENSIONS
# =============================================================================
VIRTUAL_WIDTH = 960
VIRTUAL_HEIGHT = 540

SIDEBAR_WIDTH = 320
LINE_HEIGHT = 20
FONT_SIZE = 20
SECTION_SPACING = 8
LOG_PANEL_HEIGHT = 120
LOG_LINE_HEIGHT = 18
PANEL_MARGIN = 12

# Guess buttons (one per weather state, stacked under the HUD)
GUESS_BUTTON_WIDTH = 90
GUESS_BUTTON_HEIGHT = 28
GUESS_BUTTON_GAP = 8

# =============================================================================
# COLORS
# =============================================================================
COLOR_BG_DARK = (20, 20, 25)
COLOR_BG_PANEL = (25, 25, 30)
COLOR_BORDER = (40, 40, 40)
COLOR_BORDER_LIGHT = (80, 80, 85)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TEXT_DIM = (100, 100, 100)
COLOR_TEXT_HIGHLIGHT = (220, 200, 120)
COLOR_TEXT_GOOD = (140, 220, 140)
COLOR_TEXT_BAD = (230, 120, 110)
COLOR_LOG_TEXT = (160, 200, 160)

BUTTON_BG_COLOR: Tuple[int, int, int] = (30, 30, 35)
BUTTON_SELECTED_COLOR: Tuple[int, int, int] = (60, 55, 40)

# Per-weather accent colors (HUD labels and buttons)
WEATHER_COLORS: Dict[str, Tuple[int, int, int]] = {
    "Sunny": (240, 210, 90),
    "Cloudy": (170, 175, 185),
    "Rainy": (90, 150, 230),
}

# =============================================================================
# HISTORY GRAPH IMAGE
# =============================================================================
GRAPH_WIDTH = 512
GRAPH_HEIGHT = 256
GRAPH_BG_COLOR = (255, 255, 255)
GRAPH_LINE_COLOR = (0, 0, 255)
GRAPH_LINE_THICKNESS = 3

# Pixel row for each encoded weather level, measured up from the bottom edge.
# Levels: 0 = Rainy, 1 = Cloudy, 2 = Sunny
GRAPH_LEVEL_ROWS: Tuple[int, ...] = (50, 128, 206)
