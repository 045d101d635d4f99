# config.py
"""
Centralized game configuration for Forecast.

This file contains high-level, cross-cutting constants.
Rendering constants (colors, layout, graph image) are in render/config.py.
"""
from __future__ import annotations

from typing import Dict

# =============================================================================
# WEATHER MODEL
# =============================================================================
DEFAULT_WEATHER = "Sunny"  # Current weather before the history pre-fill

# Prior transition probabilities (row = today, column = tomorrow)
PRIOR_TRANSITIONS: Dict[str, Dict[str, float]] = {
    "Sunny": {"Sunny": 0.7, "Cloudy": 0.2, "Rainy": 0.1},
    "Cloudy": {"Sunny": 0.3, "Cloudy": 0.5, "Rainy": 0.2},
    "Rainy": {"Sunny": 0.2, "Cloudy": 0.3, "Rainy": 0.5},
}

ROW_SUM_TOLERANCE = 1e-6

# =============================================================================
# HISTORY
# =============================================================================
HISTORY_LIMIT = 30   # Days of weather kept (oldest evicted first)
DISPLAY_LIMIT = 7    # Recent window used for display and reweighting

# Laplace smoothing for the adaptive matrix: (count + ALPHA) / (total + ALPHA * states)
SMOOTHING_ALPHA = 1.0

# =============================================================================
# PREDICTION
# =============================================================================
DEFAULT_UTILITY = 1.0          # Utility when fewer than DISPLAY_LIMIT days are known
UTILITY_JITTER_MIN = 0.01      # Random jitter added to recency utility
UTILITY_JITTER_MAX = 0.05

# =============================================================================
# GAMEPLAY
# =============================================================================
# The simulator never clears a stored guess on its own; the game layer does
# when this is set, so a guess only ever scores against one day.
CLEAR_GUESS_AFTER_RESOLVE = True

MESSAGE_LOG_SIZE = 100

# =============================================================================
# FILES
# =============================================================================
GRAPH_IMAGE_DIR = "GraphImages"
GRAPH_IMAGE_PATH = f"{GRAPH_IMAGE_DIR}/Graph.png"
