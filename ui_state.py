# ui_state.py
"""
UI state management for pygame frontend.

Tracks layout regions, guess button hit areas, the loaded graph image and
event log scrolling. Keeps UI state separate from game state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pygame

from render.config import (
    VIRTUAL_WIDTH,
    VIRTUAL_HEIGHT,
    SIDEBAR_WIDTH,
    LOG_PANEL_HEIGHT,
    PANEL_MARGIN,
    GUESS_BUTTON_WIDTH,
    GUESS_BUTTON_HEIGHT,
    GUESS_BUTTON_GAP,
)
from world.states import WeatherState

# Layout constants derived from render config
GRAPH_PANEL_WIDTH = VIRTUAL_WIDTH - SIDEBAR_WIDTH
MAIN_AREA_HEIGHT = VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT


def _layout_guess_buttons() -> List[Tuple[WeatherState, pygame.Rect]]:
    """One button per weather state, in a row along the bottom of the graph panel."""
    y = MAIN_AREA_HEIGHT - PANEL_MARGIN - GUESS_BUTTON_HEIGHT
    buttons = []
    for i, weather in enumerate(WeatherState):
        x = SIDEBAR_WIDTH + PANEL_MARGIN + i * (GUESS_BUTTON_WIDTH + GUESS_BUTTON_GAP)
        buttons.append((weather, pygame.Rect(x, y, GUESS_BUTTON_WIDTH, GUESS_BUTTON_HEIGHT)))
    return buttons


@dataclass
class UIState:
    """
    Manages UI layout and transient state.

    Layout regions are fixed at creation time. Other state (scroll, graph
    image) changes during gameplay.
    """
    sidebar_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, SIDEBAR_WIDTH, MAIN_AREA_HEIGHT))
    graph_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(
        SIDEBAR_WIDTH + PANEL_MARGIN,
        PANEL_MARGIN,
        GRAPH_PANEL_WIDTH - 2 * PANEL_MARGIN,
        MAIN_AREA_HEIGHT - 3 * PANEL_MARGIN - GUESS_BUTTON_HEIGHT,
    ))
    log_panel_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, MAIN_AREA_HEIGHT, VIRTUAL_WIDTH, LOG_PANEL_HEIGHT))
    guess_buttons: List[Tuple[WeatherState, pygame.Rect]] = field(default_factory=_layout_guess_buttons)

    # Event log scrolling
    log_scroll_offset: int = 0  # 0 = showing most recent, positive = scrolled up

    # Graph image as loaded from disk (None until the first export)
    graph_image: Optional[pygame.Surface] = None

    def get_guess_button_at(self, pos: Tuple[int, int]) -> Optional[WeatherState]:
        """Weather state of the guess button under pos, or None."""
        for weather, rect in self.guess_buttons:
            if rect.collidepoint(pos):
                return weather
        return None

    def handle_scroll(self, pos: Tuple[int, int], direction: int, total_messages: int, visible_count: int) -> bool:
        """
        Handle mouse scroll. direction: positive=up, negative=down.
        Returns True if scroll was handled.
        """
        if self.log_panel_rect.collidepoint(pos):
            max_scroll = max(0, total_messages - visible_count)
            if direction > 0:  # Scroll up (show older)
                self.log_scroll_offset = min(self.log_scroll_offset + 1, max_scroll)
            else:  # Scroll down (show newer)
                self.log_scroll_offset = max(self.log_scroll_offset - 1, 0)
            return True
        return False

    def reset_log_scroll(self) -> None:
        self.log_scroll_offset = 0
