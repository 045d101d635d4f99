# render/hud.py
"""HUD panels: today's weather, recent history, forecast, guess and score."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pygame

from game_state.player_actions import (
    outcome_message,
    format_prediction,
    format_guess,
)
from render.primitives import draw_text, draw_section_header
from render.config import (
    LINE_HEIGHT,
    SECTION_SPACING,
    COLOR_BG_PANEL,
    COLOR_BORDER_LIGHT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_DIM,
    COLOR_TEXT_GOOD,
    COLOR_TEXT_BAD,
    COLOR_TEXT_WHITE,
    BUTTON_BG_COLOR,
    BUTTON_SELECTED_COLOR,
    WEATHER_COLORS,
)
from world.states import GuessOutcome, WeatherState

if TYPE_CHECKING:
    from game_state import GameState
    from ui_state import UIState


def format_score(state: "GameState") -> str:
    score = state.score
    if not score.total:
        return "Score: -"
    return f"Score: {score.correct}/{score.total} ({score.accuracy * 100:.0f}%)"


def render_weather_hud(
    screen,
    font,
    state: "GameState",
    hud_x: int,
    start_y: int,
    width: int,
) -> int:
    """Render the weather panels. Returns final y position."""
    y_offset = start_y

    # Today
    y_offset = draw_section_header(screen, font, "WEATHER", (hud_x, y_offset), width=width) + 4
    draw_text(screen, font, f"Day {state.day}", (hud_x, y_offset))
    y_offset += LINE_HEIGHT
    today = state.current
    draw_text(screen, font, f"Today: {today}", (hud_x, y_offset),
              color=WEATHER_COLORS.get(str(today), COLOR_TEXT_WHITE))
    y_offset += LINE_HEIGHT + SECTION_SPACING

    # Recent history, one day per line so it fits the sidebar
    recent = state.recent_history()
    y_offset = draw_section_header(screen, font, f"LAST {len(recent)} DAYS", (hud_x, y_offset), width=width) + 4
    for i, w in enumerate(recent):
        label = "today" if i == len(recent) - 1 else f"-{len(recent) - 1 - i}d"
        draw_text(screen, font, f"{label:>6}  {w}", (hud_x, y_offset), color=WEATHER_COLORS.get(str(w), COLOR_TEXT_GRAY))
        y_offset += LINE_HEIGHT - 2
    y_offset += SECTION_SPACING

    # Forecast and guess
    y_offset = draw_section_header(screen, font, "TOMORROW", (hud_x, y_offset), width=width) + 4
    draw_text(screen, font, format_prediction(state.prediction), (hud_x, y_offset))
    y_offset += LINE_HEIGHT
    draw_text(screen, font, format_guess(state.guess), (hud_x, y_offset))
    y_offset += LINE_HEIGHT

    result = outcome_message(state.last_outcome, state.last_report.weather if state.last_report else None)
    if result:
        color = COLOR_TEXT_GOOD if state.last_outcome is GuessOutcome.CORRECT else COLOR_TEXT_BAD
        draw_text(screen, font, result, (hud_x, y_offset), color=color)
        y_offset += LINE_HEIGHT
    draw_text(screen, font, format_score(state), (hud_x, y_offset), color=COLOR_TEXT_GRAY)
    y_offset += LINE_HEIGHT + SECTION_SPACING

    return y_offset


def render_guess_buttons(screen, font, ui_state: "UIState", selected: Optional[WeatherState]) -> None:
    """Draw one button per weather state at the rects laid out by ui_state."""
    for index, (state, rect) in enumerate(ui_state.guess_buttons):
        bg = BUTTON_SELECTED_COLOR if state == selected else BUTTON_BG_COLOR
        pygame.draw.rect(screen, bg, rect)
        pygame.draw.rect(screen, WEATHER_COLORS.get(str(state), COLOR_BORDER_LIGHT), rect, 1)
        draw_text(screen, font, f"{index + 1} {state}", (rect.x + 8, rect.y + 6))


def render_graph_panel(screen, font, graph: Optional[pygame.Surface], rect: pygame.Rect,
                       stale: bool = False) -> None:
    """Blit the saved history graph scaled into rect, or a placeholder."""
    pygame.draw.rect(screen, COLOR_BG_PANEL, rect)
    pygame.draw.rect(screen, COLOR_BORDER_LIGHT, rect, 1)
    if graph is None:
        draw_text(screen, font, "No graph yet. Press G to save one.", (rect.x + 12, rect.y + 12), color=COLOR_TEXT_DIM)
        return

    inner = rect.inflate(-16, -16)
    scale = min(inner.width / graph.get_width(), inner.height / graph.get_height())
    size = (int(graph.get_width() * scale), int(graph.get_height() * scale))
    scaled = pygame.transform.scale(graph, size)
    screen.blit(scaled, scaled.get_rect(center=inner.center))
    if stale:
        draw_text(screen, font, "History changed. Press G to refresh.", (rect.x + 12, rect.bottom - 24),
                  color=COLOR_TEXT_DIM)
