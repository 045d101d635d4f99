# render/overlays.py
"""Bottom panel rendering: the day-by-day event log and the controls overlay."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Tuple

import pygame

from render.primitives import Color, draw_text
from render.config import (
    LINE_HEIGHT,
    LOG_LINE_HEIGHT,
    PANEL_MARGIN,
    COLOR_BG_PANEL,
    COLOR_BORDER_LIGHT,
    COLOR_TEXT_WHITE,
    COLOR_TEXT_HIGHLIGHT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_GOOD,
    COLOR_TEXT_BAD,
    COLOR_LOG_TEXT,
)

if TYPE_CHECKING:
    from game_state import GameState

HELP_COLUMNS = 4


def visible_log_count(max_height: int) -> int:
    """How many log lines fit under the header in a panel of max_height."""
    return max(0, (max_height - LINE_HEIGHT - 2 * PANEL_MARGIN) // LOG_LINE_HEIGHT)


def log_window(total: int, visible: int, scroll_offset: int) -> Tuple[int, int]:
    """Slice [start, end) of the message log to show, scroll_offset lines up from the newest."""
    end = max(0, total - max(0, scroll_offset))
    start = max(0, end - visible)
    return start, end


def message_color(message: str) -> Color:
    """Guess results stand out from the rest of the day's report."""
    if message.startswith("Correct!"):
        return COLOR_TEXT_GOOD
    if message.startswith("Wrong!"):
        return COLOR_TEXT_BAD
    if message.startswith("Day "):
        return COLOR_TEXT_WHITE
    return COLOR_LOG_TEXT


def split_control(control: str) -> Tuple[str, str]:
    """'Space: next day' -> ('Space', 'next day')."""
    key, _, action = control.partition(":")
    return key.strip(), action.strip()


def render_help_overlay(surface, font, controls: Sequence[str], rect: pygame.Rect) -> None:
    """Controls laid out in a fixed grid over the log panel, keys highlighted."""
    pygame.draw.rect(surface, COLOR_BG_PANEL, rect, 0)
    x, y = rect.x + PANEL_MARGIN, rect.y + PANEL_MARGIN // 2
    draw_text(surface, font, "CONTROLS", (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += LINE_HEIGHT

    col_width = (rect.width - 2 * PANEL_MARGIN) // HELP_COLUMNS
    for i, control in enumerate(controls):
        row, col = divmod(i, HELP_COLUMNS)
        cy = y + row * LOG_LINE_HEIGHT
        if cy + LOG_LINE_HEIGHT > rect.bottom:
            break
        key, action = split_control(control)
        cx = x + col * col_width
        draw_text(surface, font, key, (cx, cy), color=COLOR_TEXT_HIGHLIGHT)
        draw_text(surface, font, action, (cx + 70, cy), color=COLOR_TEXT_GRAY)


def render_event_log(surface, font, state: "GameState", rect: pygame.Rect, scroll_offset: int = 0) -> int:
    """Draw the newest messages that fit in rect, with a scroll bar on the right.

    Returns the number of message lines the panel can show.
    """
    messages: List[str] = list(state.messages)
    visible = visible_log_count(rect.height)
    start, end = log_window(len(messages), visible, scroll_offset)

    x, y = rect.x + PANEL_MARGIN, rect.y + PANEL_MARGIN // 2
    header = f"EVENT LOG  day {state.day}"
    if scroll_offset > 0:
        header += f"  ({scroll_offset} newer below)"
    draw_text(surface, font, header, (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += LINE_HEIGHT

    for message in messages[start:end]:
        draw_text(surface, font, message, (x, y), color=message_color(message))
        y += LOG_LINE_HEIGHT

    if len(messages) > visible > 0:
        track = pygame.Rect(rect.right - PANEL_MARGIN, rect.y + PANEL_MARGIN // 2, 4,
                            rect.height - PANEL_MARGIN)
        thumb_h = max(6, track.height * visible // len(messages))
        thumb_y = track.y + (track.height - thumb_h) * start // max(1, len(messages) - visible)
        pygame.draw.rect(surface, COLOR_BORDER_LIGHT, (track.x, thumb_y, track.width, thumb_h))

    return visible