# pygame_runner.py
"""
Pygame-CE frontend for the Forecast prototype.

Architecture:
- Virtual screen space: fixed 960x540 UI layout surface
- Screen space: actual window pixels (scales with resize, letterboxed)

Mouse input is transformed screen -> virtual before hit testing.

Controls:
- Space: generate the next day's weather
- 1-3: guess Sunny / Cloudy / Rainy (or click a guess button)
- P: new forecast
- G: save the history graph and show it
- S: status
- H: show help
- ESC: quit
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from main import (
    GameState,
    build_initial_state,
    handle_command,
)
from ui_state import UIState
from keybindings import (
    CONTROL_DESCRIPTIONS,
    GUESS_KEYS,
    NEXT_DAY_KEY,
    PREDICT_KEY,
    GRAPH_KEY,
    STATUS_KEY,
    QUIT_KEY,
    HELP_KEY,
)
from render.config import (
    VIRTUAL_WIDTH,
    VIRTUAL_HEIGHT,
    LOG_PANEL_HEIGHT,
    FONT_SIZE,
    PANEL_MARGIN,
    COLOR_BG_DARK,
    COLOR_BORDER_LIGHT,
)
from render import (
    render_weather_hud,
    render_guess_buttons,
    render_graph_panel,
    render_help_overlay,
    render_event_log,
    visible_log_count,
    load_graph_image,
)


def screen_to_virtual(
    screen_pos: Tuple[int, int],
    screen_size: Tuple[int, int],
) -> Tuple[int, int]:
    """Transform screen coordinates to virtual screen coordinates."""
    screen_w, screen_h = screen_size
    scale = min(screen_w / VIRTUAL_WIDTH, screen_h / VIRTUAL_HEIGHT)
    offset_x = (screen_w - VIRTUAL_WIDTH * scale) / 2
    offset_y = (screen_h - VIRTUAL_HEIGHT * scale) / 2

    vx = int((screen_pos[0] - offset_x) / scale)
    vy = int((screen_pos[1] - offset_y) / scale)
    return vx, vy


def render_to_virtual_screen(
    virtual_screen: pygame.Surface,
    font,
    state: GameState,
    ui_state: UIState,
    show_help: bool,
) -> None:
    """Render everything to the virtual screen at fixed resolution."""
    virtual_screen.fill(COLOR_BG_DARK)

    # 1. Sidebar: weather HUD
    sidebar = ui_state.sidebar_rect
    render_weather_hud(virtual_screen, font, state, sidebar.x + PANEL_MARGIN, PANEL_MARGIN,
                       sidebar.width - 2 * PANEL_MARGIN)

    # 2. Graph panel and guess buttons
    render_graph_panel(virtual_screen, font, ui_state.graph_image, ui_state.graph_rect, state.graph_dirty)
    render_guess_buttons(virtual_screen, font, ui_state, state.guess)

    # 3. Log panel
    if show_help:
        render_help_overlay(virtual_screen, font, CONTROL_DESCRIPTIONS, ui_state.log_panel_rect)
    else:
        render_event_log(virtual_screen, font, state, ui_state.log_panel_rect, ui_state.log_scroll_offset)
    pygame.draw.line(virtual_screen, COLOR_BORDER_LIGHT,
                     (0, ui_state.log_panel_rect.y),
                     (VIRTUAL_WIDTH, ui_state.log_panel_rect.y), 2)


def blit_virtual_to_screen(virtual_screen: pygame.Surface, screen: pygame.Surface) -> None:
    """Scale and blit the virtual screen to the actual display, with letterboxing."""
    screen_w, screen_h = screen.get_size()
    scale = min(screen_w / VIRTUAL_WIDTH, screen_h / VIRTUAL_HEIGHT)
    scaled_w = int(VIRTUAL_WIDTH * scale)
    scaled_h = int(VIRTUAL_HEIGHT * scale)
    offset_x = (screen_w - scaled_w) // 2
    offset_y = (screen_h - scaled_h) // 2

    screen.fill((0, 0, 0))
    scaled = pygame.transform.scale(virtual_screen, (scaled_w, scaled_h))
    screen.blit(scaled, (offset_x, offset_y))


def issue(state: GameState, ui_state: UIState, cmd: str, args: List[str]) -> None:
    """Run a command and keep the UI in sync with its side effects."""
    if handle_command(state, cmd, args):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        return

    ui_state.reset_log_scroll()
    if cmd == "graph" and state.graph_path:
        ui_state.graph_image = load_graph_image(state.graph_path)


def run(seed: Optional[int] = None) -> None:
    """Main game loop."""
    pygame.init()

    virtual_screen = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
    screen = pygame.display.set_mode((VIRTUAL_WIDTH, VIRTUAL_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Forecast - Weather Guessing")

    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    state = build_initial_state(seed)
    ui_state = UIState()
    state.messages.append("Welcome to Forecast. Guess tomorrow's weather, then press Space. H for help.")
    issue(state, ui_state, "graph", [])

    show_help = False
    visible_messages = visible_log_count(LOG_PANEL_HEIGHT)

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            if event.type == pygame.MOUSEWHEEL:
                virtual_pos = screen_to_virtual(pygame.mouse.get_pos(), screen.get_size())
                ui_state.handle_scroll(virtual_pos, event.y, len(state.messages), visible_messages)
                continue

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                virtual_pos = screen_to_virtual(event.pos, screen.get_size())
                weather = ui_state.get_guess_button_at(virtual_pos)
                if weather is not None:
                    issue(state, ui_state, "guess", [str(weather)])
                continue

            if event.type != pygame.KEYDOWN:
                continue

            if event.key == QUIT_KEY:
                running = False
            elif event.key == HELP_KEY:
                show_help = not show_help
            elif event.key in GUESS_KEYS:
                issue(state, ui_state, "guess", [GUESS_KEYS[event.key]])
            elif event.key == NEXT_DAY_KEY:
                issue(state, ui_state, "next", [])
            elif event.key == PREDICT_KEY:
                issue(state, ui_state, "predict", [])
            elif event.key == GRAPH_KEY:
                issue(state, ui_state, "graph", [])
            elif event.key == STATUS_KEY:
                issue(state, ui_state, "status", [])

        render_to_virtual_screen(virtual_screen, font, state, ui_state, show_help)
        blit_virtual_to_screen(virtual_screen, screen)
        pygame.display.flip()

    pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Forecast weather guessing prototype")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    return parser.parse_args(argv)


def main() -> None:
    try:
        run(parse_args().seed)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
