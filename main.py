# main.py
"""
Forecast - Weather Guessing Prototype
Day-based game: study the recent weather, guess tomorrow, see if you were right.

The weather comes from an adaptive Markov chain (world/weather.py).
"""
from __future__ import annotations

from typing import List

from config import DISPLAY_LIMIT
from game_state import (
    GameState,
    build_initial_state,
    guess_weather,
    next_day,
    refresh_prediction,
    export_graph,
    format_history,
)
from world.markov import STATES, matrix_to_array
from world.states import WeatherError


def simulate_day(state: GameState) -> None:
    """Advance the world by one day."""
    next_day(state)


def show_history(state: GameState, days: int = DISPLAY_LIMIT) -> None:
    state.messages.append(format_history(state.recent_history(days)))


def show_status(state: GameState) -> None:
    score = state.score
    state.messages.append(
        f"Day {state.day}: today {state.current}, guess {state.guess or '-'}, "
        f"score {score.correct}/{score.total} (best streak {score.best_streak})")

    # Current transition matrix, one row per source state
    probs = matrix_to_array(state.weather.matrix)
    for source, row in zip(STATES, probs):
        cells = " ".join(f"{p:.2f}" for p in row)
        state.messages.append(f"  {str(source):<6} -> {cells}")


def handle_command(state: GameState, cmd: str, args: List[str]) -> bool:
    """Process a player command. Returns True if the game should quit."""
    command_map = {
        "next": lambda s, a: simulate_day(s),
        "guess": lambda s, a: guess_weather(s, a[0]) if a else s.messages.append("Usage: guess <sunny|cloudy|rainy>"),
        "predict": lambda s, a: refresh_prediction(s),
        "history": lambda s, a: show_history(s, int(a[0]) if a else DISPLAY_LIMIT),
        "graph": lambda s, a: export_graph(s),
        "status": lambda s, a: show_status(s),
    }
    if cmd == "quit":
        return True
    handler = command_map.get(cmd)
    if not handler:
        state.messages.append(f"Unknown command: {cmd}")
        return False
    try:
        handler(state, args)
    except WeatherError as e:
        state.messages.append(str(e))
    except (TypeError, ValueError, IndexError):
        state.messages.append(f"Invalid usage for '{cmd}'.")
    return False


__all__ = [
    "GameState",
    "build_initial_state",
    "simulate_day",
    "show_history",
    "show_status",
    "handle_command",
]
