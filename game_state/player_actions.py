# game_state/player_actions.py
"""Player actions: guessing, advancing the day, forecasting, graph export."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence

from config import CLEAR_GUESS_AFTER_RESOLVE, GRAPH_IMAGE_PATH
from world.states import GuessOutcome, WeatherState

if TYPE_CHECKING:
    from game_state.state import GameState
    from world.weather import DayReport


def format_history(history: Sequence[WeatherState]) -> str:
    """'Last 7 Days: Sunny | Cloudy | ...'"""
    return f"Last {len(history)} Days: " + " | ".join(str(w) for w in history)


def format_prediction(prediction: Optional[WeatherState]) -> str:
    return f"Predicted Next Day: {prediction if prediction else '-'}"


def format_guess(guess: Optional[WeatherState]) -> str:
    return f"Your Guess: {guess if guess else '-'}"


def outcome_message(outcome: Optional[GuessOutcome], weather: Optional[WeatherState]) -> str:
    """Result line for a scored guess, empty when there is nothing to report."""
    if outcome is GuessOutcome.CORRECT:
        return f"Correct! The weather is {weather}"
    if outcome is GuessOutcome.INCORRECT:
        return f"Wrong! The weather is {weather}"
    return ""


def guess_weather(state: GameState, name) -> None:
    """Store the player's guess for tomorrow."""
    guess = state.weather.record_guess(name)
    state.messages.append(format_guess(guess))


def refresh_prediction(state: GameState) -> WeatherState:
    state.prediction = state.weather.predict_next()
    state.messages.append(format_prediction(state.prediction))
    return state.prediction


def next_day(state: GameState) -> DayReport:
    """Advance one day, then report weather, forecast and guess result."""
    report = state.weather.advance_day()
    state.last_report = report
    state.prediction = report.prediction
    state.graph_dirty = True

    state.messages.append(f"Day {report.day}: New Weather: {report.weather}")
    result = outcome_message(report.outcome, report.weather)
    if result:
        state.messages.append(result)
    state.messages.append(format_prediction(report.prediction))

    state.score.record(report.outcome)
    if CLEAR_GUESS_AFTER_RESOLVE and report.outcome is not GuessOutcome.NO_GUESS:
        state.weather.clear_guess()
    return report


def export_graph(state: GameState, path: str = GRAPH_IMAGE_PATH) -> Optional[str]:
    """Render the weather history graph to a PNG. Returns the path, or None on failure."""
    import pygame
    from render.graph import save_history_graph

    try:
        saved = save_history_graph(state.weather.recent_history(len(state.weather.history)), path)
    except (OSError, pygame.error) as e:
        print(f"Graph export failed: {e}", file=sys.stderr)
        state.messages.append("Could not save the weather graph.")
        return None

    state.graph_path = saved
    state.graph_dirty = False
    state.messages.append(f"Graph saved to: {saved}")
    return saved
