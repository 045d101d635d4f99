# game_state/__init__.py
"""Game state management module."""

from game_state.state import GameState, Score
from game_state.initialization import build_initial_state
from game_state.player_actions import (
    guess_weather,
    next_day,
    refresh_prediction,
    export_graph,
    outcome_message,
    format_history,
    format_prediction,
    format_guess,
)

__all__ = [
    'GameState',
    'Score',
    'build_initial_state',
    'guess_weather',
    'next_day',
    'refresh_prediction',
    'export_graph',
    'outcome_message',
    'format_history',
    'format_prediction',
    'format_guess',
]
