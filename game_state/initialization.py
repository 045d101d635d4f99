# game_state/initialization.py
"""Game state initialization."""
from __future__ import annotations

import random
from typing import Optional

from game_state.state import GameState
from world.weather import WeatherSimulator


def build_initial_state(seed: Optional[int] = None) -> GameState:
    """Create a new game with 30 days of simulated weather history.

    Passing a seed makes every later draw (weather, prediction jitter)
    reproducible.
    """
    simulator = WeatherSimulator(rng=random.Random(seed)).initialize()
    state = GameState(weather=simulator)

    # Show a forecast from the very first frame
    state.prediction = simulator.predict_next()
    return state
