# world/__init__.py
"""
World module: weather states, transition matrix, and the weather simulator.

Provides:
- Weather enums and error types (from states.py)
- Transition matrix helpers (from markov.py)
- The WeatherSimulator component (from weather.py)
"""

# Enums and errors
from world.states import (
    WeatherState,
    GuessOutcome,
    WeatherError,
    UninitializedStateError,
    InvalidStateValueError,
)

# Transition matrix
from world.markov import (
    TransitionMatrix,
    prior_matrix,
    validate_matrix,
    reweighted_matrix,
    choose_by_probability,
    sample_next,
)

# Simulator
from world.weather import WeatherSimulator, DayReport

__all__ = [
    # States
    "WeatherState",
    "GuessOutcome",
    "WeatherError",
    "UninitializedStateError",
    "InvalidStateValueError",
    # Markov
    "TransitionMatrix",
    "prior_matrix",
    "validate_matrix",
    "reweighted_matrix",
    "choose_by_probability",
    "sample_next",
    # Simulator
    "WeatherSimulator",
    "DayReport",
]
