# states.py
"""
Weather states, guess outcomes, and the weather error taxonomy.

WeatherState is a closed set; its declaration order is the enumeration order
used by every sampling routine.
"""
from __future__ import annotations

from enum import Enum
from typing import Union


class WeatherError(Exception):
    """Base class for weather model errors."""


class UninitializedStateError(WeatherError, RuntimeError):
    """Raised when the simulator is used before initialize()."""


class InvalidStateValueError(WeatherError, ValueError):
    """Raised for a value outside the weather enumeration or a malformed matrix entry."""


class WeatherState(Enum):
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "WeatherState":
        """Look up a state by name, ignoring case and surrounding whitespace."""
        key = name.strip().lower()
        for state in cls:
            if state.value.lower() == key:
                return state
        raise InvalidStateValueError(f"Unknown weather: {name!r}")

    @classmethod
    def coerce(cls, value: Union["WeatherState", str]) -> "WeatherState":
        """Accept a WeatherState or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise InvalidStateValueError(f"Not a weather state: {value!r}")


class GuessOutcome(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NO_GUESS = "no_guess"
