# weather.py
"""
Markov-chain weather simulator for Forecast.

Owns the transition matrix, the rolling weather history, the adaptive
reweighting, next-day prediction, and the player's guess. Nothing here knows
about pygame; the game layer reads the plain values it returns.
"""
from __future__ import annotations

import collections
import random
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple, Union

from config import (
    DEFAULT_WEATHER,
    HISTORY_LIMIT,
    DISPLAY_LIMIT,
    DEFAULT_UTILITY,
    UTILITY_JITTER_MIN,
    UTILITY_JITTER_MAX,
)
from world.markov import (
    STATES,
    Distribution,
    TransitionMatrix,
    prior_matrix,
    validate_matrix,
    reweighted_matrix,
    choose_by_probability,
    sample_next,
    count_recent,
    normalize,
)
from world.states import (
    WeatherState,
    GuessOutcome,
    UninitializedStateError,
)


@dataclass(frozen=True)
class DayReport:
    """Everything the presentation layer needs after one day advance."""
    day: int
    weather: WeatherState
    prediction: WeatherState
    outcome: GuessOutcome
    guess: Optional[WeatherState] = None


@dataclass
class WeatherSimulator:
    """
    Weather state machine.

    Construct, then call initialize() before anything else. Fields can also be
    set directly (matrix, history, current) to start from a known situation.
    """
    rng: random.Random = field(default_factory=random.Random)
    matrix: Optional[TransitionMatrix] = None
    history: Deque[WeatherState] = field(
        default_factory=lambda: collections.deque(maxlen=HISTORY_LIMIT))
    current: Optional[WeatherState] = None
    guess: Optional[WeatherState] = None
    day: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.history, collections.deque) or self.history.maxlen != HISTORY_LIMIT:
            self.history = collections.deque(self.history, maxlen=HISTORY_LIMIT)

    @property
    def initialized(self) -> bool:
        return self.matrix is not None and self.current is not None

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise UninitializedStateError("WeatherSimulator.initialize() has not been called")

    # === Setup ===
    def initialize(self) -> "WeatherSimulator":
        """Reset to the prior matrix and pre-fill history with simulated days.

        Every pre-fill draw uses the unmodified prior, starting from the
        default weather; current ends up as the last drawn day.
        """
        self.matrix = prior_matrix()
        self.current = WeatherState.parse(DEFAULT_WEATHER)
        self.history.clear()
        self.guess = None
        self.day = 0

        for _ in range(HISTORY_LIMIT):
            self.current = sample_next(self.matrix, self.current, self.rng)
            self.history.append(self.current)
        return self

    def set_matrix(self, matrix) -> None:
        """Replace the transition matrix after validating it."""
        self.matrix = validate_matrix(matrix)

    # === Simulation ===
    def adapt_matrix(self) -> None:
        """Reweight every row from the last DISPLAY_LIMIT days (no-op on short history)."""
        self._require_initialized()
        updated = reweighted_matrix(self.history, DISPLAY_LIMIT)
        if updated is not None:
            self.matrix = updated

    def generate_weather(self) -> WeatherState:
        """Advance the world by one day and return the new weather."""
        self._require_initialized()
        self.adapt_matrix()
        self.current = sample_next(self.matrix, self.current, self.rng)
        self.history.append(self.current)
        self.day += 1
        return self.current

    def advance_day(self) -> DayReport:
        """Generate weather, refresh the prediction, and score the stored guess."""
        weather = self.generate_weather()
        prediction = self.predict_next()
        return DayReport(
            day=self.day,
            weather=weather,
            prediction=prediction,
            outcome=self.resolve_guess(),
            guess=self.guess,
        )

    # === Prediction ===
    def weather_utility(self, state: WeatherState) -> float:
        """Recency desirability of a state: share of the last week plus a little jitter."""
        if len(self.history) < DISPLAY_LIMIT:
            return DEFAULT_UTILITY
        count = count_recent(self.history, DISPLAY_LIMIT)[state]
        return count / DISPLAY_LIMIT + self.rng.uniform(UTILITY_JITTER_MIN, UTILITY_JITTER_MAX)

    def expected_utilities(self) -> Distribution:
        """EU(t) = sum over sources of P(source -> t) * U(t)."""
        self._require_initialized()
        utilities = {target: self.weather_utility(target) for target in STATES}
        expected = {target: 0.0 for target in STATES}
        for row in self.matrix.values():
            for target, probability in row.items():
                expected[target] += probability * utilities[target]
        return expected

    def prediction_distribution(self) -> Distribution:
        return normalize(self.expected_utilities())

    def predict_next(self) -> WeatherState:
        """Sample a forecast for tomorrow. Only consumes random numbers."""
        return choose_by_probability(self.prediction_distribution(), self.rng.random())

    # === Player guess ===
    def record_guess(self, guess: Union[WeatherState, str]) -> WeatherState:
        self.guess = WeatherState.coerce(guess)
        return self.guess

    def resolve_guess(self) -> GuessOutcome:
        """Compare the stored guess with today's weather. The guess is kept."""
        self._require_initialized()
        if self.guess is None:
            return GuessOutcome.NO_GUESS
        if self.guess == self.current:
            return GuessOutcome.CORRECT
        return GuessOutcome.INCORRECT

    def clear_guess(self) -> None:
        self.guess = None

    # === Read-only views ===
    def recent_history(self, n: int = DISPLAY_LIMIT) -> Tuple[WeatherState, ...]:
        """The last n days, oldest first (fewer if less history is known)."""
        self._require_initialized()
        if not 0 <= n <= HISTORY_LIMIT:
            raise ValueError(f"n must be between 0 and {HISTORY_LIMIT}, got {n}")
        if n == 0:
            return ()
        return tuple(self.history)[-n:]
