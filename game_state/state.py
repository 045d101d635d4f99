# game_state/state.py
"""Core game state data structures."""
from __future__ import annotations

import collections
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from config import MESSAGE_LOG_SIZE, DISPLAY_LIMIT
from world.states import WeatherState, GuessOutcome
from world.weather import WeatherSimulator, DayReport


@dataclass
class Score:
    """Running tally of scored guesses."""
    correct: int = 0
    total: int = 0
    streak: int = 0
    best_streak: int = 0

    def record(self, outcome: GuessOutcome) -> None:
        if outcome is GuessOutcome.NO_GUESS:
            return
        self.total += 1
        if outcome is GuessOutcome.CORRECT:
            self.correct += 1
            self.streak += 1
            self.best_streak = max(self.best_streak, self.streak)
        else:
            self.streak = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


@dataclass
class GameState:
    """Main game state container.

    The simulator is the source of truth for weather; the remaining fields are
    what the HUD shows between days.
    """
    weather: WeatherSimulator = field(default_factory=WeatherSimulator)
    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=MESSAGE_LOG_SIZE))
    score: Score = field(default_factory=Score)

    # Latest forecast and the result of the last scored day
    prediction: Optional[WeatherState] = None
    last_report: Optional[DayReport] = None

    # Set whenever history changes; the graph image is regenerated on demand
    graph_dirty: bool = True
    graph_path: Optional[str] = None

    # === Weather convenience properties ===
    @property
    def day(self) -> int:
        return self.weather.day

    @property
    def current(self) -> Optional[WeatherState]:
        return self.weather.current

    @property
    def guess(self) -> Optional[WeatherState]:
        return self.weather.guess

    @property
    def last_outcome(self) -> Optional[GuessOutcome]:
        return self.last_report.outcome if self.last_report else None

    def recent_history(self, n: int = DISPLAY_LIMIT) -> Tuple[WeatherState, ...]:
        return self.weather.recent_history(n)
