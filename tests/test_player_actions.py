"""
Tests for game state setup and player actions.
"""
import os

import pytest

import game_state.player_actions as player_actions
from game_state import (
    GameState,
    Score,
    build_initial_state,
    guess_weather,
    next_day,
    refresh_prediction,
    export_graph,
    outcome_message,
    format_history,
    format_prediction,
    format_guess,
)
from world.states import WeatherState, GuessOutcome, InvalidStateValueError

S, C, R = WeatherState.SUNNY, WeatherState.CLOUDY, WeatherState.RAINY


@pytest.fixture
def state():
    return build_initial_state(seed=2024)


class TestInitialState:

    def test_ready_to_play(self, state):
        assert isinstance(state, GameState)
        assert state.day == 0
        assert len(state.weather.history) == 30
        assert state.prediction in tuple(WeatherState)
        assert state.graph_dirty

    def test_seed_is_reproducible(self):
        a = build_initial_state(seed=5)
        b = build_initial_state(seed=5)
        assert list(a.weather.history) == list(b.weather.history)
        assert a.prediction == b.prediction


class TestGuessing:

    def test_guess_is_stored(self, state):
        guess_weather(state, "rainy")
        assert state.guess == R
        assert state.messages[-1] == "Your Guess: Rainy"

    def test_bad_guess_raises(self, state):
        with pytest.raises(InvalidStateValueError):
            guess_weather(state, "hail")
        assert state.guess is None


class TestNextDay:

    def test_without_guess(self, state):
        report = next_day(state)
        assert report.outcome is GuessOutcome.NO_GUESS
        assert state.day == 1
        assert state.score.total == 0
        assert state.prediction == report.prediction
        assert f"Day 1: New Weather: {report.weather}" in state.messages
        assert state.messages[-1] == f"Predicted Next Day: {report.prediction}"

    def test_with_guess(self, state):
        guess_weather(state, S)
        report = next_day(state)

        assert report.guess == S
        assert state.score.total == 1
        if report.weather == S:
            assert state.score.correct == 1
            assert f"Correct! The weather is {report.weather}" in state.messages
        else:
            assert state.score.correct == 0
            assert f"Wrong! The weather is {report.weather}" in state.messages

    def test_guess_cleared_after_scoring(self, state):
        guess_weather(state, C)
        next_day(state)
        assert state.guess is None

        next_day(state)
        assert state.last_outcome is GuessOutcome.NO_GUESS
        assert state.score.total == 1

    def test_guess_kept_when_clearing_disabled(self, state, monkeypatch):
        monkeypatch.setattr(player_actions, "CLEAR_GUESS_AFTER_RESOLVE", False)
        guess_weather(state, C)
        next_day(state)
        next_day(state)
        assert state.guess == C
        assert state.score.total == 2

    def test_marks_graph_dirty(self, state):
        state.graph_dirty = False
        next_day(state)
        assert state.graph_dirty


class TestPrediction:

    def test_refresh(self, state):
        prediction = refresh_prediction(state)
        assert state.prediction == prediction
        assert state.messages[-1] == f"Predicted Next Day: {prediction}"


class TestFormatting:

    def test_outcome_message(self):
        assert outcome_message(GuessOutcome.CORRECT, S) == "Correct! The weather is Sunny"
        assert outcome_message(GuessOutcome.INCORRECT, R) == "Wrong! The weather is Rainy"
        assert outcome_message(GuessOutcome.NO_GUESS, R) == ""
        assert outcome_message(None, None) == ""

    def test_history_line(self):
        assert format_history((S, C, R)) == "Last 3 Days: Sunny | Cloudy | Rainy"

    def test_placeholders(self):
        assert format_prediction(None) == "Predicted Next Day: -"
        assert format_guess(C) == "Your Guess: Cloudy"


class TestScore:

    def test_streaks(self):
        score = Score()
        for outcome in (GuessOutcome.CORRECT, GuessOutcome.CORRECT, GuessOutcome.NO_GUESS,
                        GuessOutcome.INCORRECT, GuessOutcome.CORRECT):
            score.record(outcome)
        assert (score.correct, score.total) == (3, 4)
        assert score.streak == 1
        assert score.best_streak == 2
        assert score.accuracy == pytest.approx(0.75)

    def test_empty_accuracy(self):
        assert Score().accuracy == 0.0


class TestExportGraph:

    def test_writes_png(self, state, tmp_path):
        path = str(tmp_path / "GraphImages" / "Graph.png")
        assert export_graph(state, path) == path
        assert os.path.isfile(path)
        assert state.graph_path == path
        assert not state.graph_dirty
        assert state.messages[-1] == f"Graph saved to: {path}"

    def test_failure_is_reported(self, state, tmp_path, monkeypatch, capsys):
        import render.graph

        def fail(history, path):
            raise OSError("disk full")

        monkeypatch.setattr(render.graph, "save_history_graph", fail)
        assert export_graph(state, str(tmp_path / "g.png")) is None
        assert state.graph_path is None
        assert "disk full" in capsys.readouterr().err
        assert state.messages[-1] == "Could not save the weather graph."
