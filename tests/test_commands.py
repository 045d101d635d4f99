"""
Tests for the text command dispatcher in main.py.
"""
import pytest

from main import build_initial_state, handle_command, show_status
from world.states import WeatherState


@pytest.fixture
def state():
    return build_initial_state(seed=11)


class TestHandleCommand:

    def test_quit(self, state):
        assert handle_command(state, "quit", []) is True

    def test_unknown(self, state):
        assert handle_command(state, "dance", []) is False
        assert state.messages[-1] == "Unknown command: dance"

    def test_next(self, state):
        handle_command(state, "next", [])
        assert state.day == 1

    def test_guess(self, state):
        handle_command(state, "guess", ["Cloudy"])
        assert state.guess == WeatherState.CLOUDY

    def test_guess_usage(self, state):
        handle_command(state, "guess", [])
        assert state.messages[-1].startswith("Usage: guess")

    def test_guess_unknown_weather(self, state):
        assert handle_command(state, "guess", ["hail"]) is False
        assert state.messages[-1] == "Unknown weather: 'hail'"
        assert state.guess is None

    def test_predict(self, state):
        handle_command(state, "predict", [])
        assert state.messages[-1] == f"Predicted Next Day: {state.prediction}"

    def test_history(self, state):
        handle_command(state, "history", ["3"])
        recent = state.recent_history(3)
        assert state.messages[-1] == "Last 3 Days: " + " | ".join(str(w) for w in recent)

    def test_history_default_week(self, state):
        handle_command(state, "history", [])
        assert state.messages[-1].startswith("Last 7 Days: ")

    @pytest.mark.parametrize("args", [["50"], ["soon"]])
    def test_history_invalid(self, state, args):
        handle_command(state, "history", args)
        assert state.messages[-1] == "Invalid usage for 'history'."

    def test_graph(self, state, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        handle_command(state, "graph", [])
        assert (tmp_path / "GraphImages" / "Graph.png").is_file()


class TestStatus:

    def test_lists_matrix_rows(self, state):
        show_status(state)
        rows = list(state.messages)[-3:]
        assert rows[0].strip().startswith("Sunny")
        assert rows[0].endswith("0.70 0.20 0.10")
        assert rows[2].strip().startswith("Rainy")
