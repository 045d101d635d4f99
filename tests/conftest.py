"""Shared fixtures: headless SDL and seeded simulators."""
import os
import random

import pytest

# Rendering tests never open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from world.weather import WeatherSimulator  # noqa: E402


class SequenceRandom(random.Random):
    """Random source that replays fixed values from random()."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


@pytest.fixture
def simulator():
    return WeatherSimulator(rng=random.Random(1234)).initialize()


@pytest.fixture
def sequence_random():
    return SequenceRandom
