"""Pytest fixtures for Pyroshow tests."""
import random
import pytest

from pyroshow.core.events import EventBus
from pyroshow.core.simulation import Simulation
from pyroshow.frontends.recording_canvas import RecordingCanvas


class FixedRandom:
    """Random source that replays a fixed sequence of values in [0, 1)."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """A random source that always returns 0.5."""
    return FixedRandom([0.5])


@pytest.fixture
def make_rng():
    """Factory for random sources replaying the given values."""
    return FixedRandom


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def simulation(rng, bus):
    """An 800x600 Simulation with no entities."""
    return Simulation(800, 600, rng=rng, bus=bus)


@pytest.fixture
def canvas():
    """A headless canvas with no pending events."""
    return RecordingCanvas(800, 600)
