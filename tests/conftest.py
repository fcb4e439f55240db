"""Shared fixtures. pygame runs headless for every test."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from dodgefall import simulation
from dodgefall.spawner import ObjectSpawner


class ScriptedRandom:
    """Random source that replays fixed values.

    random() pops from `rolls` (repeating the last value when exhausted);
    uniform() returns the low end unless `columns` supplies values.
    """

    def __init__(self, rolls=None, columns=None):
        self.rolls = list(rolls) if rolls else [1.0]
        self.columns = list(columns) if columns else []

    def random(self) -> float:
        if len(self.rolls) > 1:
            return self.rolls.pop(0)
        return self.rolls[0]

    def uniform(self, a: float, b: float) -> float:
        if self.columns:
            return self.columns.pop(0)
        return a


@pytest.fixture
def scripted_random():
    """The ScriptedRandom class, for tests that need custom rolls."""
    return ScriptedRandom


@pytest.fixture
def pygame_display():
    """Initialised pygame with a small dummy display."""
    pygame.init()
    screen = pygame.display.set_mode((400, 300), 0, 32)
    yield screen
    pygame.quit()


@pytest.fixture
def state():
    """Fresh 400x300 simulation state."""
    return simulation.create_state(400, 300)


@pytest.fixture
def never_spawn():
    """Spawner whose roll never succeeds."""
    return ObjectSpawner(rng=ScriptedRandom(rolls=[1.0]))


@pytest.fixture
def always_spawn():
    """Spawner whose roll always succeeds, spawning at x=0."""
    return ObjectSpawner(rng=ScriptedRandom(rolls=[0.0]))
