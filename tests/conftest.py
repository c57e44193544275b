"""
Pytest configuration for the test suite.

This file is automatically loaded by pytest and provides fixtures
shared by all tests in the tests/ directory.
"""

import os
import random
import sys

import pytest

# Headless pygame for every test module
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from invaders.config import Config
from invaders.game import Simulation


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ScriptedRandom:
    """
    Random source with scripted answers.

    randint/randrange/random pop from their own queues and fall back to
    fixed defaults once a queue is empty.
    """

    def __init__(self, randints=None, randranges=None, randoms=None):
        self.randints = list(randints or [])
        self.randranges = list(randranges or [])
        self.randoms = list(randoms or [])

    def randint(self, a, b):
        value = self.randints.pop(0) if self.randints else a
        assert a <= value <= b
        return value

    def randrange(self, n):
        value = self.randranges.pop(0) if self.randranges else 0
        assert 0 <= value < n
        return value

    def random(self):
        # 1.0 never passes a `< chance` roll, so enemies hold fire by default
        return self.randoms.pop(0) if self.randoms else 1.0


@pytest.fixture
def config():
    """Create a test configuration."""
    return Config(SOUND_ENABLED=False, LOG_TO_FILE=False)


@pytest.fixture
def quiet_rng():
    """Random source that never lets enemies fire."""
    return ScriptedRandom()


@pytest.fixture
def sim(config, quiet_rng):
    """Simulation at the level 1 intro screen with enemy fire disabled."""
    return Simulation(config, quiet_rng)


@pytest.fixture
def playing_sim(sim):
    """Simulation already in the PLAYING phase of level 1."""
    from invaders.game import Action
    sim.handle_action(Action.CONFIRM)
    return sim


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
