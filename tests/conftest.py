import random

import pytest

from birb.physics_engine import GameEngine

WIDTH = 400
HEIGHT = 600


@pytest.fixture
def engine():
    eng = GameEngine(rng=random.Random(1234))
    eng.reset(WIDTH, HEIGHT)
    return eng
