import random

import pytest

from flappy.data_models import Bird, GameState, Phase, Viewport
from flappy.game_engine import GameEngine
from flappy.physics_core import PhysicsCore
from flappy.pipe_stream import PipeStream


@pytest.fixture
def viewport():
    return Viewport(width=1000, height=1000)


@pytest.fixture
def stream():
    return PipeStream(rng=random.Random(1234))


@pytest.fixture
def physics():
    return PhysicsCore()


@pytest.fixture
def engine(viewport, stream, physics):
    return GameEngine(viewport=viewport, physics=physics, stream=stream)


@pytest.fixture
def running_state(viewport):
    return GameState(phase=Phase.RUNNING, bird=Bird(y=viewport.height / 2))
