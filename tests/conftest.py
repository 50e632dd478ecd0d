import os

# No window needed for the tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from square_space.world import World
from square_space.components import Position, Velocity, Acceleration

@pytest.fixture
def world():
    return World()

@pytest.fixture
def make_body():
    from square_space.physics import Body

    def _make(x=0.0, y=0.0, dx=0.0, dy=0.0, max_speed=400.0, rate=1200.0, slowdown=800.0):
        return Body(Position(x, y), Velocity(dx, dy, max_speed), Acceleration(rate=rate, slowdown=slowdown))
    return _make
