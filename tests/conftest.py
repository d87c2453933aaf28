import os
import sys

import pytest

# Headless SDL so surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the project root is on the path so modules can be imported in tests
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame

from core.world import Chunk, TileType, World
from state.event_bus import EVENT_BUS


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def _reset_event_bus():
    """Isolate global event subscriptions between tests."""

    EVENT_BUS.reset()
    yield
    EVENT_BUS.reset()


@pytest.fixture
def world():
    """Return a world with grass chunks covering tiles ``[-16, 32)`` on both axes.

    The chunk at ``(0, 0)`` carries a tree at local ``(1, 0)`` and iron ore at
    local ``(2, 0)``.
    """

    w = World(chunk_size=16)
    for cy in range(-1, 2):
        for cx in range(-1, 2):
            w.add_chunk(Chunk.filled(cx, cy, TileType.GRASS, 16))
    origin = w.chunk_at(0, 0)
    origin.objects[(1, 0)] = TileType.TREE
    origin.objects[(2, 0)] = TileType.IRON_ORE
    return w


class Recorder:
    """Callable collecting every call it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def recorder():
    return Recorder()
