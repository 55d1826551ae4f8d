"""Shared fixtures for GIFTFALL tests."""

import random

import pytest

from giftfall.core.events import EventBus
from giftfall.game.session import GameSession
from giftfall.graphics.images import SpriteSet
from giftfall.storage.highscore import MemoryHighScoreStore


class RecordingSurface:
    """DrawingSurface that records draw calls instead of drawing."""

    def __init__(self, width: int = 400, height: int = 600):
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def fill_circle(self, x, y, radius, color) -> None:
        self.calls.append(("circle", x, y, radius, color))

    def draw_image(self, handle, x, y, width, height) -> None:
        self.calls.append(("image", handle, x, y, width, height))


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def surface():
    return RecordingSurface(400, 600)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def sprites():
    # Any non-None object works as a handle for RecordingSurface
    return SpriteSet(player="santa", gift="gift", obstacle="obstacle")


@pytest.fixture
def session(bus, surface, sprites, store):
    s = GameSession(bus, surface, sprites, store, rng=random.Random(1234))
    yield s
    s.close()
