import os
import random
import tempfile

# Headless SDL and a throwaway high-score file, before pygame or config load.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
_data_dir = tempfile.TemporaryDirectory(prefix="classic-snake-")
os.environ.setdefault(
    "CLASSIC_SNAKE_HIGHSCORE_FILE",
    os.path.join(_data_dir.name, "highscore.txt"),
)

import pygame
import pytest

from classic_snake.model import GameModel
from classic_snake.storage import MemoryHighScoreStore


def pytest_unconfigure(config):
    _data_dir.cleanup()


@pytest.fixture(autouse=True)
def pygame_init():
    pygame.init()
    yield


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def model(store):
    return GameModel(store=store, rng=random.Random(1234))


@pytest.fixture
def running_model(model):
    model.reset()
    return model
