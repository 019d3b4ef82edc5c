from __future__ import annotations

import os
import random

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from apple_collector.spawner import Spawner


@pytest.fixture
def spawner() -> Spawner:
    return Spawner(random.Random(1234))
