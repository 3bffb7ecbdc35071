import os
import random

import pytest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from ghosts.surface import RecordingSurface


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def surface():
    return RecordingSurface()
