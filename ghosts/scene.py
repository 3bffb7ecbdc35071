import math
import random
from collections import deque
from dataclasses import dataclass

from .ghost import Ghost, random_int
from .log import get_logger
from .vector import Vector2D

log = get_logger(__name__)

AREA_PER_GHOST = 200


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


def ghost_count(width, height) -> int:
    # half-up rounding: (300 + 200) / 200 = 2.5 gives 3 ghosts
    return max(0, math.floor((width + height) / AREA_PER_GHOST + 0.5))


class Scene:
    """Owns the ghosts and runs one update/render pass per frame.

    Input arrives as PointerMoved / Resized messages. post() queues them and
    tick() applies the queue before updating, so a resize always replaces the
    ghost list before any ghost is updated in that frame.
    """

    def __init__(self, width, height, surface=None, rng=None):
        self.surface = surface
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.pointer = Vector2D(width / 2, height / 2)
        self.ghosts = []
        self.number_of_ghosts = ghost_count(width, height)
        self.pending = deque()
        self.frames = 0

    def initialize_ghosts(self):
        for _ in range(self.number_of_ghosts):
            ghost = Ghost(
                random_int(self.rng, 0, math.floor(self.width)),
                random_int(self.rng, 0, math.floor(self.height)),
                self.surface,
                self.rng,
            )
            ghost.initialize()
            self.ghosts.append(ghost)
        log.debug('spawned %d ghosts for %sx%s', len(self.ghosts), self.width, self.height)

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.number_of_ghosts = ghost_count(width, height)

        self.ghosts = []
        self.initialize_ghosts()

    def set_pointer(self, x, y):
        self.pointer = Vector2D(x, y)

    def post(self, message):
        self.pending.append(message)

    def apply(self, message):
        if isinstance(message, PointerMoved):
            self.set_pointer(message.x, message.y)
        elif isinstance(message, Resized):
            self.resize(message.width, message.height)
        else:
            raise TypeError(f'unsupported scene message: {message!r}')

    def drain(self):
        while self.pending:
            self.apply(self.pending.popleft())

    def update(self):
        for ghost in self.ghosts:
            ghost.update(self.pointer)

    def render(self):
        self.surface.clear(self.width, self.height)
        for ghost in self.ghosts:
            ghost.render(self.surface)

    def tick(self):
        self.drain()
        self.update()
        self.render()
        self.frames += 1
        return self.frames
