import math
import random

from .eye import Eye
from .surface import WHITE
from .vector import TWO_PI, Vector2D

REROLL_CHANCE = 0.01
HAND_RADIUS = 10
HAND_INSET = 5
HAND_DROP = 10
EYE_RAISE = 10


def random_int(rng, lo: int, hi: int) -> int:
    """Integer in [lo, hi], both ends included."""
    return math.floor(rng.random() * (hi - lo + 1)) + lo


class Ghost:
    def __init__(self, x: float, y: float, surface=None, rng=None):
        self.rng = rng or random
        self.surface = surface
        self.position = Vector2D(x, y)
        self.hand_position = Vector2D(x, y)

        self.radius = 50
        self.eye_distance = 10
        self.eyes = []
        self.body_bounce_angle = random_int(self.rng, 0, 100)
        self.bounce_distance = 0.5
        self.bounce_speed = 0.05

        self.velocity = Vector2D(0, 0)
        self._roll_velocity()
        self.rerolls = 0
        self.facing_angle = 0.0

    @classmethod
    def spawn(cls, x: float, y: float, surface=None, rng=None):
        ghost = cls(x, y, surface, rng)
        ghost.initialize()
        return ghost

    def initialize(self):
        if self.eyes:
            return
        self.eyes.append(Eye(self.position.x - self.eye_distance, self.position.y - EYE_RAISE))
        self.eyes.append(Eye(self.position.x + self.eye_distance, self.position.y - EYE_RAISE))

    def _roll_velocity(self):
        self.velocity.set_length(self.rng.random() * 2 + 1)
        self.velocity.set_angle(self.rng.random() * TWO_PI)

    def update(self, pointer):
        if self.rng.random() < REROLL_CHANCE:
            self._roll_velocity()
            self.rerolls += 1

        # velocity is only re-sampled; position never integrates it

        body_bounce = Vector2D(0, math.sin(self.body_bounce_angle) * self.bounce_distance)
        hand_bounce = Vector2D(0, math.sin(self.body_bounce_angle + 10) * self.bounce_distance / 2)
        self.position.add_to(body_bounce)
        self.hand_position.subtract_from(hand_bounce)

        # one angle for both eyes, measured from the bounced body position
        dx = pointer.x - self.position.x
        dy = pointer.y - self.position.y
        angle = math.atan2(dy, dx)
        self.facing_angle = angle

        for eye in self.eyes:
            eye.update(body_bounce, angle)

        self.body_bounce_angle += self.bounce_speed
        return angle

    def hand_centers(self):
        offset = self.radius - HAND_INSET
        hx, hy = self.hand_position.x, self.hand_position.y + HAND_DROP
        return (hx - offset, hy), (hx + offset, hy)

    def render(self, surface=None):
        """Draw onto surface, or onto the one given at construction."""
        if surface is None:
            surface = self.surface
        if surface is None:
            raise ValueError('Ghost.render needs a surface: pass one here or to the constructor')
        # painter's order: body first so hands and eyes land on top
        surface.fill_circle(self.position.x, self.position.y, self.radius, WHITE)
        for hx, hy in self.hand_centers():
            surface.fill_circle(hx, hy, HAND_RADIUS, WHITE)
        for eye in self.eyes:
            eye.render(surface)
