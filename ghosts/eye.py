import math

from .surface import BLACK
from .vector import Vector2D


class Eye:
    def __init__(self, x: float, y: float):
        self.position = Vector2D(x, y)
        self.iris_position = Vector2D(x, y)
        self.move_radius = 20
        self.size_radius = 5

    def update(self, velocity, angle: float):
        # velocity is the owning ghost's bounce delta for this frame
        self.position.add_to(velocity)

        self.iris_position.set_x(self.position.get_x() + math.cos(angle) * self.move_radius)
        self.iris_position.set_y(self.position.get_y() + math.sin(angle) * self.move_radius)

    def render(self, surface):
        surface.fill_circle(self.iris_position.x, self.iris_position.y, self.size_radius, BLACK)
