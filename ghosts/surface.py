import math
from dataclasses import dataclass

from .log import get_logger

log = get_logger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class Clear:
    width: float
    height: float


@dataclass(frozen=True)
class FillCircle:
    x: float
    y: float
    radius: float
    color: tuple


class RecordingSurface:
    """Headless drawing surface: keeps the commands it is given, in order.

    With keep_last_frame=True each clear() drops the previous frame, so long
    runs hold one frame of commands at most.
    """

    def __init__(self, keep_last_frame=False):
        self.keep_last_frame = keep_last_frame
        self.commands = []

    def clear(self, width, height):
        if self.keep_last_frame:
            self.commands.clear()
        self.commands.append(Clear(width, height))

    def fill_circle(self, x, y, radius, color):
        self.commands.append(FillCircle(x, y, radius, tuple(color)))

    def circles(self):
        return [c for c in self.commands if isinstance(c, FillCircle)]

    def last_frame(self):
        """Commands issued since the most recent clear (the clear included)."""
        for i in range(len(self.commands) - 1, -1, -1):
            if isinstance(self.commands[i], Clear):
                return self.commands[i:]
        return list(self.commands)

    def reset(self):
        self.commands.clear()


class PygameSurface:
    def __init__(self, target, background=(18, 18, 20)):
        self.target = target
        self.background = tuple(background)
        self.skipped = 0

    def clear(self, width, height):
        import pygame
        self.target.fill(self.background, pygame.Rect(0, 0, int(width), int(height)))

    def fill_circle(self, x, y, radius, color):
        import pygame
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(radius)):
            # nan/inf positions come from degenerate vector math; drop the shape, keep the frame
            self.skipped += 1
            log.debug('skipping non-finite circle at (%r, %r) r=%r', x, y, radius)
            return
        pygame.draw.circle(self.target, color, (x, y), radius)
