from .eye import Eye
from .ghost import Ghost
from .scene import PointerMoved, Resized, Scene, ghost_count
from .surface import PygameSurface, RecordingSurface
from .vector import Vector2D

__version__ = '0.1.0'
