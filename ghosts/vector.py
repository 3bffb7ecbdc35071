import numpy as np


TWO_PI = np.pi * 2


class Vector2D:
    """2D point/vector with polar accessors.

    Arithmetic follows IEEE semantics throughout: dividing by zero or feeding
    non-finite values into the trig helpers produces inf/nan instead of raising.
    """

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    # -- component access --------------------------------------------------

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def set_x(self, x: float):
        self.x = float(x)

    def set_y(self, y: float):
        self.y = float(y)

    # -- polar -------------------------------------------------------------

    def get_angle(self) -> float:
        with np.errstate(invalid='ignore'):
            return float(np.arctan2(self.y, self.x))

    def set_angle(self, angle: float):
        length = self.get_length()
        with np.errstate(invalid='ignore'):
            self.x = float(np.cos(angle) * length)
            self.y = float(np.sin(angle) * length)

    def get_length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def set_length(self, length: float):
        angle = self.get_angle()
        with np.errstate(invalid='ignore'):
            self.x = float(np.cos(angle) * length)
            self.y = float(np.sin(angle) * length)

    # -- allocating arithmetic ---------------------------------------------

    def add(self, v2):
        return Vector2D(self.x + v2.x, self.y + v2.y)

    def subtract(self, v2):
        return Vector2D(self.x - v2.x, self.y - v2.y)

    def multiply(self, value: float):
        with np.errstate(invalid='ignore', over='ignore'):
            return Vector2D(np.multiply(self.x, value), np.multiply(self.y, value))

    def divide(self, value: float):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return Vector2D(np.divide(self.x, value), np.divide(self.y, value))

    # -- in place ----------------------------------------------------------

    def add_to(self, v2):
        self.x += v2.x
        self.y += v2.y

    def subtract_from(self, v2):
        self.x -= v2.x
        self.y -= v2.y

    def multiply_by(self, value: float):
        result = self.multiply(value)
        self.x, self.y = result.x, result.y

    def divide_by(self, value: float):
        result = self.divide(value)
        self.x, self.y = result.x, result.y

    # -- python protocol ---------------------------------------------------

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, value):
        return self.multiply(value)

    __rmul__ = __mul__

    def __truediv__(self, value):
        return self.divide(value)

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __repr__(self):
        return f'Vector2D({self.x!r}, {self.y!r})'

    def copy(self):
        return Vector2D(self.x, self.y)

    def to_tuple(self):
        return (self.x, self.y)
