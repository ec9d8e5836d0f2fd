"""
Immutable 2D vector value type
"""

import math

import numpy as np


class Vector2D:
    """
    Immutable 2D point / direction

    Every operation returns a new Vector2D; instances are never modified
    after construction.
    """

    __slots__ = ("_values",)

    def __init__(self, x=0.0, y=0.0):
        values = np.array([float(x), float(y)])
        if not np.all(np.isfinite(values)):
            raise ValueError("Vector2D requires finite coordinates")
        values.setflags(write=False)
        object.__setattr__(self, "_values", values)

    def __setattr__(self, name, value):
        raise AttributeError("Vector2D is immutable")

    @classmethod
    def create(cls, x=0.0, y=0.0):
        """Create a new vector"""
        return cls(x, y)

    @classmethod
    def from_array(cls, arr):
        """Create a vector from any array-like of shape (2,)"""
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (2,):
            raise ValueError("Vector2D requires exactly 2 values")
        return cls(arr[0], arr[1])

    @property
    def x(self):
        return float(self._values[0])

    @property
    def y(self):
        return float(self._values[1])

    def to_array(self):
        """Get the vector as a NumPy array (copy)"""
        return self._values.copy()

    def add(self, other):
        return Vector2D.from_array(self._values + other._values)

    def subtract(self, other):
        return Vector2D.from_array(self._values - other._values)

    def scale(self, scalar):
        return Vector2D.from_array(self._values * scalar)

    def dot(self, other):
        return float(np.dot(self._values, other._values))

    def cross(self, other):
        """z-component of the 3D cross product"""
        return self.x * other.y - self.y * other.x

    def length(self):
        return float(math.hypot(self.x, self.y))

    def normalize(self):
        """
        Unit vector in the same direction

        A zero-length vector normalizes to the zero vector instead of
        raising.
        """
        length = self.length()
        if length == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D.from_array(self._values / length)

    def angle(self, other):
        """
        Unsigned angle to ``other`` in radians, always within [0, pi]

        The cosine is clamped to [-1, 1] so rounding overshoot cannot
        produce NaN. Returns 0 when either vector has zero length.
        """
        denominator = self.length() * other.length()
        if denominator == 0:
            return 0.0
        cosine = max(-1.0, min(1.0, self.dot(other) / denominator))
        return math.acos(cosine)

    def rotate(self, angle):
        """Rotate counterclockwise by ``angle`` radians"""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2D(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def perpendicular(self):
        return Vector2D(-self.y, self.x)

    def distance_to(self, other):
        return self.subtract(other).length()

    def lerp(self, other, t):
        """Linear interpolation, t=0 gives self and t=1 gives other"""
        return Vector2D.from_array(self._values + (other._values - self._values) * t)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return self.scale(-1.0)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"
