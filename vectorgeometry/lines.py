"""
Line segment shape
"""

import math

import numpy as np

from .core import resolve
from .primitives import Bounds, PathKind, PathPoint
from .shapes import Shape


def distance_to_segment(x, y, x1, y1, x2, y2):
    """
    Distance from (x, y) to the segment (x1, y1)-(x2, y2)

    Returns None when the perpendicular foot falls outside the segment.
    A zero-length segment reports the distance to its single point.
    """
    dx = x2 - x1
    dy = y2 - y1
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(x - x1, y - y1)
    t = ((x - x1) * dx + (y - y1) * dy) / length_sq
    if t < 0 or t > 1:
        return None
    return abs(dx * (y1 - y) - (x1 - x) * dy) / math.sqrt(length_sq)


class Line(Shape):
    """Straight segment between two local points"""

    kind = "line"

    def __init__(self, x1=0.0, y1=0.0, x2=0.0, y2=0.0, hit_tolerance=None, **options):
        super().__init__(**options)
        self._x1 = float(x1)
        self._y1 = float(y1)
        self._x2 = float(x2)
        self._y2 = float(y2)
        self._hit_tolerance = hit_tolerance

    @property
    def start(self):
        return np.array([self._x1, self._y1])

    @property
    def end(self):
        return np.array([self._x2, self._y2])

    def geometry(self):
        return {
            "x1": self._x1,
            "y1": self._y1,
            "x2": self._x2,
            "y2": self._y2,
            "hit_tolerance": self._hit_tolerance,
        }

    def local_bounds(self):
        return Bounds.from_points([(self._x1, self._y1), (self._x2, self._y2)])

    def local_outline(self):
        return np.array([[self._x1, self._y1], [self._x2, self._y2]])

    def _contains_local(self, x, y):
        if self._x1 == self._x2 and self._y1 == self._y2:
            return x == self._x1 and y == self._y1
        distance = distance_to_segment(x, y, self._x1, self._y1, self._x2, self._y2)
        return distance is not None and distance <= resolve("hit_tolerance", self._hit_tolerance)

    def to_path(self):
        (ax, ay), (bx, by) = self.transform.transform_points(self.local_outline())
        return [PathPoint(ax, ay, PathKind.MOVE), PathPoint(bx, by, PathKind.LINE)]
