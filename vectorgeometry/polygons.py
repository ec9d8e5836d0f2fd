"""
Regular hexagon shape
"""

import math

import numpy as np

from .booleans import point_in_rings
from .primitives import Bounds
from .shapes import Shape, closed_path


class Hexagon(Shape):
    """Regular hexagon inscribed in a circle of ``radius``"""

    kind = "hexagon"
    sides = 6

    def __init__(self, center_x=0.0, center_y=0.0, radius=0.0, rotation=0.0, **options):
        super().__init__(**options)
        self._center_x = float(center_x)
        self._center_y = float(center_y)
        self._radius = float(radius)
        self._rotation = float(rotation)
        if self._radius < 0:
            raise ValueError("Radius must be non-negative")

    @property
    def radius(self):
        return self._radius

    @property
    def rotation(self):
        return self._rotation

    def geometry(self):
        return {
            "center_x": self._center_x,
            "center_y": self._center_y,
            "radius": self._radius,
            "rotation": self._rotation,
        }

    def vertices(self):
        """Local vertices, first one at angle ``rotation``"""
        angles = self._rotation + 2 * math.pi * np.arange(self.sides) / self.sides
        return np.column_stack([
            self._center_x + self._radius * np.cos(angles),
            self._center_y + self._radius * np.sin(angles),
        ])

    def local_outline(self):
        return self.vertices()

    def local_bounds(self):
        return Bounds.from_points(self.vertices())

    def _contains_local(self, x, y):
        return point_in_rings((x, y), [self.vertices().tolist()])

    def to_path(self):
        return closed_path(self.transform.transform_points(self.vertices()))
