"""
Circle shape
"""

import math

import numpy as np

from .core import resolve
from .decompose import decompose_circle
from .primitives import Bounds, PathKind, PathPoint
from .shapes import Shape, closed_path

# 4/3 * tan(pi/8): control-point distance for a quarter-circle cubic
KAPPA = 0.552284749831


class Circle(Shape):
    """Circle given by its center and radius in local coordinates"""

    kind = "circle"

    def __init__(self, center_x=0.0, center_y=0.0, radius=0.0, **options):
        """
        Create a Circle

        Parameters:
        -----------
        center_x, center_y : float
            Center point in local coordinates
        radius : float
            Circle radius; zero is allowed and gives zero-area bounds
        **options
            id, transform, style, scale_origin, custom_scale_origin
        """
        super().__init__(**options)
        self._center_x = float(center_x)
        self._center_y = float(center_y)
        self._radius = float(radius)
        if self._radius < 0:
            raise ValueError("Radius must be non-negative")

    @property
    def center(self):
        """Local center as NumPy array"""
        return np.array([self._center_x, self._center_y])

    @property
    def radius(self):
        return self._radius

    def geometry(self):
        return {
            "center_x": self._center_x,
            "center_y": self._center_y,
            "radius": self._radius,
        }

    def local_bounds(self):
        r = self._radius
        return Bounds(self._center_x - r, self._center_y - r, 2 * r, 2 * r)

    def transformed_center(self):
        return self.transform.transform_point((self._center_x, self._center_y))

    def transformed_radius(self):
        """Radius scaled by the larger transform scale factor"""
        return max(self.transform.get_scale()) * self._radius

    @property
    def bounds(self):
        center = self.transformed_center()
        r = self.transformed_radius()
        return Bounds(center.x - r, center.y - r, 2 * r, 2 * r)

    def _contains_local(self, x, y):
        return math.hypot(x - self._center_x, y - self._center_y) <= self._radius

    def intersects(self, other):
        """Exact test against another circle when both scale uniformly"""
        if isinstance(other, Circle) and self._is_uniform() and other._is_uniform():
            distance = self.transformed_center().distance_to(other.transformed_center())
            return distance <= self.transformed_radius() + other.transformed_radius()
        return super().intersects(other)

    def _is_uniform(self):
        sx, sy = self.transform.get_scale()
        return abs(sx - sy) <= resolve("scale_epsilon")

    def to_path(self, segments=None, use_bezier=False):
        """
        Flatten the circle

        Parameters:
        -----------
        segments : int, optional
            Number of straight chords (default: ``circle_segments`` setting)
        use_bezier : bool
            Emit four cubic quarter arcs instead of chords

        Returns:
        --------
        list of PathPoint
            Closed path in current coordinates, starting at angle 0
        """
        if use_bezier:
            return self._bezier_path()
        segments = int(resolve("circle_segments", segments))
        local = decompose_circle(self.center, self._radius, segments)
        return closed_path(self.transform.transform_points(local))

    def _bezier_path(self):
        cx, cy, r = self._center_x, self._center_y, self._radius
        c = r * KAPPA

        def project(x, y):
            p = self.transform.transform_point((x, y))
            return (p.x, p.y)

        def cubic(end, control1, control2):
            x, y = project(*end)
            return PathPoint(
                x, y, PathKind.CUBIC,
                control1=project(*control1),
                control2=project(*control2),
            )

        start = project(cx + r, cy)
        return [
            PathPoint(start[0], start[1], PathKind.MOVE),
            cubic((cx, cy + r), (cx + r, cy + c), (cx + c, cy + r)),
            cubic((cx - r, cy), (cx - c, cy + r), (cx - r, cy + c)),
            cubic((cx, cy - r), (cx - r, cy - c), (cx - c, cy - r)),
            cubic((cx + r, cy), (cx + c, cy - r), (cx + r, cy - c)),
        ]
