"""
Path shape: an ordered list of PathPoint with any number of subpaths
"""

import numpy as np

from .booleans import is_point_in_path, path_to_segments
from .core import resolve
from .decompose import flatten_path
from .lines import distance_to_segment
from .primitives import Bounds, PathKind, PathPoint
from .shapes import Shape


def as_path_point(point):
    """Accept PathPoint, (x, y), (x, y, kind) or a dict with x/y/kind"""
    if isinstance(point, PathPoint):
        return point
    if isinstance(point, dict):
        return PathPoint(
            point["x"], point["y"],
            point.get("kind", point.get("type", PathKind.LINE)),
            control1=point.get("control1"),
            control2=point.get("control2"),
        )
    if len(point) == 3:
        return PathPoint(point[0], point[1], point[2])
    return PathPoint(point[0], point[1])


class Path(Shape):
    """
    Polyline / polygon shape

    Containment uses the even-odd fill of every subpath (each implicitly
    closed) and also accepts points within ``hit_tolerance`` of the
    stroke.
    """

    kind = "path"

    def __init__(self, points=None, closed=False, hit_tolerance=None, **options):
        super().__init__(**options)
        self._points = tuple(as_path_point(p) for p in (points or ()))
        self._hit_tolerance = hit_tolerance
        if closed and not self.is_closed and len(self._points) >= 2:
            first = self._points[0]
            self._points += (PathPoint(first.x, first.y, PathKind.LINE),)

    @property
    def points(self):
        return list(self._points)

    @property
    def is_closed(self):
        """First and last points coincide (needs at least 3 points)"""
        if len(self._points) < 3:
            return False
        first, last = self._points[0], self._points[-1]
        return first.x == last.x and first.y == last.y

    def geometry(self):
        return {"points": list(self._points), "hit_tolerance": self._hit_tolerance}

    def close_path(self):
        """Return the path with a closing point back to the first point"""
        if self.is_closed or len(self._points) < 2:
            return self
        return self._replace(closed=True)

    def add_point(self, x, y, kind=PathKind.LINE):
        """Return the path with one more point"""
        return self._replace(points=self._points + (PathPoint(x, y, kind),))

    def local_outline(self):
        flat = flatten_path(self._points)
        if not flat:
            return np.empty((0, 2))
        return np.array([(p.x, p.y) for p in flat])

    def local_bounds(self):
        return Bounds.from_points(self.local_outline())

    def _contains_local(self, x, y):
        if is_point_in_path((x, y), self._points):
            return True
        tolerance = resolve("hit_tolerance", self._hit_tolerance)
        for segment in path_to_segments(self._points):
            distance = distance_to_segment(
                x, y, segment.start.x, segment.start.y, segment.end.x, segment.end.y
            )
            if distance is not None and distance <= tolerance:
                return True
        return False

    def to_path(self):
        """Points in current coordinates, control points included"""
        transform = self.transform

        def project(xy):
            if xy is None:
                return None
            p = transform.transform_point(xy)
            return (p.x, p.y)

        result = []
        for point in self._points:
            x, y = project(point.xy)
            result.append(PathPoint(
                x, y, point.kind,
                control1=project(point.control1),
                control2=project(point.control2),
            ))
        return result
