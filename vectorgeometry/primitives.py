"""
Value types shared by shapes and the path boolean engine
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

Point = Tuple[float, float]


class PathKind(str, Enum):
    """How a path point connects to the previous one"""

    MOVE = "move"
    LINE = "line"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


class BooleanOperation(str, Enum):
    UNION = "union"
    INTERSECT = "intersect"
    SUBTRACT = "subtract"
    XOR = "xor"


class WindingDirection(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


class BoundaryPolicy(str, Enum):
    """
    What the boolean engine does with edges shared by both operands

    INCLUDE keeps a shared edge once (from the first path) whenever the
    operation needs it as output boundary; EXCLUDE drops every shared edge.
    """

    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class PathPoint:
    """
    A path vertex

    ``control1`` is the quadratic control point, or the first cubic
    control point; ``control2`` is the second cubic control point.
    """

    x: float
    y: float
    kind: PathKind = PathKind.LINE
    control1: Optional[Point] = None
    control2: Optional[Point] = None

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "kind", PathKind(self.kind))
        for name in ("control1", "control2"):
            control = getattr(self, name)
            if control is not None:
                object.__setattr__(self, name, (float(control[0]), float(control[1])))

    @property
    def is_move(self):
        return self.kind == PathKind.MOVE

    @property
    def xy(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class PathSegment:
    start: PathPoint
    end: PathPoint

    @property
    def length(self):
        return ((self.end.x - self.start.x) ** 2 + (self.end.y - self.start.y) ** 2) ** 0.5


@dataclass(frozen=True)
class PathIntersectionPoint:
    """Crossing of two segments; t1/t2 are parametric positions in [0, 1]"""

    x: float
    y: float
    t1: float
    t2: float
    segment_index1: int = field(default=0, compare=False)
    segment_index2: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box"""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, points):
        """Smallest box holding every (x, y) in ``points``; empty input gives a zero box"""
        points = list(points)
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)
        xs = [float(p[0]) for p in points]
        ys = [float(p[1]) for p in points]
        min_x, min_y = min(xs), min(ys)
        return cls(min_x, min_y, max(xs) - min_x, max(ys) - min_y)

    @property
    def min_x(self):
        return self.x

    @property
    def min_y(self):
        return self.y

    @property
    def max_x(self):
        return self.x + self.width

    @property
    def max_y(self):
        return self.y + self.height

    @property
    def center(self):
        return (self.x + self.width / 2, self.y + self.height / 2)

    def corners(self):
        """Corners clockwise on screen (y down) starting at the top-left"""
        return [
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        ]

    def overlaps(self, other):
        """Touching edges count as overlap"""
        return not (
            other.x > self.max_x
            or other.max_x < self.x
            or other.y > self.max_y
            or other.max_y < self.y
        )

    def contains(self, point):
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def union(self, other):
        return Bounds.from_points(self.corners() + other.corners())

    def almost_equal(self, other, tolerance=1e-6):
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) <= tolerance
            and abs(self.width - other.width) <= tolerance
            and abs(self.height - other.height) <= tolerance
        )
