"""
VectorGeometry

A 2D vector-graphics geometry kernel: immutable affine-transform algebra,
shape bounds under transform with configurable scale pivots, and boolean
operations (union, intersection, subtraction) on flattened paths.

This package combines:
- Immutable ``Vector2D`` and ``Matrix3x3`` values backed by NumPy
- Shapes (rectangle, circle, line, path, text, hexagon) whose bounds,
  hit tests and flattened outlines follow their current transform
- A polygon boolean engine built on segment intersection, winding
  analysis and ray-casting containment

# Quick Start
```python
from vectorgeometry import Matrix3x3, Rectangle, Circle, combine_shapes

rect = Rectangle(0, 0, 100, 50, scale_origin="center")
bigger = rect.apply_transform(Matrix3x3.scale(2, 2))
bigger.bounds  # Bounds(x=-50.0, y=-25.0, width=200.0, height=100.0)

circle = Circle(100, 25, 40)
merged = combine_shapes(rect, circle, "union")
merged.contains_point((130, 25))  # True
```

# Features
- Pure, synchronous and side-effect free; values are never mutated
- Tunable tolerances through ``VectorGeometryCore.configure``
- Optional matplotlib patches via ``Shape.to_mpl_patch``
"""

import logging

from .core import VectorGeometryCore, setup_logging
from .errors import (
    ConfigurationError,
    DegenerateGeometry,
    GeometryError,
    InvalidDimension,
    NotInvertible,
    UnknownShapeType,
)
from .vectors import Vector2D
from .transforms import Matrix3x3, to_homogeneous, to_euclidean, apply_transform
from .primitives import (
    BooleanOperation,
    BoundaryPolicy,
    Bounds,
    PathIntersectionPoint,
    PathKind,
    PathPoint,
    PathSegment,
    WindingDirection,
)
from .shapes import Shape, ScaleOrigin, scale_origin_point, transform_around_point
from .decompose import decompose, decompose_circle, flatten_path
from .booleans import (
    combine_shapes,
    find_path_intersections,
    find_segment_intersection,
    get_path_winding_direction,
    is_point_in_path,
    path_to_segments,
    perform_path_boolean_operation,
)
from .circles import Circle
from .rectangles import Rectangle
from .lines import Line
from .paths import Path
from .text import Text
from .polygons import Hexagon
from .registry import create_shape, has_shape, register_shape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "VectorGeometryCore",
    "setup_logging",
    "GeometryError",
    "InvalidDimension",
    "NotInvertible",
    "DegenerateGeometry",
    "ConfigurationError",
    "UnknownShapeType",
    "Vector2D",
    "Matrix3x3",
    "to_homogeneous",
    "to_euclidean",
    "apply_transform",
    "BooleanOperation",
    "BoundaryPolicy",
    "Bounds",
    "PathIntersectionPoint",
    "PathKind",
    "PathPoint",
    "PathSegment",
    "WindingDirection",
    "Shape",
    "ScaleOrigin",
    "scale_origin_point",
    "transform_around_point",
    "decompose",
    "decompose_circle",
    "flatten_path",
    "combine_shapes",
    "find_path_intersections",
    "find_segment_intersection",
    "get_path_winding_direction",
    "is_point_in_path",
    "path_to_segments",
    "perform_path_boolean_operation",
    "Circle",
    "Rectangle",
    "Line",
    "Path",
    "Text",
    "Hexagon",
    "create_shape",
    "has_shape",
    "register_shape",
]
