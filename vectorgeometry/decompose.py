"""
Flattening of curved and composite geometry into straight-line points

Every boolean operation and hit test works on polygons; this module turns
circles, Bézier segments and whole shapes into ordered point sequences.

# Resolution
Chord counts default to the ``circle_segments`` and ``curve_segments``
settings and can be overridden per call.
"""

import logging

import numpy as np

from .core import resolve
from .primitives import PathKind, PathPoint

logger = logging.getLogger(__name__)


def decompose_circle(center, radius, resolution=None):
    """
    Generate circle boundary points

    Parameters:
    -----------
    center : array-like, shape (2,)
        Circle center coordinates [x, y]
    radius : float
        Circle radius
    resolution : int, optional
        Number of points to generate (default: ``circle_segments`` setting)

    Returns:
    --------
    points : ndarray, shape (resolution, 2)
        Points on circle boundary as [x, y] coordinates

    Examples:
    ---------
    >>> points = decompose_circle([0, 0], 1.0, 8)
    >>> points.shape
    (8, 2)
    >>> np.allclose(np.linalg.norm(points, axis=1), 1.0)
    True

    Notes:
    ------
    - Points are generated counterclockwise (y up) starting from (radius, 0)
    """
    resolution = int(resolve("circle_segments", resolution))
    if resolution < 3:
        raise ValueError("Resolution must be at least 3")
    center = np.asarray(center, dtype=float)
    if center.shape != (2,):
        raise ValueError("Center must be 2D point")

    theta = np.linspace(0, 2 * np.pi, resolution, endpoint=False)
    x = center[0] + radius * np.cos(theta)
    y = center[1] + radius * np.sin(theta)
    return np.column_stack([x, y])


def flatten_cubic(p0, c1, c2, p3, segments=None):
    """
    Sample a cubic Bézier curve

    Returns:
    --------
    points : ndarray, shape (segments, 2)
        Points at t = 1/segments ... 1; the start point is excluded
    """
    segments = int(resolve("curve_segments", segments))
    p0, c1, c2, p3 = (np.asarray(p, dtype=float) for p in (p0, c1, c2, p3))
    t = np.linspace(0, 1, segments + 1)[1:, None]
    mt = 1 - t
    return mt ** 3 * p0 + 3 * mt ** 2 * t * c1 + 3 * mt * t ** 2 * c2 + t ** 3 * p3


def flatten_quadratic(p0, c, p2, segments=None):
    """
    Sample a quadratic Bézier curve

    Returns:
    --------
    points : ndarray, shape (segments, 2)
        Points at t = 1/segments ... 1; the start point is excluded
    """
    segments = int(resolve("curve_segments", segments))
    p0, c, p2 = (np.asarray(p, dtype=float) for p in (p0, c, p2))
    t = np.linspace(0, 1, segments + 1)[1:, None]
    mt = 1 - t
    return mt ** 2 * p0 + 2 * mt * t * c + t ** 2 * p2


def flatten_path(points, segments=None):
    """
    Resolve quadratic and cubic path points into line points

    Parameters:
    -----------
    points : sequence of PathPoint
    segments : int, optional
        Chords per curve (default: ``curve_segments`` setting)

    Returns:
    --------
    list of PathPoint
        Only MOVE and LINE points
    """
    result = []
    previous = None
    for point in points:
        if point.kind in (PathKind.MOVE, PathKind.LINE) or previous is None:
            kind = PathKind.MOVE if point.is_move or previous is None else PathKind.LINE
            result.append(PathPoint(point.x, point.y, kind))
        elif point.kind == PathKind.CUBIC:
            c1 = point.control1 or previous
            c2 = point.control2 or point.xy
            for x, y in flatten_cubic(previous, c1, c2, point.xy, segments):
                result.append(PathPoint(x, y, PathKind.LINE))
        else:
            c = point.control1 or previous
            for x, y in flatten_quadratic(previous, c, point.xy, segments):
                result.append(PathPoint(x, y, PathKind.LINE))
        previous = point.xy
    return result


def decompose(geometry, resolution=None):
    """
    Generic flattening for shapes and path point lists

    Parameters:
    -----------
    geometry : Shape, sequence of PathPoint, or dict
        A shape, a path, or a dict with ``center`` and ``radius``
    resolution : int, optional
        Chords per circle or curve

    Returns:
    --------
    ndarray, shape (N, 2)
        Flattened points in order (subpath breaks are not marked)
    """
    from .circles import Circle
    from .shapes import Shape

    if isinstance(geometry, Circle):
        points = geometry.to_path(segments=resolution)
    elif isinstance(geometry, Shape):
        points = geometry.to_path()
    elif isinstance(geometry, dict):
        if "radius" not in geometry:
            raise ValueError("Dictionary must contain 'center' and 'radius'")
        return decompose_circle(geometry["center"], geometry["radius"], resolution)
    else:
        points = list(geometry)

    flat = flatten_path(points, resolution)
    if not flat:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in flat])
