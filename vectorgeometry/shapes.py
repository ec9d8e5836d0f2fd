"""
Shape abstraction shared by every concrete shape kind

A shape owns its local geometry plus a current ``transform``. Bounds are
never stored: they are recomputed from the local outline and the
transform on every access. Shapes are immutable by convention;
``apply_transform`` returns a new instance with the same id and
``clone`` a new instance with a fresh id.

# Scale pivots
When a transform that carries scale is applied, the shape keeps its
scale origin fixed instead of scaling about local (0, 0):

    new_transform = T(p) * M * T(-p) * transform

where ``p`` is the pivot chosen by `scale_origin_point` (in local
coordinates) projected through the current transform.
"""

import copy
import logging
import uuid
from enum import Enum

import numpy as np

from .primitives import Bounds, PathKind, PathPoint
from .transforms import Matrix3x3

logger = logging.getLogger(__name__)


class ScaleOrigin(str, Enum):
    TOP_LEFT = "topLeft"
    CENTER = "center"
    CUSTOM = "custom"


def scale_origin_point(origin, local_bounds, custom=None):
    """
    Pick the scale pivot for a shape

    Parameters:
    -----------
    origin : ScaleOrigin or str
        Pivot policy
    local_bounds : Bounds
        Untransformed bounds of the shape
    custom : (x, y), optional
        Pivot used with ``ScaleOrigin.CUSTOM``; the top-left corner is
        used when it is missing

    Returns:
    --------
    (x, y) : tuple of float
        Pivot in local coordinates
    """
    origin = ScaleOrigin(origin)
    if origin == ScaleOrigin.CENTER:
        return local_bounds.center
    if origin == ScaleOrigin.CUSTOM and custom is not None:
        return (float(custom[0]), float(custom[1]))
    return (local_bounds.x, local_bounds.y)


def transform_around_point(matrix, pivot, transform=None):
    """Compose ``T(pivot) * matrix * T(-pivot) * transform``"""
    px, py = pivot
    result = (
        Matrix3x3.translation(px, py)
        .multiply(matrix)
        .multiply(Matrix3x3.translation(-px, -py))
    )
    if transform is not None:
        result = result.multiply(transform)
    return result


def closed_path(points):
    """Turn an (N, 2) outline into move + lines + closing line"""
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(points) == 0:
        return []
    path = [PathPoint(points[0, 0], points[0, 1], PathKind.MOVE)]
    path.extend(PathPoint(x, y, PathKind.LINE) for x, y in points[1:])
    path.append(PathPoint(points[0, 0], points[0, 1], PathKind.LINE))
    return path


class Shape:
    """Base class for all shapes"""

    kind = None

    def __init__(self, id=None, transform=None, style=None,
                 scale_origin=ScaleOrigin.TOP_LEFT, custom_scale_origin=None):
        self._id = id or str(uuid.uuid4())
        self._transform = transform if transform is not None else Matrix3x3()
        self._style = dict(style or {})
        self._scale_origin = ScaleOrigin(scale_origin)
        self._custom_scale_origin = (
            None if custom_scale_origin is None
            else (float(custom_scale_origin[0]), float(custom_scale_origin[1]))
        )

    @property
    def id(self):
        return self._id

    @property
    def transform(self):
        return self._transform

    @property
    def style(self):
        """Style attributes (copy)"""
        return dict(self._style)

    @property
    def scale_origin(self):
        return self._scale_origin

    @property
    def custom_scale_origin(self):
        return self._custom_scale_origin

    def geometry(self):
        """Keyword arguments that rebuild this shape's local geometry"""
        raise NotImplementedError

    def local_bounds(self):
        """Axis-aligned box in untransformed coordinates"""
        raise NotImplementedError

    def local_outline(self):
        """Points whose transformed images bound the shape, shape (N, 2)"""
        return np.array(self.local_bounds().corners())

    def _contains_local(self, x, y):
        raise NotImplementedError

    def to_path(self):
        """Flatten to a list of PathPoint in current coordinates"""
        raise NotImplementedError

    @property
    def bounds(self):
        """Axis-aligned bounds after ``transform``"""
        return Bounds.from_points(self._transform.transform_points(self.local_outline()))

    def _replace(self, **changes):
        options = dict(
            self.geometry(),
            id=self._id,
            transform=self._transform,
            style=copy.deepcopy(self._style),
            scale_origin=self._scale_origin,
            custom_scale_origin=self._custom_scale_origin,
        )
        options.update(changes)
        return type(self)(**options)

    def scale_origin_point(self):
        """Current scale pivot in local coordinates"""
        return scale_origin_point(
            self._scale_origin, self.local_bounds(), self._custom_scale_origin
        )

    def apply_transform(self, matrix):
        """
        Return this shape with ``matrix`` applied after its transform

        Scaling matrices are applied about the scale origin so that point
        stays fixed; other matrices are composed as ``matrix * transform``.
        """
        if matrix.has_scale():
            pivot = self._transform.transform_point(self.scale_origin_point())
            logger.debug(
                "Scaling %s %s about %s pivot (%g, %g)",
                self.kind, self._id, self._scale_origin.value, pivot.x, pivot.y,
            )
            new_transform = transform_around_point(matrix, pivot, self._transform)
        else:
            new_transform = matrix.multiply(self._transform)
        return self._replace(transform=new_transform)

    def with_scale_origin(self, origin, point=None):
        """Return this shape with a different scale origin policy"""
        origin = ScaleOrigin(origin)
        if origin != ScaleOrigin.CUSTOM:
            point = None
        return self._replace(scale_origin=origin, custom_scale_origin=point)

    def clone(self):
        """Independent copy with a new id"""
        return self._replace(id=str(uuid.uuid4()))

    def to_local(self, point):
        """Map a point in current coordinates into local coordinates"""
        return self._transform.inverse().transform_point(point)

    def contains_point(self, point):
        local = self.to_local(point)
        return bool(self._contains_local(local.x, local.y))

    def intersects(self, other):
        """Bounding-box overlap test"""
        return self.bounds.overlaps(other.bounds)

    def to_mpl_patch(self, **kwargs):
        """
        Convert to a matplotlib PathPatch for quick plotting

        Parameters:
        -----------
        **kwargs
            Passed to matplotlib.patches.PathPatch (facecolor, edgecolor, ...)
        """
        try:
            from matplotlib.path import Path as MPLPath
            from matplotlib.patches import PathPatch
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_patch(). Install with: pip install matplotlib")

        from .decompose import flatten_path

        vertices = []
        codes = []
        for point in flatten_path(self.to_path()):
            vertices.append((point.x, point.y))
            codes.append(MPLPath.MOVETO if point.is_move or not codes else MPLPath.LINETO)
        if not vertices:
            vertices, codes = [(0.0, 0.0)], [MPLPath.MOVETO]
        return PathPatch(MPLPath(vertices, codes), **kwargs)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.geometry().items())
        return f"{type(self).__name__}({fields}, id={self._id!r})"
