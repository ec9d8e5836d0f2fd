"""
Affine transforms for 2D geometry

This module provides the immutable ``Matrix3x3`` used for every shape
transform, together with homogeneous-coordinate helpers that operate on
NumPy point arrays.

# Convention
Matrices act on column vectors ``(x, y, 1)ᵀ`` and are stored row-major as
``[a, b, c, d, e, f, g, h, i]``::

    | a b c |   | x |
    | d e f | * | y |
    | g h i |   | 1 |

so ``A.multiply(B)`` applies ``B`` first and then ``A``. Translation
lives in ``c`` and ``f``. Composing in the other order silently produces
wrong rotations and pivots.

# Key Functions
- `to_homogeneous()`: Convert Euclidean to homogeneous coordinates
- `to_euclidean()`: Convert homogeneous to Euclidean coordinates
- `apply_transform()`: Apply transformation matrices to points
"""

import math

import numpy as np

from .core import resolve
from .errors import InvalidDimension, NotInvertible
from .vectors import Vector2D


class Matrix3x3:
    """Immutable 3x3 matrix representing a 2D affine transform"""

    __slots__ = ("_m",)

    def __init__(self, values=None):
        """
        Create a matrix

        Parameters:
        -----------
        values : sequence of 9 numbers, optional
            Row-major values. Identity when omitted.

        Raises:
        -------
        InvalidDimension
            If ``values`` does not hold exactly 9 numbers
        """
        if values is None:
            m = np.identity(3)
        else:
            flat = np.asarray(values, dtype=float).ravel()
            if flat.size != 9:
                raise InvalidDimension(
                    f"Matrix3x3 requires exactly 9 values, got {flat.size}"
                )
            m = flat.reshape(3, 3).copy()
        m.setflags(write=False)
        object.__setattr__(self, "_m", m)

    def __setattr__(self, name, value):
        raise AttributeError("Matrix3x3 is immutable")

    @classmethod
    def create(cls, values=None):
        """Create a matrix, identity when ``values`` is omitted"""
        return cls(values)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translation(cls, tx, ty):
        return cls([1, 0, tx, 0, 1, ty, 0, 0, 1])

    @classmethod
    def rotation(cls, angle):
        """Counterclockwise rotation by ``angle`` radians"""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls([c, -s, 0, s, c, 0, 0, 0, 1])

    @classmethod
    def scale(cls, sx, sy):
        return cls([sx, 0, 0, 0, sy, 0, 0, 0, 1])

    @property
    def values(self):
        """Row-major values as a new list"""
        return self._m.ravel().tolist()

    def to_array(self):
        """Get the matrix as a (3, 3) NumPy array (copy)"""
        return self._m.copy()

    def multiply(self, other):
        """
        Matrix product ``self * other``

        Applied to a point, the result transforms by ``other`` first and
        then by ``self``.
        """
        return Matrix3x3(np.dot(self._m, other._m))

    def __matmul__(self, other):
        return self.multiply(other)

    def determinant(self):
        (a, b, c), (d, e, f), (g, h, i) = self._m.tolist()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def inverse(self, epsilon=None):
        """
        Inverse via adjugate / determinant

        Raises:
        -------
        NotInvertible
            If |determinant| is below ``epsilon`` (default: the
            ``determinant_epsilon`` setting)
        """
        epsilon = resolve("determinant_epsilon", epsilon)
        det = self.determinant()
        if abs(det) < epsilon:
            raise NotInvertible(f"Matrix is not invertible (determinant={det:g})")

        (a, b, c), (d, e, f), (g, h, i) = self._m.tolist()
        adjugate = [
            e * i - f * h, c * h - b * i, b * f - c * e,
            f * g - d * i, a * i - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        ]
        return Matrix3x3([v / det for v in adjugate])

    def transform_point(self, point):
        """Transform a single point, returns Vector2D"""
        x, y = point
        m = self._m
        w = m[2, 0] * x + m[2, 1] * y + m[2, 2]
        px = m[0, 0] * x + m[0, 1] * y + m[0, 2]
        py = m[1, 0] * x + m[1, 1] * y + m[1, 2]
        if w != 1.0:
            px /= w
            py /= w
        return Vector2D(px, py)

    def transform_points(self, points):
        """Transform an (N, 2) array of points, returns (N, 2) ndarray"""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        return to_euclidean(apply_transform(self._m, to_homogeneous(points)))

    def get_scale(self):
        """Scale factors (sx, sy) as magnitudes of the first two columns"""
        return transform_scale(self)

    def has_scale(self, epsilon=None):
        """True when either column magnitude differs from 1"""
        epsilon = resolve("scale_epsilon", epsilon)
        sx, sy = self.get_scale()
        return abs(sx - 1.0) > epsilon or abs(sy - 1.0) > epsilon

    def is_identity(self):
        return bool(np.array_equal(self._m, np.identity(3)))

    def almost_equal(self, other, tolerance=1e-5):
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=tolerance))

    def __eq__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self):
        return hash(tuple(self.values))

    def __repr__(self):
        return f"Matrix3x3({self.values})"


def transform_scale(matrix):
    """
    Scale factors carried by ``matrix``

    Returns:
    --------
    (scale_x, scale_y) : tuple of float
        Euclidean lengths of the first and second column of the linear
        part, i.e. the images of the unit x and y axes
    """
    m = matrix._m
    return (
        float(math.hypot(m[0, 0], m[1, 0])),
        float(math.hypot(m[0, 1], m[1, 1])),
    )


def to_homogeneous(points):
    """
    Convert Euclidean coordinates to homogeneous coordinates

    Appends a coordinate of 1 to each point.

    Parameters:
    -----------
    points : array-like
        - 1D array of shape (N,) -> homogeneous (N+1,)
        - 2D array of shape (M, N) -> homogeneous (M, N+1)

    Examples:
    ---------
    >>> to_homogeneous(np.array([1.0, 2.0]))
    array([1., 2., 1.])
    >>> to_homogeneous(np.array([[1, 2], [3, 4]])).shape
    (2, 3)
    """
    points = np.asarray(points, dtype=float)

    if points.ndim == 1:
        return np.append(points, 1.0)
    elif points.ndim == 2:
        return np.hstack([points, np.ones((points.shape[0], 1))])
    else:
        raise ValueError("Points must be 1D or 2D array")


def to_euclidean(points):
    """
    Convert homogeneous coordinates to Euclidean coordinates

    Performs perspective division by the last coordinate and removes it.

    Raises:
    -------
    ValueError
        If a homogeneous coordinate (last element) is zero

    Examples:
    ---------
    >>> to_euclidean(np.array([2.0, 4.0, 2.0]))
    array([1., 2.])
    """
    points = np.asarray(points, dtype=float)

    if points.ndim == 1:
        if points[-1] == 0:
            raise ValueError("Cannot convert point at infinity (w = 0)")
        return points[:-1] / points[-1]
    elif points.ndim == 2:
        w = points[:, -1:]
        if np.any(w == 0):
            raise ValueError("Cannot convert point at infinity (w = 0)")
        return points[:, :-1] / w
    else:
        raise ValueError("Points must be 1D or 2D array")


def apply_transform(transform_matrix, points):
    """
    Apply homogeneous transformation to points

    Parameters:
    -----------
    transform_matrix : Matrix3x3 or array-like, shape (3, 3)
        Homogeneous transformation matrix
    points : array-like
        Points to transform (homogeneous coordinates)

    Returns:
    --------
    ndarray
        Transformed points
    """
    if isinstance(transform_matrix, Matrix3x3):
        transform_matrix = transform_matrix._m
    transform_matrix = np.asarray(transform_matrix, dtype=float)
    points = np.asarray(points, dtype=float)

    if transform_matrix.shape != (3, 3):
        raise ValueError("Transform matrix must be 3x3")

    if points.ndim == 1:
        if points.shape[0] != 3:
            raise ValueError("Points must be in homogeneous coordinates (3D)")
        return transform_matrix @ points

    elif points.ndim == 2:
        if points.shape[1] != 3:
            raise ValueError("Points must be in homogeneous coordinates (3D)")
        return (transform_matrix @ points.T).T

    else:
        raise ValueError("Points must be 1D or 2D array")
