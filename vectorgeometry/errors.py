"""
Exception types raised by the geometry kernel
"""


class GeometryError(ValueError):
    """Base class for all vectorgeometry errors"""


class InvalidDimension(GeometryError):
    """Matrix constructed from a value list whose length is not 9"""


class NotInvertible(GeometryError):
    """Matrix determinant is too close to zero to invert"""


class DegenerateGeometry(GeometryError):
    """Zero-length segment handed to the intersection solver"""


class ConfigurationError(GeometryError):
    """Unknown setting name"""


class UnknownShapeType(GeometryError):
    """Shape kind has no registered factory"""
