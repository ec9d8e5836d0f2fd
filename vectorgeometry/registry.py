"""
Shape factories keyed by shape kind

Lets callers that only know a kind string (e.g. a scene loader) build
shapes:

    >>> create_shape("rectangle", x=0, y=0, width=10, height=5).bounds
    Bounds(x=0.0, y=0.0, width=10.0, height=5.0)
"""

from .circles import Circle
from .errors import UnknownShapeType
from .lines import Line
from .paths import Path
from .polygons import Hexagon
from .rectangles import Rectangle
from .text import Text

_FACTORIES = {}


def register_shape(kind, factory):
    """
    Register a factory for ``kind``

    Parameters:
    -----------
    kind : str
        Shape kind identifier
    factory : callable
        Called with the creation options, returns a Shape

    Raises:
    -------
    ValueError
        If ``kind`` is already registered
    """
    if kind in _FACTORIES:
        raise ValueError(f"Shape type '{kind}' is already registered")
    _FACTORIES[kind] = factory


def unregister_shape(kind):
    _FACTORIES.pop(kind, None)


def has_shape(kind):
    return kind in _FACTORIES


def create_shape(kind, **options):
    """Build a shape of ``kind``; raises UnknownShapeType for unknown kinds"""
    try:
        factory = _FACTORIES[kind]
    except KeyError:
        raise UnknownShapeType(f"Unknown shape type: {kind}")
    return factory(**options)


for _shape_class in (Rectangle, Circle, Line, Path, Text, Hexagon):
    register_shape(_shape_class.kind, _shape_class)
