"""
Rectangle shape
"""

from .primitives import Bounds
from .shapes import Shape, closed_path


class Rectangle(Shape):
    """Axis-aligned rectangle in local coordinates"""

    kind = "rectangle"

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0, **options):
        super().__init__(**options)
        self._x = float(x)
        self._y = float(y)
        self._width = float(width)
        self._height = float(height)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def geometry(self):
        return {"x": self._x, "y": self._y, "width": self._width, "height": self._height}

    def local_bounds(self):
        return Bounds(self._x, self._y, self._width, self._height)

    def _contains_local(self, x, y):
        return self.local_bounds().contains((x, y))

    def to_path(self):
        """Four transformed corners plus the closing point"""
        return closed_path(self.transform.transform_points(self.local_outline()))
