"""
Text shape with approximate metrics

Glyph metrics are not available to the kernel, so the text box is
estimated as ``font_size * len(text) * text_width_factor`` wide and
``font_size`` tall, then offset by alignment and baseline.
"""

from .core import resolve
from .primitives import Bounds
from .shapes import Shape, closed_path

TEXT_ALIGNS = ("left", "center", "right")
TEXT_BASELINES = ("top", "middle", "bottom")


class Text(Shape):
    kind = "text"

    def __init__(self, x=0.0, y=0.0, text="", font="sans-serif", font_size=16.0,
                 text_align="left", text_baseline="top", **options):
        super().__init__(**options)
        if text_align not in TEXT_ALIGNS:
            raise ValueError(f"text_align must be one of {TEXT_ALIGNS}")
        if text_baseline not in TEXT_BASELINES:
            raise ValueError(f"text_baseline must be one of {TEXT_BASELINES}")
        self._x = float(x)
        self._y = float(y)
        self._text = str(text)
        self._font = font
        self._font_size = float(font_size)
        self._text_align = text_align
        self._text_baseline = text_baseline

    @property
    def text(self):
        return self._text

    @property
    def font(self):
        return self._font

    @property
    def font_size(self):
        return self._font_size

    @property
    def text_align(self):
        return self._text_align

    @property
    def text_baseline(self):
        return self._text_baseline

    def geometry(self):
        return {
            "x": self._x,
            "y": self._y,
            "text": self._text,
            "font": self._font,
            "font_size": self._font_size,
            "text_align": self._text_align,
            "text_baseline": self._text_baseline,
        }

    def measure(self):
        """Approximate (width, height) of the rendered text"""
        width = self._font_size * len(self._text) * resolve("text_width_factor")
        return width, self._font_size

    def local_bounds(self):
        width, height = self.measure()
        x = self._x
        if self._text_align == "center":
            x -= width / 2
        elif self._text_align == "right":
            x -= width

        y = self._y
        if self._text_baseline == "middle":
            y -= height / 2
        elif self._text_baseline == "bottom":
            y -= height
        return Bounds(x, y, width, height)

    def _contains_local(self, x, y):
        return self.local_bounds().contains((x, y))

    def to_path(self):
        """Text box outline; glyph outlines are not available"""
        return closed_path(self.transform.transform_points(self.local_outline()))
