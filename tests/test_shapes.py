#!/usr/bin/env python3
"""
Tests for shapes: bounds under transform, scale pivots, hit testing
"""

import math
import sys
import numpy as np
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vectorgeometry import (
    Bounds,
    Circle,
    Hexagon,
    Line,
    Matrix3x3,
    NotInvertible,
    Path as GeometryPath,
    PathKind,
    PathPoint,
    Rectangle,
    ScaleOrigin,
    Text,
    UnknownShapeType,
    create_shape,
    has_shape,
    register_shape,
    scale_origin_point,
    transform_around_point,
)
from vectorgeometry.registry import unregister_shape


def test_scale_about_center():
    """Scaling about the center keeps the center fixed"""
    rect = Rectangle(0, 0, 100, 50, scale_origin="center")
    scaled = rect.apply_transform(Matrix3x3.scale(2, 2))

    assert scaled.bounds == Bounds(-50, -25, 200, 100)
    assert scaled.bounds.center == rect.bounds.center
    print("✓ Center pivot test passed")


def test_scale_about_top_left():
    """The default pivot is the top-left corner of the local bounds"""
    rect = Rectangle(0, 0, 100, 50)
    scaled = rect.apply_transform(Matrix3x3.scale(2, 2))

    assert rect.scale_origin == ScaleOrigin.TOP_LEFT
    assert scaled.bounds == Bounds(0, 0, 200, 100)
    print("✓ Top-left pivot test passed")


def test_scale_about_custom_point():
    """A custom pivot is used as given"""
    rect = Rectangle(0, 0, 100, 50, scale_origin="custom", custom_scale_origin=(100, 50))
    scaled = rect.apply_transform(Matrix3x3.scale(2, 2))

    assert scaled.bounds == Bounds(-100, -50, 200, 100)

    # a custom policy without a point falls back to the top-left corner
    fallback = Rectangle(0, 0, 100, 50, scale_origin="custom")
    assert fallback.apply_transform(Matrix3x3.scale(2, 2)).bounds == Bounds(0, 0, 200, 100)
    print("✓ Custom pivot test passed")


def test_scale_pivot_follows_current_transform():
    """The pivot stays fixed in current coordinates for moved shapes"""
    rect = Rectangle(0, 0, 100, 50, transform=Matrix3x3.translation(10, 10), scale_origin="center")
    scaled = rect.apply_transform(Matrix3x3.scale(2, 2))

    assert rect.bounds == Bounds(10, 10, 100, 50)
    assert scaled.bounds.almost_equal(Bounds(-40, -15, 200, 100))
    print("✓ Pivot with transform test passed")


def test_scale_origin_point():
    """Test the pivot decision table"""
    local = Bounds(10, 20, 100, 50)

    assert scale_origin_point("topLeft", local) == (10, 20)
    assert scale_origin_point(ScaleOrigin.CENTER, local) == (60, 45)
    assert scale_origin_point("custom", local, (1, 2)) == (1.0, 2.0)
    assert scale_origin_point("custom", local) == (10, 20)
    with pytest.raises(ValueError):
        scale_origin_point("bottomRight", local)
    print("✓ Scale origin table test passed")


def test_apply_transform_without_scale():
    """Non-scaling matrices compose as matrix * transform"""
    rect = Rectangle(0, 0, 100, 50)
    moved = rect.apply_transform(Matrix3x3.translation(5, 5))
    rotated = rect.apply_transform(Matrix3x3.rotation(math.pi / 2))

    assert moved.id == rect.id
    assert moved.bounds == Bounds(5, 5, 100, 50)
    assert rect.bounds == Bounds(0, 0, 100, 50)
    assert rotated.bounds.almost_equal(Bounds(-50, 0, 50, 100))
    print("✓ Non-scaling transform test passed")


def test_transform_around_point():
    """T(p) * M * T(-p) keeps p fixed"""
    m = transform_around_point(Matrix3x3.rotation(0.4), (50, 50))

    assert np.allclose(m.transform_point((50, 50)).to_array(), [50, 50])
    print("✓ Transform around point test passed")


def test_clone_and_with_scale_origin():
    """Clones get a new id, other copies keep it"""
    rect = Rectangle(0, 0, 10, 10, style={"fill": "red"})
    clone = rect.clone()
    centered = rect.with_scale_origin("center")

    assert clone.id != rect.id
    assert clone.bounds == rect.bounds
    assert clone.style == {"fill": "red"}
    assert centered.id == rect.id
    assert centered.scale_origin == ScaleOrigin.CENTER
    assert rect.scale_origin == ScaleOrigin.TOP_LEFT

    style = rect.style
    style["fill"] = "blue"
    assert rect.style == {"fill": "red"}
    print("✓ Clone test passed")


def test_rectangle_contains_point():
    """Hit testing happens in local coordinates"""
    rect = Rectangle(0, 0, 100, 50, transform=Matrix3x3.translation(100, 100))

    assert rect.contains_point((150, 120))
    assert rect.contains_point((100, 100))
    assert not rect.contains_point((50, 50))

    collapsed = Rectangle(0, 0, 10, 10, transform=Matrix3x3.scale(0, 0))
    with pytest.raises(NotInvertible):
        collapsed.contains_point((0, 0))
    print("✓ Rectangle containment test passed")


def test_rectangle_to_path():
    """Closed path through the transformed corners"""
    path = Rectangle(0, 0, 10, 20, transform=Matrix3x3.translation(1, 1)).to_path()

    assert len(path) == 5
    assert path[0].kind == PathKind.MOVE
    assert all(p.kind == PathKind.LINE for p in path[1:])
    assert path[0].xy == path[-1].xy == (1, 1)
    assert path[2].xy == (11, 21)
    print("✓ Rectangle path test passed")


def test_bounds_overlap():
    """Default intersects() compares bounding boxes"""
    a = Rectangle(0, 0, 100, 100)

    assert a.intersects(Rectangle(50, 50, 100, 100))
    assert a.intersects(Rectangle(100, 0, 10, 10))
    assert not a.intersects(Rectangle(200, 200, 10, 10))
    print("✓ Bounds overlap test passed")


def test_circle_bounds():
    """Radius is scaled by the larger scale factor"""
    circle = Circle(0, 0, 10, transform=Matrix3x3.scale(2, 3))
    moved = Circle(5, 5, 10, transform=Matrix3x3.translation(10, 0))

    assert circle.bounds == Bounds(-30, -30, 60, 60)
    assert moved.bounds == Bounds(5, -5, 20, 20)
    assert Circle(5, 5, 0).bounds == Bounds(5, 5, 0, 0)
    with pytest.raises(ValueError):
        Circle(0, 0, -1)
    print("✓ Circle bounds test passed")


def test_circle_contains_and_intersects():
    """Test circle hit testing and exact circle overlap"""
    circle = Circle(50, 50, 10)

    assert circle.contains_point((55, 55))
    assert not circle.contains_point((60, 60))

    assert Circle(0, 0, 10).intersects(Circle(15, 0, 10))
    assert Circle(0, 0, 10).intersects(Circle(20, 0, 10))
    # bounding boxes overlap but the circles do not
    far = Circle(14.2, 14.2, 10)
    assert Circle(0, 0, 10).bounds.overlaps(far.bounds)
    assert not Circle(0, 0, 10).intersects(far)
    print("✓ Circle containment test passed")


def test_circle_to_path():
    """Chord and Bezier flattening stay on the circle"""
    circle = Circle(10, 20, 100)
    chords = circle.to_path()

    assert len(chords) == 33
    assert chords[0].kind == PathKind.MOVE
    assert chords[0].xy == chords[-1].xy
    distances = [math.hypot(p.x - 10, p.y - 20) for p in chords]
    assert np.allclose(distances, 100)
    assert len(circle.to_path(segments=8)) == 9

    curves = circle.to_path(use_bezier=True)
    assert len(curves) == 5
    assert all(p.kind == PathKind.CUBIC for p in curves[1:])
    assert np.allclose(curves[1].xy, (10, 120))

    from vectorgeometry import decompose
    flat = decompose(curves)
    radii = np.hypot(flat[:, 0] - 10, flat[:, 1] - 20)
    assert np.all(np.abs(radii - 100) < 0.05)
    print("✓ Circle path test passed")


def test_line():
    """Test line bounds and stroke hit testing"""
    line = Line(0, 0, 10, 0)

    assert Line(0, 0, 10, 5).bounds == Bounds(0, 0, 10, 5)
    assert line.contains_point((5, 0.5))
    assert not line.contains_point((5, 2))
    assert not line.contains_point((11, 0))
    assert Line(0, 0, 10, 0, hit_tolerance=3).contains_point((5, 2))

    point = Line(3, 3, 3, 3)
    assert point.contains_point((3, 3))
    assert not point.contains_point((3, 3.5))

    path = line.to_path()
    assert [p.kind for p in path] == [PathKind.MOVE, PathKind.LINE]
    print("✓ Line test passed")


def test_path_shape():
    """Test polygon paths, stroke hits and immutable editing"""
    square = GeometryPath([(0, 0, "move"), (100, 0), (100, 100), (0, 100)], closed=True)

    assert square.is_closed
    assert len(square.points) == 5
    assert square.bounds == Bounds(0, 0, 100, 100)
    assert square.contains_point((50, 50))
    assert not square.contains_point((150, 150))

    stroke = GeometryPath([(0, 0, "move"), (100, 0)])
    assert stroke.contains_point((50, 0.5))
    assert not stroke.contains_point((50, 5))

    open_path = GeometryPath([(0, 0), (10, 0), (10, 10)])
    closed = open_path.close_path()
    longer = open_path.add_point(0, 10)
    assert not open_path.is_closed
    assert closed.is_closed and closed.id == open_path.id
    assert len(open_path.points) == 3
    assert len(longer.points) == 4
    print("✓ Path shape test passed")


def test_path_with_hole():
    """Even-odd fill leaves holes empty"""
    outer = [(0, 0, "move"), (100, 0), (100, 100), (0, 100), (0, 0)]
    inner = [(25, 25, "move"), (75, 25), (75, 75), (25, 75), (25, 25)]
    ring = GeometryPath(outer + inner)

    assert ring.contains_point((10, 10))
    assert not ring.contains_point((50, 50))
    print("✓ Path hole test passed")


def test_path_transform():
    """Transforms apply to vertices and control points"""
    curve = GeometryPath(
        [
            {"x": 0, "y": 0, "kind": "move"},
            {"x": 30, "y": 0, "type": "cubic", "control1": (10, 10), "control2": (20, 10)},
        ],
        transform=Matrix3x3.translation(10, 0),
    )
    path = curve.to_path()

    assert path[1] == PathPoint(40, 0, PathKind.CUBIC, control1=(20, 10), control2=(30, 10))
    print("✓ Path transform test passed")


def test_text_bounds():
    """Text bounds follow alignment and baseline"""
    text = Text(0, 0, "abcd", font_size=10)

    assert text.measure() == pytest.approx((24, 10))
    assert text.bounds.almost_equal(Bounds(0, 0, 24, 10))
    assert Text(0, 0, "abcd", font_size=10, text_align="center").bounds.almost_equal(Bounds(-12, 0, 24, 10))
    assert Text(0, 0, "abcd", font_size=10, text_align="right", text_baseline="bottom").bounds.almost_equal(
        Bounds(-24, -10, 24, 10)
    )
    with pytest.raises(ValueError):
        Text(0, 0, "x", text_align="justify")
    print("✓ Text bounds test passed")


def test_hexagon():
    """Test hexagon bounds and containment"""
    hexagon = Hexagon(0, 0, 10)

    assert hexagon.bounds.almost_equal(Bounds(-10, -10 * math.sin(math.pi / 3), 20, 20 * math.sin(math.pi / 3)))
    assert hexagon.contains_point((0, 0))
    assert hexagon.contains_point((9, 0))
    assert not hexagon.contains_point((10, 10))
    assert len(hexagon.to_path()) == 7
    print("✓ Hexagon test passed")


def test_registry():
    """Shapes can be built by kind name"""
    circle = create_shape("circle", center_x=1, center_y=2, radius=3)

    assert isinstance(circle, Circle)
    assert circle.radius == 3
    assert has_shape("hexagon")
    with pytest.raises(UnknownShapeType):
        create_shape("star")
    with pytest.raises(ValueError):
        register_shape("rectangle", Rectangle)

    register_shape("square", lambda size, **options: Rectangle(0, 0, size, size, **options))
    try:
        assert create_shape("square", size=5).bounds == Bounds(0, 0, 5, 5)
    finally:
        unregister_shape("square")
    assert not has_shape("square")
    print("✓ Registry test passed")


def test_shape_to_matplotlib():
    """Test Shape to matplotlib patch conversion"""
    try:
        from matplotlib.patches import PathPatch
    except ImportError:
        print("⊘ Matplotlib not installed - skipping matplotlib tests")
        return

    patch = Rectangle(0, 0, 10, 20).to_mpl_patch(facecolor="none")
    vertices = patch.get_path().vertices

    assert isinstance(patch, PathPatch)
    assert vertices.shape == (5, 2)
    assert np.allclose(vertices[2], [10, 20])
    print("✓ Shape to matplotlib PathPatch test passed")
