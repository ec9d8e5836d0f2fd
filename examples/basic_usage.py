#!/usr/bin/env python3
"""
Basic usage examples for the vectorgeometry kernel
"""

import sys
import math
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from vectorgeometry import (
    Circle,
    Matrix3x3,
    Rectangle,
    Vector2D,
    combine_shapes,
    perform_path_boolean_operation,
    setup_logging,
)


def example_vectors():
    """Example using Vector2D"""
    print("=== Vector Example ===")

    a = Vector2D(3, 4)
    b = Vector2D(1, 0)
    print(f"a = {a}, |a| = {a.length()}")
    print(f"a normalized: {a.normalize()}")
    print(f"angle(a, b) = {math.degrees(a.angle(b)):.2f}°")
    print(f"a rotated 90°: {a.rotate(math.pi / 2)}")


def example_transforms():
    """Example composing Matrix3x3 transforms"""
    print("\n=== Transform Example ===")

    # applied right to left: scale, then rotate, then translate
    m = Matrix3x3.translation(10, 20) @ Matrix3x3.rotation(math.pi / 6) @ Matrix3x3.scale(2, 2)
    p = m.transform_point((1, 0))
    print(f"Transformed (1, 0): ({p.x:.3f}, {p.y:.3f})")
    print(f"Scale factors: {m.get_scale()}")
    print(f"Determinant: {m.determinant():.3f}")
    print(f"M * M^-1 is identity: {m.multiply(m.inverse()).almost_equal(Matrix3x3.identity())}")


def example_scale_pivots():
    """Example of scale origins"""
    print("\n=== Scale Pivot Example ===")

    for origin in ("topLeft", "center"):
        rect = Rectangle(0, 0, 100, 50, scale_origin=origin)
        scaled = rect.apply_transform(Matrix3x3.scale(2, 2))
        print(f"{origin:>8}: {rect.bounds} -> {scaled.bounds}")


def example_booleans():
    """Example of path boolean operations"""
    print("\n=== Boolean Example ===")

    a = Rectangle(0, 0, 100, 100).to_path()
    b = Rectangle(50, 50, 100, 100).to_path()
    for operation in ("union", "intersect", "subtract", "xor"):
        result = perform_path_boolean_operation(a, b, operation)
        rings = sum(1 for p in result if p.is_move)
        print(f"{operation:>9}: {len(result)} points in {rings} ring(s)")

    merged = combine_shapes(Rectangle(0, 0, 100, 50), Circle(100, 25, 40), "union")
    print(f"Rectangle ∪ circle bounds: {merged.bounds}")
    print(f"Contains (130, 25): {merged.contains_point((130, 25))}")


def main():
    setup_logging()
    example_vectors()
    example_transforms()
    example_scale_pivots()
    example_booleans()


if __name__ == "__main__":
    main()
