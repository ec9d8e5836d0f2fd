#!/usr/bin/env python3
"""
Tests for Matrix3x3 and the homogeneous-coordinate helpers
"""

import math
import sys
import numpy as np
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vectorgeometry import (
    InvalidDimension,
    Matrix3x3,
    NotInvertible,
    Vector2D,
    apply_transform,
    to_euclidean,
    to_homogeneous,
)


def test_identity_is_neutral():
    """M * I == I * M == M"""
    identity = Matrix3x3.create()
    for values in ([2, 3, 4, 5, 6, 7, 0, 0, 1], [1.5, -0.25, 10, 0.5, 3, -7, 0, 0, 1]):
        m = Matrix3x3.create(values)
        assert m.multiply(identity) == m
        assert identity.multiply(m) == m
    assert identity.is_identity()
    print("✓ Identity test passed")


def test_inverse_round_trip():
    """M * M^-1 ~= I for invertible M"""
    m = Matrix3x3.translation(10, 20) @ Matrix3x3.rotation(0.3) @ Matrix3x3.scale(2, 3)

    assert m.multiply(m.inverse()).almost_equal(Matrix3x3.identity())
    assert m.inverse().multiply(m).almost_equal(Matrix3x3.identity())
    assert np.isclose(m.determinant(), 6.0)
    print("✓ Inverse round trip test passed")


def test_singular_matrix():
    """Test that non-invertible matrices raise"""
    with pytest.raises(NotInvertible):
        Matrix3x3.scale(0, 1).inverse()
    with pytest.raises(NotInvertible):
        Matrix3x3.create([1, 2, 0, 2, 4, 0, 0, 0, 1]).inverse()

    tiny = Matrix3x3.scale(1e-4, 1e-4)
    with pytest.raises(NotInvertible):
        tiny.inverse()
    assert np.isclose(tiny.inverse(epsilon=1e-12).values[0], 1e4)
    print("✓ Singular matrix test passed")


def test_invalid_dimension():
    """Test construction from a wrong number of values"""
    with pytest.raises(InvalidDimension):
        Matrix3x3.create([1, 2, 3])
    with pytest.raises(ValueError):
        Matrix3x3.create(list(range(10)))
    print("✓ Invalid dimension test passed")


def test_composition_order():
    """A.multiply(B) applies B first"""
    translate_then_scale = Matrix3x3.scale(2, 2).multiply(Matrix3x3.translation(10, 0))
    scale_then_translate = Matrix3x3.translation(10, 0).multiply(Matrix3x3.scale(2, 2))

    assert translate_then_scale.transform_point((1, 0)) == Vector2D(22, 0)
    assert scale_then_translate.transform_point((1, 0)) == Vector2D(12, 0)

    combined = Matrix3x3.translation(10, 20).multiply(Matrix3x3.translation(5, 5))
    assert combined.transform_point(Vector2D(0, 0)) == Vector2D(15, 25)
    print("✓ Composition order test passed")


def test_rotation():
    """Test counterclockwise rotation"""
    p = Matrix3x3.rotation(math.pi / 2).transform_point((1, 0))

    assert np.allclose(p.to_array(), [0, 1])
    print("✓ Rotation test passed")


def test_values_are_copies():
    """Mutating returned values must not change the matrix"""
    m = Matrix3x3.create()
    values = m.values
    values[0] = 99
    arr = m.to_array()
    arr[0, 0] = 42

    assert m.values[0] == 1.0
    assert m == Matrix3x3.identity()
    with pytest.raises(AttributeError):
        m.foo = 1
    print("✓ Values copy test passed")


def test_scale_extraction():
    """Scale factors are the column magnitudes"""
    m = Matrix3x3.rotation(0.7) @ Matrix3x3.scale(2, 3)

    assert np.allclose(m.get_scale(), (2, 3))
    assert m.has_scale()
    assert not Matrix3x3.rotation(0.7).has_scale()
    assert not Matrix3x3.translation(5, 5).has_scale()
    assert Matrix3x3.scale(1, 2).has_scale()
    print("✓ Scale extraction test passed")


def test_transform_points():
    """Test batch transformation of an (N, 2) array"""
    m = Matrix3x3.translation(1, 2) @ Matrix3x3.scale(2, 2)
    points = np.array([[0, 0], [1, 1], [-1, 3]])

    result = m.transform_points(points)
    assert result.shape == (3, 2)
    assert np.allclose(result, [[1, 2], [3, 4], [-1, 8]])
    print("✓ Transform points test passed")


def test_homogeneous_helpers():
    """Test to_homogeneous / to_euclidean / apply_transform"""
    assert np.allclose(to_homogeneous(np.array([1.0, 2.0])), [1, 2, 1])
    assert to_homogeneous(np.array([[1, 2], [3, 4]])).shape == (2, 3)
    assert np.allclose(to_euclidean(np.array([2.0, 4.0, 2.0])), [1, 2])

    with pytest.raises(ValueError):
        to_euclidean(np.array([1.0, 1.0, 0.0]))

    moved = apply_transform(Matrix3x3.translation(5, 0), to_homogeneous(np.array([1.0, 1.0])))
    assert np.allclose(moved, [6, 1, 1])
    with pytest.raises(ValueError):
        apply_transform(np.eye(2), np.array([1.0, 1.0, 1.0]))
    print("✓ Homogeneous helpers test passed")


def test_equality_and_hash():
    """Matrices compare by value"""
    a = Matrix3x3.translation(1, 2)
    b = Matrix3x3.create([1, 0, 1, 0, 1, 2, 0, 0, 1])

    assert a == b
    assert hash(a) == hash(b)
    assert a != Matrix3x3.translation(2, 1)
    print("✓ Equality test passed")
