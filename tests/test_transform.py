"""Tests for the affine transform."""
import math

import pytest

from boardsvg.svg import Matrix, compose


def test_identity_leaves_points_unchanged():
    assert Matrix.identity().apply_to_point(3.5, -2.0) == (3.5, -2.0)


def test_scale_and_translate_compose_right_to_left():
    """compose(T, S) scales first, then translates."""
    m = compose(Matrix.translate(10, 5), Matrix.scale(2))
    assert m.apply_to_point(1, 1) == (12.0, 7.0)
    assert m.scale_x == 2
    assert m.scale_y == 2


def test_scale_magnitudes_ignore_sign():
    m = Matrix.scale(4, -4)
    assert m.scale_x == 4
    assert m.scale_y == 4
    assert m.apply_to_point(1, 1) == (4.0, -4.0)


def test_rotation_maps_x_axis_to_y_axis():
    x, y = Matrix.rotate_deg(90).apply_to_point(1, 0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_apply_to_points_preserves_order():
    m = compose(Matrix.translate(10, 5), Matrix.scale(2))
    points = [(0, 0), (1, 0), (1, 1), (0, 1)]

    mapped = m.apply_to_points(points)

    assert mapped == [m.apply_to_point(px, py) for px, py in points]
    assert mapped == [(10.0, 5.0), (12.0, 5.0), (12.0, 7.0), (10.0, 7.0)]


def test_apply_to_points_empty():
    assert Matrix.identity().apply_to_points([]) == []


def test_array_round_trip():
    m = Matrix(a=2, b=0.5, c=-0.5, d=3, e=7, f=-1)
    back = Matrix.from_array(m.to_array())
    assert back == m
    assert math.isclose(back.apply_to_point(1, 1)[0], 2 - 0.5 + 7)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
