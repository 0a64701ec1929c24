import math

import pytest

from softraster.plane import Plane
from softraster.vector3 import Vector3
from softraster.vector4 import Vector4


def test_default_plane_is_xz_plane():
    plane = Plane()
    assert plane.normal == Vector3.UNIT_Y
    assert plane.distance(Vector3(0.0, 5.0, 0.0)) == 5.0


def test_from_normal_point_contains_point():
    point = Vector3(1.0, 2.0, 3.0)
    plane = Plane.from_normal_point(Vector3.UNIT_X, point)
    assert plane.distance(point) == 0.0
    assert plane.d == -point.x


def test_from_normal_point_rejects_non_unit_normal():
    with pytest.raises(ValueError):
        Plane.from_normal_point(Vector3(0.0, 2.0, 0.0), Vector3.ZERO)


def test_from_points_contains_all_points():
    points = [Vector3(0.0, 2.0, 0.0), Vector3(0.0, 2.0, 1.0), Vector3(1.0, 2.0, 0.0)]
    plane = Plane.from_points(*points)
    assert plane.normal == Vector3.UNIT_Y
    for point in points:
        assert math.isclose(plane.distance(point), 0.0, abs_tol=1e-9)


def test_from_vector4_normalizes():
    plane = Plane.from_vector4(Vector4(0.0, 2.0, 0.0, 4.0))
    assert math.isclose(plane.normal.size(), 1.0)
    assert math.isclose(plane.distance(Vector3(0.0, -2.0, 0.0)), 0.0, abs_tol=1e-9)


def test_from_vector4_keeps_unit_coefficients():
    plane = Plane.from_vector4(Vector4(0.0, 0.0, 1.0, -3.0))
    assert plane.normal == Vector3.UNIT_Z
    assert plane.d == -3.0


def test_is_outside_follows_normal():
    plane = Plane.from_normal_point(Vector3.UNIT_Y, Vector3.ZERO)
    assert plane.is_outside(Vector3(0.0, 1.0, 0.0))
    assert not plane.is_outside(Vector3(0.0, -1.0, 0.0))
    assert not plane.is_outside(Vector3(4.0, 0.0, 4.0))


def test_distance_sign_flips_across_plane():
    plane = Plane.from_points(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    above = plane.distance(Vector3(0.0, 0.0, 2.0))
    below = plane.distance(Vector3(0.0, 0.0, -2.0))
    assert math.isclose(above, -below)