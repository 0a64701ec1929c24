import pytest

from softraster.bounds import Box, Sphere
from softraster.frustum import Frustum
from softraster.mathutil import BoundCheckResult
from softraster.plane import Plane
from softraster.vector3 import Vector3

_NORMALS = [
    Vector3.UNIT_Y,
    -Vector3.UNIT_Y,
    Vector3.UNIT_X,
    -Vector3.UNIT_X,
    Vector3.UNIT_Z,
    -Vector3.UNIT_Z,
]


@pytest.fixture
def cube():
    """A frustum shaped as the cube [-1, 1] on every axis."""
    return Frustum(Plane.from_normal_point(n, n) for n in _NORMALS)


def test_wrong_plane_count_rejected():
    with pytest.raises(ValueError):
        Frustum([Plane()] * 5)


def test_default_frustum_has_six_planes():
    assert Frustum().planes == (Plane(),) * 6


def test_point_classification(cube):
    assert cube.check_bound(Vector3.ZERO) is BoundCheckResult.INSIDE
    assert cube.check_bound(Vector3(2.0, 0.0, 0.0)) is BoundCheckResult.OUTSIDE
    assert cube.check_bound(Vector3(1.0, 0.0, 0.0)) is BoundCheckResult.INTERSECT


def test_sphere_classification(cube):
    assert cube.check_bound(Sphere(Vector3.ZERO, 0.5)) is BoundCheckResult.INSIDE
    assert cube.check_bound(Sphere(Vector3.ZERO, 2.0)) is BoundCheckResult.INTERSECT
    assert cube.check_bound(Sphere(Vector3(0.0, 5.0, 0.0), 1.0)) is BoundCheckResult.OUTSIDE


def test_box_classification(cube):
    inner = Box(Vector3(-0.5, -0.5, -0.5), Vector3(0.5, 0.5, 0.5))
    far = Box(Vector3(-0.5, 5.0, -0.5), Vector3(0.5, 6.0, 0.5))
    straddling = Box(Vector3(0.5, -0.5, -0.5), Vector3(1.5, 0.5, 0.5))
    assert cube.check_bound(inner) is BoundCheckResult.INSIDE
    assert cube.check_bound(far) is BoundCheckResult.OUTSIDE
    assert cube.check_bound(straddling) is BoundCheckResult.INTERSECT


def test_is_intersect(cube):
    straddling = Box(Vector3(0.5, -0.5, -0.5), Vector3(1.5, 0.5, 0.5))
    far = Box(Vector3(-0.5, 5.0, -0.5), Vector3(0.5, 6.0, 0.5))
    inner = Box(Vector3(-0.5, -0.5, -0.5), Vector3(0.5, 0.5, 0.5))
    assert cube.is_intersect(straddling) is True
    assert cube.is_intersect(far) is False
    assert cube.is_intersect(inner) is False


def test_check_bound_rejects_unknown_type(cube):
    with pytest.raises(TypeError):
        cube.check_bound("not a bound")