import math

import pytest

from softraster.vector2 import Vector2


def test_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vector2(3.0, -7.0)
    assert -a + a == Vector2.ZERO


def test_scalar_and_componentwise_multiplication():
    a = Vector2(2.0, 3.0)
    assert a * 2.0 == Vector2(4.0, 6.0)
    assert 2.0 * a == a * 2.0
    assert a * Vector2(0.5, 2.0) == Vector2(1.0, 6.0)


def test_division_inverts_multiplication():
    a = Vector2(2.0, -3.0)
    assert (a * 4.0) / 4.0 == a


def test_indexing_and_bounds():
    a = Vector2(5.0, 6.0)
    assert (a[0], a[1]) == (5.0, 6.0)
    assert list(a) == [5.0, 6.0]
    with pytest.raises(IndexError):
        a[2]


def test_size():
    assert Vector2(3.0, 4.0).size() == pytest.approx(5.0)
    assert Vector2(3.0, 4.0).size_squared() == pytest.approx(Vector2(3.0, 4.0).size() ** 2)


def test_normalized():
    assert Vector2(3.0, -8.0).normalized().size() == pytest.approx(1.0)
    assert Vector2.ZERO.normalized() == Vector2.ZERO
    unit = Vector2(0.0, 1.0)
    assert unit.normalized() is unit


def test_equals_in_tolerance_is_inclusive_on_x_only():
    origin = Vector2(0.0, 0.0)
    assert origin.equals_in_tolerance(Vector2(0.5, 0.0), 0.5)
    assert not origin.equals_in_tolerance(Vector2(0.0, 0.5), 0.5)
    assert origin.equals_in_tolerance(Vector2(1e-9, 1e-9))


def test_max_and_dot():
    assert Vector2(-1.0, 4.0).max() == 4.0
    assert Vector2.UNIT_X.dot(Vector2.UNIT_Y) == 0.0
    assert Vector2(2.0, 3.0).dot(Vector2(2.0, 3.0)) == Vector2(2.0, 3.0).size_squared()


def test_angles():
    assert Vector2.UNIT_Y.angle() == pytest.approx(math.pi / 2)
    assert Vector2.UNIT_Y.angle_in_degree() == pytest.approx(90.0, abs=1e-6)


def test_polar_round_trip():
    a = Vector2(-2.0, 3.5)
    back = a.to_polar_coordinate().to_cartesian_coordinate()
    assert back.equals_in_tolerance(a, 1e-4)


def test_str_format():
    assert str(Vector2(1.0, -2.5)) == "(1.000, -2.500)"