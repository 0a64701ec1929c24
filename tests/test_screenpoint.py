import pytest

from softraster.screenpoint import ScreenPoint
from softraster.vector2 import Vector2

SIZE = ScreenPoint(800, 600)


def test_from_floats_floors():
    assert ScreenPoint.from_floats(1.7, -1.2) == ScreenPoint(1, -2)
    assert ScreenPoint.from_vector2(Vector2(3.0, 4.0)) == ScreenPoint(3, 4)


def test_half_of_even_size_doubles_back():
    half = SIZE.half()
    assert half + half == SIZE


def test_aspect_ratio_and_zero():
    assert SIZE.aspect_ratio() == 800 / 600
    assert ScreenPoint(10, 0).has_zero()
    assert not SIZE.has_zero()
    with pytest.raises(ZeroDivisionError):
        ScreenPoint(10, 0).aspect_ratio()


def test_origin_maps_to_screen_centre():
    assert ScreenPoint.to_screen_coordinate(SIZE, Vector2.ZERO) == SIZE.half()


def test_positive_y_goes_up_on_screen():
    centre = ScreenPoint.to_screen_coordinate(SIZE, Vector2.ZERO)
    above = ScreenPoint.to_screen_coordinate(SIZE, Vector2(0.0, 10.0))
    assert above.y < centre.y
    assert above.x == centre.x


@pytest.mark.parametrize("pixel", [ScreenPoint(0, 0), ScreenPoint(799, 599), ScreenPoint(123, 456)])
def test_cartesian_round_trip(pixel):
    cartesian = pixel.to_cartesian_coordinate(SIZE)
    assert ScreenPoint.to_screen_coordinate(SIZE, cartesian) == pixel


def test_add_sub_round_trip():
    a = ScreenPoint(5, -7)
    b = ScreenPoint(12, 3)
    assert (a + b) - b == a
    assert a - a == ScreenPoint()