import pytest

from softraster.color import Color32, HSVColor, LinearColor


def test_color32_error_constant():
    assert tuple(Color32.from_value(0xFFFF00FF)) == (255, 0, 255, 255)
    assert Color32.from_value(0xFFFF00FF) == Color32.ERROR


def test_color32_packed_layout_is_bgra():
    assert Color32.ERROR.color_value() == 0xFFFF00FF


@pytest.mark.parametrize("color", [Color32(1, 2, 3, 4), Color32(255, 0, 128), Color32(0, 0, 0, 0)])
def test_color32_value_round_trip(color):
    assert Color32.from_value(color.color_value()) == color


def test_color32_from_value_rejects_too_large():
    with pytest.raises(ValueError):
        Color32.from_value(1 << 32)


def test_color32_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color32(256, 0, 0)


def test_color32_add_saturates():
    result = Color32(200, 10, 0, 255) + Color32(100, 20, 0, 255)
    assert result.r == 255
    assert result.g == 30
    assert result.a == 255


def test_color32_default_alpha_opaque():
    assert Color32(1, 2, 3).a == 255


@pytest.mark.parametrize("value", range(256))
def test_linear_color32_round_trip(value):
    color = Color32(value, value, value, value)
    assert LinearColor.from_color32(color).to_color32() == color


def test_linear_to_color32_clamps():
    color = LinearColor(2.0, -1.0, 0.0, 1.0).to_color32()
    assert color == Color32(255, 0, 0, 255)


def test_linear_constants_match_color32():
    assert LinearColor.ERROR.to_color32() == Color32.ERROR
    assert LinearColor.WHITE.to_color32() == Color32(255, 255, 255, 255)


def test_linear_arithmetic_round_trip():
    first = LinearColor(0.1, 0.2, 0.3, 0.4)
    second = LinearColor(0.5, 0.25, 0.125, 0.0)
    assert ((first + second) - second).equals_in_range(first, 1e-9)
    assert ((first * 4.0) / 4.0).equals_in_range(first, 1e-9)
    assert (2.0 * first) == first * 2.0


def test_linear_componentwise_product():
    product = LinearColor(1.0, 1.0, 0.0, 1.0) * LinearColor(0.0, 1.0, 1.0, 1.0)
    assert product.equals_in_range(LinearColor(0.0, 1.0, 0.0, 1.0), 1e-9)
    assert product.to_color32() == Color32(0, 255, 0, 255)


def test_equals_in_range_is_strict():
    base = LinearColor(0.5, 0.5, 0.5, 1.0)
    assert not base.equals_in_range(LinearColor(0.75, 0.5, 0.5, 1.0), 0.25)
    assert base.equals_in_range(LinearColor(0.6, 0.5, 0.5, 1.0), 0.25)


def test_hsv_default_is_red():
    assert HSVColor().to_linear_color() == LinearColor.RED


def test_hsv_third_is_green():
    assert HSVColor(1.0 / 3.0, 1.0, 1.0).to_linear_color().equals_in_range(LinearColor.GREEN, 1e-6)


def test_hsv_zero_saturation_is_gray():
    color = HSVColor(0.7, 0.0, 0.5).to_linear_color()
    assert color.equals_in_range(LinearColor.GRAY, 1e-9)


def test_hsv_negative_hue_is_black():
    assert HSVColor(-0.1, 1.0, 1.0).to_linear_color() == LinearColor.BLACK