"""Scalar helpers shared by the vector, matrix and geometry types."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TypeVar

T = TypeVar("T")

SMALL_NUMBER = 1.0e-8

PI = 3.14159265358979323846
TWO_PI = 2.0 * PI
HALF_PI = 1.57079632679
INV_PI = 0.31830988618

INVALID_HASH_NAME = "!@CK_INVALIDHASH#$"
INVALID_HASH = hash(INVALID_HASH_NAME)


class BoundCheckResult(IntEnum):
    """Outcome of testing a bounding volume against a frustum."""

    OUTSIDE = 0
    INTERSECT = 1
    INSIDE = 2


def trunc_to_int(value: float) -> int:
    """Drop the fractional part, rounding toward zero."""
    return int(value)


def round_to_int(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return trunc_to_int(-rounded if value < 0 else rounded)


def floor_to_int(value: float) -> int:
    """Largest integer not greater than ``value``."""
    return trunc_to_int(math.floor(value))


def ceil_to_int(value: float) -> int:
    """Smallest integer not less than ``value``."""
    return trunc_to_int(math.ceil(value))


def equals_in_tolerance(a: float, b: float, tolerance: float = SMALL_NUMBER) -> bool:
    """True when ``a`` and ``b`` differ by at most ``tolerance``."""
    return abs(a - b) <= tolerance


def lerp(src: T, dest: T, alpha: float) -> T:
    """Linear interpolation from ``src`` to ``dest``."""
    return src + (dest - src) * alpha


def square(value: T) -> T:
    """The value multiplied by itself."""
    return value * value


def deg2rad(degree: float) -> float:
    """Degrees to radians."""
    return degree * PI / 180.0


def rad2deg(radian: float) -> float:
    """Radians to degrees."""
    return radian * 180.0 * INV_PI


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range [low, high]."""
    if value < low:
        return low
    return value if value < high else high


def sin_cos_rad(radian: float) -> tuple[float, float]:
    """Sine and cosine of an angle in radians by minimax approximation."""
    quotient = (INV_PI * 0.5) * radian
    if radian >= 0.0:
        quotient = float(int(quotient + 0.5))
    else:
        quotient = float(int(quotient - 0.5))
    y = radian - TWO_PI * quotient

    if y > HALF_PI:
        y = PI - y
        sign = -1.0
    elif y < -HALF_PI:
        y = -PI - y
        sign = -1.0
    else:
        sign = 1.0

    y2 = y * y
    sin = (
        ((((-2.3889859e-08 * y2 + 2.7525562e-06) * y2 - 0.00019840874) * y2 + 0.0083333310) * y2 - 0.16666667)
        * y2
        + 1.0
    ) * y
    p = (
        (((-2.6051615e-07 * y2 + 2.4760495e-05) * y2 - 0.0013888378) * y2 + 0.041666638) * y2 - 0.5
    ) * y2 + 1.0
    return sin, sign * p


def sin_cos(degree: float) -> tuple[float, float]:
    """Sine and cosine of an angle in degrees, exact at the right angles."""
    if degree == 0.0:
        return 0.0, 1.0
    if degree == 90.0:
        return 1.0, 0.0
    if degree == 180.0:
        return 0.0, -1.0
    if degree == 270.0:
        return -1.0, 0.0
    return sin_cos_rad(deg2rad(degree))


def fmod(x: float, y: float) -> float:
    """Remainder of ``x / y`` truncated toward zero; 0 when ``y`` is near zero."""
    if abs(y) <= SMALL_NUMBER:
        return 0.0
    quotient = float(trunc_to_int(x / y))
    int_portion = y * quotient
    if abs(int_portion) > abs(x):
        int_portion = x
    return x - int_portion


def inv_sqrt(value: float) -> float:
    """Reciprocal square root."""
    return 1.0 / math.sqrt(value)