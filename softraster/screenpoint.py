"""Integer pixel position on the screen."""

from __future__ import annotations

from dataclasses import dataclass

from softraster.mathutil import floor_to_int
from softraster.vector2 import Vector2


@dataclass(frozen=True)
class ScreenPoint:
    """A pixel coordinate or a screen size; origin at the top left, Y downward."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_floats(cls, x: float, y: float) -> ScreenPoint:
        """Floor both coordinates."""
        return cls(floor_to_int(x), floor_to_int(y))

    @classmethod
    def from_vector2(cls, vector: Vector2) -> ScreenPoint:
        return cls.from_floats(vector.x, vector.y)

    def half(self) -> ScreenPoint:
        return ScreenPoint(floor_to_int(0.5 * self.x), floor_to_int(0.5 * self.y))

    def aspect_ratio(self) -> float:
        """Width over height."""
        return self.x / self.y

    def has_zero(self) -> bool:
        return self.x == 0 or self.y == 0

    @staticmethod
    def to_screen_coordinate(screen_size: ScreenPoint, position: Vector2) -> ScreenPoint:
        """Map a Cartesian position centred on the screen to a pixel."""
        return ScreenPoint.from_floats(
            position.x + screen_size.x * 0.5, -position.y + screen_size.y * 0.5
        )

    def to_cartesian_coordinate(self, screen_size: ScreenPoint) -> Vector2:
        """The Cartesian position of this pixel's centre."""
        return Vector2(
            self.x - screen_size.x * 0.5 + 0.5,
            -(self.y + 0.5) + screen_size.y * 0.5,
        )

    def __add__(self, other: ScreenPoint) -> ScreenPoint:
        if not isinstance(other, ScreenPoint):
            return NotImplemented
        return ScreenPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: ScreenPoint) -> ScreenPoint:
        if not isinstance(other, ScreenPoint):
            return NotImplemented
        return ScreenPoint(self.x - other.x, self.y - other.y)