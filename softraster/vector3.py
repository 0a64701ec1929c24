"""Three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from softraster.mathutil import SMALL_NUMBER, inv_sqrt
from softraster.vector2 import Vector2


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    DIMENSION: ClassVar[int] = 3
    UNIT_X: ClassVar["Vector3"]
    UNIT_Y: ClassVar["Vector3"]
    UNIT_Z: ClassVar["Vector3"]
    ZERO: ClassVar["Vector3"]
    ONE: ClassVar["Vector3"]

    @classmethod
    def from_vector2(cls, vector: Vector2, is_point: bool = True) -> Vector3:
        """Homogeneous 2D coordinate: z is 1 for a point, 0 for a direction."""
        return cls(vector.x, vector.y, 1.0 if is_point else 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self.DIMENSION:
            raise IndexError(f"Vector3 index out of range: {index}")
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)

    def size(self) -> float:
        return math.sqrt(self.size_squared())

    def size_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; zero stays zero."""
        square_sum = self.size_squared()
        if square_sum == 1.0:
            return self
        if square_sum == 0.0:
            return Vector3.ZERO
        inv_length = inv_sqrt(square_sum)
        return Vector3(self.x * inv_length, self.y * inv_length, self.z * inv_length)

    def equals_in_tolerance(self, other: Vector3, tolerance: float = SMALL_NUMBER) -> bool:
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    def max(self) -> float:
        largest = self.x if self.x >= self.y else self.y
        return largest if largest >= self.z else self.z

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)
Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)