"""Planes in Hessian normal form."""

from __future__ import annotations

from dataclasses import dataclass

from softraster.mathutil import equals_in_tolerance, inv_sqrt
from softraster.vector3 import Vector3
from softraster.vector4 import Vector4

_UNIT_TOLERANCE = 1.0e-6


@dataclass(frozen=True)
class Plane:
    """Points p with normal.dot(p) + d == 0; the normal points outward."""

    normal: Vector3 = Vector3.UNIT_Y
    d: float = 0.0

    @classmethod
    def from_normal_point(cls, normal: Vector3, point: Vector3) -> Plane:
        """Plane through ``point`` with the given unit normal."""
        if not equals_in_tolerance(normal.size_squared(), 1.0, _UNIT_TOLERANCE):
            raise ValueError(f"plane normal must be a unit vector, got {normal}")
        return cls(normal, -normal.dot(point))

    @classmethod
    def from_points(cls, point1: Vector3, point2: Vector3, point3: Vector3) -> Plane:
        """Plane through three points, normal by the right-hand rule."""
        normal = (point2 - point1).cross(point3 - point1).normalized()
        return cls(normal, -normal.dot(point1))

    @classmethod
    def from_vector4(cls, vector: Vector4) -> Plane:
        """Plane from unnormalised (a, b, c, d) coefficients."""
        normal = vector.to_vector3()
        d = vector.w
        squared_size = normal.size_squared()
        if not equals_in_tolerance(squared_size, 1.0):
            inv_length = inv_sqrt(squared_size)
            normal = normal * inv_length
            d *= inv_length
        return cls(normal, d)

    def distance(self, point: Vector3) -> float:
        """Signed distance, positive on the side the normal points to."""
        return self.normal.dot(point) + self.d

    def is_outside(self, point: Vector3) -> bool:
        return self.distance(point) > 0.0