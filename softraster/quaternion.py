"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from softraster.mathutil import SMALL_NUMBER, equals_in_tolerance, rad2deg, sin_cos
from softraster.matrix import Matrix3x3
from softraster.rotator import Rotator
from softraster.vector3 import Vector3


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with imaginary part (x, y, z) and real part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar["Quaternion"]

    @classmethod
    def from_matrix(cls, matrix: Matrix3x3) -> Quaternion:
        """Rotation of an orthonormal column-major matrix."""
        m = matrix
        trace = m[0][0] + m[1][1] + m[2][2]

        if trace > 0.0:
            root = math.sqrt(trace + 1.0)
            w = 0.5 * root
            root = 0.5 / root
            return cls(
                (m[1][2] - m[2][1]) * root,
                (m[2][0] - m[0][2]) * root,
                (m[0][1] - m[1][0]) * root,
                w,
            )

        i = 0
        if m[1][1] > m[0][0]:
            i = 1
        if m[2][2] > m[i][i]:
            i = 2
        following = (1, 2, 0)
        j = following[i]
        k = following[j]

        root = math.sqrt(m[i][i] - m[j][j] - m[k][k] + 1.0)
        imaginary = [0.0, 0.0, 0.0]
        imaginary[i] = 0.5 * root
        root = 0.5 / root
        imaginary[j] = (m[i][j] + m[j][i]) * root
        imaginary[k] = (m[i][k] + m[k][i]) * root
        w = (m[j][k] - m[k][j]) * root
        return cls(imaginary[0], imaginary[1], imaginary[2], w)

    @classmethod
    def from_vector(cls, vector: Vector3, up: Vector3 = Vector3.UNIT_Y) -> Quaternion:
        """Rotation that turns the Z axis toward ``vector``, keeping ``up`` upward."""
        local_z = vector.normalized()
        if abs(local_z.y) >= 1.0 - SMALL_NUMBER:
            local_x = Vector3.UNIT_X
        else:
            local_x = up.cross(local_z).normalized()
        local_y = local_z.cross(local_x).normalized()
        return cls.from_matrix(Matrix3x3(local_x, local_y, local_z))

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle_degree: float) -> Quaternion:
        sin, cos = sin_cos(angle_degree * 0.5)
        return cls(sin * axis.x, sin * axis.y, sin * axis.z, cos)

    @classmethod
    def from_rotator(cls, rotator: Rotator) -> Quaternion:
        sp, cp = sin_cos(rotator.pitch * 0.5)
        sy, cy = sin_cos(rotator.yaw * 0.5)
        sr, cr = sin_cos(rotator.roll * 0.5)
        return cls(
            sy * sr * cp + sp * cy * cr,
            sy * cp * cr - sp * sr * cy,
            -sy * sp * cr + sr * cy * cp,
            sy * sp * sr + cy * cp * cr,
        )

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        """Compose with another quaternion, or rotate a vector."""
        if isinstance(other, Quaternion):
            v1 = self.imaginary_part()
            v2 = other.imaginary_part()
            w = self.w * other.w - v1.dot(v2)
            v = v2 * self.w + v1 * other.w + v1.cross(v2)
            return Quaternion(v.x, v.y, v.z, w)
        if isinstance(other, Vector3):
            return self.rotate_vector(other)
        return NotImplemented

    @staticmethod
    def slerp(first: Quaternion, second: Quaternion, ratio: float) -> Quaternion:
        """Spherical interpolation along the shorter arc."""
        q1, q2 = first, second
        dot = q1.x * q2.x + q1.y * q2.y + q1.z * q2.z + q1.w * q2.w
        if dot < 0.0:
            q1 = -q1
            dot = -dot

        if dot > 0.9995:
            alpha = 1.0 - ratio
            beta = ratio
        else:
            theta = math.acos(dot)
            inv_sin = 1.0 / math.sin(theta)
            alpha = math.sin((1.0 - ratio) * theta) * inv_sin
            beta = math.sin(ratio * theta) * inv_sin

        return Quaternion(*(alpha * a + beta * b for a, b in zip(q1, q2)))

    def rotate_vector(self, vector: Vector3) -> Vector3:
        q = self.imaginary_part()
        t = q.cross(vector) * 2.0
        return vector + t * self.w + q.cross(t)

    def inverse(self) -> Quaternion:
        """Conjugate; the inverse of a unit quaternion."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def normalized(self) -> Quaternion:
        """Unit-length copy; identity when the length is negligible."""
        square_sum = sum(c * c for c in self)
        if square_sum < SMALL_NUMBER:
            return Quaternion.IDENTITY
        scale = 1.0 / math.sqrt(square_sum)
        return Quaternion(*(c * scale for c in self))

    def to_rotator(self) -> Rotator:
        x, y, z, w = self
        sinr_cosp = 2.0 * (w * z + x * y)
        cosr_cosp = 1.0 - 2.0 * (z * z + x * x)
        roll = rad2deg(math.atan2(sinr_cosp, cosr_cosp))

        pitch_test = w * x - y * z
        asin_threshold = 0.4999995
        if pitch_test < -asin_threshold:
            pitch = -90.0
        elif pitch_test > asin_threshold:
            pitch = 90.0
        else:
            pitch = rad2deg(math.asin(2.0 * pitch_test))

        siny_cosp = 2.0 * (w * y + x * z)
        cosy_cosp = 1.0 - 2.0 * (x * x + y * y)
        yaw = rad2deg(math.atan2(siny_cosp, cosy_cosp))
        return Rotator(yaw, roll, pitch)

    def is_unit_quaternion(self) -> bool:
        size = math.sqrt(sum(c * c for c in self))
        return equals_in_tolerance(size, 1.0)

    def real_part(self) -> float:
        return self.w

    def imaginary_part(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __str__(self) -> str:
        return str(self.to_rotator())


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)