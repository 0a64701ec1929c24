"""Position, rotation and scale of an object in space."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from softraster.mathutil import SMALL_NUMBER, equals_in_tolerance
from softraster.matrix import Matrix3x3, Matrix4x4
from softraster.quaternion import Quaternion
from softraster.rotator import Rotator
from softraster.vector3 import Vector3
from softraster.vector4 import Vector4


@dataclass
class Transform:
    """A translation, a rotation and a per-axis scale."""

    position: Vector3 = Vector3.ZERO
    rotation: Quaternion = Quaternion.IDENTITY
    scale: Vector3 = Vector3.ONE

    @classmethod
    def from_matrix(cls, matrix: Matrix4x4) -> Transform:
        """Split an affine matrix into position, scale and rotation."""
        rot_scale = matrix.to_matrix3x3()
        position = matrix[3].to_vector3()

        square_sums = [column.size_squared() for column in rot_scale]
        scale = Vector3(*(math.sqrt(s) if s > SMALL_NUMBER else 0.0 for s in square_sums))

        rotation_matrix = Matrix3x3(
            *(column / square_sum for column, square_sum in zip(rot_scale, square_sums))
        )
        return cls(position, Quaternion.from_matrix(rotation_matrix), scale)

    def add_position(self, delta: Vector3) -> None:
        self.position = self.position + delta

    def _add_euler(self, axis: str, degree: float) -> None:
        rotator = self.rotation.to_rotator()
        rotator = replace(rotator, **{axis: getattr(rotator, axis) + degree}).clamped()
        self.rotation = Quaternion.from_rotator(rotator)

    def add_yaw_rotation(self, degree: float) -> None:
        self._add_euler("yaw", degree)

    def add_roll_rotation(self, degree: float) -> None:
        self._add_euler("roll", degree)

    def add_pitch_rotation(self, degree: float) -> None:
        self._add_euler("pitch", degree)

    def set_rotation(self, rotation: Quaternion | Rotator | Matrix3x3) -> None:
        """Set the rotation from a quaternion, Euler angles or a rotation matrix."""
        if isinstance(rotation, Quaternion):
            self.rotation = rotation
        elif isinstance(rotation, Rotator):
            self.rotation = Quaternion.from_rotator(rotation)
        elif isinstance(rotation, Matrix3x3):
            self.rotation = Quaternion.from_matrix(rotation)
        else:
            raise TypeError(f"cannot set rotation from {type(rotation).__name__}")

    def x_axis(self) -> Vector3:
        return self.rotation * Vector3.UNIT_X

    def y_axis(self) -> Vector3:
        return self.rotation * Vector3.UNIT_Y

    def z_axis(self) -> Vector3:
        return self.rotation * Vector3.UNIT_Z

    def matrix(self) -> Matrix4x4:
        """The model matrix: scale, then rotate, then translate."""
        return Matrix4x4(
            Vector4.from_vector3(self.x_axis() * self.scale.x, False),
            Vector4.from_vector3(self.y_axis() * self.scale.y, False),
            Vector4.from_vector3(self.z_axis() * self.scale.z, False),
            Vector4.from_vector3(self.position, True),
        )

    def inverse(self) -> Transform:
        """The transform that undoes this one; a zero scale axis stays zero."""
        reciprocal = Vector3(
            *(0.0 if equals_in_tolerance(c, 0.0) else 1.0 / c for c in self.scale)
        )
        rotation = self.rotation.inverse()
        position = reciprocal * (rotation * -self.position)
        return Transform(position, rotation, reciprocal)

    def local_to_world(self, parent: Transform) -> Transform:
        """Treat this transform as local to ``parent`` and return it in world space."""
        return Transform(
            parent.position + parent.rotation * (parent.scale * self.position),
            parent.rotation * self.rotation,
            parent.scale * self.scale,
        )

    def world_to_local(self, parent: Transform) -> Transform:
        """Treat this transform as world space and return it relative to ``parent``."""
        inv = parent.inverse()
        return Transform(
            inv.position + inv.rotation * (inv.scale * self.position),
            inv.rotation * self.rotation,
            inv.scale * self.scale,
        )