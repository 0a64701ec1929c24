"""Euler angles in degrees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from softraster.mathutil import fmod, sin_cos
from softraster.vector3 import Vector3


@dataclass(frozen=True)
class Rotator:
    """Yaw, roll and pitch angles in degrees."""

    yaw: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0

    IDENTITY: ClassVar["Rotator"]

    @staticmethod
    def axis_clamped_value(value: float) -> float:
        """Wrap an angle into [0, 360)."""
        angle = fmod(value, 360.0)
        if angle < 0.0:
            angle += 360.0
        return angle

    def clamped(self) -> Rotator:
        """A copy with every angle wrapped into [0, 360)."""
        return Rotator(
            self.axis_clamped_value(self.yaw),
            self.axis_clamped_value(self.roll),
            self.axis_clamped_value(self.pitch),
        )

    def local_axes(self) -> tuple[Vector3, Vector3, Vector3]:
        """The (right, up, forward) axes of this orientation."""
        sy, cy = sin_cos(self.yaw)
        sp, cp = sin_cos(self.pitch)
        sr, cr = sin_cos(self.roll)

        right = Vector3(cy * cr + sy * sp * sr, cp * sr, -sy * cr + cy * sp * sr)
        up = Vector3(-cy * sr + sy * sp * cr, cp * cr, sy * sr + cy * sp * cr)
        forward = Vector3(sy * cp, -sp, cy * cp)
        return right, up, forward

    def __str__(self) -> str:
        return f"(Y : {self.yaw:.1f}, R: {self.roll:.1f}, P : {self.pitch:.1f})"


Rotator.IDENTITY = Rotator(0.0, 0.0, 0.0)