"""Vertices carrying a position, a colour and texture coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from softraster.color import LinearColor
from softraster.vector2 import Vector2
from softraster.vector4 import Vector4


@dataclass(frozen=True)
class Vertex2D:
    """A vertex in the plane."""

    position: Vector2 = Vector2.ZERO
    color: LinearColor = LinearColor()
    uv: Vector2 = Vector2.ZERO

    def __mul__(self, scalar: float) -> Vertex2D:
        """Scale every attribute, as used for interpolation."""
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vertex2D(self.position * scalar, self.color * scalar, self.uv * scalar)

    def __rmul__(self, scalar: float) -> Vertex2D:
        return self.__mul__(scalar)

    def __add__(self, other: Vertex2D) -> Vertex2D:
        """Sum every attribute."""
        if not isinstance(other, Vertex2D):
            return NotImplemented
        return Vertex2D(
            self.position + other.position,
            self.color + other.color,
            self.uv + other.uv,
        )


@dataclass(frozen=True)
class Vertex3D:
    """A vertex with a homogeneous position."""

    position: Vector4 = Vector4.ZERO
    color: LinearColor = LinearColor()
    uv: Vector2 = Vector2.ZERO

    def __mul__(self, scalar: float) -> Vertex3D:
        """Scale every attribute, as used for interpolation."""
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vertex3D(self.position * scalar, self.color * scalar, self.uv * scalar)

    def __rmul__(self, scalar: float) -> Vertex3D:
        return self.__mul__(scalar)

    def __add__(self, other: Vertex3D) -> Vertex3D:
        """Sum every attribute."""
        if not isinstance(other, Vertex3D):
            return NotImplemented
        return Vertex3D(
            self.position + other.position,
            self.color + other.color,
            self.uv + other.uv,
        )