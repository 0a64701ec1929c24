"""Column-major square matrices of rank 2, 3 and 4."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

from softraster.vector2 import Vector2
from softraster.vector3 import Vector3
from softraster.vector4 import Vector4


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(frozen=True)
class Matrix2x2:
    """A 2x2 matrix stored as two column vectors."""

    col0: Vector2 = Vector2.UNIT_X
    col1: Vector2 = Vector2.UNIT_Y

    RANK: ClassVar[int] = 2

    @classmethod
    def identity(cls) -> Matrix2x2:
        return cls()

    @property
    def cols(self) -> tuple[Vector2, Vector2]:
        return (self.col0, self.col1)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector2:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix2x2 column index out of range: {index}")
        return self.cols[index]

    def transpose(self) -> Matrix2x2:
        return Matrix2x2(
            Vector2(self.col0.x, self.col1.x),
            Vector2(self.col0.y, self.col1.y),
        )

    def __mul__(self, other):
        """Multiply by a scalar, a matrix or a column vector."""
        if isinstance(other, Matrix2x2):
            rows = self.transpose().cols
            return Matrix2x2(*(Vector2(*(row.dot(col) for row in rows)) for col in other))
        if isinstance(other, Vector2):
            return Vector2(*(row.dot(other) for row in self.transpose()))
        if _is_scalar(other):
            return Matrix2x2(*(col * other for col in self))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other) or isinstance(other, Vector2):
            return self * other
        return NotImplemented

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [f"| {row.x:.3f} , {row.y:.3f} |" for row in self.transpose()]


@dataclass(frozen=True)
class Matrix3x3:
    """A 3x3 matrix stored as three column vectors."""

    col0: Vector3 = Vector3.UNIT_X
    col1: Vector3 = Vector3.UNIT_Y
    col2: Vector3 = Vector3.UNIT_Z

    RANK: ClassVar[int] = 3

    @classmethod
    def identity(cls) -> Matrix3x3:
        return cls()

    @property
    def cols(self) -> tuple[Vector3, Vector3, Vector3]:
        return (self.col0, self.col1, self.col2)

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector3:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix3x3 column index out of range: {index}")
        return self.cols[index]

    def transpose(self) -> Matrix3x3:
        c0, c1, c2 = self.cols
        return Matrix3x3(
            Vector3(c0.x, c1.x, c2.x),
            Vector3(c0.y, c1.y, c2.y),
            Vector3(c0.z, c1.z, c2.z),
        )

    def __mul__(self, other):
        """Multiply by a scalar, a matrix, a 3D vector or a 2D point."""
        if isinstance(other, Matrix3x3):
            rows = self.transpose().cols
            return Matrix3x3(*(Vector3(*(row.dot(col) for row in rows)) for col in other))
        if isinstance(other, Vector3):
            return Vector3(*(row.dot(other) for row in self.transpose()))
        if isinstance(other, Vector2):
            return (self * Vector3.from_vector2(other)).to_vector2()
        if _is_scalar(other):
            return Matrix3x3(*(col * other for col in self))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other) or isinstance(other, (Vector2, Vector3)):
            return self * other
        return NotImplemented

    def to_matrix2x2(self) -> Matrix2x2:
        return Matrix2x2(self.col0.to_vector2(), self.col1.to_vector2())

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [f"| {row.x:.3f} , {row.y:.3f} , {row.z:.3f} |" for row in self.transpose()]


@dataclass(frozen=True)
class Matrix4x4:
    """A 4x4 matrix stored as four column vectors."""

    col0: Vector4 = Vector4.UNIT_X
    col1: Vector4 = Vector4.UNIT_Y
    col2: Vector4 = Vector4.UNIT_Z
    col3: Vector4 = Vector4.UNIT_W

    RANK: ClassVar[int] = 4

    @classmethod
    def identity(cls) -> Matrix4x4:
        return cls()

    @property
    def cols(self) -> tuple[Vector4, Vector4, Vector4, Vector4]:
        return (self.col0, self.col1, self.col2, self.col3)

    def __iter__(self) -> Iterator[Vector4]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector4:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix4x4 column index out of range: {index}")
        return self.cols[index]

    def transpose(self) -> Matrix4x4:
        c0, c1, c2, c3 = self.cols
        return Matrix4x4(
            Vector4(c0.x, c1.x, c2.x, c3.x),
            Vector4(c0.y, c1.y, c2.y, c3.y),
            Vector4(c0.z, c1.z, c2.z, c3.z),
            Vector4(c0.w, c1.w, c2.w, c3.w),
        )

    def __mul__(self, other):
        """Multiply by a scalar, a matrix, a 4D vector or a 3D point."""
        if isinstance(other, Matrix4x4):
            rows = self.transpose().cols
            return Matrix4x4(*(Vector4(*(row.dot(col) for row in rows)) for col in other))
        if isinstance(other, Vector4):
            return Vector4(*(row.dot(other) for row in self.transpose()))
        if isinstance(other, Vector3):
            return (self * Vector4.from_vector3(other)).to_vector3()
        if _is_scalar(other):
            return Matrix4x4(*(col * other for col in self))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other) or isinstance(other, (Vector3, Vector4)):
            return self * other
        return NotImplemented

    def to_matrix3x3(self) -> Matrix3x3:
        return Matrix3x3(self.col0.to_vector3(), self.col1.to_vector3(), self.col2.to_vector3())

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [
            f"| {row.x:.3f} , {row.y:.3f} , {row.z:.3f}, {row.w:.3f} |" for row in self.transpose()
        ]