"""Bounding volumes: circles, rectangles, spheres and axis-aligned boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from softraster.vector2 import Vector2
from softraster.vector3 import Vector3


@dataclass(frozen=True)
class Circle:
    """A circle in the plane."""

    center: Vector2 = Vector2.ZERO
    radius: float = 0.0

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector2]) -> Circle:
        """Centre at the vertex average; radius is the length of the farthest vertex."""
        points = list(vertices)
        if not points:
            return cls()
        total = Vector2.ZERO
        for point in points:
            total = total + point
        center = total / float(len(points))
        farthest = max(points, key=lambda p: (center - p).size_squared())
        return cls(center, farthest.size())

    def is_inside(self, point: Vector2) -> bool:
        return (self.center - point).size_squared() <= self.radius * self.radius

    def intersect(self, other: Circle) -> bool:
        radius_sum = self.radius + other.radius
        return (self.center - other.center).size_squared() <= radius_sum * radius_sum


@dataclass
class Rectangle:
    """An axis-aligned rectangle that grows as points are added."""

    min: Vector2 = Vector2.ZERO
    max: Vector2 = Vector2.ZERO

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector2]) -> Rectangle:
        """Grow a rectangle starting at the origin to cover every vertex."""
        rect = cls()
        for vertex in vertices:
            rect += vertex
        return rect

    def intersect(self, other: Rectangle) -> bool:
        if self.min.x > other.max.x or other.min.x > self.max.x:
            return False
        if self.min.y > other.max.y or other.min.y > self.max.y:
            return False
        return True

    def is_inside(self, other: Vector2 | Rectangle) -> bool:
        """Whether a point, or both corners of a rectangle, lie within."""
        if isinstance(other, Rectangle):
            return self.is_inside(other.min) and self.is_inside(other.max)
        return self.min.x <= other.x <= self.max.x and self.min.y <= other.y <= self.max.y

    def __iadd__(self, other: Vector2 | Rectangle) -> Rectangle:
        if isinstance(other, Rectangle):
            low, high = other.min, other.max
        elif isinstance(other, Vector2):
            low = high = other
        else:
            return NotImplemented
        self.min = Vector2(min(self.min.x, low.x), min(self.min.y, low.y))
        self.max = Vector2(max(self.max.x, high.x), max(self.max.y, high.y))
        return self

    def size(self) -> Vector2:
        return self.max - self.min

    def extent(self) -> Vector2:
        return self.size() * 0.5

    def center_and_extent(self) -> tuple[Vector2, Vector2]:
        extent = self.extent()
        return self.min + extent, extent


@dataclass(frozen=True)
class Sphere:
    """A sphere in space."""

    center: Vector3 = Vector3.ZERO
    radius: float = 0.0

    @classmethod
    def from_circle(cls, circle: Circle) -> Sphere:
        """Lift a circle; its centre becomes a homogeneous point with z of 1."""
        return cls(Vector3.from_vector2(circle.center), circle.radius)

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector3]) -> Sphere:
        """Centre at the vertex average; radius is the length of the farthest vertex."""
        points = list(vertices)
        if not points:
            return cls()
        total = Vector3.ZERO
        for point in points:
            total = total + point
        center = total / float(len(points))
        farthest = max(points, key=lambda p: (center - p).size_squared())
        return cls(center, farthest.size())

    def is_inside(self, point: Vector3) -> bool:
        return (self.center - point).size_squared() <= self.radius * self.radius

    def intersect(self, other: Sphere) -> bool:
        radius_sum = self.radius + other.radius
        return (self.center - other.center).size_squared() <= radius_sum * radius_sum


@dataclass
class Box:
    """An axis-aligned box that grows as points are added."""

    min: Vector3 = Vector3.ZERO
    max: Vector3 = Vector3.ZERO

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vector3]) -> Box:
        """Grow a box starting at the origin to cover every vertex."""
        box = cls()
        for vertex in vertices:
            box += vertex
        return box

    def intersect(self, other: Box) -> bool:
        if self.min.x > other.max.x or other.min.x > self.max.x:
            return False
        if self.min.y > other.max.y or other.min.y > self.max.y:
            return False
        if self.min.z > other.max.z or other.min.z > self.max.z:
            return False
        return True

    def is_inside(self, other: Vector3 | Box) -> bool:
        """Whether a point, or both corners of a box, lie within."""
        if isinstance(other, Box):
            return self.is_inside(other.min) and self.is_inside(other.max)
        return (
            self.min.x <= other.x <= self.max.x
            and self.min.y <= other.y <= self.max.y
            and self.min.z <= other.z <= self.max.z
        )

    def __iadd__(self, other: Vector3 | Box) -> Box:
        if isinstance(other, Box):
            low, high = other.min, other.max
        elif isinstance(other, Vector3):
            low = high = other
        else:
            return NotImplemented
        self.min = Vector3(min(self.min.x, low.x), min(self.min.y, low.y), min(self.min.z, low.z))
        self.max = Vector3(
            max(self.max.x, high.x), max(self.max.y, high.y), max(self.max.z, high.z)
        )
        return self

    def size(self) -> Vector3:
        return self.max - self.min

    def extent(self) -> Vector3:
        return self.size() * 0.5

    def center_and_extent(self) -> tuple[Vector3, Vector3]:
        extent = self.extent()
        return self.min + extent, extent