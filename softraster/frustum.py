"""View frustum culling against six planes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from softraster.bounds import Box, Sphere
from softraster.mathutil import BoundCheckResult, equals_in_tolerance
from softraster.plane import Plane
from softraster.vector3 import Vector3


def _box_vertices(plane: Plane, box: Box) -> tuple[Vector3, Vector3]:
    """The box corners farthest along and against the plane normal."""
    pairs = [
        (hi, lo) if n >= 0.0 else (lo, hi)
        for n, lo, hi in zip(plane.normal, box.min, box.max)
    ]
    positive = Vector3(*(p for p, _ in pairs))
    negative = Vector3(*(n for _, n in pairs))
    return positive, negative


@dataclass(frozen=True)
class Frustum:
    """Six outward-facing planes, ordered Y+, Y-, X+, X-, Z+, Z-."""

    planes: tuple[Plane, ...] = field(default_factory=lambda: (Plane(),) * 6)

    def __init__(self, planes: Iterable[Plane] | None = None) -> None:
        planes = tuple(planes) if planes is not None else (Plane(),) * 6
        if len(planes) != 6:
            raise ValueError(f"a frustum needs exactly 6 planes, got {len(planes)}")
        object.__setattr__(self, "planes", planes)

    def check_bound(self, bound: Vector3 | Sphere | Box) -> BoundCheckResult:
        """Classify a point, sphere or box against the frustum."""
        if isinstance(bound, Vector3):
            return self._check_point(bound)
        if isinstance(bound, Sphere):
            return self._check_sphere(bound)
        if isinstance(bound, Box):
            return self._check_box(bound)
        raise TypeError(f"cannot check bound of type {type(bound).__name__}")

    def _check_point(self, point: Vector3) -> BoundCheckResult:
        for plane in self.planes:
            if plane.is_outside(point):
                return BoundCheckResult.OUTSIDE
            if equals_in_tolerance(plane.distance(point), 0.0):
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def _check_sphere(self, sphere: Sphere) -> BoundCheckResult:
        for plane in self.planes:
            distance = plane.distance(sphere.center)
            if distance > sphere.radius:
                return BoundCheckResult.OUTSIDE
            if abs(distance) <= sphere.radius:
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def _check_box(self, box: Box) -> BoundCheckResult:
        for plane in self.planes:
            positive, negative = _box_vertices(plane, box)
            near = plane.distance(negative)
            if near > 0.0:
                return BoundCheckResult.OUTSIDE
            if near <= 0.0 and plane.distance(positive) >= 0.0:
                return BoundCheckResult.INTERSECT
        return BoundCheckResult.INSIDE

    def is_intersect(self, box: Box) -> bool:
        """Whether any plane passes through the box."""
        for plane in self.planes:
            positive, negative = _box_vertices(plane, box)
            if plane.distance(negative) <= 0.0 and plane.distance(positive) >= 0.0:
                return True
        return False