"""Clipping of triangles against the planes of the homogeneous clip volume."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from softraster.vertex import Vertex3D

ClipTest = Callable[[Vertex3D], bool]
EdgeVertex = Callable[[Vertex3D, Vertex3D], Vertex3D]


@dataclass(frozen=True)
class PerspectiveTest:
    """One clip plane: a test that flags outside vertices and an edge intersector."""

    clipping_test_func: ClipTest
    get_edge_vertex_func: EdgeVertex

    def clip_triangles(self, vertices: Sequence[Vertex3D]) -> list[Vertex3D]:
        """Clip a triangle list against this plane.

        Triangles wholly outside are dropped; triangles with one outside vertex
        are split in two, the extra triangle appended after all the others.
        Vertices that do not complete a triangle are kept unchanged.
        """
        whole = len(vertices) - len(vertices) % 3
        kept: list[Vertex3D] = []
        extra: list[Vertex3D] = []

        for start in range(0, whole, 3):
            triangle = list(vertices[start:start + 3])
            flags = [self.clipping_test_func(vertex) for vertex in triangle]
            outside = sum(flags)
            if outside == 0:
                kept.extend(triangle)
            elif outside == 1:
                first, second = self._divide_into_two(triangle, flags)
                kept.extend(first)
                extra.extend(second)
            elif outside == 2:
                kept.extend(self._clip_two_outside(triangle, flags))

        return kept + list(vertices[whole:]) + extra

    def _divide_into_two(
        self, triangle: list[Vertex3D], flags: list[bool]
    ) -> tuple[list[Vertex3D], list[Vertex3D]]:
        index = flags.index(True)
        outside = triangle[index]
        v1 = triangle[(index + 1) % 3]
        v2 = triangle[(index + 2) % 3]
        clipped1 = self.get_edge_vertex_func(outside, v1)
        clipped2 = self.get_edge_vertex_func(outside, v2)
        return [clipped1, v1, v2], [clipped1, v2, clipped2]

    def _clip_two_outside(self, triangle: list[Vertex3D], flags: list[bool]) -> list[Vertex3D]:
        index = flags.index(False)
        inside = triangle[index]
        result = list(triangle)
        for step in (1, 2):
            position = (index + step) % 3
            result[position] = self.get_edge_vertex_func(inside, triangle[position])
        return result


def _interpolate(start: Vertex3D, end: Vertex3D, p1: float, p2: float) -> Vertex3D:
    t = p1 / (p1 - p2)
    return start * (1.0 - t) + end * t


def test_w0(vertex: Vertex3D) -> bool:
    """Behind the camera: w below zero."""
    return vertex.position.w < 0.0


def edge_w0(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(start, end, start.position.w, end.position.w)


def test_ny(vertex: Vertex3D) -> bool:
    return vertex.position.y < -vertex.position.w


def edge_ny(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w + start.position.y, end.position.w + end.position.y
    )


def test_py(vertex: Vertex3D) -> bool:
    return vertex.position.y > vertex.position.w


def edge_py(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w - start.position.y, end.position.w - end.position.y
    )


def test_nx(vertex: Vertex3D) -> bool:
    return vertex.position.x < -vertex.position.w


def edge_nx(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w + start.position.x, end.position.w + end.position.x
    )


def test_px(vertex: Vertex3D) -> bool:
    return vertex.position.x > vertex.position.w


def edge_px(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w - start.position.x, end.position.w - end.position.x
    )


def test_far(vertex: Vertex3D) -> bool:
    return vertex.position.z > vertex.position.w


def edge_far(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w - start.position.z, end.position.w - end.position.z
    )


def test_near(vertex: Vertex3D) -> bool:
    return vertex.position.z < -vertex.position.w


def edge_near(start: Vertex3D, end: Vertex3D) -> Vertex3D:
    return _interpolate(
        start, end, start.position.w + start.position.z, end.position.w + end.position.z
    )


def standard_tests() -> list[PerspectiveTest]:
    """The seven clip planes: w=0, -Y, +Y, -X, +X, far and near."""
    return [
        PerspectiveTest(test_w0, edge_w0),
        PerspectiveTest(test_ny, edge_ny),
        PerspectiveTest(test_py, edge_py),
        PerspectiveTest(test_nx, edge_nx),
        PerspectiveTest(test_px, edge_px),
        PerspectiveTest(test_far, edge_far),
        PerspectiveTest(test_near, edge_near),
    ]